"""Runtime settings read from the environment (and a local ``.env``)."""

import os

from dotenv import load_dotenv

load_dotenv()


def _csv(value: str) -> list[str]:
    return [part.strip() for part in value.split(",") if part.strip()]


class Settings:
    # Dashboard: warehouses strictly above this utilization are "near capacity"
    near_capacity_threshold: float = float(os.getenv("LEDGER_NEAR_CAPACITY_THRESHOLD", "80"))

    # Activity log: how many recent entries callers see by default
    activity_limit: int = int(os.getenv("LEDGER_ACTIVITY_LIMIT", "50"))

    # Repository reads are paged with this size when loading whole collections
    page_size: int = int(os.getenv("LEDGER_PAGE_SIZE", "500"))

    cors_origins: list[str] = _csv(os.getenv("LEDGER_CORS_ORIGINS", "*"))
    log_level: str = os.getenv("LEDGER_LOG_LEVEL", "INFO").upper()
    log_format: str = os.getenv("LEDGER_LOG_FORMAT", "console")


settings = Settings()
