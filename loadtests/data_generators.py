"""Faker-based data generators for Locust load test scenarios.

Each generator produces payloads that pass the ledger's validation rules
(non-blank names, capacity of at least 1, non-negative quantities, unique
SKUs and warehouse names) and use the camelCase field names of the API.
"""

import random
import uuid

from faker import Faker

fake = Faker()

CATEGORIES = ["Electronics", "Furniture", "Accessories", "Office Supplies"]


def unique_suffix() -> str:
    return uuid.uuid4().hex[:8]


def warehouse_data(max_capacity: int | None = None) -> dict:
    """CreateWarehouseRequest payload with a unique name."""
    return {
        "name": f"{fake.city()} Hub {unique_suffix()}"[:255],
        "location": f"{fake.city()}, {fake.state_abbr()}",
        "maxCapacity": max_capacity or random.randint(500, 5000),
    }


def unique_sku(prefix: str | None = None) -> str:
    """SKUs like 'ELEC-a1b2c3d4'; unique across the catalog."""
    return f"{prefix or random.choice(['ELEC', 'FURN', 'ACC', 'OFF'])}-{unique_suffix()}".upper()


def item_data(warehouse_id: str, quantity: int | None = None) -> dict:
    """CreateItemRequest payload."""
    return {
        "sku": unique_sku(),
        "name": fake.catch_phrase()[:255],
        "description": fake.sentence(nb_words=6),
        "category": random.choice(CATEGORIES),
        "quantity": random.randint(1, 50) if quantity is None else quantity,
        "storageLocation": f"{random.choice('ABCD')}{random.randint(1, 4)}-R{random.randint(1, 5)}-S{random.randint(1, 5)}",
        "warehouseId": warehouse_id,
    }


def transfer_data(item_id: str, source_id: str, destination_id: str, quantity: int) -> dict:
    """TransferRequest payload."""
    return {
        "itemId": item_id,
        "sourceWarehouseId": source_id,
        "destinationWarehouseId": destination_id,
        "quantity": quantity,
    }


def search_term() -> str:
    return random.choice(["elec", "furn", "desk", "hub", "acc", fake.word()[:4]])
