"""Warehouse Ledger Load Testing — Locust entry point.

Discovers all user classes from the scenarios package.
Run specific scenarios with Locust's class selection.

Usage:
    # All scenarios (web UI):
    locust -f loadtests/locustfile.py

    # Mixed workload only:
    locust -f loadtests/locustfile.py MixedWorkloadUser

    # Write contention on a single item:
    locust -f loadtests/locustfile.py TransferContentionUser

    # Headless (CI mode):
    locust -f loadtests/locustfile.py MixedWorkloadUser --headless \
           -u 50 -r 5 -t 300s --csv=results/loadtest
"""

import logging
import time

import requests
from locust import events

# Import all user classes so Locust discovers them
from loadtests.helpers.response import extract_error_detail
from loadtests.scenarios.mixed import MixedWorkloadUser  # noqa: F401
from loadtests.scenarios.stress import TransferContentionUser  # noqa: F401

logger = logging.getLogger("loadtest")


@events.request.add_listener
def on_request(request_type, name, response, exception, **_kw):
    """Log error details for every failed request.

    Fires globally for all scenarios — no per-task wiring needed.
    Extracts the API error body so you see "CapacityExceeded: Insufficient
    warehouse capacity..." instead of just "409".
    """
    if exception:
        logger.error("[EXCEPTION] %s %s: %s", request_type, name, exception)
    elif response is not None and response.status_code >= 400:
        detail = extract_error_detail(response)
        logger.error("[%s] %s %s: %s", response.status_code, request_type, name, detail)


@events.test_start.add_listener
def on_test_start(environment, **_kwargs):
    """Log a marker when load test begins."""
    print(f"\n[LOADTEST] Started at {time.strftime('%H:%M:%S')}")
    print(f"[LOADTEST] Target host: {environment.host}")
    print()


@events.test_stop.add_listener
def on_test_stop(environment, **_kwargs):
    """Print the ledger's dashboard totals when the test ends."""
    print(f"\n[LOADTEST] Stopped at {time.strftime('%H:%M:%S')}")
    if not environment.host:
        return
    try:
        resp = requests.get(f"{environment.host.rstrip('/')}/dashboard", timeout=5)
        resp.raise_for_status()
        summary = resp.json()
    except requests.RequestException as e:
        print(f"[LOADTEST] Could not fetch dashboard: {e}\n")
        return

    print("\n[LOADTEST] Final ledger totals:")
    print(f"  warehouses:          {summary['totalWarehouses']}")
    print(f"  items:               {summary['totalItems']}")
    print(f"  units in stock:      {summary['totalQuantity']}")
    print(f"  overall utilization: {summary['overallUtilization']:.1f}%")
    over = [row["name"] for row in summary["capacity"] if row["available"] < 0]
    if over:
        print(f"  OVER CAPACITY:       {', '.join(over)}")
    print()
