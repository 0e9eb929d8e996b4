"""Stress test scenarios for write contention.

TransferContentionUser sends many small transfers of the same item back
and forth between two warehouses, so every request competes for the same
item and warehouse locks. The ledger must stay consistent: the item's
units are never lost or duplicated, whatever the interleaving.
"""

import random

from locust import HttpUser, constant_pacing, events, task

from loadtests.data_generators import item_data, transfer_data, warehouse_data

_shared = {}


@events.test_start.add_listener
def _reset_shared(**_kwargs):
    _shared.clear()


class TransferContentionUser(HttpUser):
    """Stress test: many users racing to move units of one item.

    Rejections (409/400) are expected when a racing transfer drained the
    source first; they are counted as successes.
    """

    wait_time = constant_pacing(0.1)  # ~10 requests/sec per user

    def on_start(self):
        if _shared:
            return
        first = self.client.post("/warehouses", json=warehouse_data(max_capacity=10000), name="[STRESS] setup").json()
        second = self.client.post("/warehouses", json=warehouse_data(max_capacity=10000), name="[STRESS] setup").json()
        item = self.client.post("/items", json=item_data(first["id"], quantity=5000), name="[STRESS] setup").json()
        _shared.update(warehouses=[first["id"], second["id"]], sku=item["sku"])

    @task
    def transfer_some(self):
        source, destination = random.sample(_shared["warehouses"], 2)
        candidates = self.client.get(f"/items/warehouse/{source}", name="[STRESS] GET /items/warehouse/{id}").json()
        matching = [item for item in candidates if item["sku"] == _shared["sku"] and item["quantity"] > 0]
        if not matching:
            return
        item = matching[0]
        with self.client.post(
            "/items/transfer",
            json=transfer_data(item["id"], source, destination, random.randint(1, 25)),
            catch_response=True,
            name="[STRESS] POST /items/transfer",
        ) as resp:
            if resp.status_code in (200, 400, 409):
                resp.success()
