"""Ledger load test scenarios.

Stateful SequentialTaskSet journeys for stocking warehouses and moving
stock between them, plus a read-only browsing TaskSet.
"""

import random

from locust import SequentialTaskSet, TaskSet, task

from loadtests.data_generators import item_data, search_term, transfer_data, warehouse_data
from loadtests.helpers.response import extract_error_detail
from loadtests.helpers.state import LedgerState, TrackedItem


class StockingJourney(SequentialTaskSet):
    """Create Warehouses -> Stock Items -> Top Up -> Check Dashboard.

    Models an operator opening two warehouses and filling them.
    """

    def on_start(self):
        self.state = LedgerState()

    @task
    def create_warehouses(self):
        for _ in range(2):
            with self.client.post(
                "/warehouses",
                json=warehouse_data(),
                catch_response=True,
                name="POST /warehouses",
            ) as resp:
                if resp.status_code == 201:
                    self.state.warehouse_ids.append(resp.json()["id"])
                else:
                    resp.failure(f"Create warehouse failed: {resp.status_code} — {extract_error_detail(resp)}")
                    self.interrupt()

    @task
    def stock_items(self):
        for _ in range(random.randint(2, 5)):
            warehouse_id = random.choice(self.state.warehouse_ids)
            with self.client.post(
                "/items",
                json=item_data(warehouse_id),
                catch_response=True,
                name="POST /items",
            ) as resp:
                if resp.status_code == 201:
                    body = resp.json()
                    self.state.items.append(TrackedItem(body["id"], body["warehouseId"], body["quantity"]))
                else:
                    resp.failure(f"Create item failed: {resp.status_code} — {extract_error_detail(resp)}")

    @task
    def top_up(self):
        if not self.state.items:
            self.interrupt()
        item = random.choice(self.state.items)
        quantity = item.quantity + random.randint(1, 20)
        with self.client.put(
            f"/items/{item.item_id}",
            json={"quantity": quantity},
            catch_response=True,
            name="PUT /items/{id}",
        ) as resp:
            if resp.status_code == 200:
                item.quantity = quantity
            elif resp.status_code == 409:
                # Warehouse full: an expected outcome under load
                resp.success()
            else:
                resp.failure(f"Update item failed: {resp.status_code} — {extract_error_detail(resp)}")

    @task
    def check_dashboard(self):
        self.client.get("/dashboard", name="GET /dashboard")

    @task
    def done(self):
        self.interrupt()


class TransferJourney(SequentialTaskSet):
    """Create Warehouses -> Create Item -> Partial Transfer -> Full Transfer -> Clean Up.

    Exercises the split, merge and move paths of the transfer coordinator.
    """

    def on_start(self):
        self.state = LedgerState()

    @task
    def setup(self):
        for _ in range(2):
            resp = self.client.post("/warehouses", json=warehouse_data(max_capacity=1000), name="POST /warehouses")
            if resp.status_code != 201:
                self.interrupt()
            self.state.warehouse_ids.append(resp.json()["id"])

        resp = self.client.post("/items", json=item_data(self.state.warehouse_ids[0], quantity=60), name="POST /items")
        if resp.status_code != 201:
            self.interrupt()
        body = resp.json()
        self.state.items.append(TrackedItem(body["id"], body["warehouseId"], body["quantity"]))

    @task
    def partial_transfers(self):
        item = self.state.items[0]
        destination = self.state.other_warehouse(item.warehouse_id)
        for quantity in (10, 5):
            with self.client.post(
                "/items/transfer",
                json=transfer_data(item.item_id, item.warehouse_id, destination, quantity),
                catch_response=True,
                name="POST /items/transfer (partial)",
            ) as resp:
                if resp.status_code == 200:
                    item.quantity -= quantity
                else:
                    resp.failure(f"Transfer failed: {resp.status_code} — {extract_error_detail(resp)}")

    @task
    def full_transfer(self):
        item = self.state.items[0]
        destination = self.state.other_warehouse(item.warehouse_id)
        with self.client.post(
            "/items/transfer",
            json=transfer_data(item.item_id, item.warehouse_id, destination, item.quantity),
            catch_response=True,
            name="POST /items/transfer (full)",
        ) as resp:
            if resp.status_code == 200:
                item.warehouse_id = destination
            else:
                resp.failure(f"Transfer failed: {resp.status_code} — {extract_error_detail(resp)}")

    @task
    def clean_up(self):
        for warehouse_id in self.state.warehouse_ids:
            resp = self.client.get(f"/items/warehouse/{warehouse_id}", name="GET /items/warehouse/{id}")
            for item in resp.json() if resp.status_code == 200 else []:
                self.client.delete(f"/items/{item['id']}", name="DELETE /items/{id}")
            self.client.delete(f"/warehouses/{warehouse_id}", name="DELETE /warehouses/{id}")
        self.interrupt()


class BrowsingTasks(TaskSet):
    """Read-only traffic: listings, searches, categories and reports."""

    @task(4)
    def list_items(self):
        self.client.get("/items", name="GET /items")

    @task(3)
    def search_items(self):
        self.client.get("/items/search", params={"searchTerm": search_term()}, name="GET /items/search")

    @task(2)
    def list_warehouses(self):
        self.client.get("/warehouses", name="GET /warehouses")

    @task(1)
    def categories(self):
        self.client.get("/items/categories", name="GET /items/categories")

    @task(1)
    def activity(self):
        self.client.get("/activity", params={"limit": 20}, name="GET /activity")

    @task(1)
    def stop(self):
        self.interrupt()
