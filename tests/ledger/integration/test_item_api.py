"""Integration tests for Item and Transfer API endpoints via TestClient."""


class TestCreateItemEndpoint:
    def test_create_item(self, client, create_warehouse, create_item):
        wh = create_warehouse(name="North")
        data = create_item(wh["id"], category="Electronics", storageLocation="A1-R1-S3")
        assert data["sku"] == "LAPTOP-001"
        assert data["warehouseId"] == wh["id"]
        assert data["warehouseName"] == "North"
        assert data["storageLocation"] == "A1-R1-S3"

    def test_over_capacity(self, client, create_warehouse):
        wh = create_warehouse(maxCapacity=50)
        response = client.post("/items", json={"sku": "X", "name": "X", "quantity": 60, "warehouseId": wh["id"]})
        assert response.status_code == 409
        body = response.json()
        assert body["error"] == "CapacityExceeded"
        assert body["errors"]["quantity"] == ["Insufficient warehouse capacity. Available: 50, Required: 60"]

    def test_duplicate_sku(self, client, create_warehouse, create_item):
        wh = create_warehouse()
        create_item(wh["id"], quantity=1)
        response = client.post("/items", json={"sku": "LAPTOP-001", "name": "Again", "warehouseId": wh["id"]})
        assert response.status_code == 409
        assert response.json()["error"] == "Conflict"

    def test_unknown_warehouse(self, client):
        response = client.post("/items", json={"sku": "X", "name": "X", "warehouseId": "missing"})
        assert response.status_code == 404


class TestReadItemEndpoints:
    def test_list_and_get(self, client, create_warehouse, create_item):
        wh = create_warehouse()
        item = create_item(wh["id"])
        assert [i["id"] for i in client.get("/items").json()] == [item["id"]]
        assert client.get(f"/items/{item['id']}").json()["quantity"] == 40

    def test_items_by_warehouse(self, client, create_warehouse, create_item):
        w1 = create_warehouse(name="North")
        w2 = create_warehouse(name="South")
        create_item(w1["id"], sku="A")
        create_item(w2["id"], sku="B")
        response = client.get(f"/items/warehouse/{w2['id']}")
        assert [i["sku"] for i in response.json()] == ["B"]

    def test_search(self, client, create_warehouse, create_item):
        wh = create_warehouse()
        create_item(wh["id"], sku="DESK-001", name="Standing Desk", category="Furniture", quantity=5)
        create_item(wh["id"], sku="LAMP-001", name="LED Desk Lamp", category="Office Supplies", quantity=5)
        response = client.get("/items/search", params={"searchTerm": "furn"})
        assert [i["sku"] for i in response.json()] == ["DESK-001"]

        response = client.get("/items/search", params={"searchTerm": "desk", "warehouseId": wh["id"]})
        assert {i["sku"] for i in response.json()} == {"DESK-001", "LAMP-001"}

    def test_categories(self, client, create_warehouse, create_item):
        wh = create_warehouse()
        create_item(wh["id"], sku="A", category="Furniture", quantity=1)
        create_item(wh["id"], sku="B", category="Electronics", quantity=1)
        assert client.get("/items/categories").json() == ["Electronics", "Furniture"]


class TestUpdateItemEndpoint:
    def test_update_quantity(self, client, create_warehouse, create_item):
        wh = create_warehouse()
        item = create_item(wh["id"])
        response = client.put(f"/items/{item['id']}", json={"quantity": 55})
        assert response.status_code == 200
        assert response.json()["quantity"] == 55

    def test_sku_change_rejected(self, client, create_warehouse, create_item):
        wh = create_warehouse()
        item = create_item(wh["id"])
        response = client.put(f"/items/{item['id']}", json={"sku": "OTHER"})
        assert response.status_code == 400
        assert response.json()["error"] == "InvalidArgument"


class TestDeleteItemEndpoint:
    def test_delete(self, client, create_warehouse, create_item):
        wh = create_warehouse()
        item = create_item(wh["id"])
        assert client.delete(f"/items/{item['id']}").status_code == 204
        assert client.get(f"/items/{item['id']}").status_code == 404
        assert client.get(f"/warehouses/{wh['id']}").json()["currentCapacity"] == 0


class TestTransferEndpoint:
    def _transfer(self, client, item, source, destination, quantity):
        return client.post(
            "/items/transfer",
            json={
                "itemId": item["id"],
                "sourceWarehouseId": source["id"],
                "destinationWarehouseId": destination["id"],
                "quantity": quantity,
            },
        )

    def test_partial_transfer(self, client, create_warehouse, create_item):
        w1 = create_warehouse(name="W1")
        w2 = create_warehouse(name="W2", maxCapacity=50)
        item = create_item(w1["id"])

        response = self._transfer(client, item, w1, w2, 15)
        assert response.status_code == 200
        body = response.json()
        assert body["mode"] == "split"
        assert body["sourceItem"]["quantity"] == 25
        assert body["destinationItem"]["quantity"] == 15
        assert body["destinationItem"]["warehouseName"] == "W2"

    def test_full_transfer(self, client, create_warehouse, create_item):
        w1 = create_warehouse(name="W1")
        w2 = create_warehouse(name="W2", maxCapacity=50)
        item = create_item(w1["id"])

        body = self._transfer(client, item, w1, w2, 40).json()
        assert body["mode"] == "move"
        assert body["destinationItem"]["id"] == item["id"]
        assert client.get(f"/warehouses/{w2['id']}").json()["currentCapacity"] == 40

    def test_error_statuses(self, client, create_warehouse, create_item):
        w1 = create_warehouse(name="W1")
        w2 = create_warehouse(name="W2", maxCapacity=10)
        item = create_item(w1["id"])

        assert self._transfer(client, item, w2, w1, 5).status_code == 409
        assert self._transfer(client, item, w1, w1, 5).status_code == 400
        assert self._transfer(client, item, w1, w2, 0).status_code == 400
        assert self._transfer(client, item, w1, w2, 41).status_code == 400
        assert self._transfer(client, item, w1, w2, 11).status_code == 409
        assert self._transfer(client, {"id": "missing"}, w1, w2, 1).status_code == 404

    def test_error_body_is_keyed_by_field(self, client, create_warehouse, create_item):
        w1 = create_warehouse(name="W1")
        w2 = create_warehouse(name="W2", maxCapacity=10)
        item = create_item(w1["id"])

        body = self._transfer(client, item, w1, w2, 11).json()
        assert body["error"] == "CapacityExceeded"
        assert body["errors"] == {"quantity": ["Insufficient capacity in destination warehouse. Available: 10, Required: 11"]}
        assert body["message"] == "Insufficient capacity in destination warehouse. Available: 10, Required: 11"

        body = self._transfer(client, {"id": "missing"}, w1, w2, 1).json()
        assert body["error"] == "NotFound"
        assert list(body["errors"]) == ["item_id"]
