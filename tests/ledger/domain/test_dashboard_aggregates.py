"""Tests for the dashboard aggregate functions over a ledger snapshot."""

from types import SimpleNamespace

from ledger.reporting.dashboard import (
    UNCATEGORIZED,
    LedgerSnapshot,
    capacity_rows,
    overall_utilization,
    quantity_by_category,
    summarize,
    total_items,
    total_quantity,
    total_warehouses,
    warehouses_above,
)
from ledger.warehouse.registry import views_from


def _warehouse(warehouse_id, name, max_capacity):
    return SimpleNamespace(
        id=warehouse_id,
        name=name,
        location="Somewhere",
        max_capacity=max_capacity,
        created_at=None,
        updated_at=None,
    )


def _item(item_id, warehouse_id, quantity, category=None):
    return SimpleNamespace(id=item_id, warehouse_id=warehouse_id, quantity=quantity, category=category)


def _snapshot(warehouses, items):
    return LedgerSnapshot(warehouses=views_from(warehouses, items), items=items)


def _sample():
    warehouses = [_warehouse("w1", "North", 100), _warehouse("w2", "South", 50)]
    items = [
        _item("i1", "w1", 85, "Electronics"),
        _item("i2", "w2", 10, "Furniture"),
        _item("i3", "w2", 5, None),
        _item("i4", "w2", 5, "Electronics"),
    ]
    return _snapshot(warehouses, items)


class TestTotals:
    def test_counts(self):
        snapshot = _sample()
        assert total_warehouses(snapshot) == 2
        assert total_items(snapshot) == 4
        assert total_quantity(snapshot) == 105

    def test_overall_utilization(self):
        assert overall_utilization(_sample()) == 105 / 150 * 100

    def test_overall_utilization_without_warehouses(self):
        assert overall_utilization(LedgerSnapshot()) == 0.0


class TestNearCapacity:
    def test_strictly_above_threshold(self):
        names = [w.name for w in warehouses_above(_sample(), 80)]
        assert names == ["North"]

    def test_equal_to_threshold_is_not_above(self):
        names = [w.name for w in warehouses_above(_sample(), 85)]
        assert names == []

    def test_threshold_is_a_parameter(self):
        names = [w.name for w in warehouses_above(_sample(), 30)]
        assert names == ["North", "South"]


class TestCategories:
    def test_quantity_by_category(self):
        assert quantity_by_category(_sample()) == {
            "Electronics": 90,
            "Furniture": 10,
            UNCATEGORIZED: 5,
        }

    def test_blank_category_is_uncategorized(self):
        snapshot = _snapshot([_warehouse("w1", "North", 100)], [_item("i1", "w1", 3, "  ")])
        assert quantity_by_category(snapshot) == {UNCATEGORIZED: 3}


class TestSummary:
    def test_capacity_rows(self):
        rows = capacity_rows(_sample())
        north = next(row for row in rows if row.name == "North")
        assert north.used == 85
        assert north.available == 15
        assert north.utilization_percentage == 85.0

    def test_summarize_uses_given_threshold(self):
        summary = summarize(_sample(), threshold=90)
        assert summary.threshold == 90
        assert summary.near_capacity == []
        assert summary.total_quantity == 105
