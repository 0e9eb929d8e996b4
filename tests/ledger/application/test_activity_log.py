"""Application tests for the activity log written after ledger mutations."""

from unittest.mock import patch

import pytest
from ledger.activity.log import ActivityEntry, ActivityType, recent_activity, record_activity
from ledger.exceptions import CapacityExceeded
from ledger.item.catalog import delete_item, get_item, update_item
from ledger.transfer.transfer import TransferRequest, transfer
from ledger.warehouse.registry import update_warehouse


def _types():
    return [entry.activity_type for entry in recent_activity()]


class TestActivityRecording:
    def test_warehouse_lifecycle_is_recorded(self, make_warehouse):
        wh = make_warehouse(name="North")
        update_warehouse(wh.id, location="Boston, MA")
        assert _types() == [ActivityType.WAREHOUSE_UPDATED.value, ActivityType.WAREHOUSE_CREATED.value]

    def test_item_entries_carry_names_and_quantities(self, make_warehouse, make_item):
        wh = make_warehouse(name="North")
        make_item(wh.id, sku="LAMP-001", name="LED Desk Lamp", quantity=12)

        entry = recent_activity()[0]
        assert entry.activity_type == ActivityType.CREATED.value
        assert entry.item_name == "LED Desk Lamp"
        assert entry.sku == "LAMP-001"
        assert entry.warehouse_name == "North"
        assert entry.quantity == 12
        assert "LED Desk Lamp" in entry.description

    def test_quantity_increase_is_stock_added(self, make_warehouse, make_item):
        wh = make_warehouse()
        item = make_item(wh.id, quantity=10)
        update_item(item.id, quantity=25)
        entry = recent_activity()[0]
        assert entry.activity_type == ActivityType.STOCK_ADDED.value
        assert entry.quantity == 15

    def test_other_updates_are_updated(self, make_warehouse, make_item):
        wh = make_warehouse()
        item = make_item(wh.id, quantity=10)
        update_item(item.id, name="Renamed")
        assert _types()[0] == ActivityType.UPDATED.value

    def test_transfer_and_delete_are_recorded(self, make_warehouse, make_item):
        w1 = make_warehouse()
        w2 = make_warehouse()
        item = make_item(w1.id, quantity=10)
        transfer(TransferRequest(item.id, w1.id, w2.id, 4))
        delete_item(item.id)
        assert _types()[:2] == [ActivityType.DELETED.value, ActivityType.TRANSFERRED.value]

    def test_rejected_mutation_is_not_recorded(self, make_warehouse, make_item):
        wh = make_warehouse(max_capacity=5)
        before = len(recent_activity())
        with pytest.raises(CapacityExceeded):
            make_item(wh.id, quantity=6)
        assert len(recent_activity()) == before


class TestActivityLog:
    def test_recent_is_limited(self):
        for n in range(5):
            record_activity(ActivityType.UPDATED, f"entry {n}")
        assert len(recent_activity(limit=3)) == 3

    def test_unknown_type_is_not_written(self):
        assert record_activity("SOMETHING_ELSE", "nope") is None
        assert recent_activity() == []

    def test_log_failure_never_fails_the_mutation(self, make_warehouse, make_item):
        wh = make_warehouse()
        with patch.object(ActivityEntry, "__init__", side_effect=RuntimeError("log store down")):
            item = make_item(wh.id, quantity=3)
        assert get_item(item.id).quantity == 3
