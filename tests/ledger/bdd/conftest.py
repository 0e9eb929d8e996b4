"""Shared BDD fixtures and step definitions for the Ledger."""

import pytest
from ledger.exceptions import error_kind
from ledger.item.catalog import create_item, search_items
from ledger.transfer.transfer import TransferRequest, transfer
from ledger.warehouse.registry import create_warehouse, get_warehouse
from protean.exceptions import InvalidOperationError, InvalidStateError, ObjectNotFoundError, ValidationError
from pytest_bdd import given, parsers, then, when

_EXPECTED_FAILURES = (ValidationError, ObjectNotFoundError, InvalidOperationError, InvalidStateError)


@pytest.fixture()
def warehouses():
    """Warehouse views by name."""
    return {}


@pytest.fixture()
def outcome():
    return {}


def _record(sku, warehouse):
    matches = [item for item in search_items(sku, warehouse.id) if item.sku == sku]
    assert len(matches) == 1
    return matches[0]


def _attempt(outcome, action):
    try:
        outcome["result"] = action()
    except _EXPECTED_FAILURES as exc:
        outcome["error"] = exc


def _transfer(warehouses, sku, source, destination, quantity):
    item = _record(sku, warehouses[source])
    return transfer(
        TransferRequest(
            item_id=item.id,
            source_warehouse_id=warehouses[source].id,
            destination_warehouse_id=warehouses[destination].id,
            quantity=quantity,
        )
    )


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given(parsers.cfparse('a warehouse "{name}" with capacity {capacity:d}'))
def _(warehouses, name, capacity):
    warehouses[name] = create_warehouse(name, "Springfield, IL", capacity)


@given(parsers.cfparse('item "{sku}" is in "{warehouse}" with quantity {quantity:d}'))
def _(warehouses, sku, warehouse, quantity):
    create_item(sku=sku, name=f"Item {sku}", warehouse_id=warehouses[warehouse].id, quantity=quantity)


@given(parsers.cfparse('{quantity:d} units of "{sku}" were transferred from "{source}" to "{destination}"'))
def _(warehouses, quantity, sku, source, destination):
    _transfer(warehouses, sku, source, destination, quantity)


# ---------------------------------------------------------------------------
# When steps
# ---------------------------------------------------------------------------
@when(parsers.cfparse('item "{sku}" is created in "{warehouse}" with quantity {quantity:d}'))
def _(warehouses, outcome, sku, warehouse, quantity):
    _attempt(
        outcome,
        lambda: create_item(sku=sku, name=f"Item {sku}", warehouse_id=warehouses[warehouse].id, quantity=quantity),
    )


@when(parsers.cfparse('{quantity:d} units of "{sku}" are transferred from "{source}" to "{destination}"'))
def _(warehouses, outcome, quantity, sku, source, destination):
    _attempt(outcome, lambda: _transfer(warehouses, sku, source, destination, quantity))


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then(parsers.cfparse('"{warehouse}" holds {quantity:d} units'))
def _(warehouses, warehouse, quantity):
    assert get_warehouse(warehouses[warehouse].id).current_capacity == quantity


@then(parsers.cfparse('"{warehouse}" has {quantity:d} units available'))
def _(warehouses, warehouse, quantity):
    assert get_warehouse(warehouses[warehouse].id).available_capacity == quantity


@then(parsers.cfparse('the transfer succeeds as a "{mode}"'))
def _(outcome, mode):
    assert "error" not in outcome, outcome.get("error")
    assert outcome["result"].mode == mode


@then(parsers.cfparse('item "{sku}" is now in "{warehouse}"'))
def _(warehouses, outcome, sku, warehouse):
    moved = outcome["result"].destination_item
    assert moved.sku == sku
    assert moved.warehouse_id == warehouses[warehouse].id


@then(parsers.cfparse('the "{sku}" record in "{warehouse}" has quantity {quantity:d}'))
def _(warehouses, sku, warehouse, quantity):
    assert _record(sku, warehouses[warehouse]).quantity == quantity


@then(parsers.cfparse('the operation fails with "{kind}"'))
def _(outcome, kind):
    assert "error" in outcome
    assert error_kind(outcome["error"]) == kind
