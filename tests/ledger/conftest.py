import pytest
from protean.integrations.pytest import DomainFixture


@pytest.fixture(scope="session")
def ledger_bed():
    from ledger.domain import ledger

    bed = DomainFixture(ledger)
    bed.setup()
    yield bed
    bed.teardown()


@pytest.fixture(autouse=True)
def _ctx(ledger_bed):
    with ledger_bed.domain_context():
        yield

        from protean import current_domain

        # Clear all databases
        for _, provider in current_domain.providers.items():
            provider._data_reset()

        # Drain event stores
        current_domain.event_store.store._data_reset()


@pytest.fixture()
def make_warehouse():
    """Create a warehouse through the Registry and return its view."""
    from ledger.warehouse.registry import create_warehouse

    counter = {"n": 0}

    def _make(name=None, location="Springfield, IL", max_capacity=100):
        counter["n"] += 1
        return create_warehouse(name or f"Warehouse {counter['n']}", location, max_capacity)

    return _make


@pytest.fixture()
def make_item():
    """Create an item through the Catalog and return its view."""
    from ledger.item.catalog import create_item

    counter = {"n": 0}

    def _make(warehouse_id, sku=None, name=None, quantity=10, **extra):
        counter["n"] += 1
        return create_item(
            sku=sku or f"SKU-{counter['n']:03d}",
            name=name or f"Item {counter['n']}",
            warehouse_id=warehouse_id,
            quantity=quantity,
            **extra,
        )

    return _make
