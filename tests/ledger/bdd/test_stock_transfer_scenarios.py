"""BDD tests for stock transfers and capacity accounting."""

from pytest_bdd import scenarios

scenarios("features/stock_transfer.feature")
