"""Shared BDD fixtures and step definitions for the storefront."""

import pytest
from protean.exceptions import ValidationError
from pytest_bdd import given, parsers, then

from storefront.cart.cart import Cart
from storefront.catalog.store import CatalogStore


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------
@pytest.fixture()
def error():
    """Container for captured validation errors."""
    return {"exc": None}


@pytest.fixture()
def catalog():
    """Products created in this scenario, by name."""
    return {}


@pytest.fixture()
def cart():
    return {"cart": Cart()}


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given(parsers.cfparse('a product "{name}" priced {price:f} sold in steps of {increment:d}'))
def product_in_catalog(catalog, name, price, increment):
    store = CatalogStore()
    catalog[name] = store.get(
        store.create(name=name, category="vegetables", price=price, min_order_increment=increment)
    )


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then("the action fails with a validation error")
def action_fails_with_validation_error(error):
    assert error["exc"] is not None, "Expected a validation error but none was raised"
    assert isinstance(error["exc"], ValidationError)


@then("the cart is empty")
def cart_is_empty(cart):
    assert cart["cart"].is_empty
