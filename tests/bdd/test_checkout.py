"""BDD tests for checkout."""

import pytest
from protean.utils.globals import current_domain
from pytest_bdd import given, parsers, scenarios, then, when

from storefront.cart.cart import Cart
from storefront.order.intake import checkout
from storefront.order.order import Order
from storefront.shared.errors import OrderSubmissionError

scenarios("features/checkout.feature")


@pytest.fixture()
def outcome():
    return {"order_id": None, "exc": None}


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given(parsers.cfparse('a cart with {first_qty:d} of "{first}" and {second_qty:d} of "{second}"'))
def filled_cart(cart, catalog, first_qty, first, second_qty, second):
    cart["cart"] = Cart().add_line(catalog[first], first_qty).add_line(catalog[second], second_qty)


# ---------------------------------------------------------------------------
# When steps
# ---------------------------------------------------------------------------
@when(parsers.cfparse('the customer checks out with phone "{phone}" and address "{address}"'))
def check_out(cart, outcome, phone, address):
    try:
        outcome["order_id"], cart["cart"] = checkout(cart["cart"], {"phone": phone, "address": address})
    except OrderSubmissionError as exc:
        outcome["exc"] = exc


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then(parsers.cfparse("an order is accepted with total {total:f} and quantity {quantity:d}"))
def order_accepted(outcome, total, quantity):
    order = current_domain.repository_for(Order).get(outcome["order_id"])
    assert order.status == "Accepted"
    assert order.total_amount == total
    assert order.total_quantity == quantity


@then(parsers.cfparse('checkout fails with "{code}"'))
def checkout_fails(outcome, code):
    assert outcome["exc"] is not None, "Expected checkout to be refused"
    assert outcome["exc"].code == code


@then("no order is stored")
def no_order_stored():
    assert current_domain.repository_for(Order)._dao.query.all().items == []
