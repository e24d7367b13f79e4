"""BDD tests for cart line management."""

from protean.exceptions import ValidationError
from pytest_bdd import parsers, scenarios, then, when

scenarios("features/cart_lines.feature")


# ---------------------------------------------------------------------------
# When steps
# ---------------------------------------------------------------------------
@when(parsers.cfparse('{quantity:d} of "{name}" are added to the cart'))
def add_to_cart(cart, catalog, quantity, name):
    cart["cart"] = cart["cart"].add_line(catalog[name], quantity)


@when(parsers.cfparse('the quantity of "{name}" is set to {quantity:d}'))
def set_quantity(cart, catalog, error, name, quantity):
    try:
        cart["cart"] = cart["cart"].set_line_quantity(str(catalog[name].id), quantity)
    except ValidationError as exc:
        error["exc"] = exc


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then(parsers.cfparse("the cart has {count:d} line"))
def cart_has_lines(cart, count):
    assert len(cart["cart"].lines) == count


@then(parsers.cfparse('the quantity of "{name}" is {quantity:d}'))
def quantity_is(cart, catalog, name, quantity):
    assert cart["cart"].line_for(str(catalog[name].id)).quantity == quantity
