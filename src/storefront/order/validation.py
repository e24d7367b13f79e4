"""Order validation — decides whether a cart plus contact details may be submitted.

Checks run in a fixed order and stop at the first failure, so the caller
always gets the most fundamental problem first:

1. the cart has at least one line
2. the phone number is present and phone-shaped
3. the delivery address is present
4. the summed quantity is within ``WEIGHT_LIMIT``
5. every line still respects its product's minimum increment

Validation has no side effects. A passing cart yields an ``OrderDraft`` that
``storefront.order.intake`` persists.
"""

import re
from dataclasses import dataclass, field
from datetime import UTC, datetime

from storefront.cart.cart import WEIGHT_LIMIT
from storefront.order.status import OrderSource, OrderStatus
from storefront.shared.errors import (
    EmptyCartError,
    MissingAddressError,
    PhoneFormatError,
    QuantityIncrementError,
    WeightLimitError,
)

# Digits, spaces, hyphens and parentheses after an optional leading +,
# at least ten characters in total
PHONE_PATTERN = re.compile(r"^\+?[0-9\s\-()]{10,}$")


@dataclass(frozen=True)
class OrderDraft:
    """A validated, not yet persisted order payload."""

    items: tuple
    customer: dict
    total_amount: float
    total_quantity: int
    source: OrderSource
    status: OrderStatus = OrderStatus.ACCEPTED
    comments: str | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))


def is_valid_phone(phone):
    return bool(phone) and bool(PHONE_PATTERN.match(phone.strip()))


def validate_order(cart, customer, source, comments=None):
    """Validate ``cart`` and ``customer`` and return an ``OrderDraft``.

    Args:
        cart: A ``storefront.cart.cart.Cart``.
        customer: Dict with phone, address and optionally name.
        source: The intake channel tag (``OrderSource`` or its value).
        comments: Free-text remarks from the customer.

    Raises:
        EmptyCartError, PhoneFormatError, MissingAddressError,
        WeightLimitError, QuantityIncrementError
    """
    if cart.is_empty:
        raise EmptyCartError()

    phone = customer.get("phone")
    if not phone or not phone.strip():
        raise PhoneFormatError("Phone number is required")
    if not is_valid_phone(phone):
        raise PhoneFormatError()

    address = customer.get("address")
    if not address or not address.strip():
        raise MissingAddressError()

    total_quantity = cart.total_quantity
    if total_quantity > WEIGHT_LIMIT:
        raise WeightLimitError(f"Total quantity {total_quantity} exceeds the limit of {WEIGHT_LIMIT}")

    for line in cart.lines:
        if not line.respects_increment:
            raise QuantityIncrementError(
                f"{line.name}: quantity {line.quantity} must be a multiple of {line.min_order_increment}"
            )

    items = tuple(
        {
            "product_id": str(line.product_id),
            "name": line.name,
            "unit_price": line.unit_price,
            "unit": line.unit,
            "quantity": line.quantity,
        }
        for line in cart.lines
    )

    return OrderDraft(
        items=items,
        customer=dict(customer),
        total_amount=cart.total_amount,
        total_quantity=total_quantity,
        source=OrderSource(source),
        comments=comments,
    )
