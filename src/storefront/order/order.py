"""Order aggregate — an immutable point-in-time record of a submitted cart.

Items, total and customer details are fixed when the order is placed. The
only mutation an order accepts afterwards is a status change, which goes
through the rules in ``storefront.order.status``.
"""

from datetime import UTC, datetime

from protean.fields import DateTime, Float, HasMany, Integer, String, Text, ValueObject

from storefront.domain import storefront
from storefront.order.events import OrderPlaced, OrderStatusChanged
from storefront.order.status import (
    OrderSource,
    OrderStatus,
    TransitionPolicy,
    assert_can_transition,
    parse_status,
)


# ---------------------------------------------------------------------------
# Value Objects
# ---------------------------------------------------------------------------
@storefront.value_object(part_of="Order")
class CustomerInfo:
    """Contact details captured at submission time.

    ``external_channel_user_id`` is only set for orders that arrived through
    the messaging-platform integration.
    """

    name = String(max_length=255)
    phone = String(required=True, max_length=50)
    address = Text()
    external_channel_user_id = String(max_length=64)


# ---------------------------------------------------------------------------
# Entities
# ---------------------------------------------------------------------------
@storefront.entity(part_of="Order")
class OrderItem:
    """A line of the order, snapshotted from the cart.

    ``product_id`` is kept for traceability only; the order never reads the
    catalog again, so later price edits cannot change it.
    """

    line_number = Integer(required=True, min_value=1)
    product_id = String(max_length=64)
    name = String(required=True, max_length=255)
    unit_price = Float(required=True, min_value=0.0)
    unit = String(max_length=20)
    quantity = Integer(required=True, min_value=1)

    @property
    def line_total(self):
        return self.unit_price * self.quantity


# ---------------------------------------------------------------------------
# Aggregate Root
# ---------------------------------------------------------------------------
@storefront.aggregate
class Order:
    items = HasMany(OrderItem)
    customer_info = ValueObject(CustomerInfo, required=True)
    total_amount = Float(required=True, min_value=0.0)
    status = String(choices=OrderStatus, default=OrderStatus.ACCEPTED.value)
    source = String(choices=OrderSource, required=True)
    comments = Text()
    created_at = DateTime()
    updated_at = DateTime()

    # -------------------------------------------------------------------
    # Factory method
    # -------------------------------------------------------------------
    @classmethod
    def place(cls, items_data, customer_info, total_amount, source, comments=None, created_at=None):
        """Create an order in ``Accepted`` state.

        Args:
            items_data: List of dicts with product_id, name, unit_price, unit
                and quantity, in cart order.
            customer_info: Dict with name, phone, address and optionally
                external_channel_user_id.
            total_amount: Sum of unit_price × quantity over the items.
            source: An ``OrderSource`` or its value.
        """
        now = created_at or datetime.now(UTC)
        items = [OrderItem(line_number=position, **item) for position, item in enumerate(items_data, start=1)]

        order = cls(
            items=items,
            customer_info=CustomerInfo(**customer_info),
            total_amount=total_amount,
            status=OrderStatus.ACCEPTED.value,
            source=OrderSource(source).value,
            comments=comments,
            created_at=now,
            updated_at=now,
        )
        order.raise_(
            OrderPlaced(
                order_id=str(order.id),
                source=order.source,
                status=order.status,
                total_amount=order.total_amount,
                total_quantity=order.total_quantity,
                item_count=len(items),
                created_at=now,
            )
        )
        return order

    # -------------------------------------------------------------------
    # Derived values
    # -------------------------------------------------------------------
    @property
    def ordered_items(self):
        return sorted(self.items, key=lambda item: item.line_number)

    @property
    def total_quantity(self):
        return sum(item.quantity for item in self.items)

    # -------------------------------------------------------------------
    # Status
    # -------------------------------------------------------------------
    def change_status(self, new_status, policy=TransitionPolicy.GUARDED, changed_by=None):
        """Move the order to ``new_status`` under ``policy``."""
        current = parse_status(self.status)
        target = parse_status(new_status)
        assert_can_transition(current, target, policy)

        now = datetime.now(UTC)
        self.status = target.value
        self.updated_at = now

        self.raise_(
            OrderStatusChanged(
                order_id=str(self.id),
                previous_status=current.value,
                new_status=target.value,
                changed_by=changed_by,
                changed_at=now,
            )
        )
