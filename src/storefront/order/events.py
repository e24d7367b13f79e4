"""Domain events for the Order aggregate."""

from protean.fields import DateTime, Float, Identifier, Integer, String

from storefront.domain import storefront


@storefront.event(part_of="Order")
class OrderPlaced:
    """A validated order was accepted from one of the intake channels."""

    __version__ = 1

    order_id = Identifier(required=True)
    source = String(required=True, max_length=20)
    status = String(required=True, max_length=20)
    total_amount = Float(required=True)
    total_quantity = Integer(required=True)
    item_count = Integer(required=True)
    created_at = DateTime(required=True)


@storefront.event(part_of="Order")
class OrderStatusChanged:
    """An administrator moved the order to a new fulfillment status."""

    __version__ = 1

    order_id = Identifier(required=True)
    previous_status = String(required=True, max_length=20)
    new_status = String(required=True, max_length=20)
    changed_by = String(max_length=255)
    changed_at = DateTime(required=True)
