"""Orders by status — admin dashboard view for filtering orders by status."""

from collections import Counter

from protean.core.projector import on
from protean.fields import DateTime, Float, Identifier, String
from protean.utils.globals import current_domain

from storefront.domain import storefront
from storefront.order.events import OrderPlaced, OrderStatusChanged
from storefront.order.order import Order
from storefront.order.status import OrderStatus
from storefront.utils.query import fetch_all


@storefront.projection
class OrdersByStatus:
    order_id = Identifier(identifier=True, required=True)
    status = String(required=True)
    source = String(max_length=20)
    total_amount = Float()
    created_at = DateTime()
    updated_at = DateTime()


@storefront.projector(projector_for=OrdersByStatus, aggregates=[Order])
class OrdersByStatusProjector:
    @on(OrderPlaced)
    def on_order_placed(self, event):
        current_domain.repository_for(OrdersByStatus).add(
            OrdersByStatus(
                order_id=event.order_id,
                status=event.status,
                source=event.source,
                total_amount=event.total_amount,
                created_at=event.created_at,
                updated_at=event.created_at,
            )
        )

    @on(OrderStatusChanged)
    def on_order_status_changed(self, event):
        repo = current_domain.repository_for(OrdersByStatus)
        record = repo.get(event.order_id)
        record.status = event.new_status
        record.updated_at = event.changed_at
        repo.add(record)


def status_counts():
    """Number of orders per status, every status present (zero if unused)."""
    records = fetch_all(current_domain.repository_for(OrdersByStatus)._dao.query.order_by("order_id"))
    counts = Counter(record.status for record in records)
    return {status.value: counts.get(status.value, 0) for status in OrderStatus}
