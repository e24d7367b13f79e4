"""Order fulfillment — status change command and handler."""

import structlog
from protean import handle
from protean.fields import Identifier, String
from protean.utils.globals import current_domain

from storefront.domain import storefront
from storefront.order.order import Order
from storefront.order.status import configured_policy

logger = structlog.get_logger(__name__)


@storefront.command(part_of="Order")
class ChangeOrderStatus:
    """Move an order to a new fulfillment status."""

    order_id = Identifier(required=True)
    status = String(required=True, max_length=20)
    changed_by = String(max_length=255)


@storefront.command_handler(part_of=Order)
class ChangeOrderStatusHandler:
    @handle(ChangeOrderStatus)
    def change_status(self, command):
        repo = current_domain.repository_for(Order)
        order = repo.get(command.order_id)

        policy = configured_policy()
        previous = order.status
        order.change_status(command.status, policy=policy, changed_by=command.changed_by)
        repo.add(order)

        logger.info(
            "Order status changed",
            order_id=str(order.id),
            previous_status=previous,
            new_status=order.status,
            policy=policy.value,
            changed_by=command.changed_by,
        )
        return order.status
