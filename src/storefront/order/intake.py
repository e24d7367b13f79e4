"""Order intake — the single write path for new orders.

Orders arrive from the web checkout form and from the messaging-platform
integration. Both are validated and normalized the same way; they differ only
in how ``source`` is tagged and whether
``customer_info.external_channel_user_id`` is filled.
"""

import json
import math

import structlog
from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Float, String, Text
from protean.utils.globals import current_domain

from storefront.cart.cart import Cart
from storefront.domain import storefront
from storefront.order.order import Order
from storefront.order.status import OrderSource
from storefront.order.validation import validate_order

logger = structlog.get_logger(__name__)

UNNAMED_CUSTOMER = "Not specified"


@storefront.command(part_of="Order")
class SubmitWebOrder:
    lines = Text(required=True)  # JSON: list of cart line snapshots
    customer_name = String(max_length=255)
    phone = String(max_length=50)
    address = Text()
    comments = Text()
    total_amount = Float()  # Total the client displayed, checked against the lines


@storefront.command(part_of="Order")
class SubmitChannelOrder:
    channel_user_id = String(required=True, max_length=64)
    lines = Text(required=True)  # JSON: list of cart line snapshots
    customer_name = String(max_length=255)
    phone = String(max_length=50)
    address = Text()
    comments = Text()
    total_amount = Float()


def normalize_intake(draft, channel_user_id=None, claimed_total=None):
    """Turn a validated ``OrderDraft`` into an ``Order`` ready to persist.

    Raises ``ValidationError`` when the channel identity does not fit the
    source, or when a client-claimed total disagrees with the items.
    """
    if draft.source == OrderSource.EXTERNAL_CHANNEL:
        if channel_user_id is None or not str(channel_user_id).strip():
            raise ValidationError({"external_channel_user_id": ["Channel orders must identify the channel user"]})
        channel_user_id = str(channel_user_id).strip()
    else:
        # Web orders never carry a channel identity, even if one was sent
        channel_user_id = None

    if claimed_total is not None and not math.isclose(claimed_total, draft.total_amount, abs_tol=0.005):
        raise ValidationError(
            {"total_amount": [f"Submitted total {claimed_total} does not match the cart total {draft.total_amount}"]}
        )

    customer = draft.customer
    name = (customer.get("name") or "").strip() or UNNAMED_CUSTOMER

    return Order.place(
        items_data=[dict(item) for item in draft.items],
        customer_info={
            "name": name,
            "phone": customer["phone"].strip(),
            "address": customer["address"].strip(),
            "external_channel_user_id": channel_user_id,
        },
        total_amount=draft.total_amount,
        source=draft.source,
        comments=(draft.comments or "").strip() or None,
        created_at=draft.created_at,
    )


@storefront.command_handler(part_of=Order)
class OrderIntakeHandler:
    @handle(SubmitWebOrder)
    def submit_web_order(self, command):
        return self._accept(command, OrderSource.WEB)

    @handle(SubmitChannelOrder)
    def submit_channel_order(self, command):
        return self._accept(command, OrderSource.EXTERNAL_CHANNEL, channel_user_id=command.channel_user_id)

    def _accept(self, command, source, channel_user_id=None):
        lines = json.loads(command.lines) if isinstance(command.lines, str) else command.lines
        cart = Cart.from_snapshot(lines)

        draft = validate_order(
            cart,
            {"name": command.customer_name, "phone": command.phone, "address": command.address},
            source,
            comments=command.comments,
        )
        order = normalize_intake(draft, channel_user_id=channel_user_id, claimed_total=command.total_amount)
        current_domain.repository_for(Order).add(order)

        logger.info(
            "Order accepted",
            order_id=str(order.id),
            source=order.source,
            total_amount=order.total_amount,
            total_quantity=draft.total_quantity,
        )
        return str(order.id)


def checkout(cart, customer, source=OrderSource.WEB, comments=None, channel_user_id=None, claimed_total=None):
    """Submit ``cart`` and return ``(order_id, cleared_cart)``.

    On any validation failure the exception propagates and the caller keeps
    its cart as it was.
    """
    fields = {
        "lines": json.dumps(cart.to_snapshot()),
        "customer_name": customer.get("name"),
        "phone": customer.get("phone"),
        "address": customer.get("address"),
        "comments": comments,
        "total_amount": claimed_total,
    }
    if OrderSource(source) == OrderSource.EXTERNAL_CHANNEL:
        command = SubmitChannelOrder(channel_user_id=channel_user_id, **fields)
    else:
        command = SubmitWebOrder(**fields)

    order_id = current_domain.process(command, asynchronous=False)
    return order_id, cart.clear()
