"""Read helpers over persisted orders for the admin console."""

from protean.utils.globals import current_domain

from storefront.order.order import Order
from storefront.utils.query import fetch_all


def list_orders(newest_first=True):
    """All orders sorted by creation time, newest first by default."""
    ordering = "-created_at" if newest_first else "created_at"
    return fetch_all(current_domain.repository_for(Order)._dao.query.order_by(ordering))


def get_order(order_id):
    """Return the order or raise ``ObjectNotFoundError``."""
    return current_domain.repository_for(Order).get(order_id)
