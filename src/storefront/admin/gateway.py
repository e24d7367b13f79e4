"""Admin mutation gateway — the only route to catalog edits and status changes.

Every call authenticates the presented bearer token before touching the
domain. A refused token raises ``AuthError`` and nothing is read or written.
"""

import structlog
from protean.utils.globals import current_domain

from storefront.admin.auth import get_authenticator
from storefront.catalog.store import CatalogStore
from storefront.order.fulfillment import ChangeOrderStatus
from storefront.order.queries import get_order, list_orders
from storefront.projections.orders_by_status import status_counts

logger = structlog.get_logger(__name__)


class AdminGateway:
    def __init__(self, authenticator=None, catalog=None):
        self._authenticator = authenticator
        self.catalog = catalog or CatalogStore()

    @property
    def authenticator(self):
        return self._authenticator or get_authenticator()

    def _authorize(self, token, action):
        principal = self.authenticator.authenticate(token)
        logger.debug("Admin action authorized", action=action, admin=principal.username)
        return principal

    # -------------------------------------------------------------------
    # Catalog
    # -------------------------------------------------------------------
    def create_product(self, token, **fields):
        principal = self._authorize(token, "create_product")
        product_id = self.catalog.create(**fields)
        logger.info("Product created by admin", product_id=product_id, admin=principal.username)
        return self.catalog.get(product_id)

    def update_product(self, token, product_id, **changes):
        principal = self._authorize(token, "update_product")
        product = self.catalog.update(product_id, **changes)
        logger.info("Product updated by admin", product_id=str(product_id), admin=principal.username)
        return product

    def delete_product(self, token, product_id):
        principal = self._authorize(token, "delete_product")
        self.catalog.delete(product_id)
        logger.info("Product deleted by admin", product_id=str(product_id), admin=principal.username)

    # -------------------------------------------------------------------
    # Orders
    # -------------------------------------------------------------------
    def list_orders(self, token, newest_first=True):
        self._authorize(token, "list_orders")
        return list_orders(newest_first=newest_first)

    def get_order(self, token, order_id):
        self._authorize(token, "get_order")
        return get_order(order_id)

    def change_order_status(self, token, order_id, status):
        principal = self._authorize(token, "change_order_status")
        current_domain.process(
            ChangeOrderStatus(order_id=order_id, status=status, changed_by=principal.username),
            asynchronous=False,
        )
        return get_order(order_id)

    def status_board(self, token):
        self._authorize(token, "status_board")
        return status_counts()
