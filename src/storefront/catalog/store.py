"""Catalog store — the read side of the catalog plus thin write helpers.

Reads go straight to the Product repository. Writes are dispatched as
commands so validation and events stay in the aggregate; administrative
callers reach them through ``storefront.admin.gateway.AdminGateway``.
"""

import json

from protean.utils.globals import current_domain

from storefront.catalog.management import CreateProduct, DeleteProduct, UpdateProduct
from storefront.catalog.product import Product
from storefront.utils.query import fetch_all


class CatalogStore:
    """Source of truth for price, unit and minimum order increment."""

    def list(self, category=None, search=None):
        """Return products in creation order, optionally filtered.

        ``search`` matches a case-insensitive substring of the name or the
        category, mirroring the storefront search box.
        """
        query = current_domain.repository_for(Product)._dao.query.order_by("created_at")
        if category:
            query = query.filter(category=category)
        products = fetch_all(query)

        if search:
            needle = search.strip().lower()
            products = [p for p in products if needle in (p.name or "").lower() or needle in (p.category or "").lower()]

        return products

    def get(self, product_id):
        """Return the product or raise ``ObjectNotFoundError``."""
        return current_domain.repository_for(Product).get(product_id)

    def is_empty(self):
        return not current_domain.repository_for(Product)._dao.query.limit(1).all().items

    def create(self, **fields):
        return current_domain.process(CreateProduct(**fields), asynchronous=False)

    def update(self, product_id, **changes):
        current_domain.process(
            UpdateProduct(product_id=product_id, changes=json.dumps(changes)),
            asynchronous=False,
        )
        return self.get(product_id)

    def delete(self, product_id):
        current_domain.process(DeleteProduct(product_id=product_id), asynchronous=False)
