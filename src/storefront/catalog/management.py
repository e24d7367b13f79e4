"""Catalog management — create, update and delete product commands and handler."""

import json

import structlog
from protean import handle
from protean.fields import Float, Identifier, Integer, String, Text
from protean.utils.globals import current_domain

from storefront.catalog.product import Product
from storefront.domain import storefront

logger = structlog.get_logger(__name__)


@storefront.command(part_of="Product")
class CreateProduct:
    name = String(required=True, max_length=255)
    category = String(required=True, max_length=50)
    price = Float(required=True)
    min_order_increment = Integer(required=True)
    unit = String(max_length=20)
    description = Text()
    shelf_life = String(max_length=100)
    allergens = String(max_length=255)
    image_url = String(max_length=500)


@storefront.command(part_of="Product")
class UpdateProduct:
    product_id = Identifier(required=True)
    changes = Text(required=True)  # JSON: {field: new value} for the edited fields only


@storefront.command(part_of="Product")
class DeleteProduct:
    product_id = Identifier(required=True)


@storefront.command_handler(part_of=Product)
class ManageCatalogHandler:
    @handle(CreateProduct)
    def create_product(self, command):
        product = Product.create(
            name=command.name,
            category=command.category,
            price=command.price,
            min_order_increment=command.min_order_increment,
            unit=command.unit,
            description=command.description,
            shelf_life=command.shelf_life,
            allergens=command.allergens,
            image_url=command.image_url,
        )
        current_domain.repository_for(Product).add(product)
        logger.info("Product created", product_id=str(product.id), name=product.name)
        return str(product.id)

    @handle(UpdateProduct)
    def update_product(self, command):
        changes = json.loads(command.changes) if isinstance(command.changes, str) else command.changes
        repo = current_domain.repository_for(Product)
        product = repo.get(command.product_id)
        changed = product.update_details(**changes)
        repo.add(product)
        logger.info("Product updated", product_id=str(product.id), changed_fields=changed)
        return str(product.id)

    @handle(DeleteProduct)
    def delete_product(self, command):
        repo = current_domain.repository_for(Product)
        product = repo.get(command.product_id)
        repo._dao.delete(product)
        logger.info("Product deleted", product_id=str(command.product_id))
