"""Domain events for the Product aggregate."""

from protean.fields import DateTime, Float, Identifier, Integer, String, Text

from storefront.domain import storefront


@storefront.event(part_of="Product")
class ProductCreated:
    """A product was added to the catalog."""

    __version__ = 1

    product_id = Identifier(required=True)
    name = String(required=True, max_length=255)
    category = String(required=True, max_length=50)
    price = Float(required=True)
    min_order_increment = Integer(required=True)
    unit = String(max_length=20)
    created_at = DateTime(required=True)


@storefront.event(part_of="Product")
class ProductUpdated:
    """One or more product fields were edited by an administrator."""

    __version__ = 1

    product_id = Identifier(required=True)
    changed_fields = Text(required=True)  # JSON: list of field names
    price = Float(required=True)
    min_order_increment = Integer(required=True)
    updated_at = DateTime(required=True)
