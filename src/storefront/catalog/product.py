"""Product aggregate root — a catalog entry sold in minimum-increment quantities."""

import json
from datetime import datetime
from enum import Enum

import structlog
from protean.exceptions import ValidationError
from protean.fields import DateTime, Float, Integer, String, Text

from storefront.domain import storefront

logger = structlog.get_logger(__name__)

DEFAULT_UNIT = "kg"

# Fields an administrator may change after creation
EDITABLE_FIELDS = (
    "name",
    "category",
    "price",
    "min_order_increment",
    "unit",
    "description",
    "shelf_life",
    "allergens",
    "image_url",
)


class ProductCategory(Enum):
    """Categories the storefront filters by. Other values are tolerated."""

    VEGETABLES = "vegetables"
    FRUITS = "fruits"
    SPICES = "spices"

    @classmethod
    def is_known(cls, value):
        return value in {c.value for c in cls}


@storefront.aggregate
class Product:
    """Product aggregate root."""

    name = String(required=True, max_length=255)
    category = String(required=True, max_length=50)
    price = Float(required=True, min_value=0.0)
    min_order_increment = Integer(required=True, min_value=1)
    unit = String(max_length=20, default=DEFAULT_UNIT)
    description = Text()
    shelf_life = String(max_length=100)
    allergens = String(max_length=255)
    image_url = String(max_length=500)
    created_at = DateTime(default=datetime.now)
    updated_at = DateTime(default=datetime.now)

    @classmethod
    def create(
        cls,
        name,
        category,
        price,
        min_order_increment,
        unit=None,
        description=None,
        shelf_life=None,
        allergens=None,
        image_url=None,
    ):
        from storefront.catalog.events import ProductCreated

        if not ProductCategory.is_known(category):
            logger.warning("Product created with unrecognised category", category=category, name=name)

        now = datetime.now()
        product = cls(
            name=name,
            category=category,
            price=price,
            min_order_increment=min_order_increment,
            unit=unit or DEFAULT_UNIT,
            description=description,
            shelf_life=shelf_life,
            allergens=allergens,
            image_url=image_url,
            created_at=now,
            updated_at=now,
        )
        product.raise_(
            ProductCreated(
                product_id=product.id,
                name=name,
                category=category,
                price=product.price,
                min_order_increment=product.min_order_increment,
                unit=product.unit,
                created_at=now,
            )
        )
        return product

    def update_details(self, **changes):
        """Apply a partial edit. Only keys present in ``changes`` are touched."""
        from storefront.catalog.events import ProductUpdated

        unknown = set(changes) - set(EDITABLE_FIELDS)
        if unknown:
            raise ValidationError({field: ["Field cannot be edited"] for field in sorted(unknown)})

        changed = []
        for field in EDITABLE_FIELDS:
            if field not in changes:
                continue
            value = changes[field]
            if getattr(self, field) != value:
                setattr(self, field, value)
                changed.append(field)

        if "category" in changed and not ProductCategory.is_known(self.category):
            logger.warning("Product moved to unrecognised category", product_id=str(self.id), category=self.category)

        if not changed:
            return []

        self.updated_at = datetime.now()
        self.raise_(
            ProductUpdated(
                product_id=self.id,
                changed_fields=json.dumps(changed),
                price=self.price,
                min_order_increment=self.min_order_increment,
                updated_at=self.updated_at,
            )
        )
        return changed
