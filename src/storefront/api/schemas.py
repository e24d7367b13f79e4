"""Pydantic request/response schemas for the storefront API.

These are external contracts — separate from internal Protean commands.
"""

from datetime import datetime

from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# Catalog
# ---------------------------------------------------------------------------
class ProductSchema(BaseModel):
    id: str
    name: str
    category: str
    price: float
    min_order_increment: int
    unit: str | None = None
    description: str | None = None
    shelf_life: str | None = None
    allergens: str | None = None
    image_url: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @classmethod
    def from_product(cls, product):
        return cls(
            id=str(product.id),
            name=product.name,
            category=product.category,
            price=product.price,
            min_order_increment=product.min_order_increment,
            unit=product.unit,
            description=product.description,
            shelf_life=product.shelf_life,
            allergens=product.allergens,
            image_url=product.image_url,
            created_at=product.created_at,
            updated_at=product.updated_at,
        )


class CreateProductRequest(BaseModel):
    name: str
    category: str
    price: float
    min_order_increment: int
    unit: str | None = None
    description: str | None = None
    shelf_life: str | None = None
    allergens: str | None = None
    image_url: str | None = None

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "name": "Огурцы",
                    "category": "vegetables",
                    "price": 50.0,
                    "min_order_increment": 10,
                    "unit": "kg",
                }
            ]
        }
    }


class UpdateProductRequest(BaseModel):
    name: str | None = None
    category: str | None = None
    price: float | None = None
    min_order_increment: int | None = None
    unit: str | None = None
    description: str | None = None
    shelf_life: str | None = None
    allergens: str | None = None
    image_url: str | None = None


# ---------------------------------------------------------------------------
# Cart
# ---------------------------------------------------------------------------
class CartLineSchema(BaseModel):
    product_id: str
    name: str
    unit_price: float = Field(ge=0)
    unit: str | None = None
    min_order_increment: int = Field(ge=1)
    quantity: int = Field(ge=1)


class CartQuoteRequest(BaseModel):
    lines: list[CartLineSchema]


class CartQuoteResponse(BaseModel):
    total_amount: float
    total_quantity: int
    is_over_limit: bool
    weight_limit: int


class BulkOrderRequest(BaseModel):
    text: str


class BulkOrderResponse(BaseModel):
    lines: list[CartLineSchema]
    failed: list[str]


# ---------------------------------------------------------------------------
# Orders
# ---------------------------------------------------------------------------
class SubmitOrderRequest(BaseModel):
    lines: list[CartLineSchema]
    customer_name: str | None = None
    phone: str | None = None
    address: str | None = None
    comments: str | None = None
    total_amount: float | None = None


class SubmitChannelOrderRequest(SubmitOrderRequest):
    channel_user_id: str


class OrderIdResponse(BaseModel):
    order_id: str


class OrderItemSchema(BaseModel):
    line_number: int
    product_id: str | None = None
    name: str
    unit_price: float
    unit: str | None = None
    quantity: int


class CustomerInfoSchema(BaseModel):
    name: str | None = None
    phone: str
    address: str | None = None
    external_channel_user_id: str | None = None


class OrderSchema(BaseModel):
    id: str
    status: str
    status_label: str
    source: str
    total_amount: float
    total_quantity: int
    items: list[OrderItemSchema]
    customer_info: CustomerInfoSchema
    comments: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class ChangeStatusRequest(BaseModel):
    status: str


class StatusResponse(BaseModel):
    status: str = "ok"
