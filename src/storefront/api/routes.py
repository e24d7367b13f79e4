"""FastAPI routes for the storefront — catalog, cart, orders and admin."""

import json

from fastapi import APIRouter, Header
from protean.utils.globals import current_domain

from storefront.admin.gateway import AdminGateway
from storefront.api.schemas import (
    BulkOrderRequest,
    BulkOrderResponse,
    CartLineSchema,
    CartQuoteRequest,
    CartQuoteResponse,
    ChangeStatusRequest,
    CreateProductRequest,
    CustomerInfoSchema,
    OrderIdResponse,
    OrderItemSchema,
    OrderSchema,
    ProductSchema,
    StatusResponse,
    SubmitChannelOrderRequest,
    SubmitOrderRequest,
    UpdateProductRequest,
)
from storefront.cart.bulk import parse_bulk_order
from storefront.cart.cart import WEIGHT_LIMIT, Cart
from storefront.catalog.store import CatalogStore
from storefront.order.intake import SubmitChannelOrder, SubmitWebOrder
from storefront.order.status import status_label


def _bearer_token(authorization):
    if not authorization:
        return None
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer":
        return None
    return token.strip() or None


def _order_schema(order):
    customer = order.customer_info
    return OrderSchema(
        id=str(order.id),
        status=order.status,
        status_label=status_label(order.status),
        source=order.source,
        total_amount=order.total_amount,
        total_quantity=order.total_quantity,
        items=[
            OrderItemSchema(
                line_number=item.line_number,
                product_id=item.product_id,
                name=item.name,
                unit_price=item.unit_price,
                unit=item.unit,
                quantity=item.quantity,
            )
            for item in order.ordered_items
        ],
        customer_info=CustomerInfoSchema(
            name=customer.name,
            phone=customer.phone,
            address=customer.address,
            external_channel_user_id=customer.external_channel_user_id,
        ),
        comments=order.comments,
        created_at=order.created_at,
        updated_at=order.updated_at,
    )


# ---------------------------------------------------------------------------
# Catalog Router
# ---------------------------------------------------------------------------
catalog_router = APIRouter(prefix="/products", tags=["catalog"])


@catalog_router.get("", response_model=list[ProductSchema])
async def list_products(category: str | None = None, search: str | None = None) -> list[ProductSchema]:
    products = CatalogStore().list(category=category, search=search)
    return [ProductSchema.from_product(product) for product in products]


@catalog_router.get("/{product_id}", response_model=ProductSchema)
async def get_product(product_id: str) -> ProductSchema:
    return ProductSchema.from_product(CatalogStore().get(product_id))


# ---------------------------------------------------------------------------
# Cart Router
# ---------------------------------------------------------------------------
cart_router = APIRouter(prefix="/cart", tags=["cart"])


@cart_router.post("/quote", response_model=CartQuoteResponse)
async def quote_cart(body: CartQuoteRequest) -> CartQuoteResponse:
    cart = Cart.from_snapshot([line.model_dump() for line in body.lines])
    return CartQuoteResponse(
        total_amount=cart.total_amount,
        total_quantity=cart.total_quantity,
        is_over_limit=cart.is_over_limit,
        weight_limit=WEIGHT_LIMIT,
    )


@cart_router.post("/bulk", response_model=BulkOrderResponse)
async def parse_bulk(body: BulkOrderRequest) -> BulkOrderResponse:
    result = parse_bulk_order(body.text, CatalogStore().list())
    cart = Cart().add_bulk(result)
    return BulkOrderResponse(
        lines=[CartLineSchema(**line) for line in cart.to_snapshot()],
        failed=list(result.failed),
    )


# ---------------------------------------------------------------------------
# Order Router
# ---------------------------------------------------------------------------
order_router = APIRouter(tags=["orders"])


@order_router.post("/orders", status_code=201, response_model=OrderIdResponse)
async def submit_web_order(body: SubmitOrderRequest) -> OrderIdResponse:
    command = SubmitWebOrder(
        lines=json.dumps([line.model_dump() for line in body.lines]),
        customer_name=body.customer_name,
        phone=body.phone,
        address=body.address,
        comments=body.comments,
        total_amount=body.total_amount,
    )
    order_id = current_domain.process(command, asynchronous=False)
    return OrderIdResponse(order_id=order_id)


@order_router.post("/integrations/messaging/orders", status_code=201, response_model=OrderIdResponse)
async def submit_channel_order(body: SubmitChannelOrderRequest) -> OrderIdResponse:
    command = SubmitChannelOrder(
        channel_user_id=body.channel_user_id,
        lines=json.dumps([line.model_dump() for line in body.lines]),
        customer_name=body.customer_name,
        phone=body.phone,
        address=body.address,
        comments=body.comments,
        total_amount=body.total_amount,
    )
    order_id = current_domain.process(command, asynchronous=False)
    return OrderIdResponse(order_id=order_id)


# ---------------------------------------------------------------------------
# Admin Router
# ---------------------------------------------------------------------------
admin_router = APIRouter(prefix="/admin", tags=["admin"])


@admin_router.post("/products", status_code=201, response_model=ProductSchema)
async def create_product(body: CreateProductRequest, authorization: str | None = Header(None)) -> ProductSchema:
    product = AdminGateway().create_product(_bearer_token(authorization), **body.model_dump(exclude_none=True))
    return ProductSchema.from_product(product)


@admin_router.put("/products/{product_id}", response_model=ProductSchema)
async def update_product(
    product_id: str, body: UpdateProductRequest, authorization: str | None = Header(None)
) -> ProductSchema:
    product = AdminGateway().update_product(
        _bearer_token(authorization), product_id, **body.model_dump(exclude_unset=True)
    )
    return ProductSchema.from_product(product)


@admin_router.delete("/products/{product_id}", response_model=StatusResponse)
async def delete_product(product_id: str, authorization: str | None = Header(None)) -> StatusResponse:
    AdminGateway().delete_product(_bearer_token(authorization), product_id)
    return StatusResponse()


@admin_router.get("/orders", response_model=list[OrderSchema])
async def list_orders(newest_first: bool = True, authorization: str | None = Header(None)) -> list[OrderSchema]:
    orders = AdminGateway().list_orders(_bearer_token(authorization), newest_first=newest_first)
    return [_order_schema(order) for order in orders]


# Declared before /orders/{order_id} so the literal path wins
@admin_router.get("/orders/status-board")
async def status_board(authorization: str | None = Header(None)) -> dict[str, int]:
    return AdminGateway().status_board(_bearer_token(authorization))


@admin_router.get("/orders/{order_id}", response_model=OrderSchema)
async def get_order(order_id: str, authorization: str | None = Header(None)) -> OrderSchema:
    return _order_schema(AdminGateway().get_order(_bearer_token(authorization), order_id))


@admin_router.put("/orders/{order_id}/status", response_model=OrderSchema)
async def change_order_status(
    order_id: str, body: ChangeStatusRequest, authorization: str | None = Header(None)
) -> OrderSchema:
    order = AdminGateway().change_order_status(_bearer_token(authorization), order_id, body.status)
    return _order_schema(order)
