"""Integration tests for the OrdersByStatus projection."""

import pytest
from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from storefront.cart.cart import Cart
from storefront.order.fulfillment import ChangeOrderStatus
from storefront.order.intake import checkout
from storefront.order.status import OrderSource
from storefront.projections.orders_by_status import OrdersByStatus, status_counts


@pytest.fixture()
def cart(saved_product):
    return Cart().add_line(saved_product(), 30)


class TestOrdersByStatusProjection:
    def test_record_created_on_placement(self, cart, customer):
        order_id, _ = checkout(cart, customer, OrderSource.EXTERNAL_CHANNEL, channel_user_id="tg-5")
        record = current_domain.repository_for(OrdersByStatus).get(order_id)
        assert record.status == "Accepted"
        assert record.source == "external-channel"
        assert record.total_amount == 1500.0

    def test_record_follows_status(self, cart, customer):
        order_id, _ = checkout(cart, customer)
        current_domain.process(ChangeOrderStatus(order_id=order_id, status="Processing"), asynchronous=False)
        record = current_domain.repository_for(OrdersByStatus).get(order_id)
        assert record.status == "Processing"

    def test_no_record_for_unknown_order(self):
        with pytest.raises(ObjectNotFoundError):
            current_domain.repository_for(OrdersByStatus).get("missing-order")

    def test_status_counts(self, cart, customer):
        ids = [checkout(cart, customer)[0] for _ in range(3)]
        current_domain.process(ChangeOrderStatus(order_id=ids[0], status="Cancelled"), asynchronous=False)

        assert status_counts() == {
            "Accepted": 2,
            "Processing": 0,
            "InDelivery": 0,
            "Completed": 0,
            "Cancelled": 1,
        }
