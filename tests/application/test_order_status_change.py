"""Application tests for the status change command handler."""

import pytest
from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.utils.globals import current_domain

from storefront.cart.cart import Cart
from storefront.order.fulfillment import ChangeOrderStatus
from storefront.order.intake import checkout
from storefront.order.order import Order


@pytest.fixture()
def order_id(saved_product, customer):
    product = saved_product()
    order_id, _ = checkout(Cart().add_line(product, 20), customer)
    return order_id


def _change(order_id, status, changed_by="admin"):
    return current_domain.process(
        ChangeOrderStatus(order_id=order_id, status=status, changed_by=changed_by),
        asynchronous=False,
    )


class TestChangeOrderStatus:
    def test_guarded_happy_path(self, order_id):
        for status in ("Processing", "InDelivery", "Completed"):
            _change(order_id, status)
        assert current_domain.repository_for(Order).get(order_id).status == "Completed"

    def test_guarded_rejects_skip(self, order_id):
        with pytest.raises(ValidationError):
            _change(order_id, "Completed")
        assert current_domain.repository_for(Order).get(order_id).status == "Accepted"

    def test_cancel_from_accepted(self, order_id):
        _change(order_id, "Cancelled")
        assert current_domain.repository_for(Order).get(order_id).status == "Cancelled"

    def test_free_policy_from_env(self, order_id, monkeypatch):
        monkeypatch.setenv("STOREFRONT_STATUS_POLICY", "free")
        _change(order_id, "Completed")
        _change(order_id, "Processing")
        assert current_domain.repository_for(Order).get(order_id).status == "Processing"

    def test_unknown_status_rejected(self, order_id, monkeypatch):
        monkeypatch.setenv("STOREFRONT_STATUS_POLICY", "free")
        with pytest.raises(ValidationError):
            _change(order_id, "Lost")

    def test_unknown_order(self):
        with pytest.raises(ObjectNotFoundError):
            _change("missing-order", "Processing")

    def test_status_change_keeps_items_and_total(self, order_id):
        before = current_domain.repository_for(Order).get(order_id)
        _change(order_id, "Processing")
        after = current_domain.repository_for(Order).get(order_id)

        assert after.total_amount == before.total_amount
        assert [(i.name, i.quantity) for i in after.ordered_items] == [(i.name, i.quantity) for i in before.ordered_items]
        assert after.customer_info.phone == before.customer_info.phone
        assert after.created_at == before.created_at
