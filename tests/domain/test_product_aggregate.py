"""Tests for the Product aggregate."""

import json

import pytest
from protean.exceptions import ValidationError

from storefront.catalog.events import ProductCreated, ProductUpdated
from storefront.catalog.product import DEFAULT_UNIT, Product, ProductCategory


class TestProductCreation:
    def test_create_sets_fields(self, make_product):
        product = make_product()
        assert product.name == "Огурцы свежие"
        assert product.category == "vegetables"
        assert product.price == 50.0
        assert product.min_order_increment == 10
        assert product.id is not None

    def test_unit_defaults_to_kg(self):
        product = Product.create(name="Бананы", category="fruits", price=90, min_order_increment=10)
        assert product.unit == DEFAULT_UNIT

    def test_timestamps_set(self, make_product):
        product = make_product()
        assert product.created_at is not None
        assert product.created_at == product.updated_at

    def test_raises_product_created(self, make_product):
        product = make_product()
        assert len(product._events) == 1
        event = product._events[0]
        assert isinstance(event, ProductCreated)
        assert event.product_id == product.id
        assert event.min_order_increment == 10

    def test_unknown_category_is_accepted(self, make_product):
        product = make_product(category="mushrooms")
        assert product.category == "mushrooms"
        assert not ProductCategory.is_known("mushrooms")

    def test_negative_price_rejected(self, make_product):
        with pytest.raises(ValidationError) as exc:
            make_product(price=-1)
        assert "price" in exc.value.messages

    def test_zero_increment_rejected(self, make_product):
        with pytest.raises(ValidationError) as exc:
            make_product(min_order_increment=0)
        assert "min_order_increment" in exc.value.messages

    def test_name_required(self, make_product):
        with pytest.raises(ValidationError) as exc:
            make_product(name=None)
        assert "name" in exc.value.messages


class TestProductUpdate:
    def test_only_supplied_fields_change(self, make_product):
        product = make_product(description="Fresh")
        product.update_details(price=55.0)
        assert product.price == 55.0
        assert product.description == "Fresh"
        assert product.name == "Огурцы свежие"

    def test_returns_changed_fields_and_raises_event(self, make_product):
        product = make_product()
        product._events.clear()

        changed = product.update_details(price=60.0, min_order_increment=5, name="Огурцы свежие")

        assert changed == ["price", "min_order_increment"]
        event = product._events[-1]
        assert isinstance(event, ProductUpdated)
        assert json.loads(event.changed_fields) == ["price", "min_order_increment"]
        assert event.price == 60.0

    def test_no_change_raises_no_event(self, make_product):
        product = make_product()
        product._events.clear()

        assert product.update_details(price=50.0) == []
        assert product._events == []

    def test_unknown_field_rejected(self, make_product):
        product = make_product()
        with pytest.raises(ValidationError) as exc:
            product.update_details(stock=10)
        assert "stock" in exc.value.messages

    def test_negative_price_rejected_on_update(self, make_product):
        product = make_product()
        with pytest.raises(ValidationError):
            product.update_details(price=-5)

    def test_zero_increment_rejected_on_update(self, make_product):
        product = make_product()
        with pytest.raises(ValidationError):
            product.update_details(min_order_increment=0)
