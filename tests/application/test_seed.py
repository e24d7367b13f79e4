"""Application tests for sample catalog seeding."""

from storefront.catalog.seed import SAMPLE_PRODUCTS, seed_sample_products
from storefront.catalog.store import CatalogStore


class TestSeedSampleProducts:
    def test_seeds_empty_catalog(self):
        assert seed_sample_products() == len(SAMPLE_PRODUCTS)
        names = [p.name for p in CatalogStore().list()]
        assert names == ["Огурцы свежие", "Яблоки Гала", "Бананы"]

    def test_skips_populated_catalog(self, saved_product):
        saved_product()
        assert seed_sample_products() == 0
        assert len(CatalogStore().list()) == 1

    def test_failure_is_swallowed(self):
        samples = [
            {"name": "Бананы", "category": "fruits", "price": 90, "min_order_increment": 10},
            {"name": "Broken", "category": "fruits", "price": -1, "min_order_increment": 10},
        ]
        assert seed_sample_products(samples=samples) == 1
        assert [p.name for p in CatalogStore().list()] == ["Бананы"]
