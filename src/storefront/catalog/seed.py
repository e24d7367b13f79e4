"""Sample catalog data loaded into an empty store at startup."""

import structlog

from storefront.catalog.store import CatalogStore

logger = structlog.get_logger(__name__)

SAMPLE_PRODUCTS = [
    {
        "name": "Огурцы свежие",
        "category": "vegetables",
        "price": 50,
        "min_order_increment": 10,
        "unit": "kg",
        "description": "Свежие огурцы из Узбекистана",
        "shelf_life": "7 дней",
        "allergens": "Нет",
        "image_url": "https://images.unsplash.com/photo-1560433802-62c9db426a4d",
    },
    {
        "name": "Яблоки Гала",
        "category": "fruits",
        "price": 120,
        "min_order_increment": 20,
        "unit": "kg",
        "description": "Сладкие красные яблоки",
        "shelf_life": "30 дней",
        "allergens": "Нет",
        "image_url": "https://images.unsplash.com/photo-1571535911609-4f7afc6af16b",
    },
    {
        "name": "Бананы",
        "category": "fruits",
        "price": 90,
        "min_order_increment": 10,
        "unit": "kg",
        "description": "Спелые сладкие бананы из Эквадора",
        "shelf_life": "5 дней",
        "allergens": "Нет",
        "image_url": "https://images.unsplash.com/photo-1603833665858-e61d17a86224",
    },
]


def seed_sample_products(store=None, samples=None):
    """Insert sample products when the catalog is empty.

    Seeding is a convenience, so any failure is logged and startup carries
    on. Returns the number of products inserted.
    """
    store = store or CatalogStore()
    samples = SAMPLE_PRODUCTS if samples is None else samples

    inserted = 0
    try:
        if not store.is_empty():
            logger.debug("Catalog already populated, skipping sample data")
            return 0

        for sample in samples:
            store.create(**sample)
            inserted += 1
    except Exception as exc:  # noqa: BLE001
        logger.error("Sample catalog seeding failed", error=str(exc), inserted=inserted)
        return inserted

    logger.info("Sample products added to catalog", count=inserted)
    return inserted
