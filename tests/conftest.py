import os
from pathlib import Path

import pytest


def pytest_addoption(parser):
    parser.addoption(
        "--env",
        action="store",
        default="test",
        help="Config environment to run tests on",
    )


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their directory location."""
    for item in items:
        test_path = str(Path(item.fspath))

        if "/domain/" in test_path:
            item.add_marker(pytest.mark.domain)
        elif "/application/" in test_path:
            item.add_marker(pytest.mark.application)
        elif "/integration/" in test_path:
            item.add_marker(pytest.mark.integration)
            if not any(m.name == "fast" for m in item.iter_markers()):
                item.add_marker(pytest.mark.slow)
        elif "/bdd/" in test_path:
            item.add_marker(pytest.mark.bdd)


@pytest.fixture(scope="session")
def _storefront_domain(request):
    """Initialize the storefront domain once per session."""
    os.environ["PROTEAN_ENV"] = request.config.option.env

    from storefront.domain import storefront

    storefront.init()
    return storefront


@pytest.fixture(scope="session", autouse=True)
def setup_db(_storefront_domain):
    from storefront.utils.db import drop_db, setup_db

    setup_db(_storefront_domain)

    yield

    drop_db(_storefront_domain)


@pytest.fixture(autouse=True)
def run_around_tests(_storefront_domain, monkeypatch):
    """Push domain context before each test, cleanup after."""
    monkeypatch.delenv("STOREFRONT_STATUS_POLICY", raising=False)
    monkeypatch.delenv("STOREFRONT_ADMIN_JWT_SECRET", raising=False)

    ctx = _storefront_domain.domain_context()
    ctx.push()

    yield

    from protean import current_domain

    from storefront.admin.auth import reset_authenticator

    reset_authenticator()

    for _, provider in current_domain.providers.items():
        provider._data_reset()

    current_domain.event_store.store._data_reset()
    ctx.pop()


# ---------------------------------------------------------------------------
# Shared builders
# ---------------------------------------------------------------------------
@pytest.fixture()
def make_product():
    """Build an unsaved Product with sensible defaults."""
    from storefront.catalog.product import Product

    def _make(**overrides):
        defaults = {
            "name": "Огурцы свежие",
            "category": "vegetables",
            "price": 50.0,
            "min_order_increment": 10,
            "unit": "kg",
        }
        defaults.update(overrides)
        return Product.create(**defaults)

    return _make


@pytest.fixture()
def saved_product():
    """Persist a product through the catalog store and return it."""
    from storefront.catalog.store import CatalogStore

    def _save(**overrides):
        defaults = {
            "name": "Огурцы свежие",
            "category": "vegetables",
            "price": 50.0,
            "min_order_increment": 10,
            "unit": "kg",
        }
        defaults.update(overrides)
        store = CatalogStore()
        return store.get(store.create(**defaults))

    return _save


@pytest.fixture()
def customer():
    return {"name": "Ivan", "phone": "+7 999 123-45-67", "address": "Tashkent, Chilonzor 5"}
