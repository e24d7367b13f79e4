"""Tests for SQL schema creation and teardown."""

from contextlib import nullcontext
from types import SimpleNamespace

import pytest
from sqlalchemy import Column, MetaData, String, Table, create_engine, inspect

from storefront.utils.db import drop_db, setup_db


class _Repository:
    def __init__(self, touched, cls):
        self._touched = touched
        self._cls = cls

    @property
    def _dao(self):
        self._touched.append(self._cls.__name__)
        return object()


class _Domain:
    """Just enough of a Protean domain for the schema helpers."""

    def __init__(self, providers, aggregates):
        self.providers = providers
        self.registry = SimpleNamespace(aggregates=aggregates, entities={}, projections={})
        self.touched = []

    def domain_context(self):
        return nullcontext()

    def repository_for(self, cls):
        return _Repository(self.touched, cls)


def _provider(name, kind, uri=None):
    metadata = MetaData()
    Table(f"{name}_orders", metadata, Column("id", String(36), primary_key=True))
    return SimpleNamespace(name=name, conn_info={"provider": kind, "database_uri": uri}, _metadata=metadata)


def _aggregate(provider_name):
    cls = type("StoredOrder", (), {"meta_": SimpleNamespace(provider=provider_name)})
    return {"StoredOrder": SimpleNamespace(cls=cls)}


@pytest.fixture()
def sqlite_uri(tmp_path):
    return f"sqlite:///{tmp_path / 'storefront.db'}"


class TestSqlSchema:
    def test_setup_creates_tables(self, sqlite_uri):
        domain = _Domain({"default": _provider("default", "sqlite", sqlite_uri)}, _aggregate("default"))

        setup_db(domain)

        assert inspect(create_engine(sqlite_uri)).get_table_names() == ["default_orders"]
        assert domain.touched == ["StoredOrder"]

    def test_drop_removes_tables(self, sqlite_uri):
        domain = _Domain({"default": _provider("default", "sqlite", sqlite_uri)}, _aggregate("default"))
        setup_db(domain)

        drop_db(domain)

        assert inspect(create_engine(sqlite_uri)).get_table_names() == []

    def test_memory_providers_skipped(self):
        domain = _Domain({"memory": _provider("memory", "memory")}, _aggregate("memory"))

        setup_db(domain)
        drop_db(domain)

        assert domain.touched == []
