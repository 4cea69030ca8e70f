"""Tests for connection registry."""

import logging

import pytest
from sqlalchemy import create_engine

from jsonsql_rest._connections import ConnectionRegistry
from jsonsql_rest._errors import ConnectionFailedError, UnknownConnectionError


def test_register_and_list():
    registry = ConnectionRegistry()
    registry.register("test", lambda: create_engine("sqlite:///:memory:"))
    assert "test" in registry.list_connections()


def test_get_engine():
    registry = ConnectionRegistry()
    engine = create_engine("sqlite:///:memory:")
    registry.register("test", lambda: engine)

    assert registry.get_engine("test") is engine


def test_get_engine_defaults_to_default_name():
    registry = ConnectionRegistry()
    engine = create_engine("sqlite:///:memory:")
    registry.register("default", lambda: engine)

    assert registry.get_engine() is engine
    assert registry.get_engine(None) is engine


def test_get_engine_caches():
    registry = ConnectionRegistry()
    call_count = 0

    def factory():
        nonlocal call_count
        call_count += 1
        return create_engine("sqlite:///:memory:")

    registry.register("test", factory)

    first = registry.get_engine("test")
    assert call_count == 1

    assert registry.get_engine("test") is first
    assert call_count == 1


def test_reregister_replaces_cached_engine():
    registry = ConnectionRegistry()
    old = create_engine("sqlite:///:memory:")
    new = create_engine("sqlite:///:memory:")
    registry.register("test", lambda: old)
    registry.get_engine("test")

    registry.register("test", lambda: new)
    assert registry.get_engine("test") is new


def test_register_url():
    registry = ConnectionRegistry()
    registry.register_url("lite", "sqlite:///:memory:")

    engine = registry.get_engine("lite")
    assert engine.dialect.name == "sqlite"


def test_get_engine_unknown():
    registry = ConnectionRegistry()

    with pytest.raises(UnknownConnectionError, match="Unknown connection"):
        registry.get_engine("nonexistent")


def test_dispose_drops_engines():
    registry = ConnectionRegistry()
    call_count = 0

    def factory():
        nonlocal call_count
        call_count += 1
        return create_engine("sqlite:///:memory:")

    registry.register("test", factory)
    registry.get_engine("test")
    registry.dispose()

    registry.get_engine("test")
    assert call_count == 2


def test_engine_creation_failure_is_connection_error(caplog):
    registry = ConnectionRegistry()
    registry.register_url("default", "mysql+nosuchdriver://u:p@127.0.0.1/db")

    with caplog.at_level(logging.ERROR, logger="jsonsql_rest"):
        with pytest.raises(ConnectionFailedError, match="nosuchdriver"):
            registry.get_engine()

    assert "Database connection error:" in caplog.text
    assert registry.list_connections() == ["default"]
