"""Shared fixtures."""

import pytest
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool

from jsonsql_rest import ConnectionRegistry


def memory_engine():
    # One shared in-memory database, usable from the test client's worker threads
    return create_engine(
        "sqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def engine():
    engine = memory_engine()
    with engine.begin() as conn:
        conn.exec_driver_sql(
            "CREATE TABLE t (id INTEGER PRIMARY KEY AUTOINCREMENT, x INTEGER, name TEXT)"
        )
    yield engine
    engine.dispose()


@pytest.fixture
def registry(engine):
    registry = ConnectionRegistry()
    registry.register("default", lambda: engine)
    return registry
