"""Tests for app factory."""

import pytest
from fastapi.testclient import TestClient
from httpx import AsyncClient, ASGITransport
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool

from jsonsql_rest import ConnectionRegistry, create_app, create_app_from_settings
from jsonsql_rest._config import Settings


def test_create_app(registry):
    app = create_app(registry)

    client = TestClient(app)

    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_create_app_with_cors(registry):
    app = create_app(registry, cors_origins=["http://localhost:3000"])

    client = TestClient(app)
    response = client.options(
        "/health",
        headers={"Origin": "http://localhost:3000", "Access-Control-Request-Method": "GET"},
    )
    assert "access-control-allow-origin" in response.headers


def test_lifespan_disposes_engines():
    registry = ConnectionRegistry()
    created = []

    def factory():
        engine = create_engine(
            "sqlite://",
            poolclass=StaticPool,
            connect_args={"check_same_thread": False},
        )
        created.append(engine)
        return engine

    registry.register("default", factory)
    app = create_app(registry)

    with TestClient(app) as client:
        client.post("/", json="SELECT 1")
        client.post("/", json="SELECT 1")
    assert len(created) == 1

    registry.get_engine()
    assert len(created) == 2


def test_create_app_from_settings(tmp_path):
    settings = Settings(database_url=f"sqlite:///{tmp_path / 'app.db'}")
    client = TestClient(create_app_from_settings(settings))

    client.post("/", json="CREATE TABLE t (id INTEGER PRIMARY KEY, x INTEGER)")
    response = client.post("/", params={"return": "true"}, json="INSERT INTO t(x) VALUES (4)")
    assert response.json() == 1

    response = client.post("/", json="SELECT x FROM t")
    assert response.json() == [{"x": 4}]


def test_create_app_from_settings_requires_url():
    with pytest.raises(RuntimeError, match="DATABASE_URL"):
        create_app_from_settings(Settings())


@pytest.mark.anyio
async def test_full_workflow(registry):
    """Insert with returned id, read it back, then hit an error."""
    app = create_app(registry)

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        response = await client.post(
            "/", params={"return": "true"}, json=["INSERT INTO t(x) VALUES (?)", [42]]
        )
        assert response.status_code == 200
        new_id = response.json()

        response = await client.post("/", json=["SELECT id, x FROM t WHERE id = ?", [new_id]])
        assert response.status_code == 200
        assert response.json() == [{"id": new_id, "x": 42}]

        response = await client.post("/", json="SELECT * FROM nonexistent")
        assert response.status_code == 500
        assert "nonexistent" in response.text
