# tests/conftest.py
from __future__ import annotations
from datetime import datetime, timedelta, timezone
from typing import Any, Callable, Dict

import pytest
from sqlalchemy.pool import StaticPool
from starlette.testclient import TestClient

from favfilms.common.settings import CatalogConfig, Settings
from favfilms.database.core.main import Database
from favfilms.services.api.app import create_app
from favfilms.services.auth.tokens import TokenService

SQLITE_URL = "sqlite+pysqlite:///:memory:"


class FakeClock:
    """Callable clock the token service reads; tests move it by hand."""

    def __init__(self, start: datetime | None = None) -> None:
        self.now = start or datetime(2026, 1, 1, 12, 0, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kw) -> None:
        self.now += timedelta(**kw)


@pytest.fixture(scope="session")
def database_url():
    """
    In-memory SQLite by default. USE_TESTCONTAINERS=1 runs everything
    against a throwaway Postgres instead.
    """
    cfg = Settings()
    if not cfg.use_testcontainers:
        yield SQLITE_URL
        return

    from testcontainers.postgres import PostgresContainer
    with PostgresContainer(cfg.test_db_image) as pg:
        # Force psycopg (v3) driver in the URL returned by testcontainers (it defaults to psycopg2)
        yield pg.get_connection_url().replace("psycopg2", "psycopg")


@pytest.fixture()
def database(database_url) -> Database:
    """Fresh schema per test; the same in-memory connection is shared via StaticPool."""
    kw = {"poolclass": StaticPool} if database_url.startswith("sqlite") else {}
    db = Database(database_url, **kw)
    db.create_schema()
    try:
        yield db
    finally:
        db.drop_schema()
        db.disconnect()


@pytest.fixture()
def settings() -> Settings:
    return Settings(
        app_env="test",
        jwt_secret="test-secret",
        token_ttl_minutes=60,
        bcrypt_rounds=4,
        catalog=CatalogConfig(page_size=10),
    )


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def token_service(settings, clock) -> TokenService:
    return TokenService.from_settings(settings, clock=clock)


@pytest.fixture()
def app(settings, database, token_service):
    return create_app(settings=settings, database=database, token_service=token_service)


@pytest.fixture()
def api_client(app):
    """TestClient running the app lifespan against the per-test database."""
    with TestClient(app) as client:
        yield client


# ---- request payloads ----

@pytest.fixture()
def ann() -> Dict[str, str]:
    return {"name": "Ann", "email": "ann@x.com", "password": "pw123456"}


@pytest.fixture()
def dune() -> Dict[str, Any]:
    return {
        "title": "Dune",
        "type": "Movie",
        "director": "Villeneuve",
        "budget": 165000000,
        "location": "Jordan",
        "duration": "155 min",
        "year_or_time": 2021,
    }


@pytest.fixture()
def make_entry() -> Callable[[int], Dict[str, Any]]:
    def _make(i: int) -> Dict[str, Any]:
        return {
            "title": f"Film #{i}",
            "type": "Movie" if i % 2 == 0 else "TV_Show",
            "director": f"Director {i}",
            "budget": 1_000_000 + i * 50_000,
            "location": f"Location {i}",
            "duration": f"{100 + i} min",
            "year_or_time": 2000 + (i % 25),
        }
    return _make


@pytest.fixture()
def token(api_client, ann) -> str:
    r = api_client.post("/auth/signup", json=ann)
    assert r.status_code == 201, r.text
    return r.json()["token"]


@pytest.fixture()
def auth_headers(token) -> Dict[str, str]:
    return {"Authorization": f"Bearer {token}"}
