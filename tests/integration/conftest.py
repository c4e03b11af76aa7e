import os
import uuid
from collections.abc import Generator
from typing import Any

import psycopg
import pytest

from app.config.settings import Settings
from app.database.connection import (
    build_conninfo,
    close_pool,
    ensure_schema,
    get_connection,
    init_pool,
)


def _test_settings() -> Settings:
    os.environ.setdefault("DB_DATABASE", "resume_analyzer_test")
    return Settings()


@pytest.fixture(scope="session")
def test_settings() -> Settings:
    return _test_settings()


@pytest.fixture(scope="session")
def integration_pool(test_settings: Settings) -> Generator[None, None, None]:
    try:
        with psycopg.connect(build_conninfo(test_settings), connect_timeout=3):
            pass
    except psycopg.Error as e:
        pytest.skip(f"PostgreSQL test DB not available: {e}. Set DATABASE_URL or DB_* env")
    init_pool(test_settings)
    try:
        ensure_schema()
        yield
    finally:
        close_pool()


@pytest.fixture
def db_conn(integration_pool: None) -> Generator[psycopg.Connection[Any], None, None]:
    with get_connection() as conn:
        yield conn


@pytest.fixture
def owner_ids(integration_pool: None) -> Generator[list[str], None, None]:
    """Unique user ids for one test; their rows are deleted afterwards."""
    ids = [f"it-{uuid.uuid4()}" for _ in range(2)]
    yield ids
    with get_connection() as conn:
        conn.execute("DELETE FROM resume_analyses WHERE user_id = ANY(%s)", (ids,))
        conn.commit()
