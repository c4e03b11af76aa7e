from collections.abc import Generator
from contextlib import contextmanager
from typing import Any

import psycopg
from psycopg_pool import ConnectionPool

from app.config.settings import Settings

_pool: ConnectionPool | None = None

_SCHEMA_STATEMENTS = (
    """
    CREATE TABLE IF NOT EXISTS resume_analyses (
        id BIGSERIAL PRIMARY KEY,
        file_name TEXT NOT NULL,
        job_role TEXT NOT NULL,
        resume_text TEXT NOT NULL,
        ai_feedback TEXT NOT NULL,
        ats_score DOUBLE PRECISION
            CHECK (ats_score IS NULL OR (ats_score >= 0 AND ats_score <= 10)),
        user_id TEXT NOT NULL,
        created_at TIMESTAMPTZ NOT NULL DEFAULT NOW(),
        updated_at TIMESTAMPTZ NOT NULL DEFAULT NOW()
    )
    """,
    """
    CREATE INDEX IF NOT EXISTS resume_analyses_user_created_idx
    ON resume_analyses (user_id, created_at DESC)
    """,
    """
    CREATE INDEX IF NOT EXISTS resume_analyses_ats_score_idx
    ON resume_analyses (ats_score)
    """,
)


def build_conninfo(settings: Settings) -> str:
    """Return DATABASE_URL when set, otherwise a conninfo built from DB_* settings."""
    if settings.database_url:
        return settings.database_url
    return (
        f"host={settings.db_host} "
        f"port={settings.db_port} "
        f"dbname={settings.db_database} "
        f"user={settings.db_username} "
        f"password={settings.db_password}"
    )


def init_pool(settings: Settings) -> None:
    """Initialize the global connection pool from settings."""
    global _pool  # noqa: PLW0603
    _pool = ConnectionPool(build_conninfo(settings), min_size=1, max_size=10, open=True)


def close_pool() -> None:
    """Close the global connection pool."""
    global _pool  # noqa: PLW0603
    if _pool is not None:
        _pool.close()
        _pool = None


@contextmanager
def get_connection() -> Generator[psycopg.Connection[Any], None, None]:
    """Yield a connection from the pool. Caller manages commit/rollback."""
    if _pool is None:
        raise RuntimeError("Connection pool not initialized. Call init_pool() first.")
    with _pool.connection() as conn:
        yield conn


def ensure_schema() -> None:
    """Create the resume_analyses table and its indexes if they are missing."""
    with get_connection() as conn:
        for statement in _SCHEMA_STATEMENTS:
            conn.execute(statement)
        conn.commit()
