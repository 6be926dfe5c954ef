import os
import uuid
from collections.abc import Generator
from pathlib import Path
from typing import Any

import psycopg
import pytest

from studynotes.config.settings import Settings
from studynotes.database.connection import build_conninfo, close_pool, get_connection, init_pool

SCHEMA_PATH = Path(__file__).resolve().parents[2] / "sql" / "schema.sql"


def _test_settings() -> Settings:
    os.environ.setdefault("DB_DATABASE", "studynotes_test")
    return Settings()


@pytest.fixture(scope="session")
def test_settings() -> Settings:
    return _test_settings()


@pytest.fixture(scope="session")
def integration_pool(test_settings: Settings) -> Generator[None, None, None]:
    try:
        with psycopg.connect(build_conninfo(test_settings), connect_timeout=3) as conn:
            conn.execute(SCHEMA_PATH.read_text(encoding="utf-8"))
        init_pool(test_settings)
    except Exception as e:
        pytest.skip(f"PostgreSQL test DB not available: {e}. Set DB_* env to run.")
    try:
        yield
    finally:
        close_pool()


@pytest.fixture
def db_conn(integration_pool: None) -> Generator[psycopg.Connection[Any], None, None]:
    with get_connection() as conn:
        yield conn


@pytest.fixture
def requester_id(integration_pool: None) -> Generator[str, None, None]:
    """A fresh requester whose rows are removed after the test."""
    requester = f"it-{uuid.uuid4()}"
    yield requester
    with get_connection() as conn:
        with conn.cursor() as cur:
            cur.execute("DELETE FROM notes WHERE user_id = %s", (requester,))
            cur.execute("DELETE FROM notebooks WHERE user_id = %s", (requester,))
            cur.execute("DELETE FROM user_activities WHERE user_id = %s", (requester,))
            cur.execute("DELETE FROM upload_rate_events WHERE requester_id = %s", (requester,))
        conn.commit()
