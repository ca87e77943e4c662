import os
import uuid
from collections.abc import Generator

import pytest

from docproc.config.settings import Settings
from docproc.database.connection import close_pool, ensure_schema, get_connection, init_pool


def _test_settings() -> Settings:
    os.environ.setdefault("DB_DATABASE", "documents_test")
    return Settings()


@pytest.fixture(scope="session")
def test_settings() -> Settings:
    return _test_settings()


@pytest.fixture(scope="session")
def integration_pool(test_settings: Settings) -> Generator[None, None, None]:
    try:
        init_pool(test_settings)
        ensure_schema()
    except Exception as e:
        close_pool()
        pytest.skip(f"PostgreSQL test DB not available: {e}. Set DB_* env to run these tests")
    try:
        yield
    finally:
        close_pool()


@pytest.fixture
def document_ids(integration_pool: None) -> Generator[list[str], None, None]:
    """Fresh document ids; their rows are removed after the test."""
    ids = [f"it-{uuid.uuid4()}" for _ in range(3)]
    yield ids
    with get_connection() as conn:
        with conn.cursor() as cur:
            cur.execute("DELETE FROM documents WHERE id = ANY(%s)", (ids,))
        conn.commit()
