from unittest.mock import MagicMock, patch

import psycopg
import pytest

from docproc.database import connection
from docproc.database.connection import ensure_schema, get_connection
from docproc.processor.exceptions import StorageError


class TestGetConnection:
    def test_raises_when_pool_not_initialized(self) -> None:
        with patch.object(connection, "_pool", None):
            with pytest.raises(RuntimeError, match="not initialized"):
                with get_connection():
                    pass

    def test_yields_pooled_connection(self) -> None:
        pool = MagicMock()
        conn = pool.connection.return_value.__enter__.return_value
        with patch.object(connection, "_pool", pool):
            with get_connection() as yielded:
                assert yielded is conn

    def test_wraps_driver_errors(self) -> None:
        pool = MagicMock()
        pool.connection.return_value.__enter__.side_effect = psycopg.OperationalError("down")
        with patch.object(connection, "_pool", pool):
            with pytest.raises(StorageError, match="Database error"):
                with get_connection():
                    pass

    def test_other_errors_propagate_unchanged(self) -> None:
        pool = MagicMock()
        pool.connection.return_value.__exit__.return_value = False
        with patch.object(connection, "_pool", pool):
            with pytest.raises(KeyError):
                with get_connection():
                    raise KeyError("boom")


class TestEnsureSchema:
    def test_executes_bundled_ddl(self) -> None:
        pool = MagicMock()
        conn = pool.connection.return_value.__enter__.return_value
        with patch.object(connection, "_pool", pool):
            ensure_schema()

        ddl = conn.execute.call_args.args[0]
        assert "CREATE TABLE IF NOT EXISTS documents" in ddl
        conn.commit.assert_called_once()
