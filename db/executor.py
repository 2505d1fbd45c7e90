"""
db/executor.py
--------------
Runs one parameterized statement on a pooled connection and returns the
rows as field-named dicts. This is the only place that talks to psycopg2;
repositories depend on nothing but `Executor.execute`.
"""

from typing import Any, Sequence

import psycopg2
from psycopg2 import extras

from db.connection import get_connection, release_connection
from utils.errors import StoreError
from utils.logger import get_logger

logger = get_logger(__name__)


class Executor:
    """Executes SQL against the shared connection pool, one transaction per call."""

    def execute(self, sql: str, params: Sequence[Any] = ()) -> list[dict]:
        """
        Execute a statement with positional ``%s`` parameters.

        Args:
            sql: Query template.
            params: Values bound to the placeholders, in order.

        Returns:
            The rows produced by the statement (empty for statements
            without a result set).

        Raises:
            StoreError: On any database failure (connectivity, constraint
                violation). The transaction is rolled back.
        """
        conn = get_connection()
        try:
            with conn.cursor(cursor_factory=extras.RealDictCursor) as cur:
                cur.execute(sql, list(params) or None)
                rows = [dict(r) for r in cur.fetchall()] if cur.description else []
            conn.commit()
            return rows
        except psycopg2.Error as e:
            conn.rollback()
            logger.error(f"Query failed: {e}")
            raise StoreError(str(e).strip() or type(e).__name__) from e
        except Exception:
            conn.rollback()
            raise
        finally:
            release_connection(conn)
