"""Database connection management — single-file SQLite store."""

from __future__ import annotations

import logging
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Generator

from dashboard.config import AppConfig

logger = logging.getLogger(__name__)


def _casefold(value: Any) -> str | None:
    """SQL ``casefold(x)``: Unicode-aware lowercase of the value's text form."""
    if value is None:
        return None
    return str(value).casefold()


class Database:
    """Handle to the dashboard SQLite file.

    Every call opens its own connection and closes it on exit, so one
    instance can be shared by coroutines whose queries run in worker threads.
    """

    def __init__(self, config: AppConfig):
        self.config = config.database
        self._ensure_db()

    def _ensure_db(self) -> None:
        """Ensure the database file's parent directory exists."""
        db_path = Path(self.config.sqlite_path)
        db_path.parent.mkdir(parents=True, exist_ok=True)

    @contextmanager
    def connection(self) -> Generator[sqlite3.Connection, None, None]:
        """Get a database connection (context manager)."""
        conn = sqlite3.connect(
            str(self.config.sqlite_path),
            timeout=self.config.timeout_seconds,
        )
        conn.row_factory = sqlite3.Row
        conn.create_function("casefold", 1, _casefold, deterministic=True)
        try:
            yield conn
            conn.commit()
        except Exception:
            conn.rollback()
            raise
        finally:
            conn.close()

    def execute(self, sql: str, params: tuple = ()) -> list[dict[str, Any]]:
        """Execute a query and return results as list of dicts."""
        with self.connection() as conn:
            cursor = conn.execute(sql, params)
            if cursor.description:
                columns = [d[0] for d in cursor.description]
                return [dict(zip(columns, row)) for row in cursor.fetchall()]
            return []

    def execute_one(self, sql: str, params: tuple = ()) -> dict[str, Any] | None:
        """Execute a query and return the first row as a dict, or None."""
        results = self.execute(sql, params)
        return results[0] if results else None

    def execute_many(self, sql: str, params_list: list[tuple]) -> int:
        """Execute a batch of writes."""
        with self.connection() as conn:
            cursor = conn.executemany(sql, params_list)
            return cursor.rowcount

    def run_script(self, sql: str) -> None:
        """Run a multi-statement SQL script."""
        with self.connection() as conn:
            conn.executescript(sql)

    def initialize_schema(self) -> None:
        """Create the dashboard tables if they don't exist."""
        schema_path = Path(__file__).parent / "schema.sql"
        self.run_script(schema_path.read_text())
        logger.info("Schema ready at %s", self.config.sqlite_path)


def init_db(config: AppConfig) -> Database:
    """Create a database handle and make sure its schema exists."""
    db = Database(config)
    db.initialize_schema()
    return db
