"""Database layer — SQLite store for the invoices dashboard."""

from dashboard.db.connection import Database, init_db

__all__ = ["Database", "init_db"]
