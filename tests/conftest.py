"""Shared fixtures — temporary dashboard databases."""

from __future__ import annotations

import pytest

from dashboard.config import AppConfig, DatabaseConfig
from dashboard.db.connection import Database
from dashboard.db.seed import seed_database
from dashboard.service import QueryService


def _config(tmp_path, name: str = "test.db") -> AppConfig:
    config = AppConfig()
    config.database = DatabaseConfig(sqlite_path=tmp_path / name)
    return config


@pytest.fixture
def empty_db(tmp_path) -> Database:
    """Schema only, no rows."""
    database = Database(_config(tmp_path))
    database.initialize_schema()
    return database


@pytest.fixture
def db(empty_db) -> Database:
    """Schema plus the placeholder data set."""
    seed_database(empty_db)
    return empty_db


@pytest.fixture
def broken_db(tmp_path) -> Database:
    """A database file whose tables were never created; every query fails."""
    return Database(_config(tmp_path, "broken.db"))


@pytest.fixture
def service(db) -> QueryService:
    return QueryService(db)
