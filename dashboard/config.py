"""Application configuration — env vars, YAML files, defaults."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import Field
from pydantic_settings import BaseSettings


def _repo_root() -> Path:
    """Find the repository root (directory containing pyproject.toml)."""
    current = Path(__file__).resolve().parent.parent
    if (current / "pyproject.toml").exists():
        return current
    return Path.cwd()


REPO_ROOT = _repo_root()


class DatabaseConfig(BaseSettings):
    sqlite_path: Path = REPO_ROOT / "db.sqlite"
    timeout_seconds: float = 5.0

    model_config = {"env_prefix": "DASH_DB_"}


class PaginationConfig(BaseSettings):
    items_per_page: int = Field(default=6, ge=1)

    model_config = {"env_prefix": "DASH_PAGINATION_"}


class LoggingConfig(BaseSettings):
    level: str = "info"
    format: str = "%(asctime)s %(levelname)s %(name)s: %(message)s"

    model_config = {"env_prefix": "DASH_LOG_"}


class AppConfig(BaseSettings):
    """Top-level application configuration."""

    database: DatabaseConfig = Field(default_factory=DatabaseConfig)
    pagination: PaginationConfig = Field(default_factory=PaginationConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    # Environment & Sentry
    environment: str = "development"
    sentry_dsn: str = ""

    model_config = {"env_prefix": "DASH_"}

    @classmethod
    def from_yaml(cls, path: Path | None = None) -> AppConfig:
        """Load config from YAML file, with env var overrides."""
        if path is None:
            path = REPO_ROOT / "config" / "app.yml"

        values: dict[str, Any] = {}
        if path.exists():
            with open(path) as f:
                values = yaml.safe_load(f) or {}

        return cls(**values)
