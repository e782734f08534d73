"""Invoices dashboard data layer — composition root for page handlers."""

from __future__ import annotations

import logging

import sentry_sdk

from dashboard.config import AppConfig
from dashboard.db.connection import init_db
from dashboard.service import QueryService

logger = logging.getLogger(__name__)


def _init_sentry(dsn: str, environment: str) -> None:
    """Initialize Sentry SDK if a DSN is configured and not in development."""
    if not dsn or environment == "development":
        return
    sentry_sdk.init(
        dsn,
        environment=environment,
        traces_sample_rate=0,
        send_client_reports=False,
        auto_session_tracking=False,
    )


def create_service(config: AppConfig | None = None) -> QueryService:
    """Configure logging and error reporting, then build the query service."""
    if config is None:
        config = AppConfig.from_yaml()

    _init_sentry(config.sentry_dsn, config.environment)

    logging.basicConfig(
        level=getattr(logging, config.logging.level.upper(), logging.INFO),
        format=config.logging.format,
    )

    db = init_db(config)
    logger.info("Query service ready (%s)", config.database.sqlite_path)
    return QueryService(db, page_size=config.pagination.items_per_page)
