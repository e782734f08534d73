"""Query service — read operations behind the dashboard pages.

Every operation runs its SQLite work in a worker thread via
``asyncio.to_thread`` and maps the rows into the records in
``dashboard.db.models``. Storage failures are logged here and surfaced to
callers as a ``DataFetchError`` naming the operation.
"""

from __future__ import annotations

import asyncio
import logging
import math
from typing import Any, Callable, TypeVar

from dashboard.db import queries
from dashboard.db.connection import Database
from dashboard.db.models import (
    CardSummary,
    CustomerField,
    CustomerSummaryRow,
    InvoiceForm,
    InvoiceTableRow,
    LatestInvoice,
    Revenue,
    User,
    from_row,
)
from dashboard.formatting import format_currency

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_PAGE_SIZE = 6


def like_term(query: str) -> str:
    """Casefold ``query`` and escape it for a ``LIKE ... ESCAPE '\\'`` substring match."""
    folded = query.casefold()
    return folded.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


class DataFetchError(RuntimeError):
    """A dashboard read failed; the storage error is kept on ``__cause__``."""

    def __init__(self, context: str):
        self.context = context
        super().__init__(f"Failed to fetch {context}.")


class QueryService:
    """Read operations for the invoices dashboard."""

    def __init__(self, db: Database, page_size: int = DEFAULT_PAGE_SIZE):
        self.db = db
        self.page_size = page_size

    async def _run(self, context: str, fn: Callable[..., T], *args: Any) -> T:
        """Run a blocking read in a thread, translating failures."""
        try:
            return await asyncio.to_thread(fn, *args)
        except Exception as exc:
            logger.exception("Database error fetching %s", context)
            raise DataFetchError(context) from exc

    def _page_size(self, page_size: int | None) -> int:
        if page_size is None:
            page_size = self.page_size
        if page_size < 1:
            raise ValueError(f"page_size must be >= 1, got {page_size}")
        return page_size

    async def get_revenue_series(self) -> list[Revenue]:
        rows = await self._run("revenue", self.db.execute, queries.REVENUE)
        return [from_row(Revenue, r) for r in rows]

    async def get_latest_invoices(self) -> list[LatestInvoice]:
        """The five most recent invoices, newest first, amounts formatted."""
        rows = await self._run("latest_invoices", self.db.execute, queries.LATEST_INVOICES)
        return [from_row(LatestInvoice, r, amount=format_currency(r["amount"])) for r in rows]

    async def get_dashboard_card_summary(self) -> CardSummary:
        """Invoice/customer counts and paid/pending totals for the summary cards.

        The three aggregate reads run concurrently; if any fails the whole
        summary fails.
        """
        context = "card_data"
        try:
            invoice_count, customer_count, status_totals = await asyncio.gather(
                asyncio.to_thread(self.db.execute_one, queries.INVOICE_COUNT),
                asyncio.to_thread(self.db.execute_one, queries.CUSTOMER_COUNT),
                asyncio.to_thread(self.db.execute_one, queries.INVOICE_STATUS_TOTALS),
            )
        except Exception as exc:
            logger.exception("Database error fetching %s", context)
            raise DataFetchError(context) from exc

        status_totals = status_totals or {}
        return CardSummary(
            number_of_invoices=(invoice_count or {}).get("count") or 0,
            number_of_customers=(customer_count or {}).get("count") or 0,
            total_paid_invoices=format_currency(status_totals.get("paid") or 0),
            total_pending_invoices=format_currency(status_totals.get("pending") or 0),
        )

    async def search_invoices(
        self, query: str, page: int, page_size: int | None = None
    ) -> list[InvoiceTableRow]:
        """One page of invoices matching ``query``, newest first."""
        if page < 1:
            raise ValueError(f"page must be >= 1, got {page}")
        page_size = self._page_size(page_size)
        offset = (page - 1) * page_size
        params = (like_term(query),) * queries.INVOICE_SEARCH_FIELDS + (page_size, offset)

        rows = await self._run("invoices", self.db.execute, queries.FILTERED_INVOICES, params)
        return [from_row(InvoiceTableRow, r) for r in rows]

    async def count_invoice_pages(self, query: str, page_size: int | None = None) -> int:
        """Number of pages ``search_invoices`` yields for ``query``."""
        page_size = self._page_size(page_size)
        params = (like_term(query),) * queries.INVOICE_SEARCH_FIELDS

        row = await self._run(
            "invoice_pages", self.db.execute_one, queries.FILTERED_INVOICE_COUNT, params
        )
        count = (row or {}).get("count") or 0
        return math.ceil(count / page_size)

    async def get_invoice_by_id(self, invoice_id: str) -> InvoiceForm | None:
        """Invoice for the edit form, amount converted from cents; None if absent."""
        row = await self._run(
            "invoice", self.db.execute_one, queries.INVOICE_BY_ID, (invoice_id,)
        )
        if row is None:
            return None
        return from_row(InvoiceForm, row, amount=row["amount"] / 100)

    async def list_customers(self) -> list[CustomerField]:
        rows = await self._run("customers", self.db.execute, queries.ALL_CUSTOMERS)
        return [from_row(CustomerField, r) for r in rows]

    async def search_customers(self, query: str) -> list[CustomerSummaryRow]:
        """Customers matching ``query`` with invoice totals, ordered by name."""
        rows = await self._run(
            "customer_table", self.db.execute, queries.FILTERED_CUSTOMERS, (like_term(query),) * 2
        )
        return [
            from_row(
                CustomerSummaryRow,
                r,
                total_pending=format_currency(r["total_pending"]),
                total_paid=format_currency(r["total_paid"]),
            )
            for r in rows
        ]

    async def get_user_by_email(self, email: str) -> User | None:
        row = await self._run("user", self.db.execute_one, queries.USER_BY_EMAIL, (email,))
        if row is None:
            return None
        return from_row(User, row)
