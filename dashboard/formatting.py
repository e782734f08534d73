"""Display helpers — currency, dates and the pagination control."""

from __future__ import annotations

from datetime import date, datetime

ELLIPSIS = "..."


def format_currency(cents: int | None, symbol: str = "$") -> str:
    """Format an integer-cents amount as an en-US currency string.

    >>> format_currency(123456)
    '$1,234.56'
    """
    value = (cents or 0) / 100
    sign = "-" if value < 0 else ""
    return f"{sign}{symbol}{abs(value):,.2f}"


def format_date_to_local(value: str | date) -> str:
    """Render an ISO date (``2022-12-06``) as ``Dec 6, 2022``."""
    if isinstance(value, str):
        value = datetime.fromisoformat(value).date()
    return f"{value:%b} {value.day}, {value.year}"


def generate_pagination(current_page: int, total_pages: int) -> list[int | str]:
    """Page numbers for the pagination control, with ``...`` for gaps."""
    if total_pages <= 7:
        return list(range(1, total_pages + 1))

    if current_page <= 3:
        return [1, 2, 3, ELLIPSIS, total_pages - 1, total_pages]

    if current_page >= total_pages - 2:
        return [1, 2, ELLIPSIS, total_pages - 2, total_pages - 1, total_pages]

    return [
        1,
        ELLIPSIS,
        current_page - 1,
        current_page,
        current_page + 1,
        ELLIPSIS,
        total_pages,
    ]
