"""Row and view records for the dashboard tables."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass
class User:
    id: str
    name: str
    email: str
    password: str


@dataclass
class Revenue:
    month: str
    revenue: int


@dataclass
class LatestInvoice:
    """One row of the "latest invoices" card; amount is already formatted."""

    id: str
    name: str
    email: str
    image_url: str
    amount: str


@dataclass
class InvoiceTableRow:
    """Invoice joined with its customer; amount stays in integer cents."""

    id: str
    customer_id: str
    name: str
    email: str
    image_url: str
    date: str
    amount: int
    status: str


@dataclass
class InvoiceForm:
    """Invoice as loaded into the edit form; amount in decimal units."""

    id: str
    customer_id: str
    amount: float
    status: str


@dataclass
class CustomerField:
    id: str
    name: str


@dataclass
class CustomerSummaryRow:
    id: str
    name: str
    email: str
    image_url: str
    total_invoices: int
    total_pending: str
    total_paid: str


@dataclass
class CardSummary:
    number_of_invoices: int
    number_of_customers: int
    total_paid_invoices: str
    total_pending_invoices: str


def from_row(cls: type, row: dict[str, Any], **overrides: Any) -> Any:
    """Build a record from a row dict, ignoring columns the record doesn't declare."""
    fields = cls.__dataclass_fields__
    values = {k: row[k] for k in fields if k in row}
    values.update(overrides)
    return cls(**values)
