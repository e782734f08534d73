"""Placeholder data for local development and tests."""

from __future__ import annotations

import logging
from typing import Any

from dashboard.db.connection import Database

logger = logging.getLogger(__name__)

# bcrypt hash of "123456"; verification belongs to the auth layer
PLACEHOLDER_PASSWORD_HASH = "$2b$10$5tDqBF5bGIm4ZfBHBq6yOuJ3aUFQcq5SCLYMhBNCN4VdvOd5aAUB2"

USERS: list[dict[str, Any]] = [
    {
        "id": "410544b2-4001-4271-9855-fec4b6a6442a",
        "name": "User",
        "email": "user@nextmail.com",
        "password": PLACEHOLDER_PASSWORD_HASH,
    },
]

CUSTOMERS: list[dict[str, Any]] = [
    {
        "id": "d6e15727-9fe1-4961-8c5b-ea44a9bd81aa",
        "name": "Evil Rabbit",
        "email": "evil@rabbit.com",
        "image_url": "/customers/evil-rabbit.png",
    },
    {
        "id": "3958dc9e-712f-4377-85e9-fec4b6a6442a",
        "name": "Delba de Oliveira",
        "email": "delba@oliveira.com",
        "image_url": "/customers/delba-de-oliveira.png",
    },
    {
        "id": "3958dc9e-742f-4377-85e9-fec4b6a6442a",
        "name": "Lee Robinson",
        "email": "lee@robinson.com",
        "image_url": "/customers/lee-robinson.png",
    },
    {
        "id": "76d65c26-f784-44a2-ac19-586678f7c2f2",
        "name": "Michael Novotny",
        "email": "michael@novotny.com",
        "image_url": "/customers/michael-novotny.png",
    },
    {
        "id": "cc27c14a-0acf-4f4a-a6c9-d45682c144b9",
        "name": "Amy Burns",
        "email": "amy@burns.com",
        "image_url": "/customers/amy-burns.png",
    },
    {
        "id": "13d07535-c59e-4157-a011-f8d2ef4e0cbb",
        "name": "Balazs Orban",
        "email": "balazs@orban.com",
        "image_url": "/customers/balazs-orban.png",
    },
]

_INVOICE_ROWS = [
    (0, 15795, "pending", "2022-12-06"),
    (1, 20348, "pending", "2022-11-14"),
    (4, 3040, "paid", "2022-10-29"),
    (3, 44800, "paid", "2023-09-10"),
    (5, 34577, "pending", "2023-08-05"),
    (2, 54246, "pending", "2023-07-16"),
    (0, 666, "pending", "2023-06-27"),
    (3, 32545, "paid", "2023-06-09"),
    (4, 1250, "paid", "2023-06-17"),
    (5, 8546, "paid", "2023-06-07"),
    (1, 500, "paid", "2023-08-19"),
    (5, 8945, "paid", "2023-06-03"),
    (2, 1000, "paid", "2022-06-05"),
]

INVOICES: list[dict[str, Any]] = [
    {
        "id": f"inv-{i + 1:03d}",
        "customer_id": CUSTOMERS[customer]["id"],
        "amount": amount,
        "status": status,
        "date": day,
    }
    for i, (customer, amount, status, day) in enumerate(_INVOICE_ROWS)
]

REVENUE: list[dict[str, Any]] = [
    {"month": month, "revenue": revenue}
    for month, revenue in (
        ("Jan", 2000),
        ("Feb", 1800),
        ("Mar", 2200),
        ("Apr", 2500),
        ("May", 2300),
        ("Jun", 3200),
        ("Jul", 3500),
        ("Aug", 3700),
        ("Sep", 2500),
        ("Oct", 2800),
        ("Nov", 3000),
        ("Dec", 4800),
    )
]


def seed_database(db: Database) -> dict[str, int]:
    """Insert the placeholder rows, skipping any that already exist."""
    counts = {
        "users": db.execute_many(
            "INSERT OR IGNORE INTO users (id, name, email, password) VALUES (?, ?, ?, ?)",
            [(u["id"], u["name"], u["email"], u["password"]) for u in USERS],
        ),
        "customers": db.execute_many(
            "INSERT OR IGNORE INTO customers (id, name, email, image_url) VALUES (?, ?, ?, ?)",
            [(c["id"], c["name"], c["email"], c["image_url"]) for c in CUSTOMERS],
        ),
        "invoices": db.execute_many(
            "INSERT OR IGNORE INTO invoices (id, customer_id, amount, status, date)"
            " VALUES (?, ?, ?, ?, ?)",
            [(i["id"], i["customer_id"], i["amount"], i["status"], i["date"]) for i in INVOICES],
        ),
        "revenue": db.execute_many(
            "INSERT OR IGNORE INTO revenue (month, revenue) VALUES (?, ?)",
            [(r["month"], r["revenue"]) for r in REVENUE],
        ),
    }
    logger.info("Seeded placeholder data: %s", counts)
    return counts
