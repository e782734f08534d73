"""Create the dashboard tables and load placeholder data.

Existing rows are left alone; running it twice is harmless.

Usage:
    bin/seed-db.py                       # Uses config/app.yml (or defaults)
    bin/seed-db.py --db /tmp/dash.sqlite # Seed a specific file
    bin/seed-db.py --schema-only         # Create tables, no rows
"""
from __future__ import annotations

import argparse
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(REPO_ROOT))

from dashboard.config import AppConfig
from dashboard.db.connection import init_db
from dashboard.db.seed import seed_database


def main():
    parser = argparse.ArgumentParser(description="Seed the dashboard SQLite database")
    parser.add_argument("--db", type=Path, help="SQLite file to seed (overrides config)")
    parser.add_argument(
        "--schema-only", action="store_true",
        help="Create the tables without inserting placeholder rows",
    )
    args = parser.parse_args()

    config = AppConfig.from_yaml()
    if args.db:
        config.database.sqlite_path = args.db

    db = init_db(config)
    print(f"Schema ready at {config.database.sqlite_path}")

    if args.schema_only:
        return

    counts = seed_database(db)
    for table, inserted in counts.items():
        print(f"  {table}: {inserted} new rows")


if __name__ == "__main__":
    main()
