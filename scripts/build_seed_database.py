#!/usr/bin/env python3
"""Rebuild the bundled seed database from budgetbuddy/assets/seed.sql."""

import sqlite3
import sys
from pathlib import Path

# Add parent directory to path to import budgetbuddy
sys.path.insert(0, str(Path(__file__).parent.parent))

from budgetbuddy.store.schema import get_seed_path
from budgetbuddy.store.seed import SEED_SQL_PATH, build_seed_database


def describe(db_path: Path) -> list[str]:
    """Summarize each table of the built database as 'name: N rows'."""
    conn = sqlite3.connect(db_path)
    try:
        tables = [
            row[0]
            for row in conn.execute(
                "SELECT name FROM sqlite_master WHERE type = 'table' AND name NOT LIKE 'sqlite_%' ORDER BY name"
            )
        ]
        return [f"{table}: {conn.execute(f'SELECT COUNT(*) FROM {table}').fetchone()[0]} rows" for table in tables]
    finally:
        conn.close()


def main() -> None:
    """Build the seed database and print a summary."""
    output = Path(sys.argv[1]) if len(sys.argv) > 1 else get_seed_path()

    try:
        build_seed_database(output, SEED_SQL_PATH)
    except (sqlite3.Error, OSError) as e:
        print(f"Failed to build seed database: {e}", file=sys.stderr)
        sys.exit(1)

    print(f"Built {output} from {SEED_SQL_PATH}")
    for line in describe(output):
        print(f"  {line}")


if __name__ == "__main__":
    main()
