"""Build the bundled seed database from its SQL source."""

import sqlite3
from pathlib import Path

SEED_SQL_PATH = Path(__file__).resolve().parent.parent / "assets" / "seed.sql"


def build_seed_database(output_path: Path, sql_path: Path | None = None) -> Path:
    """Create a seed database by running the seed SQL script.

    Args:
        output_path: Database file to create. An existing file is replaced.
        sql_path: SQL script to run. If None, uses the bundled seed.sql.

    Returns:
        The output path.

    Raises:
        sqlite3.Error: If the script fails.
        OSError: If the script cannot be read or the output cannot be written.
    """
    if sql_path is None:
        sql_path = SEED_SQL_PATH

    script = sql_path.read_text(encoding="utf-8")

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.unlink(missing_ok=True)

    conn = sqlite3.connect(output_path)
    try:
        conn.executescript(script)
        conn.commit()
    except sqlite3.Error:
        conn.rollback()
        raise
    finally:
        conn.close()

    return output_path
