"""Database locations and connection handling."""

import os
import sqlite3
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

DB_FILENAME = "budgetbuddy.db"
SEED_PATH = Path(__file__).resolve().parent.parent / "assets" / "seed.db"


def get_xdg_data_home() -> Path:
    """Get XDG data directory, with fallback to ~/.local/share."""
    xdg_data = os.environ.get("XDG_DATA_HOME")
    if xdg_data:
        return Path(xdg_data)
    return Path.home() / ".local" / "share"


def get_db_path() -> Path:
    """Get the default database path (XDG compliant)."""
    return get_xdg_data_home() / "budgetbuddy" / "SQLite" / DB_FILENAME


def get_seed_path() -> Path:
    """Get the path of the seed database bundled with the package."""
    return SEED_PATH


def database_exists(db_path: Path | None = None) -> bool:
    """Check if the database file exists.

    Args:
        db_path: Path to check. If None, uses default location.

    Returns:
        True if database exists, False otherwise.
    """
    if db_path is None:
        db_path = get_db_path()
    return db_path.exists()


@contextmanager
def transaction(db_path: Path | None = None) -> Iterator[sqlite3.Connection]:
    """Open a connection and run the block inside one database transaction.

    The transaction is committed when the block exits normally and rolled
    back otherwise. The connection is always closed.

    Args:
        db_path: Path to the database file. If None, uses default location.

    Yields:
        Connection with row_factory set to sqlite3.Row.

    Raises:
        sqlite3.Error: If the database is missing, cannot be opened, or a
            statement fails.
    """
    if db_path is None:
        db_path = get_db_path()

    # mode=rw refuses to create a blank file where the seed copy belongs
    conn = sqlite3.connect(f"{db_path.resolve().as_uri()}?mode=rw", uri=True)
    conn.row_factory = sqlite3.Row
    try:
        # Has no effect once a transaction is open
        conn.execute("PRAGMA foreign_keys = ON")
        conn.execute("BEGIN")
        yield conn
        conn.commit()
    except sqlite3.Error:
        conn.rollback()
        raise
    finally:
        conn.close()
