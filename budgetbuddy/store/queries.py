"""Database query functions.

Every public function runs as one database transaction. Mutations re-read
the full snapshot inside the same transaction instead of patching results.
"""

import logging
import sqlite3
from dataclasses import dataclass
from pathlib import Path

from budgetbuddy.dates import month_window
from budgetbuddy.domain.models import CategoryId, Month
from budgetbuddy.domain.summary import TransactionsByMonth
from budgetbuddy.domain.transactions import (
    Category,
    NewTransaction,
    Transaction,
    category_from_row,
    transaction_from_row,
)
from budgetbuddy.store.schema import transaction

logger = logging.getLogger(__name__)

MONTHLY_TOTALS_SQL = """
    SELECT
        COALESCE(SUM(CASE WHEN type = 'Expense' THEN amount ELSE 0 END), 0) AS totalExpenses,
        COALESCE(SUM(CASE WHEN type = 'Income' THEN amount ELSE 0 END), 0) AS totalIncome
    FROM Transactions
    WHERE date >= ? AND date <= ?
"""


@dataclass(frozen=True)
class Snapshot:
    """The three read results the home screen renders."""

    transactions: list[Transaction]
    categories: list[Category]
    by_month: TransactionsByMonth


def _select_transactions(conn: sqlite3.Connection) -> list[Transaction]:
    rows = conn.execute("SELECT * FROM Transactions ORDER BY date DESC").fetchall()
    return [transaction_from_row(row) for row in rows]


def _select_categories(conn: sqlite3.Connection) -> list[Category]:
    rows = conn.execute("SELECT * FROM Categories").fetchall()
    return [category_from_row(row) for row in rows]


def _select_by_month(conn: sqlite3.Connection, month: Month) -> TransactionsByMonth:
    start, end = month_window(month)
    row = conn.execute(MONTHLY_TOTALS_SQL, (start, end)).fetchone()
    if row is None:
        return TransactionsByMonth()
    return TransactionsByMonth(
        total_expenses=float(row["totalExpenses"]),
        total_income=float(row["totalIncome"]),
    )


def _select_snapshot(conn: sqlite3.Connection, month: Month) -> Snapshot:
    return Snapshot(
        transactions=_select_transactions(conn),
        categories=_select_categories(conn),
        by_month=_select_by_month(conn, month),
    )


def get_all_transactions(db_path: Path | None = None) -> list[Transaction]:
    """Get all transactions.

    Args:
        db_path: Path to the database file. If None, uses default location.

    Returns:
        Transactions ordered by date descending.

    Raises:
        sqlite3.Error: If database operation fails.
    """
    with transaction(db_path) as conn:
        return _select_transactions(conn)


def get_all_categories(db_path: Path | None = None) -> list[Category]:
    """Get all categories in table order.

    Args:
        db_path: Path to the database file. If None, uses default location.

    Returns:
        List of categories.

    Raises:
        sqlite3.Error: If database operation fails.
    """
    with transaction(db_path) as conn:
        return _select_categories(conn)


def get_category(category_id: CategoryId, db_path: Path | None = None) -> Category | None:
    """Get a category by id.

    Args:
        category_id: Category id.
        db_path: Path to the database file. If None, uses default location.

    Returns:
        The category, or None if no category has this id.

    Raises:
        sqlite3.Error: If database operation fails.
    """
    with transaction(db_path) as conn:
        row = conn.execute("SELECT * FROM Categories WHERE id = ?", (category_id,)).fetchone()
        return category_from_row(row) if row else None


def get_transactions_by_month(month: Month, db_path: Path | None = None) -> TransactionsByMonth:
    """Get income and expense totals for a month.

    Rows are selected by their ``type`` text, not by the sign of ``amount``.

    Args:
        month: Month in YYYY-MM format.
        db_path: Path to the database file. If None, uses default location.

    Returns:
        Totals for the month window; zero when the month has no transactions.

    Raises:
        sqlite3.Error: If database operation fails.
        ValueError: If the month is invalid.
    """
    with transaction(db_path) as conn:
        return _select_by_month(conn, month)


def count_transactions(db_path: Path | None = None) -> int:
    """Count all transactions.

    Raises:
        sqlite3.Error: If database operation fails.
    """
    with transaction(db_path) as conn:
        return conn.execute("SELECT COUNT(*) FROM Transactions").fetchone()[0]


def fetch_snapshot(month: Month, db_path: Path | None = None) -> Snapshot:
    """Read transactions, categories and the month's totals together.

    Args:
        month: Month in YYYY-MM format for the totals.
        db_path: Path to the database file. If None, uses default location.

    Returns:
        Snapshot of all three results.

    Raises:
        sqlite3.Error: If database operation fails.
    """
    with transaction(db_path) as conn:
        return _select_snapshot(conn, month)


def insert_transaction(
    new: NewTransaction, month: Month, db_path: Path | None = None
) -> tuple[int, Snapshot]:
    """Insert a transaction and re-read the snapshot.

    The ``type`` is stored as given; it is not checked against the sign of
    the amount.

    Args:
        new: Transaction to insert.
        month: Month in YYYY-MM format for the refreshed totals.
        db_path: Path to the database file. If None, uses default location.

    Returns:
        Tuple of (new_id, snapshot).

    Raises:
        sqlite3.IntegrityError: If the category id does not exist.
        sqlite3.Error: If database operation fails.
    """
    with transaction(db_path) as conn:
        cursor = conn.execute(
            "INSERT INTO Transactions (category_id, amount, date, description, type) VALUES (?, ?, ?, ?, ?)",
            new.as_params(),
        )
        new_id = cursor.lastrowid
        snapshot = _select_snapshot(conn, month)

    logger.info("Inserted transaction %s", new_id)
    return new_id, snapshot


def delete_transaction(txn_id: int, month: Month, db_path: Path | None = None) -> tuple[int, Snapshot]:
    """Delete a transaction by id and re-read the snapshot.

    Args:
        txn_id: Transaction id. A missing id deletes nothing.
        month: Month in YYYY-MM format for the refreshed totals.
        db_path: Path to the database file. If None, uses default location.

    Returns:
        Tuple of (rows_deleted, snapshot).

    Raises:
        sqlite3.Error: If database operation fails.
    """
    with transaction(db_path) as conn:
        cursor = conn.execute("DELETE FROM Transactions WHERE id = ?", (txn_id,))
        deleted = cursor.rowcount
        snapshot = _select_snapshot(conn, month)

    if deleted:
        logger.info("Deleted transaction %s", txn_id)
    else:
        logger.info("No transaction with id %s to delete", txn_id)
    return deleted, snapshot
