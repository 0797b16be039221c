"""Home screen state: what the presentation layer renders.

HomeState owns the month cursor and the last successfully fetched data. Every
mutation and month change is followed by a full refresh. A failed operation
is logged and leaves the previous data in place.
"""

import logging
import sqlite3
from pathlib import Path

from budgetbuddy.dates import Direction, shift_month
from budgetbuddy.domain.models import CategoryId, Month
from budgetbuddy.domain.summary import TransactionsByMonth
from budgetbuddy.domain.transactions import Category, NewTransaction, Transaction, index_categories
from budgetbuddy.store.queries import Snapshot, delete_transaction, fetch_snapshot, insert_transaction

logger = logging.getLogger(__name__)


class HomeState:
    """Fetched transactions, categories and monthly totals for one month cursor."""

    def __init__(self, month: Month, db_path: Path | None = None) -> None:
        self.month = month
        self.db_path = db_path
        self.transactions: list[Transaction] = []
        self.categories: list[Category] = []
        self.by_month = TransactionsByMonth()
        self.last_inserted_id: int | None = None

    def _apply(self, snapshot: Snapshot) -> None:
        self.transactions = snapshot.transactions
        self.categories = snapshot.categories
        self.by_month = snapshot.by_month

    def refresh(self) -> bool:
        """Re-fetch everything for the current month.

        Returns:
            True on success, False if the fetch failed (state unchanged).
        """
        try:
            snapshot = fetch_snapshot(self.month, self.db_path)
        except sqlite3.Error as e:
            logger.error("Error fetching data: %s", e)
            return False
        self._apply(snapshot)
        return True

    def insert(self, new: NewTransaction) -> bool:
        """Insert a transaction, then refresh.

        Returns:
            True on success, False if the insert failed (state unchanged).
        """
        try:
            new_id, snapshot = insert_transaction(new, self.month, self.db_path)
        except sqlite3.Error as e:
            logger.error("Error inserting transaction: %s", e)
            return False
        self.last_inserted_id = new_id
        self._apply(snapshot)
        return True

    def delete(self, txn_id: int) -> bool:
        """Delete a transaction by id, then refresh.

        Deleting an id that does not exist is not a failure.

        Returns:
            True on success, False if the delete failed (state unchanged).
        """
        try:
            _, snapshot = delete_transaction(txn_id, self.month, self.db_path)
        except sqlite3.Error as e:
            logger.error("Error deleting transaction %s: %s", txn_id, e)
            return False
        self._apply(snapshot)
        return True

    def change_month(self, direction: Direction) -> bool:
        """Move the month cursor one step and refresh."""
        self.month = shift_month(self.month, direction)
        return self.refresh()

    def category_name(self, category_id: CategoryId) -> str:
        category = index_categories(self.categories).get(category_id)
        return category.name if category else "Unknown"
