"""Database store layer - provides persistence for the application.

This module re-exports all public database functions for easy importing.
"""

from budgetbuddy.store.bootstrap import BootstrapError, ensure_database, reset_database
from budgetbuddy.store.queries import (
    Snapshot,
    count_transactions,
    delete_transaction,
    fetch_snapshot,
    get_all_categories,
    get_all_transactions,
    get_category,
    get_transactions_by_month,
    insert_transaction,
)
from budgetbuddy.store.schema import database_exists, get_db_path, get_seed_path, transaction

__all__ = [
    # Bootstrap
    "BootstrapError",
    "ensure_database",
    "reset_database",
    # Schema
    "database_exists",
    "get_db_path",
    "get_seed_path",
    "transaction",
    # Queries
    "Snapshot",
    "count_transactions",
    "delete_transaction",
    "fetch_snapshot",
    "get_all_categories",
    "get_all_transactions",
    "get_category",
    "get_transactions_by_month",
    "insert_transaction",
]
