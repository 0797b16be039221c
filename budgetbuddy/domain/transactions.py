"""Pure functions and records for transactions and categories.

This module contains the functional core for transaction data:
- No I/O operations (no database, no console, no files)
- Row conversion from the database shape to immutable records
- Input normalization for new transactions
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from budgetbuddy.domain.models import Amount, CategoryId, Timestamp, TransactionType


@dataclass(frozen=True)
class Category:
    """Immutable category row."""

    id: CategoryId
    name: str
    type: TransactionType
    icon: str | None = None


@dataclass(frozen=True)
class Transaction:
    """Immutable transaction row."""

    id: int
    category_id: CategoryId
    amount: Amount
    date: Timestamp
    description: str
    type: TransactionType


@dataclass(frozen=True)
class NewTransaction:
    """Transaction data ready for insertion (the id is generated by the database)."""

    category_id: CategoryId
    amount: Amount
    date: Timestamp
    description: str
    type: TransactionType

    def as_params(self) -> tuple[int, float, int, str, str]:
        """Return the values in Transactions column order for an INSERT."""
        return (self.category_id, self.amount, self.date, self.description, self.type.value)


def parse_transaction_type(value: str) -> TransactionType:
    """Parse a transaction type, ignoring case and surrounding whitespace.

    Args:
        value: Raw type text (e.g. "expense", "Income").

    Returns:
        The matching TransactionType.

    Raises:
        ValueError: If the value is neither Income nor Expense.
    """
    normalized = value.strip().lower()
    for txn_type in TransactionType:
        if txn_type.value.lower() == normalized:
            return txn_type
    raise ValueError(f"Unknown transaction type: {value!r} (expected Income or Expense)")


def category_from_row(row: Mapping[str, Any]) -> Category:
    """Build a Category from a Categories row."""
    return Category(
        id=CategoryId(row["id"]),
        name=row["name"],
        type=TransactionType(row["type"]),
        icon=row["icon"],
    )


def transaction_from_row(row: Mapping[str, Any]) -> Transaction:
    """Build a Transaction from a Transactions row.

    A NULL description is read back as an empty string.
    """
    return Transaction(
        id=row["id"],
        category_id=CategoryId(row["category_id"]),
        amount=Amount(float(row["amount"])),
        date=Timestamp(int(row["date"])),
        description=row["description"] or "",
        type=TransactionType(row["type"]),
    )


def index_categories(categories: list[Category]) -> dict[CategoryId, Category]:
    """Map category ids to categories for lookups while rendering."""
    return {category.id: category for category in categories}
