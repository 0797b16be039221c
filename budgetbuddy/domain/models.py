"""Domain type definitions for budgetbuddy.

These NewTypes provide semantic clarity and help with type checking:
- Amount: Signed money amount in major units (e.g. dollars)
- Month: Month cursor in YYYY-MM format
- Timestamp: Unix timestamp in whole seconds
- CategoryId: Primary key of a row in Categories
"""

from enum import StrEnum
from typing import NewType

# Amounts are stored as REAL in the seed schema
Amount = NewType("Amount", float)

# Month is always in YYYY-MM format (e.g., "2024-01")
Month = NewType("Month", str)

# Transaction dates are stored as unix seconds
Timestamp = NewType("Timestamp", int)

CategoryId = NewType("CategoryId", int)


class TransactionType(StrEnum):
    """Value of the ``type`` column on Transactions and Categories."""

    INCOME = "Income"
    EXPENSE = "Expense"
