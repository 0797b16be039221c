"""Domain models and types for budgetbuddy.

This package contains the functional core:
- Pure functions with no side effects
- No I/O operations
- Easy to test
- Business logic separated from infrastructure
"""

from budgetbuddy.domain.models import Amount, CategoryId, Month, Timestamp, TransactionType

__all__ = ["Amount", "CategoryId", "Month", "Timestamp", "TransactionType"]
