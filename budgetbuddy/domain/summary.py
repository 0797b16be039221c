"""Pure functions for the monthly summary card.

Formatting money and choosing a colour by sign are the only derived
computations the presentation layer performs; both live here so they can be
tested without a console.
"""

from dataclasses import dataclass

from budgetbuddy.domain.models import TransactionType

NEGATIVE_COLOR = "#ff4500"
POSITIVE_COLOR = "#2e8b57"


@dataclass(frozen=True)
class TransactionsByMonth:
    """Income and expense totals for one month window. Never persisted."""

    total_expenses: float = 0.0
    total_income: float = 0.0

    @property
    def savings(self) -> float:
        return self.total_income - self.total_expenses


def format_money(value: float, symbol: str = "$") -> str:
    """Format an amount for display.

    Args:
        value: Amount in major units.
        symbol: Currency symbol placed before the digits.

    Returns:
        Formatted string (e.g., "-$12.50" or "$12.50").
    """
    sign = "-" if value < 0 else ""
    return f"{sign}{symbol}{abs(value):.2f}"


def money_color(value: float) -> str:
    """Pick the text colour for an amount: orange-red below zero, green otherwise."""
    return NEGATIVE_COLOR if value < 0 else POSITIVE_COLOR


def type_color(txn_type: TransactionType) -> str:
    """Pick the text colour for a transaction list row."""
    return NEGATIVE_COLOR if txn_type is TransactionType.EXPENSE else POSITIVE_COLOR


def summary_rows(by_month: TransactionsByMonth) -> list[tuple[str, float]]:
    """Labelled lines of the summary card, in display order."""
    return [
        ("Income", by_month.total_income),
        ("Total Expenses", by_month.total_expenses),
        ("Savings", by_month.savings),
    ]
