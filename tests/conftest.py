"""Shared fixtures: a seed built from seed.sql and a bootstrapped copy of it."""

from datetime import datetime
from pathlib import Path

import pytest

from budgetbuddy.dates import to_timestamp
from budgetbuddy.domain.models import Amount, CategoryId, Timestamp, TransactionType
from budgetbuddy.domain.transactions import NewTransaction
from budgetbuddy.store.bootstrap import ensure_database
from budgetbuddy.store.seed import build_seed_database

GROCERIES = CategoryId(1)
SALARY = CategoryId(8)


def ts(year: int, month: int, day: int, hour: int = 12) -> Timestamp:
    """Local-time timestamp, matching how month windows are computed."""
    return to_timestamp(datetime(year, month, day, hour))


def expense(amount: float, date: Timestamp, description: str = "Shopping") -> NewTransaction:
    return NewTransaction(
        category_id=GROCERIES,
        amount=Amount(amount),
        date=date,
        description=description,
        type=TransactionType.EXPENSE,
    )


def income(amount: float, date: Timestamp, description: str = "Paycheck") -> NewTransaction:
    return NewTransaction(
        category_id=SALARY,
        amount=Amount(amount),
        date=date,
        description=description,
        type=TransactionType.INCOME,
    )


@pytest.fixture
def seed_db(tmp_path: Path) -> Path:
    """A fresh seed database built from the bundled SQL."""
    return build_seed_database(tmp_path / "assets" / "seed.db")


@pytest.fixture
def db_path(tmp_path: Path, seed_db: Path) -> Path:
    """A bootstrapped working database."""
    path = tmp_path / "data" / "SQLite" / "budgetbuddy.db"
    ensure_database(path, seed_db)
    return path
