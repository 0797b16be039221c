"""Tests for budgetbuddy.home.HomeState."""

from pathlib import Path

import pytest
from conftest import expense, income, ts

from budgetbuddy.domain.models import Amount, CategoryId, Month, TransactionType
from budgetbuddy.domain.transactions import NewTransaction
from budgetbuddy.home import HomeState


@pytest.fixture
def state(db_path: Path) -> HomeState:
    home = HomeState(Month("2024-01"), db_path)
    assert home.refresh()
    return home


class TestRefresh:
    """Tests for HomeState.refresh."""

    def test_loads_seed_data(self, state: HomeState) -> None:
        assert state.transactions == []
        assert len(state.categories) == 10
        assert state.by_month.total_income == 0
        assert state.by_month.total_expenses == 0

    def test_failure_keeps_previous_state(
        self, state: HomeState, db_path: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Should log and keep showing stale data when the fetch fails."""
        assert state.insert(income(100, ts(2024, 1, 15)))
        before = (state.transactions, state.categories, state.by_month)

        db_path.unlink()

        assert state.refresh() is False
        assert (state.transactions, state.categories, state.by_month) == before
        assert "Error fetching data" in caplog.text


class TestMutations:
    """Tests for HomeState.insert and HomeState.delete."""

    def test_insert_refreshes_everything(self, state: HomeState) -> None:
        assert state.insert(income(100, ts(2024, 1, 15)))
        assert state.insert(expense(40, ts(2024, 1, 20)))

        assert [txn.amount for txn in state.transactions] == [40.0, 100.0]
        assert state.by_month.total_income == 100
        assert state.by_month.total_expenses == 40
        assert state.by_month.savings == 60
        assert state.last_inserted_id == state.transactions[0].id

    def test_failed_insert_keeps_state(self, state: HomeState, caplog: pytest.LogCaptureFixture) -> None:
        assert state.insert(income(100, ts(2024, 1, 15)))
        before = state.transactions

        bad = NewTransaction(
            category_id=CategoryId(999),
            amount=Amount(1.0),
            date=ts(2024, 1, 2),
            description="",
            type=TransactionType.EXPENSE,
        )

        assert state.insert(bad) is False
        assert state.transactions == before
        assert "Error inserting transaction" in caplog.text

    def test_delete_refreshes(self, state: HomeState) -> None:
        state.insert(income(100, ts(2024, 1, 15)))
        state.insert(expense(40, ts(2024, 1, 20)))
        expense_id = state.transactions[0].id

        assert state.delete(expense_id)

        assert [txn.id for txn in state.transactions] != [expense_id]
        assert len(state.transactions) == 1
        assert state.by_month.total_expenses == 0

    def test_delete_missing_id_succeeds(self, state: HomeState) -> None:
        assert state.delete(4242) is True
        assert state.transactions == []


class TestChangeMonth:
    """Tests for HomeState.change_month."""

    def test_next_and_previous(self, state: HomeState) -> None:
        state.insert(income(100, ts(2024, 1, 15)))
        state.insert(expense(25, ts(2024, 2, 3)))

        assert state.change_month("next")
        assert state.month == "2024-02"
        assert state.by_month.total_expenses == 25
        assert state.by_month.total_income == 0

        assert state.change_month("previous")
        assert state.month == "2024-01"
        assert state.by_month.total_income == 100
        assert state.by_month.total_expenses == 0

    def test_crosses_year_boundary(self, state: HomeState) -> None:
        assert state.change_month("previous")
        assert state.month == "2023-12"

    def test_transactions_list_is_not_filtered_by_month(self, state: HomeState) -> None:
        state.insert(income(100, ts(2024, 1, 15)))

        state.change_month("next")

        assert len(state.transactions) == 1


class TestCategoryName:
    """Tests for HomeState.category_name."""

    def test_known_category(self, state: HomeState) -> None:
        assert state.category_name(CategoryId(1)) == "Groceries"

    def test_unknown_category(self, state: HomeState) -> None:
        assert state.category_name(CategoryId(999)) == "Unknown"
