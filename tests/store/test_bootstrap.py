"""Tests for budgetbuddy.store.bootstrap and the seed database."""

import shutil
import sqlite3
from pathlib import Path

import pytest

from budgetbuddy.store.bootstrap import BootstrapError, ensure_database, reset_database
from budgetbuddy.store.queries import count_transactions, get_all_categories
from budgetbuddy.store.schema import SEED_PATH, database_exists, transaction
from budgetbuddy.store.seed import build_seed_database


class TestEnsureDatabase:
    """Tests for ensure_database."""

    def test_copies_seed_on_first_launch(self, tmp_path: Path, seed_db: Path) -> None:
        """Should create the directory and copy the seed."""
        target = tmp_path / "docs" / "SQLite" / "budgetbuddy.db"

        copied = ensure_database(target, seed_db)

        assert copied is True
        assert target.read_bytes() == seed_db.read_bytes()

    def test_skips_when_database_exists(self, tmp_path: Path, seed_db: Path) -> None:
        """Should leave an existing database untouched."""
        target = tmp_path / "budgetbuddy.db"
        target.write_bytes(b"existing")

        copied = ensure_database(target, seed_db)

        assert copied is False
        assert target.read_bytes() == b"existing"

    def test_second_launch_keeps_data(self, db_path: Path, seed_db: Path) -> None:
        """Should not re-copy the seed over user data."""
        with transaction(db_path) as conn:
            conn.execute(
                "INSERT INTO Transactions (category_id, amount, date, description, type) VALUES (1, 5, 0, 'x', 'Expense')"
            )

        assert ensure_database(db_path, seed_db) is False
        assert count_transactions(db_path) == 1

    def test_missing_seed_raises(self, tmp_path: Path) -> None:
        target = tmp_path / "budgetbuddy.db"

        with pytest.raises(BootstrapError, match="Seed database not found"):
            ensure_database(target, tmp_path / "missing.db")

        assert not target.exists()

    def test_copy_failure_raises_and_logs(
        self, tmp_path: Path, seed_db: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Should surface an OSError as BootstrapError."""
        blocker = tmp_path / "not-a-dir"
        blocker.write_text("file in the way")
        target = blocker / "SQLite" / "budgetbuddy.db"

        with pytest.raises(BootstrapError):
            ensure_database(target, seed_db)

        assert "Failed to copy seed database" in caplog.text

    def test_partial_copy_is_removed(
        self, tmp_path: Path, seed_db: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Should delete a half-written target so the next launch copies again."""
        target = tmp_path / "budgetbuddy.db"

        def failing_copy(src, dst):
            Path(dst).write_bytes(b"partial")
            raise OSError("disk full")

        monkeypatch.setattr(shutil, "copyfile", failing_copy)

        with pytest.raises(BootstrapError):
            ensure_database(target, seed_db)

        assert not target.exists()

    def test_database_exists(self, tmp_path: Path, db_path: Path) -> None:
        assert database_exists(db_path)
        assert not database_exists(tmp_path / "nope.db")


class TestResetDatabase:
    """Tests for reset_database."""

    def test_replaces_with_fresh_seed(self, db_path: Path, seed_db: Path) -> None:
        with transaction(db_path) as conn:
            conn.execute(
                "INSERT INTO Transactions (category_id, amount, date, description, type) VALUES (1, 5, 0, 'x', 'Expense')"
            )

        reset_database(db_path, seed_db)

        assert count_transactions(db_path) == 0

    def test_creates_when_missing(self, tmp_path: Path, seed_db: Path) -> None:
        target = tmp_path / "budgetbuddy.db"

        reset_database(target, seed_db)

        assert target.exists()


class TestSeedDatabase:
    """Tests for the seed schema and contents."""

    def test_seed_has_categories_and_no_transactions(self, db_path: Path) -> None:
        categories = get_all_categories(db_path)

        assert len(categories) == 10
        assert count_transactions(db_path) == 0

    def test_seed_categories_cover_both_types(self, db_path: Path) -> None:
        types = {category.type.value for category in get_all_categories(db_path)}

        assert types == {"Expense", "Income"}

    def test_type_column_is_constrained(self, db_path: Path) -> None:
        with pytest.raises(sqlite3.IntegrityError):
            with transaction(db_path) as conn:
                conn.execute(
                    "INSERT INTO Transactions (category_id, amount, date, description, type) VALUES (1, 5, 0, 'x', 'Gift')"
                )

    def test_build_replaces_existing_file(self, tmp_path: Path) -> None:
        output = tmp_path / "seed.db"
        output.write_bytes(b"stale")

        build_seed_database(output)

        with transaction(output) as conn:
            assert conn.execute("SELECT COUNT(*) FROM Categories").fetchone()[0] == 10

    def test_bundled_seed_matches_sql(self, tmp_path: Path) -> None:
        """The shipped seed.db should hold the same categories as seed.sql."""
        built = build_seed_database(tmp_path / "seed.db")

        assert get_all_categories(SEED_PATH) == get_all_categories(built)
