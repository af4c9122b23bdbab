"""Tests for vozfin.store against a temporary SQLite file."""

import sqlite3
from datetime import date
from decimal import Decimal
from pathlib import Path

import pytest

from vozfin.domain.interpreter import TransactionCandidate
from vozfin.domain.models import Category, TransactionType
from vozfin.store import database_exists, get_all_transactions, init_database, insert_transaction


@pytest.fixture
def db_path(tmp_path: Path) -> Path:
    path = tmp_path / "data" / "vozfin.db"
    init_database(path)
    return path


def make_candidate(description: str = "No mercado", txn_date: date = date(2025, 6, 15)) -> TransactionCandidate:
    return TransactionCandidate(
        type=TransactionType.EXPENSE,
        amount=Decimal("50.90"),
        category=Category.FOOD,
        description=description,
        date=txn_date,
        confidence=100,
    )


class TestInitDatabase:
    """Tests for init_database."""

    def test_creates_file_and_parents(self, db_path: Path) -> None:
        """Should create the database file in a new directory."""
        assert database_exists(db_path)

    def test_is_idempotent(self, db_path: Path) -> None:
        """Should be safe to run twice."""
        init_database(db_path)
        assert get_all_transactions(db_path) == []


class TestInsertTransaction:
    """Tests for insert_transaction."""

    def test_stores_candidate(self, db_path: Path) -> None:
        """Should store amount in centavos with a generated id and timestamp."""
        txn_id = insert_transaction(make_candidate(), db_path)

        [row] = get_all_transactions(db_path)
        assert row["id"] == txn_id
        assert row["type"] == "expense"
        assert row["category"] == "food"
        assert row["amount"] == 5090
        assert row["description"] == "No mercado"
        assert row["date"] == "2025-06-15"
        assert row["created_at"]

    def test_is_append_only(self, db_path: Path) -> None:
        """Should store identical candidates as separate rows."""
        first = insert_transaction(make_candidate(), db_path)
        second = insert_transaction(make_candidate(), db_path)

        assert first != second
        assert len(get_all_transactions(db_path)) == 2

    def test_rejects_non_positive_amount(self, db_path: Path) -> None:
        """Should enforce positive amounts at the schema level."""
        candidate = make_candidate()
        bad = TransactionCandidate(
            type=candidate.type,
            amount=Decimal("0"),
            category=candidate.category,
            description=candidate.description,
            date=candidate.date,
            confidence=candidate.confidence,
        )

        with pytest.raises(sqlite3.IntegrityError):
            insert_transaction(bad, db_path)


class TestGetAllTransactions:
    """Tests for get_all_transactions."""

    def test_newest_first_with_limit(self, db_path: Path) -> None:
        """Should order by date descending and honor the limit."""
        insert_transaction(make_candidate("Antiga", date(2025, 6, 1)), db_path)
        insert_transaction(make_candidate("Nova", date(2025, 6, 20)), db_path)
        insert_transaction(make_candidate("Meio", date(2025, 6, 10)), db_path)

        rows = get_all_transactions(db_path, limit=2)

        assert [row["description"] for row in rows] == ["Nova", "Meio"]
