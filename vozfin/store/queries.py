"""Database query functions.

The transactions table is append-only: rows are created from confirmed
candidates and never updated.
"""

import sqlite3
from pathlib import Path
from typing import Any

from vozfin.domain.interpreter import TransactionCandidate
from vozfin.domain.models import to_money
from vozfin.store.schema import get_db_path


def _connect(db_path: Path | None = None) -> sqlite3.Connection:
    """Create a database connection with row factory.

    Args:
        db_path: Path to the database file. If None, uses default location.

    Returns:
        Database connection with row_factory configured.
    """
    if db_path is None:
        db_path = get_db_path()
    conn = sqlite3.connect(db_path)
    conn.row_factory = sqlite3.Row
    return conn


def insert_transaction(candidate: TransactionCandidate, db_path: Path | None = None) -> int:
    """Store a confirmed candidate as a new transaction.

    Args:
        candidate: Candidate accepted by the operator.
        db_path: Path to the database file. If None, uses default location.

    Returns:
        ID of the new transaction.

    Raises:
        sqlite3.Error: If database operation fails.
    """
    with _connect(db_path) as conn:
        cursor = conn.cursor()
        try:
            cursor.execute(
                "INSERT INTO transactions (type, category, amount, description, date) VALUES (?, ?, ?, ?, ?)",
                (
                    candidate.type.value,
                    candidate.category.value,
                    to_money(candidate.amount),
                    candidate.description,
                    candidate.date.isoformat(),
                ),
            )
            conn.commit()
        except sqlite3.Error:
            conn.rollback()
            raise

        txn_id = cursor.lastrowid
        assert txn_id is not None
        return txn_id


def get_all_transactions(db_path: Path | None = None, limit: int | None = None) -> list[dict[str, Any]]:
    """Get all transactions.

    Args:
        db_path: Path to the database file. If None, uses default location.
        limit: Maximum number of transactions to return. If None, returns all.

    Returns:
        List of transaction dictionaries ordered by date descending.

    Raises:
        sqlite3.Error: If database operation fails.
    """
    with _connect(db_path) as conn:
        cursor = conn.cursor()
        query = (
            "SELECT id, type, category, amount, description, date, created_at "
            "FROM transactions ORDER BY date DESC, id DESC"
        )
        params: list[Any] = []

        if limit is not None:
            query += " LIMIT ?"
            params.append(limit)

        cursor.execute(query, params)
        rows = cursor.fetchall()
        return [dict(row) for row in rows]
