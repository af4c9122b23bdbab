"""Database store layer - provides persistence for confirmed transactions.

This module re-exports all public database functions for easy importing.
"""

from vozfin.store.queries import get_all_transactions, insert_transaction
from vozfin.store.schema import database_exists, get_db_path, init_database

__all__ = [
    # Schema
    "database_exists",
    "get_db_path",
    "init_database",
    # Queries
    "get_all_transactions",
    "insert_transaction",
]
