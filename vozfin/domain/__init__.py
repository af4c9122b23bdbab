"""Domain models and types for vozfin.

This package contains the functional core:
- Pure functions with no side effects
- No I/O operations
- Easy to test
- Business logic separated from infrastructure
"""

from vozfin.domain.interpreter import TransactionCandidate, apply_edits, interpret_transcript
from vozfin.domain.models import CATEGORY_LABELS, Category, Money, TransactionType

__all__ = [
    "CATEGORY_LABELS",
    "Category",
    "Money",
    "TransactionCandidate",
    "TransactionType",
    "apply_edits",
    "interpret_transcript",
]
