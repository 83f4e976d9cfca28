"""Mini README: Transaction store and its value records.

This package owns the in-memory ledger: immutable transaction records, the
filter selector, aggregate totals and the store that enforces id uniqueness.
It has no knowledge of persistence or interfaces so it can be reused and
tested in isolation.
"""

from .store import TransactionIdGenerator, TransactionStore, TransactionView
from .transactions import (
    KNOWN_CATEGORIES,
    LedgerSummary,
    Transaction,
    TransactionFilter,
    TransactionType,
    format_currency,
    validate_description_length,
)

__all__ = [
    "KNOWN_CATEGORIES",
    "LedgerSummary",
    "Transaction",
    "TransactionFilter",
    "TransactionIdGenerator",
    "TransactionStore",
    "TransactionType",
    "TransactionView",
    "format_currency",
    "validate_description_length",
]
