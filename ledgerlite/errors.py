"""Mini README: Error hierarchy shared by the ledger core and its interfaces.

Structure:
    * LedgerError - base class for every failure raised by Ledgerlite.
    * InvalidAmount / InvalidDescription / InvalidTransactionType - rejected
      input at the ``add`` call site; the store is left unchanged.
    * InvalidFilter - unknown filter selector.
    * DecodeFailure - persisted snapshot could not be decoded.
    * PersistFailure - writing the snapshot to the blob store failed.
    * BlobStoreError - non-OS failure reported by a blob store backend.

Validation errors also subclass ``ValueError`` so callers that only know the
standard library contract keep working.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .ledger.transactions import Transaction


class LedgerError(Exception):
    """Base class for ledger failures."""


class InvalidAmount(LedgerError, ValueError):
    """Amount is non-numeric, non-finite or not strictly positive."""


class InvalidDescription(LedgerError, ValueError):
    """Description is missing or blank after trimming."""


class InvalidTransactionType(LedgerError, ValueError):
    """Transaction type is neither income nor expense."""


class InvalidFilter(LedgerError, ValueError):
    """Filter selector is not one of all, income or expense."""


class DecodeFailure(LedgerError):
    """Persisted snapshot is unreadable."""


class BlobStoreError(LedgerError):
    """Blob store backend rejected an operation."""


class PersistFailure(LedgerError):
    """Snapshot write failed; the in-memory store stays authoritative."""

    def __init__(self, message: str, transaction: Optional["Transaction"] = None) -> None:
        super().__init__(message)
        self.transaction = transaction
