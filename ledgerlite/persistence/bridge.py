"""Mini README: Write-through synchronisation between store and blob store.

Structure:
    * LoadReport - outcome of a startup load, including any decode failure.
    * PersistenceBridge - ``load`` at startup, ``save`` after every mutation.

Saving always writes the complete sequence; there is no diffing, batching or
retrying. A corrupt snapshot never stops startup: the failure is logged, the
store is emptied and the error is handed back in the report.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional

from ..errors import BlobStoreError, DecodeFailure, PersistFailure
from ..ledger.store import TransactionStore
from ..ledger.transactions import Transaction
from ..logging_utils import get_logger
from .blob_store import BlobStore
from .codec import decode_transactions, encode_transactions

LOGGER = get_logger(__name__)

DEFAULT_STORAGE_KEY = "transactions"


@dataclass(slots=True)
class LoadReport:
    """Summary of a load attempt."""

    loaded: int = 0
    found_snapshot: bool = False
    error: Optional[DecodeFailure] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class PersistenceBridge:
    """Keep a blob store copy of the transaction store."""

    def __init__(self, blob_store: BlobStore, key: str = DEFAULT_STORAGE_KEY) -> None:
        self.blob_store = blob_store
        self.key = key

    def load(self, store: TransactionStore) -> LoadReport:
        """Replace ``store`` contents with the persisted snapshot, if any."""

        try:
            text = self.blob_store.get(self.key)
        except (UnicodeDecodeError, OSError) as error:
            failure = DecodeFailure(f"Snapshot '{self.key}' could not be read: {error}")
            failure.__cause__ = error
            LOGGER.error("Error loading transactions from '%s': %s", self.key, failure)
            store.replace_all([])
            return LoadReport(found_snapshot=True, error=failure)

        if text is None:
            LOGGER.info("No snapshot stored under '%s'; starting empty", self.key)
            store.replace_all([])
            return LoadReport()

        try:
            transactions = decode_transactions(text)
        except DecodeFailure as error:
            LOGGER.error("Error loading transactions from '%s': %s", self.key, error)
            store.replace_all([])
            return LoadReport(found_snapshot=True, error=error)

        store.replace_all(transactions)
        LOGGER.info("Loaded %s transactions from '%s'", len(store), self.key)
        return LoadReport(loaded=len(store), found_snapshot=True)

    def save(self, transactions: Iterable[Transaction], *, applied: Optional[Transaction] = None) -> None:
        """Write the full sequence, raising ``PersistFailure`` when the medium refuses."""

        text = encode_transactions(transactions)
        try:
            self.blob_store.set(self.key, text)
        except (OSError, BlobStoreError) as error:
            LOGGER.error("Failed to persist transactions to '%s': %s", self.key, error)
            raise PersistFailure(f"Could not save transactions: {error}", transaction=applied) from error
        LOGGER.debug("Persisted snapshot '%s' (%s bytes)", self.key, len(text))
