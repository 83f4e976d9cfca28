"""Mini README: Composition of store, filter state and persistence.

Structure:
    * LedgerSession - the object a UI layer talks to for every user action.
    * open_session - build a session from settings and load the snapshot.

Each mutation follows the same order: change the store, then write the full
snapshot through the bridge. A failed write leaves the change in memory and
raises ``PersistFailure`` so the caller can warn the user.
"""

from __future__ import annotations

from typing import Optional, Union

from .configuration import LedgerSettings, get_settings
from .ledger import LedgerSummary, Transaction, TransactionFilter, TransactionStore, TransactionType, TransactionView
from .logging_utils import get_logger
from .persistence import FileBlobStore, LoadReport, PersistenceBridge

LOGGER = get_logger(__name__)


class LedgerSession:
    """Own one store, the active filter and the bridge persisting them."""

    def __init__(self, store: TransactionStore, bridge: PersistenceBridge) -> None:
        self.store = store
        self.bridge = bridge
        self.current_filter = TransactionFilter.ALL
        self.load_report: Optional[LoadReport] = None

    @classmethod
    def open(cls, bridge: PersistenceBridge, store: Optional[TransactionStore] = None) -> "LedgerSession":
        """Create a session and populate its store from the bridge."""

        session = cls(store if store is not None else TransactionStore(), bridge)
        session.load_report = bridge.load(session.store)
        return session

    def add_transaction(
        self,
        description: object,
        amount: object,
        category: object,
        type: Union[str, TransactionType],
    ) -> Transaction:
        """Record a transaction and persist the new snapshot."""

        transaction = self.store.add(description, amount, category, type)
        self.bridge.save(self.store.all(), applied=transaction)
        return transaction

    def delete_transaction(self, transaction_id: int) -> bool:
        """Remove a transaction and persist, even when nothing was removed."""

        removed = self.store.remove(transaction_id)
        self.bridge.save(self.store.all())
        return removed

    def select_filter(self, selector: Union[str, TransactionFilter]) -> TransactionFilter:
        self.current_filter = TransactionFilter.from_str(selector)
        LOGGER.debug("Active filter set to %s", self.current_filter.value)
        return self.current_filter

    def visible_transactions(self) -> TransactionView:
        return self.store.list(self.current_filter)

    def summary(self) -> LedgerSummary:
        return self.store.aggregate()


def open_session(settings: Optional[LedgerSettings] = None) -> LedgerSession:
    """Open a file-backed session using ``settings`` (or the cached defaults)."""

    settings = settings or get_settings()
    bridge = PersistenceBridge(FileBlobStore(settings.data_directory), key=settings.storage_key)
    store = TransactionStore(date_format=settings.date_format)
    session = LedgerSession.open(bridge, store=store)
    LOGGER.info(
        "Opened ledger at %s with %s transactions",
        settings.data_directory,
        len(session.store),
    )
    return session
