"""Mini README: In-memory transaction store, the single source of truth.

Structure:
    * TransactionIdGenerator - clock-derived, strictly increasing identifiers.
    * TransactionView - lazy, restartable filtered view over a store.
    * TransactionStore - add/remove/list/aggregate/replace_all operations.

The store keeps records in insertion order, which doubles as chronological
order. It emits no events: callers re-derive views after each mutation and
hand the new contents to the persistence bridge themselves.
"""

from __future__ import annotations

import time
from datetime import date
from typing import Callable, Dict, Iterable, Iterator, Optional, Tuple, Union

from ..logging_utils import get_logger
from .transactions import (
    LedgerSummary,
    Transaction,
    TransactionFilter,
    TransactionType,
    parse_amount,
    parse_description,
)

LOGGER = get_logger(__name__)


def _clock_millis() -> int:
    return time.time_ns() // 1_000_000


class TransactionIdGenerator:
    """Issue identifiers from a millisecond clock, never repeating one."""

    def __init__(self, clock: Callable[[], int] = _clock_millis) -> None:
        self._clock = clock
        self._last_issued = 0

    @property
    def last_issued(self) -> int:
        return self._last_issued

    def next_id(self) -> int:
        """Return the clock reading, bumped past the previous id when needed."""

        reading = int(self._clock())
        issued = reading if reading > self._last_issued else self._last_issued + 1
        if issued != reading:
            LOGGER.debug("Clock reading %s not ahead of last id, issuing %s", reading, issued)
        self._last_issued = issued
        return issued

    def observe(self, identifier: int) -> None:
        """Record an externally supplied id so it is never issued again."""

        self._last_issued = max(self._last_issued, identifier)


class TransactionView:
    """Filtered, insertion-ordered view that re-reads the store on each pass."""

    def __init__(self, store: "TransactionStore", selector: TransactionFilter) -> None:
        self._store = store
        self.selector = selector

    def __iter__(self) -> Iterator[Transaction]:
        for transaction in self._store.all():
            if self.selector.matches(transaction):
                yield transaction

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __repr__(self) -> str:
        return f"TransactionView(filter={self.selector.value!r}, count={len(self)})"


class TransactionStore:
    """Own the ordered collection of transactions."""

    def __init__(
        self,
        transactions: Optional[Iterable[Transaction]] = None,
        *,
        id_generator: Optional[TransactionIdGenerator] = None,
        date_format: str = "%m/%d/%Y",
        today: Callable[[], date] = date.today,
    ) -> None:
        self._transactions: Dict[int, Transaction] = {}
        self._ids = id_generator or TransactionIdGenerator()
        self._date_format = date_format
        self._today = today
        if transactions:
            self.replace_all(transactions)
        LOGGER.debug("Transaction store initialised with %s transactions", len(self._transactions))

    def __len__(self) -> int:
        return len(self._transactions)

    def __contains__(self, transaction_id: object) -> bool:
        return transaction_id in self._transactions

    def all(self) -> Tuple[Transaction, ...]:
        """Return a snapshot of every transaction in insertion order."""

        return tuple(self._transactions.values())

    def get(self, transaction_id: int) -> Transaction:
        """Retrieve a transaction, raising informative errors when missing."""

        if transaction_id not in self._transactions:
            raise KeyError(f"Transaction {transaction_id} not found")
        return self._transactions[transaction_id]

    def add(
        self,
        description: object,
        amount: object,
        category: object,
        type: Union[str, TransactionType],
    ) -> Transaction:
        """Validate the candidate and append it with a fresh id and date."""

        # all checks run before the id is drawn so a rejected add changes nothing
        clean_description = parse_description(description)
        clean_amount = parse_amount(amount)
        transaction_type = TransactionType.from_str(type)
        clean_category = "" if category is None else str(category).strip()

        transaction = Transaction(
            id=self._ids.next_id(),
            description=clean_description,
            amount=clean_amount,
            category=clean_category,
            type=transaction_type,
            date=self._today().strftime(self._date_format),
        )
        self._transactions[transaction.id] = transaction
        LOGGER.info(
            "Added %s transaction %s (%s %.2f)",
            transaction.type.value,
            transaction.id,
            transaction.category,
            transaction.amount,
        )
        return transaction

    def remove(self, transaction_id: int) -> bool:
        """Delete a transaction by id; absent ids are ignored."""

        removed = self._transactions.pop(transaction_id, None)
        if removed is None:
            LOGGER.debug("Remove ignored, transaction %s not present", transaction_id)
            return False
        LOGGER.info("Removed transaction %s", transaction_id)
        return True

    def list(self, selector: Union[str, TransactionFilter] = TransactionFilter.ALL) -> TransactionView:
        """Return a lazy view of transactions matching ``selector``."""

        return TransactionView(self, TransactionFilter.from_str(selector))

    def aggregate(self) -> LedgerSummary:
        """Compute income, expense and balance from the whole store."""

        income = 0.0
        expense = 0.0
        for transaction in self._transactions.values():
            if transaction.type is TransactionType.INCOME:
                income += transaction.amount
            else:
                expense += transaction.amount
        return LedgerSummary(income=income, expense=expense)

    def replace_all(self, transactions: Iterable[Transaction]) -> None:
        """Swap in a new sequence; on duplicate ids the later record wins.

        The surviving record keeps the slot of the first occurrence of its id.
        """

        replacement: Dict[int, Transaction] = {}
        duplicates = 0
        for transaction in transactions:
            if transaction.id in replacement:
                duplicates += 1
            replacement[transaction.id] = transaction
            self._ids.observe(transaction.id)
        self._transactions = replacement
        if duplicates:
            LOGGER.warning("Replaced %s duplicate transaction ids during bulk load", duplicates)
        LOGGER.info("Store replaced with %s transactions", len(replacement))
