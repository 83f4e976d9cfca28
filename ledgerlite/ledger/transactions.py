"""Mini README: Value records describing ledger entries and derived totals.

Structure:
    * TransactionType - enum representing income versus expense entries.
    * TransactionFilter - enum describing which entries a view shows.
    * Transaction - frozen dataclass storing one recorded entry.
    * LedgerSummary - income, expense and balance triple.
    * parse_amount / parse_description - coercion helpers shared by the store
      and the snapshot decoder.
    * validate_description_length - stricter length rule used by the input
      layers (HTTP and CLI) before calling the store.

Records are immutable once created; corrections are made by deleting and
re-adding. The helpers raise the ledger error types so callers can tell
which field was rejected.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from numbers import Real
from typing import Dict, Mapping

from ..errors import InvalidAmount, InvalidDescription, InvalidFilter, InvalidTransactionType

DESCRIPTION_MIN_LENGTH = 3
DESCRIPTION_MAX_LENGTH = 50

KNOWN_CATEGORIES = (
    "food",
    "transport",
    "entertainment",
    "utilities",
    "shopping",
    "health",
    "salary",
    "freelance",
    "other",
)


class TransactionType(str, Enum):
    """Enumerate the supported transaction kinds."""

    INCOME = "income"
    EXPENSE = "expense"

    @classmethod
    def from_str(cls, value: object) -> "TransactionType":
        """Coerce arbitrary casing into a valid transaction type."""

        if isinstance(value, cls):
            return value
        try:
            normalised = str(value).strip().lower()
            return cls(normalised)
        except ValueError as error:
            raise InvalidTransactionType(f"Unsupported transaction type: {value}") from error


class TransactionFilter(str, Enum):
    """Selector restricting which transactions a view lists."""

    ALL = "all"
    INCOME = "income"
    EXPENSE = "expense"

    @classmethod
    def from_str(cls, value: object) -> "TransactionFilter":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError as error:
            raise InvalidFilter(f"Unsupported filter: {value}") from error

    def matches(self, transaction: "Transaction") -> bool:
        if self is TransactionFilter.ALL:
            return True
        return transaction.type.value == self.value


def parse_amount(value: object) -> float:
    """Return ``value`` as a positive finite float or raise ``InvalidAmount``."""

    # bool is a Real subclass but never a meaningful amount
    if isinstance(value, bool) or value is None:
        raise InvalidAmount(f"Amount must be a number, got {value!r}")
    if isinstance(value, Real):
        amount = float(value)
    elif isinstance(value, str):
        try:
            amount = float(value.strip())
        except ValueError as error:
            raise InvalidAmount(f"Amount must be a number, got {value!r}") from error
    else:
        raise InvalidAmount(f"Amount must be a number, got {value!r}")
    if not math.isfinite(amount):
        raise InvalidAmount(f"Amount must be finite, got {value!r}")
    if amount <= 0:
        raise InvalidAmount(f"Amount must be greater than zero, got {value!r}")
    return amount


def parse_description(value: object) -> str:
    """Trim ``value`` and reject blank descriptions."""

    if value is None:
        raise InvalidDescription("Description is required")
    description = str(value).strip()
    if not description:
        raise InvalidDescription("Description must not be empty")
    return description


def validate_description_length(value: object) -> str:
    """Apply the 3-50 character rule enforced by the input layers."""

    description = parse_description(value)
    if not DESCRIPTION_MIN_LENGTH <= len(description) <= DESCRIPTION_MAX_LENGTH:
        raise InvalidDescription(
            f"Description must be between {DESCRIPTION_MIN_LENGTH} and "
            f"{DESCRIPTION_MAX_LENGTH} characters"
        )
    return description


def format_currency(value: float, *, signed: bool = False) -> str:
    """Render ``value`` with two decimals, e.g. ``$4.50`` or ``-$4.50``."""

    sign = "-" if value < 0 else ("+" if signed and value > 0 else "")
    return f"{sign}${abs(value):.2f}"


@dataclass(frozen=True, slots=True)
class Transaction:
    """Represent a single income or expense entry."""

    id: int
    description: str
    amount: float
    category: str
    type: TransactionType
    date: str

    @property
    def signed_amount(self) -> float:
        """Amount with the sign implied by the transaction type."""

        return self.amount if self.type is TransactionType.INCOME else -self.amount

    @property
    def display_amount(self) -> str:
        """Two-decimal amount prefixed with ``+`` or ``-`` for list rows."""

        sign = "+" if self.type is TransactionType.INCOME else "-"
        return f"{sign}${self.amount:.2f}"

    def as_dict(self) -> Dict[str, object]:
        """Export the transaction with serialisable values."""

        return {
            "id": self.id,
            "description": self.description,
            "amount": self.amount,
            "category": self.category,
            "type": self.type.value,
            "date": self.date,
        }

    @classmethod
    def from_dict(cls, payload: Mapping[str, object]) -> "Transaction":
        """Rebuild a transaction from ``as_dict`` output, validating every field."""

        raw_id = payload["id"]
        if isinstance(raw_id, bool) or not isinstance(raw_id, int):
            raise ValueError(f"Transaction id must be an integer, got {raw_id!r}")
        return cls(
            id=raw_id,
            description=parse_description(payload["description"]),
            amount=parse_amount(payload["amount"]),
            category=str(payload["category"]),
            type=TransactionType.from_str(payload["type"]),
            date=str(payload["date"]),
        )


@dataclass(frozen=True, slots=True)
class LedgerSummary:
    """Aggregate totals derived from every transaction in a store."""

    income: float = 0.0
    expense: float = 0.0

    @property
    def balance(self) -> float:
        return self.income - self.expense

    @property
    def balance_trend(self) -> str:
        """Classify the balance as ``positive``, ``negative`` or ``zero``."""

        if self.balance > 0:
            return "positive"
        if self.balance < 0:
            return "negative"
        return "zero"

    def as_dict(self) -> Dict[str, object]:
        return {
            "income": self.income,
            "expense": self.expense,
            "balance": self.balance,
            "display": {
                "income": format_currency(self.income),
                "expense": format_currency(self.expense),
                "balance": format_currency(self.balance),
            },
            "trend": self.balance_trend,
        }
