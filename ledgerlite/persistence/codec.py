"""Mini README: JSON encoding of the full transaction sequence.

The snapshot is a JSON array whose objects carry ``id``, ``description``,
``amount``, ``category``, ``type`` and ``date``. Decoding is strict: any
structural or field-level problem becomes a ``DecodeFailure``.
"""

from __future__ import annotations

import json
from typing import Iterable, List

from ..errors import DecodeFailure
from ..ledger.transactions import Transaction


def encode_transactions(transactions: Iterable[Transaction]) -> str:
    """Serialise transactions in order as a JSON array."""

    return json.dumps([transaction.as_dict() for transaction in transactions])


def decode_transactions(text: str) -> List[Transaction]:
    """Parse a snapshot produced by ``encode_transactions``."""

    try:
        payload = json.loads(text)
    except (json.JSONDecodeError, TypeError) as error:
        raise DecodeFailure("Snapshot is not valid JSON") from error

    if not isinstance(payload, list):
        raise DecodeFailure("Snapshot must be a JSON array of transactions")

    transactions: List[Transaction] = []
    for position, entry in enumerate(payload):
        if not isinstance(entry, dict):
            raise DecodeFailure(f"Snapshot entry {position} is not an object")
        try:
            transactions.append(Transaction.from_dict(entry))
        except KeyError as error:
            raise DecodeFailure(f"Snapshot entry {position} is missing field {error}") from error
        except ValueError as error:
            raise DecodeFailure(f"Snapshot entry {position} is invalid: {error}") from error
    return transactions
