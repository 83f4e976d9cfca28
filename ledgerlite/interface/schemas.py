"""Mini README: Request payloads accepted by the HTTP interface.

Amounts and types are accepted loosely here and validated by the ledger
itself so the same rules apply to every caller.
"""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, Field


class TransactionCandidate(BaseModel):
    """Fields a user submits when recording a transaction."""

    description: Optional[str] = Field(None, description="What the entry is for.")
    amount: Any = Field(None, description="Positive amount, number or numeric string.")
    category: str = Field("other", description="Opaque category label.")
    type: str = Field("expense", description="Either income or expense.")


class FilterSelection(BaseModel):
    """Body of a filter change request."""

    filter: str = Field(..., description="One of all, income or expense.")
