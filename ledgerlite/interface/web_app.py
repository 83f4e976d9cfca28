"""Mini README: FastAPI-powered JSON interface for Ledgerlite.

Structure:
    * create_application - application factory wiring routes to a session.

The interface replaces the browser widget's event handlers: submitting the
form, pressing delete and clicking a filter button each map to one route.
Responses carry data only; turning them into markup is left to a client.
"""

from __future__ import annotations

from typing import Dict, Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from ..configuration import LedgerSettings, get_settings
from ..errors import LedgerError, PersistFailure
from ..ledger import KNOWN_CATEGORIES, TransactionFilter, validate_description_length
from ..logging_utils import configure_root_logger, get_logger
from ..session import LedgerSession, open_session
from .schemas import FilterSelection, TransactionCandidate

LOGGER = get_logger(__name__)


def _error_response(error: LedgerError, status_code: int = 422) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"detail": str(error), "error": type(error).__name__},
    )


def create_application(
    session: Optional[LedgerSession] = None,
    settings: Optional[LedgerSettings] = None,
) -> FastAPI:
    """Create the FastAPI application bound to a single ledger session."""

    settings = settings or get_settings()
    configure_root_logger(settings.log_level)
    ledger = session or open_session(settings)

    app = FastAPI(title="Ledgerlite", version="0.1.0")
    app.state.session = ledger

    @app.exception_handler(LedgerError)
    async def ledger_error_handler(request: Request, error: LedgerError) -> JSONResponse:
        """Translate validation failures into 422 responses."""

        LOGGER.info("Rejected %s %s: %s", request.method, request.url.path, error)
        return _error_response(error)

    @app.get("/transactions")
    def list_transactions(filter: Optional[str] = None) -> Dict[str, object]:
        """Return the visible transactions plus global totals."""

        selector = TransactionFilter.from_str(filter) if filter else ledger.current_filter
        transactions = [transaction.as_dict() for transaction in ledger.store.list(selector)]
        LOGGER.debug("Listing %s transactions for filter %s", len(transactions), selector.value)
        return {
            "filter": selector.value,
            "transactions": transactions,
            "summary": ledger.summary().as_dict(),
        }

    @app.post("/transactions", status_code=201)
    def add_transaction(candidate: TransactionCandidate) -> Dict[str, object]:
        """Validate and record a transaction, then persist the snapshot."""

        description = validate_description_length(candidate.description)
        payload: Dict[str, object] = {"persisted": True}
        try:
            transaction = ledger.add_transaction(
                description, candidate.amount, candidate.category, candidate.type
            )
        except PersistFailure as error:
            transaction = error.transaction
            payload.update(persisted=False, warning=str(error))
        payload["transaction"] = transaction.as_dict()
        payload["display_amount"] = transaction.display_amount
        return payload

    @app.delete("/transactions/{transaction_id}")
    def delete_transaction(transaction_id: int) -> Dict[str, object]:
        """Delete a transaction; unknown ids succeed without changes."""

        payload: Dict[str, object] = {"id": transaction_id, "persisted": True}
        existed = transaction_id in ledger.store
        try:
            payload["removed"] = ledger.delete_transaction(transaction_id)
        except PersistFailure as error:
            payload.update(removed=existed, persisted=False, warning=str(error))
        return payload

    @app.post("/filter")
    def select_filter(selection: FilterSelection) -> Dict[str, object]:
        """Change the active filter and return the matching transactions."""

        selector = ledger.select_filter(selection.filter)
        return {
            "filter": selector.value,
            "transactions": [transaction.as_dict() for transaction in ledger.visible_transactions()],
        }

    @app.get("/summary")
    def summary() -> Dict[str, object]:
        """Return income, expense and balance for the whole ledger."""

        return ledger.summary().as_dict()

    @app.get("/categories")
    def categories() -> Dict[str, object]:
        """List the category labels offered by the input form."""

        return {"categories": list(KNOWN_CATEGORIES)}

    return app
