"""Mini README: Entry point CLI for Ledgerlite.

This script exposes a Typer CLI that starts the FastAPI service with
configurable host, port and production flags, and offers quick commands to
record, delete, list and total transactions against the same file-backed
snapshot the service uses.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
import uvicorn

from ledgerlite.configuration import LedgerSettings, get_settings
from ledgerlite.errors import LedgerError, PersistFailure
from ledgerlite.ledger import validate_description_length
from ledgerlite.logging_utils import configure_root_logger
from ledgerlite.session import LedgerSession, open_session

cli = typer.Typer(help="Record income and expenses and serve the Ledgerlite API.")

DATA_DIR_OPTION = typer.Option(None, "--data-dir", help="Directory holding the snapshot.")


def _open(data_dir: Optional[Path]) -> LedgerSession:
    settings = get_settings()
    if data_dir is not None:
        settings = LedgerSettings(data_directory=data_dir)
    configure_root_logger(settings.log_level)
    return open_session(settings)


@cli.command()
def run(
    host: str = typer.Option(None, help="Host interface to bind."),
    port: int = typer.Option(None, help="Port to listen on."),
    production: bool = typer.Option(
        False, help="Use production server settings (disable auto-reload)."
    ),
) -> None:
    """Start the FastAPI application using uvicorn."""

    settings = get_settings()
    effective_host = host or settings.interface_host
    effective_port = port or settings.interface_port
    configure_root_logger(settings.log_level)

    # 0.0.0.0 cannot be opened in a browser, so point at localhost instead.
    browser_host = "127.0.0.1" if effective_host in {"0.0.0.0", "::"} else effective_host
    typer.echo(
        f"Starting Ledgerlite on {effective_host}:{effective_port}.\n"
        f"API available at http://{browser_host}:{effective_port}/transactions"
    )
    uvicorn.run(
        "ledgerlite.interface.web_app:create_application",
        host=effective_host,
        port=effective_port,
        factory=True,
        reload=not production,
    )


@cli.command()
def add(
    description: str = typer.Argument(..., help="What the entry is for (3-50 characters)."),
    amount: str = typer.Argument(..., help="Positive amount."),
    category: str = typer.Option("other", help="Category label."),
    type: str = typer.Option("expense", "--type", help="income or expense."),
    data_dir: Optional[Path] = DATA_DIR_OPTION,
) -> None:
    """Record a transaction."""

    session = _open(data_dir)
    try:
        clean_description = validate_description_length(description)
        transaction = session.add_transaction(clean_description, amount, category, type)
    except PersistFailure as error:
        typer.echo(f"Warning: {error}", err=True)
        raise typer.Exit(code=1) from error
    except LedgerError as error:
        typer.echo(f"Error: {error}", err=True)
        raise typer.Exit(code=1) from error
    typer.echo(f"Added {transaction.id}: {transaction.description} {transaction.display_amount}")


@cli.command()
def remove(
    transaction_id: int = typer.Argument(..., help="Identifier of the transaction to delete."),
    data_dir: Optional[Path] = DATA_DIR_OPTION,
) -> None:
    """Delete a transaction; unknown ids are ignored."""

    session = _open(data_dir)
    try:
        removed = session.delete_transaction(transaction_id)
    except PersistFailure as error:
        typer.echo(f"Warning: {error}", err=True)
        raise typer.Exit(code=1) from error
    typer.echo(f"Removed {transaction_id}" if removed else f"No transaction {transaction_id}")


@cli.command(name="list")
def list_transactions(
    filter: str = typer.Option("all", "--filter", help="all, income or expense."),
    data_dir: Optional[Path] = DATA_DIR_OPTION,
) -> None:
    """Print transactions matching the filter in the order they were added."""

    session = _open(data_dir)
    try:
        session.select_filter(filter)
    except LedgerError as error:
        typer.echo(f"Error: {error}", err=True)
        raise typer.Exit(code=1) from error
    transactions = list(session.visible_transactions())
    if not transactions:
        typer.echo("No transactions to display.")
        return
    for transaction in transactions:
        typer.echo(
            f"{transaction.id}  {transaction.date}  {transaction.description}"
            f"  [{transaction.category}]  {transaction.display_amount}"
        )


@cli.command()
def summary(data_dir: Optional[Path] = DATA_DIR_OPTION) -> None:
    """Print income, expense and balance totals."""

    totals = _open(data_dir).summary().as_dict()
    display = totals["display"]
    typer.echo(f"Income:  {display['income']}")
    typer.echo(f"Expense: {display['expense']}")
    typer.echo(f"Balance: {display['balance']}")


if __name__ == "__main__":
    cli()
