"""Mini README: Interactive interfaces (web/CLI) for Ledgerlite.

Exports the FastAPI application factory that serves the ledger as JSON.
The command line entry point lives in ``main_ledger.py`` at the project root.
"""

from .web_app import create_application

__all__ = ["create_application"]
