"""Mini README: Core package initializer for Ledgerlite.

This module exposes convenience imports that allow callers to reach the
ledger, its session wrapper and the logging helper without needing to know
the exact module structure. Web framework imports stay out of this module so
the core can be used without FastAPI being loaded.
"""

from .logging_utils import get_logger
from .session import LedgerSession, open_session

__all__ = ["LedgerSession", "get_logger", "open_session"]
