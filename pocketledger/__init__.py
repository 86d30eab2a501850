"""Mini README: Core package initializer for the PocketLedger expense tracker.

This module exposes convenience imports so callers can reach the ledger and
logging helpers without needing to know the exact module structure. The file
is intentionally lightweight; the interactive menu lives in
``pocketledger.interface`` and is only imported by the entry point script.
"""

from .finance import Ledger, Transaction, TransactionType
from .logging_utils import get_logger

__all__ = ["Ledger", "Transaction", "TransactionType", "get_logger"]
