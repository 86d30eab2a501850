"""Domain-specific exceptions raised by the in-memory ledger."""

from __future__ import annotations


class LedgerError(Exception):
    """Base class for every error raised by the finance package."""


class TransactionNotFoundError(LedgerError, LookupError):
    """Raised when an edit, delete or lookup names an unknown identifier."""

    def __init__(self, transaction_id: str) -> None:
        super().__init__(f"Transaction {transaction_id} not found")
        self.transaction_id = transaction_id


class InvalidAmountError(LedgerError, ValueError):
    """Raised when an amount is negative or not a finite number."""


class DuplicateTransactionError(LedgerError, ValueError):
    """Raised when adding a transaction whose identifier is already live."""
