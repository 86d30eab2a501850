"""Mini README: Finance core for the PocketLedger expense tracker.

This package holds the in-memory ledger, the transaction entity and the
reporting helpers that summarise spending by category and by month. Nothing
in here performs I/O; the interactive menu in ``pocketledger.interface``
collects input and renders the values these modules return.
"""

from .errors import (
    DuplicateTransactionError,
    InvalidAmountError,
    LedgerError,
    TransactionNotFoundError,
)
from .ledger import Ledger
from .reports import CategoryTotal, LedgerSummary, MonthlyTotals
from .transaction import EditableField, Transaction, TransactionType

__all__ = [
    "CategoryTotal",
    "DuplicateTransactionError",
    "EditableField",
    "InvalidAmountError",
    "Ledger",
    "LedgerError",
    "LedgerSummary",
    "MonthlyTotals",
    "Transaction",
    "TransactionNotFoundError",
    "TransactionType",
]
