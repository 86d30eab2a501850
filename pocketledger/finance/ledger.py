"""Mini README: In-memory ledger of income and expense transactions.

Structure:
    * Ledger - owns the ordered transaction store, CRUD operations and the
      aggregated views used by the menu.

Transactions live in a dict keyed by identifier. Dicts keep insertion order,
so listing and category grouping follow the order entries were recorded
while lookups stay constant time. The ledger never performs I/O; failures
are raised as ``pocketledger.finance.errors`` exceptions and leave the
stored state untouched.
"""

from __future__ import annotations

from typing import Dict, Iterable, Iterator, List, Optional, Union

from ..logging_utils import get_logger
from . import reports
from .errors import DuplicateTransactionError, TransactionNotFoundError
from .transaction import (
    DEFAULT_ID_LENGTH,
    EditableField,
    Transaction,
    TransactionType,
    validate_amount,
)

LOGGER = get_logger(__name__)


class Ledger:
    """Manage the session's transactions and their aggregate views."""

    def __init__(
        self,
        transactions: Optional[Iterable[Transaction]] = None,
        *,
        id_length: int = DEFAULT_ID_LENGTH,
    ) -> None:
        self._transactions: Dict[str, Transaction] = {}
        self._id_length = id_length
        for transaction in transactions or ():
            self.add(transaction)
        LOGGER.debug("Ledger initialised with %s transactions", len(self._transactions))

    def __len__(self) -> int:
        return len(self._transactions)

    def __iter__(self) -> Iterator[Transaction]:
        return iter(self._transactions.values())

    @property
    def is_empty(self) -> bool:
        return not self._transactions

    def add(self, transaction: Transaction) -> Transaction:
        """Append a transaction, keeping identifiers unique and amounts valid.

        Checks run before anything is stored, so a rejected transaction
        leaves the ledger unchanged.
        """

        if transaction.transaction_id in self._transactions:
            raise DuplicateTransactionError(
                f"Transaction {transaction.transaction_id} already exists."
            )
        amount = validate_amount(transaction.amount)
        transaction_type = transaction.transaction_type
        if not isinstance(transaction_type, TransactionType):
            transaction_type = TransactionType.from_str(str(transaction_type))
        transaction.amount = amount
        transaction.transaction_type = transaction_type
        self._transactions[transaction.transaction_id] = transaction
        LOGGER.info(
            "Recorded %s %s of %.2f in '%s'",
            transaction.transaction_type.value,
            transaction.transaction_id,
            transaction.amount,
            transaction.category,
        )
        return transaction

    def record(
        self,
        description: str,
        amount: float,
        category: str,
        transaction_type: Union[TransactionType, str],
    ) -> Transaction:
        """Create a transaction dated today and append it."""

        transaction = Transaction.create(
            description,
            amount,
            category,
            transaction_type,
            id_length=self._id_length,
        )
        return self.add(transaction)

    def list_transactions(self) -> List[Transaction]:
        """Return transactions in the order they were recorded."""

        return list(self._transactions.values())

    def find_by_id(self, transaction_id: str) -> Optional[Transaction]:
        """Return the matching transaction, or ``None`` when absent."""

        transaction = self._transactions.get(transaction_id)
        LOGGER.debug("Lookup for %s %s", transaction_id, "hit" if transaction else "missed")
        return transaction

    def get_transaction(self, transaction_id: str) -> Transaction:
        """Retrieve a transaction, raising informative errors when missing."""

        transaction = self.find_by_id(transaction_id)
        if transaction is None:
            LOGGER.warning("Transaction %s not found", transaction_id)
            raise TransactionNotFoundError(transaction_id)
        return transaction

    def edit_field(
        self,
        transaction_id: str,
        field: Union[EditableField, str],
        new_value: object,
    ) -> Transaction:
        """Change the description, amount or category of one transaction.

        Everything is validated before the record is touched, so a rejected
        edit leaves the ledger exactly as it was.
        """

        transaction = self.get_transaction(transaction_id)
        if not isinstance(field, EditableField):
            field = EditableField.from_str(str(field))

        if field is EditableField.AMOUNT:
            transaction.amount = validate_amount(new_value)
        elif field is EditableField.DESCRIPTION:
            transaction.description = str(new_value)
        else:
            transaction.category = str(new_value)
        LOGGER.info("Edited %s of transaction %s", field.value, transaction_id)
        return transaction

    def delete(self, transaction_id: str) -> Transaction:
        """Remove and return a transaction; the remaining order is unchanged."""

        transaction = self.get_transaction(transaction_id)
        del self._transactions[transaction_id]
        LOGGER.info("Deleted transaction %s", transaction_id)
        return transaction

    def group_by_category(self) -> Dict[str, List[Transaction]]:
        return reports.group_by_category(self)

    def category_net_total(self, category: str) -> float:
        return reports.category_net_total(self, category)

    def category_breakdown(self) -> List[reports.CategoryTotal]:
        return reports.category_breakdown(self)

    def summary(self) -> reports.LedgerSummary:
        return reports.summarise(self)

    def monthly_report(self) -> List[reports.MonthlyTotals]:
        return reports.monthly_report(self)
