"""Mini README: Interactive text menu driving a single ledger session.

Structure:
    * MENU_OPTIONS - ordered labels printed before every prompt.
    * MenuSession - owns one ``Ledger`` and maps menu choices to handlers.

All terminal I/O lives here. Each numeric prompt asks again until the
answer parses and passes the ledger's own amount check, so malformed or
negative values never reach the ledger. Not-found errors from the ledger
are reported and the menu carries on.
"""

from __future__ import annotations

from typing import Callable, Dict, List, Optional

import typer

from ..finance import EditableField, InvalidAmountError, Ledger, Transaction, TransactionType
from ..finance.transaction import validate_amount
from ..logging_utils import get_logger
from .formatting import (
    RULE_WIDTH,
    TRANSACTION_HEADER,
    format_money,
    format_monthly_table,
    format_summary,
    format_transaction,
)

LOGGER = get_logger(__name__)

MENU_OPTIONS: List[str] = [
    "Add Transaction",
    "View All Transactions",
    "View by Category",
    "Show Summary",
    "Edit Transaction",
    "Delete Transaction",
    "Monthly Report",
    "Exit",
]

EXIT_CHOICE = len(MENU_OPTIONS)


class MenuSession:
    """Run the menu loop against a ledger supplied by the caller."""

    def __init__(self, ledger: Ledger, *, currency_symbol: str = "$") -> None:
        self.ledger = ledger
        self.currency_symbol = currency_symbol
        self._handlers: Dict[int, Callable[[], None]] = {
            1: self.add_transaction,
            2: self.view_all_transactions,
            3: self.view_by_category,
            4: self.show_summary,
            5: self.edit_transaction,
            6: self.delete_transaction,
            7: self.monthly_report,
        }

    def run(self) -> None:
        """Loop until the operator picks the exit option."""

        typer.echo("=== Personal Expense Tracker ===")
        while True:
            self._show_menu()
            choice = typer.prompt("Choose an option", type=int)
            if choice == EXIT_CHOICE:
                typer.echo("Thank you for using Expense Tracker!")
                LOGGER.debug("Session closed with %s transactions", len(self.ledger))
                return
            handler = self._handlers.get(choice)
            if handler is None:
                typer.echo("Invalid choice. Please try again.")
                continue
            handler()

    def _show_menu(self) -> None:
        typer.echo("\n--- Menu ---")
        for number, label in enumerate(MENU_OPTIONS, start=1):
            typer.echo(f"{number}. {label}")

    def _money(self, amount: float) -> str:
        return format_money(amount, self.currency_symbol)

    def _render(self, transaction: Transaction) -> str:
        return format_transaction(transaction, self.currency_symbol)

    def _prompt_text(self, label: str) -> str:
        # An empty default lets descriptions and categories be left blank.
        return typer.prompt(label, default="", show_default=False)

    def _prompt_amount(self, label: str) -> float:
        """Ask until the answer is a finite, non-negative number."""

        while True:
            try:
                return validate_amount(typer.prompt(label, type=float))
            except InvalidAmountError:
                typer.echo("Please enter a positive amount.")

    def _prompt_type(self) -> TransactionType:
        while True:
            choice = typer.prompt("Choose type", type=int)
            if choice in (1, 2):
                return TransactionType.from_str(str(choice))
            typer.echo("Please choose 1 or 2.")

    def add_transaction(self) -> None:
        typer.echo("\n--- Add New Transaction ---")
        description = self._prompt_text("Description")
        amount = self._prompt_amount(f"Amount ({self.currency_symbol})")
        category = self._prompt_text("Category")
        typer.echo("Transaction Type:")
        typer.echo("1. Income")
        typer.echo("2. Expense")
        transaction_type = self._prompt_type()
        transaction = self.ledger.record(description, amount, category, transaction_type)
        typer.echo(f"Transaction added successfully! ID: {transaction.transaction_id}")

    def view_all_transactions(self) -> None:
        typer.echo("\n--- All Transactions ---")
        if self.ledger.is_empty:
            typer.echo("No transactions found.")
            return
        typer.echo(TRANSACTION_HEADER)
        typer.echo("-" * RULE_WIDTH)
        for transaction in self.ledger:
            typer.echo(self._render(transaction))
        typer.echo(f"\nTotal transactions: {len(self.ledger)}")

    def view_by_category(self) -> None:
        typer.echo("\n--- Transactions by Category ---")
        if self.ledger.is_empty:
            typer.echo("No transactions found.")
            return
        for group in self.ledger.category_breakdown():
            typer.echo(f"\nCategory: {group.category}")
            typer.echo("-" * RULE_WIDTH)
            for transaction in group.transactions:
                typer.echo(self._render(transaction))
            typer.echo(f"Category Total: {self._money(group.net_total)}")

    def show_summary(self) -> None:
        typer.echo("\n--- Financial Summary ---")
        if self.ledger.is_empty:
            typer.echo("No transactions found.")
            return
        for line in format_summary(self.ledger.summary(), self.currency_symbol):
            typer.echo(line)

    def edit_transaction(self) -> None:
        typer.echo("\n--- Edit Transaction ---")
        if self.ledger.is_empty:
            typer.echo("No transactions to edit.")
            return
        transaction = self._prompt_existing("Enter transaction ID to edit")
        if transaction is None:
            return
        typer.echo(f"Current transaction: {self._render(transaction)}")
        typer.echo("\nWhat would you like to edit?")
        typer.echo("1. Description")
        typer.echo("2. Amount")
        typer.echo("3. Category")
        choice = typer.prompt("Choose", type=int)
        try:
            field = EditableField.from_str(str(choice))
        except ValueError:
            typer.echo("Invalid choice.")
            return

        new_value: object
        if field is EditableField.AMOUNT:
            new_value = self._prompt_amount(f"New amount ({self.currency_symbol})")
        else:
            new_value = self._prompt_text(f"New {field.value}")
        self.ledger.edit_field(transaction.transaction_id, field, new_value)
        typer.echo("Transaction updated successfully!")

    def delete_transaction(self) -> None:
        typer.echo("\n--- Delete Transaction ---")
        if self.ledger.is_empty:
            typer.echo("No transactions to delete.")
            return
        transaction = self._prompt_existing("Enter transaction ID to delete")
        if transaction is None:
            return
        typer.echo(f"Transaction to delete: {self._render(transaction)}")
        if not typer.confirm("Are you sure?", default=False):
            typer.echo("Deletion cancelled.")
            return
        self.ledger.delete(transaction.transaction_id)
        typer.echo("Transaction deleted successfully!")

    def monthly_report(self) -> None:
        typer.echo("\n--- Monthly Report ---")
        if self.ledger.is_empty:
            typer.echo("No transactions found.")
            return
        for line in format_monthly_table(self.ledger.monthly_report(), self.currency_symbol):
            typer.echo(line)

    def _prompt_existing(self, label: str) -> Optional[Transaction]:
        """Ask for an identifier and return its transaction, or ``None``."""

        transaction_id = typer.prompt(label).strip()
        transaction = self.ledger.find_by_id(transaction_id)
        if transaction is None:
            typer.echo("Transaction not found.")
        return transaction
