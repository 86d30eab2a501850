"""Mini README: Text rendering for transactions and report rows.

The ledger hands back full precision floats; rounding to two decimals and
prefixing the currency symbol happen here and nowhere else.
"""

from __future__ import annotations

from typing import List

from ..finance import LedgerSummary, MonthlyTotals, Transaction

TRANSACTION_HEADER = "ID | Date | Amount | Type | Category | Description"
RULE_WIDTH = 55


def format_money(amount: float, symbol: str = "$") -> str:
    """Render ``amount`` with two decimals, keeping the sign ahead of the symbol."""

    sign = "-" if amount < 0 else ""
    return f"{sign}{symbol}{abs(amount):.2f}"


def format_transaction(transaction: Transaction, symbol: str = "$") -> str:
    return " | ".join(
        [
            transaction.transaction_id,
            transaction.occurred_on.isoformat(),
            format_money(transaction.amount, symbol),
            transaction.transaction_type.label,
            transaction.category,
            transaction.description,
        ]
    )


def format_summary(summary: LedgerSummary, symbol: str = "$") -> List[str]:
    lines = [
        f"Total Income: {format_money(summary.total_income, symbol)}",
        f"Total Expenses: {format_money(summary.total_expenses, symbol)}",
        f"Net Balance: {format_money(summary.net_balance, symbol)}",
    ]
    if summary.is_positive:
        lines.append("You're in the positive!")
    else:
        lines.append("You're spending more than you earn.")
    return lines


def format_monthly_table(rows: List[MonthlyTotals], symbol: str = "$") -> List[str]:
    """Render the monthly report as a fixed width table."""

    lines = [
        f"{'Month':<10} | {'Income':<12} | {'Expenses':<12} | {'Balance':<12}",
        "-" * RULE_WIDTH,
    ]
    for row in rows:
        lines.append(
            f"{row.month_key:<10} | "
            f"{format_money(row.income, symbol):<12} | "
            f"{format_money(row.expenses, symbol):<12} | "
            f"{format_money(row.balance, symbol):<12}"
        )
    return lines
