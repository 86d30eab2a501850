"""Mini README: Aggregations behind the category, summary and monthly views.

Structure:
    * CategoryTotal - one category with its transactions and signed net total.
    * LedgerSummary - overall income, expenses and net balance.
    * MonthlyTotals - income/expense sums for one ``YYYY-MM`` bucket.
    * group_by_category / category_net_total / category_breakdown /
      summarise / monthly_report - pure functions over transactions.

Category and monthly figures follow two different conventions on purpose.
Category totals are signed nets (income adds, expenses subtract) while the
summary and monthly rows keep income and expenses as separate non-negative
sums and derive the balance from them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, List

from .transaction import Transaction


@dataclass(slots=True)
class CategoryTotal:
    """Transactions sharing a category alongside their signed net total."""

    category: str
    transactions: List[Transaction] = field(default_factory=list)

    @property
    def net_total(self) -> float:
        return sum((transaction.signed_amount for transaction in self.transactions), 0.0)


@dataclass(slots=True, frozen=True)
class LedgerSummary:
    """Gross income and expense sums across the whole ledger."""

    total_income: float
    total_expenses: float

    @property
    def net_balance(self) -> float:
        return self.total_income - self.total_expenses

    @property
    def is_positive(self) -> bool:
        """True when income covers expenses; a zero balance counts as positive."""

        return self.net_balance >= 0


@dataclass(slots=True)
class MonthlyTotals:
    """Income and expenses recorded within one calendar month."""

    month_key: str
    income: float = 0.0
    expenses: float = 0.0

    @property
    def balance(self) -> float:
        return self.income - self.expenses


def group_by_category(transactions: Iterable[Transaction]) -> Dict[str, List[Transaction]]:
    """Partition transactions by category.

    Categories appear in the order they were first seen and each group keeps
    the relative order of its transactions.
    """

    groups: Dict[str, List[Transaction]] = {}
    for transaction in transactions:
        groups.setdefault(transaction.category, []).append(transaction)
    return groups


def category_net_total(transactions: Iterable[Transaction], category: str) -> float:
    """Signed net of one category; unknown categories total ``0.0``."""

    return sum(
        (transaction.signed_amount for transaction in transactions if transaction.category == category),
        0.0,
    )


def category_breakdown(transactions: Iterable[Transaction]) -> List[CategoryTotal]:
    return [
        CategoryTotal(category=category, transactions=members)
        for category, members in group_by_category(transactions).items()
    ]


def summarise(transactions: Iterable[Transaction]) -> LedgerSummary:
    """Sum income and expenses separately across ``transactions``."""

    total_income = 0.0
    total_expenses = 0.0
    for transaction in transactions:
        if transaction.is_income:
            total_income += transaction.amount
        else:
            total_expenses += transaction.amount
    return LedgerSummary(total_income=total_income, total_expenses=total_expenses)


def monthly_report(transactions: Iterable[Transaction]) -> List[MonthlyTotals]:
    """Bucket transactions by ``YYYY-MM`` and return rows oldest first.

    The keys are year-first and zero padded, so a plain string sort is
    chronological.
    """

    buckets: Dict[str, MonthlyTotals] = {}
    for transaction in transactions:
        key = transaction.month_key
        totals = buckets.get(key)
        if totals is None:
            totals = buckets[key] = MonthlyTotals(month_key=key)
        if transaction.is_income:
            totals.income += transaction.amount
        else:
            totals.expenses += transaction.amount
    return [buckets[key] for key in sorted(buckets)]
