"""Mini README: Tests for the category, summary and monthly aggregations."""

from __future__ import annotations

from datetime import date

import pytest

from pocketledger.finance import Ledger, Transaction, TransactionType

INCOME = TransactionType.INCOME
EXPENSE = TransactionType.EXPENSE


def _entry(
    transaction_id: str,
    transaction_type: TransactionType,
    amount: float,
    category: str = "General",
    occurred_on: date = date(2024, 1, 10),
) -> Transaction:
    return Transaction(
        transaction_id=transaction_id,
        transaction_type=transaction_type,
        description=transaction_id,
        category=category,
        amount=amount,
        occurred_on=occurred_on,
    )


def test_group_by_category_uses_first_appearance_order() -> None:
    ledger = Ledger(
        [
            _entry("t1", EXPENSE, 5, "Food"),
            _entry("t2", INCOME, 50, "Work"),
            _entry("t3", EXPENSE, 7, "Food"),
            _entry("t4", EXPENSE, 2, "Transport"),
        ]
    )

    groups = ledger.group_by_category()

    assert list(groups) == ["Food", "Work", "Transport"]
    assert [transaction.transaction_id for transaction in groups["Food"]] == ["t1", "t3"]


def test_category_net_total_is_signed() -> None:
    """Income adds and expenses subtract within a category."""

    ledger = Ledger([_entry("t1", INCOME, 100, "Side"), _entry("t2", EXPENSE, 30, "Side")])

    assert ledger.category_net_total("Side") == pytest.approx(70.0)
    assert ledger.category_net_total("Unknown") == 0.0


def test_category_breakdown_matches_grouping() -> None:
    ledger = Ledger(
        [
            _entry("t1", EXPENSE, 20, "Food"),
            _entry("t2", INCOME, 100, "Work"),
            _entry("t3", EXPENSE, 5.5, "Food"),
        ]
    )

    breakdown = ledger.category_breakdown()

    assert [group.category for group in breakdown] == ["Food", "Work"]
    assert breakdown[0].net_total == pytest.approx(-25.5)
    assert breakdown[1].net_total == pytest.approx(100.0)


def test_summary_keeps_gross_sums_and_derives_balance() -> None:
    ledger = Ledger(
        [
            _entry("t1", INCOME, 1200.25, "Work"),
            _entry("t2", EXPENSE, 300.0, "Rent"),
            _entry("t3", EXPENSE, 1000.0, "Travel"),
        ]
    )

    summary = ledger.summary()

    assert summary.total_income == pytest.approx(1200.25)
    assert summary.total_expenses == pytest.approx(1300.0)
    assert summary.net_balance == pytest.approx(summary.total_income - summary.total_expenses)
    assert not summary.is_positive


def test_summary_of_empty_ledger_is_zero_and_positive() -> None:
    summary = Ledger().summary()

    assert summary.total_income == 0.0
    assert summary.total_expenses == 0.0
    assert summary.net_balance == 0.0
    assert summary.is_positive


def test_monthly_report_fills_missing_side_with_zero() -> None:
    ledger = Ledger(
        [
            _entry("feb", EXPENSE, 200, occurred_on=date(2024, 2, 3)),
            _entry("jan", INCOME, 500, occurred_on=date(2024, 1, 20)),
        ]
    )

    rows = ledger.monthly_report()

    assert [row.month_key for row in rows] == ["2024-01", "2024-02"]
    assert (rows[0].income, rows[0].expenses, rows[0].balance) == (500.0, 0.0, 500.0)
    assert (rows[1].income, rows[1].expenses, rows[1].balance) == (0.0, 200.0, -200.0)


def test_monthly_report_sums_within_bucket_and_sorts_across_years() -> None:
    ledger = Ledger(
        [
            _entry("a", INCOME, 100, occurred_on=date(2024, 11, 1)),
            _entry("b", EXPENSE, 40, occurred_on=date(2024, 11, 30)),
            _entry("c", INCOME, 10, occurred_on=date(2024, 11, 15)),
            _entry("d", EXPENSE, 5, occurred_on=date(2023, 12, 31)),
            _entry("e", INCOME, 1, occurred_on=date(2025, 2, 1)),
        ]
    )

    rows = ledger.monthly_report()

    assert [row.month_key for row in rows] == ["2023-12", "2024-11", "2025-02"]
    november = rows[1]
    assert november.income == pytest.approx(110.0)
    assert november.expenses == pytest.approx(40.0)
    assert november.balance == pytest.approx(70.0)


def test_reports_follow_edits_and_deletes() -> None:
    ledger = Ledger([_entry("t1", INCOME, 100, "Side"), _entry("t2", EXPENSE, 30, "Side")])

    ledger.edit_field("t2", "category", "Food")
    ledger.delete("t1")

    assert list(ledger.group_by_category()) == ["Food"]
    assert ledger.summary().net_balance == pytest.approx(-30.0)
    assert len(ledger.monthly_report()) == 1
