"""Mini README: Transaction entity and the coercion helpers around it.

Structure:
    * TransactionType - enum representing income versus expense entries.
    * EditableField - enum of the fields an edit is allowed to touch.
    * Transaction - dataclass storing one recorded financial event.

Amounts are always non-negative; the sign of an entry is conveyed by its
type. Identifiers and dates are fixed once a transaction is created, only
description, amount and category change afterwards.
"""

from __future__ import annotations

import math
import secrets
from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Dict, Optional, Union

from .errors import InvalidAmountError

DEFAULT_ID_LENGTH = 8


class TransactionType(str, Enum):
    """Enumerate the supported transaction kinds."""

    INCOME = "income"
    EXPENSE = "expense"

    @classmethod
    def from_str(cls, value: str) -> "TransactionType":
        """Coerce arbitrary casing, or the menu numbers 1/2, into a type."""

        try:
            normalised = value.strip().lower()
            normalised = _TYPE_SHORTCUTS.get(normalised, normalised)
            return cls(normalised)
        except (ValueError, AttributeError) as error:
            raise ValueError(f"Unsupported transaction type: {value}") from error

    @property
    def label(self) -> str:
        return self.value.upper()


_TYPE_SHORTCUTS: Dict[str, str] = {"1": "income", "2": "expense"}


class EditableField(str, Enum):
    """Fields that may be changed after a transaction is recorded."""

    DESCRIPTION = "description"
    AMOUNT = "amount"
    CATEGORY = "category"

    @classmethod
    def from_str(cls, value: str) -> "EditableField":
        """Coerce a field name, or the menu numbers 1/2/3, into a field."""

        try:
            normalised = value.strip().lower()
            normalised = _FIELD_SHORTCUTS.get(normalised, normalised)
            return cls(normalised)
        except (ValueError, AttributeError) as error:
            raise ValueError(f"Field '{value}' cannot be edited.") from error


_FIELD_SHORTCUTS: Dict[str, str] = {"1": "description", "2": "amount", "3": "category"}


def validate_amount(value: object) -> float:
    """Return ``value`` as a float, rejecting negative or non-finite input."""

    try:
        amount = float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError) as error:
        raise InvalidAmountError(f"Amount must be numeric, got {value!r}") from error
    if not math.isfinite(amount) or amount < 0:
        raise InvalidAmountError(f"Amount must be a non-negative number, got {value!r}")
    return amount


def generate_transaction_id(length: int = DEFAULT_ID_LENGTH) -> str:
    """Return a random URL-safe token of ``length`` characters.

    Each character carries six bits, so the default eight characters give
    48 bits and collisions stay negligible well past ten thousand entries.
    """

    return secrets.token_urlsafe(length)[:length]


@dataclass(slots=True)
class Transaction:
    """Represent a single income or expense entry."""

    transaction_id: str
    transaction_type: TransactionType
    description: str
    category: str
    amount: float
    occurred_on: date

    @classmethod
    def create(
        cls,
        description: str,
        amount: float,
        category: str,
        transaction_type: Union[TransactionType, str],
        *,
        occurred_on: Optional[date] = None,
        id_length: int = DEFAULT_ID_LENGTH,
    ) -> "Transaction":
        """Build a new transaction with a fresh identifier dated today."""

        if not isinstance(transaction_type, TransactionType):
            transaction_type = TransactionType.from_str(str(transaction_type))
        return cls(
            transaction_id=generate_transaction_id(id_length),
            transaction_type=transaction_type,
            description=str(description),
            category=str(category),
            amount=validate_amount(amount),
            occurred_on=occurred_on or date.today(),
        )

    @property
    def is_income(self) -> bool:
        return self.transaction_type is TransactionType.INCOME

    @property
    def signed_amount(self) -> float:
        """Amount with income positive and expenses negative."""

        return self.amount if self.is_income else -self.amount

    @property
    def month_key(self) -> str:
        """Year-first, zero padded ``YYYY-MM`` bucket used by monthly reports."""

        return f"{self.occurred_on.year:04d}-{self.occurred_on.month:02d}"
