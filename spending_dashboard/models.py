"""Transaction record and the fixed vocabularies it draws from.

Every enum value is the label shown to the user, so members serialise to
JSON and render in select boxes without a separate lookup table.
"""

from __future__ import annotations

import uuid
from dataclasses import asdict, dataclass, fields
from datetime import date, datetime
from enum import Enum
from typing import Any, Dict, List

import pandas as pd


class Specification(str, Enum):
    FIXED_EXPENSE = "Fixed expense"
    EDUCATION = "Education"
    INVESTMENT_SAVINGS = "Investment/Savings"
    GOAL_1 = "Goal 1"
    GOAL_2 = "Goal 2"
    EMERGENCY_RESERVE = "Emergency reserve"
    URGENCY = "Urgency"
    OTHER = "Other"


class ExpenseType(str, Enum):
    ESSENTIAL = "Essential"
    NON_ESSENTIAL = "Non-essential"


class PaymentMethod(str, Enum):
    CREDIT = "Credit"
    DEBIT = "Debit"
    PIX_CASH = "Pix/Cash"
    INVESTMENT = "Investment"


class Category(str, Enum):
    GYM = "🏋️ Gym"
    FOOD = "🍔 Food"
    UBER = "🚗 Uber"
    GROCERIES = "🛒 Groceries"
    INSTALLMENT = "💳 Installment"
    BILLS = "💡 Bills"
    SUBSCRIPTIONS = "📺 Subscriptions"
    EDUCATION = "📚 Education"
    ELECTRONICS = "💻 Electronics"
    CLOTHING = "👗 Clothing"
    RESTAURANT = "🍽 Restaurant"
    LEISURE = "🎮 Leisure"


# Editable fields, in table column order
TRANSACTION_FIELDS: List[str] = [
    'date',
    'specification',
    'type',
    'payment_method',
    'category',
    'amount',
    'paid',
    'description',
]

ENUM_FIELDS = {
    'specification': Specification,
    'type': ExpenseType,
    'payment_method': PaymentMethod,
    'category': Category,
}

TEXT_FIELDS = {'date', 'description', *ENUM_FIELDS}
NUMBER_FIELDS = {'amount'}
BOOLEAN_FIELDS = {'paid'}


def new_transaction_id() -> str:
    return uuid.uuid4().hex


def _coerce_date(value: Any) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str) and value.strip():
        return date.fromisoformat(value.strip()[:10])
    raise ValueError(f"Invalid date value: {value!r}")


def _coerce_amount(value: Any) -> float:
    if isinstance(value, bool):
        raise ValueError(f"Invalid amount value: {value!r}")
    try:
        amount = float(value)
    except (TypeError, ValueError):
        raise ValueError(f"Invalid amount value: {value!r}") from None
    if pd.isna(amount):
        raise ValueError("Amount cannot be NaN")
    return amount


def coerce_field(field: str, value: Any) -> Any:
    """Convert raw form/JSON input into the semantic type of ``field``.

    Raises:
        ValueError: If the field is unknown or the value cannot be converted.
    """
    if field == 'date':
        return _coerce_date(value)
    if field in ENUM_FIELDS:
        return ENUM_FIELDS[field](value)
    if field == 'amount':
        return _coerce_amount(value)
    if field == 'paid':
        if not isinstance(value, bool):
            raise ValueError(f"Paid flag must be a boolean, got {value!r}")
        return value
    if field == 'description':
        return '' if value is None else str(value)
    raise ValueError(f"Unknown transaction field '{field}'")


def coerce_fields(values: Dict[str, Any]) -> Dict[str, Any]:
    """Coerce every entry of a (partial) field mapping; all or nothing."""
    return {field: coerce_field(field, value) for field, value in values.items()}


def zero_value(field: str) -> Any:
    """Neutral value used when neither a draft nor a transaction has ``field``."""
    if field in NUMBER_FIELDS:
        return 0.0
    if field in BOOLEAN_FIELDS:
        return False
    if field in TEXT_FIELDS:
        return ''
    raise ValueError(f"Unknown transaction field '{field}'")


@dataclass
class Transaction:
    """One recorded spending movement."""

    id: str
    date: date
    specification: Specification
    type: ExpenseType
    payment_method: PaymentMethod
    category: Category
    amount: float
    paid: bool = False
    description: str = ''

    @classmethod
    def create(cls, transaction_id: str, values: Dict[str, Any]) -> 'Transaction':
        missing = [f for f in TRANSACTION_FIELDS if f not in values and f not in ('paid', 'description')]
        if missing:
            raise ValueError("Missing transaction fields: " + ", ".join(missing))
        return cls(id=transaction_id, **coerce_fields(values))

    def field_values(self) -> Dict[str, Any]:
        """All editable fields (everything except ``id``)."""
        return {f.name: getattr(self, f.name) for f in fields(self) if f.name != 'id'}

    def apply(self, values: Dict[str, Any]) -> None:
        """Apply already-coerced field values in place."""
        for field, value in values.items():
            setattr(self, field, value)

    def to_record(self) -> Dict[str, Any]:
        record = asdict(self)
        record['date'] = self.date.isoformat()
        for field in ENUM_FIELDS:
            record[field] = getattr(self, field).value
        return record

    @classmethod
    def from_record(cls, record: Dict[str, Any]) -> 'Transaction':
        transaction_id = record.get('id')
        if not transaction_id:
            raise ValueError("Transaction record has no id")
        values = {k: v for k, v in record.items() if k in TRANSACTION_FIELDS}
        return cls.create(str(transaction_id), values)
