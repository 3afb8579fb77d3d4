"""Summary aggregation and categorical breakdowns over the transaction list.

Everything here is a pure function of its inputs: the summary is recomputed
from the full list on each render rather than maintained incrementally.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, Sequence, Tuple

import pandas as pd

from .config import ESSENTIAL_TARGET_RATIO
from .models import ENUM_FIELDS, TRANSACTION_FIELDS, ExpenseType, Transaction

FRAME_COLUMNS = ['id'] + TRANSACTION_FIELDS
GROUPABLE_FIELDS = ('category', 'payment_method', 'specification')


@dataclass(frozen=True)
class FinancialSummary:
    total_spent: float
    essential_spent: float
    non_essential_spent: float
    balance: float
    income: float
    paid_total: float
    pending_total: float


class BalanceStatus(str, Enum):
    POSITIVE = "positive"
    NEGATIVE = "negative"
    ZERO = "zero"


class PaymentStatus(str, Enum):
    ALL_PAID = "all_paid"
    NONE_PAID = "none_paid"
    SOME_PENDING = "some_pending"


class EssentialRatioStatus(str, Enum):
    WITHIN_TARGET = "within_target"
    OVER_TARGET = "over_target"


def transactions_to_frame(transactions: Sequence[Transaction]) -> pd.DataFrame:
    """Build a DataFrame with one row per transaction, in input order.

    Enum columns hold their display labels.  The column set is fixed so an
    empty list still yields a frame the aggregations can run on.
    """
    rows = []
    for t in transactions:
        row = {'id': t.id, **t.field_values()}
        for field in ENUM_FIELDS:
            row[field] = row[field].value
        rows.append(row)
    df = pd.DataFrame(rows, columns=FRAME_COLUMNS)
    df['amount'] = pd.to_numeric(df['amount'], errors='coerce').fillna(0.0).astype(float)
    df['paid'] = df['paid'].astype(bool)
    return df


def compute_summary(transactions: Sequence[Transaction], income: float) -> FinancialSummary:
    """Aggregate spending totals and the resulting balance.

    ``income`` is taken as-is (zero and negative values are allowed).
    """
    df = transactions_to_frame(transactions)
    amounts = df['amount']
    total_spent = float(amounts.sum())
    essential_spent = float(amounts[df['type'] == ExpenseType.ESSENTIAL.value].sum())
    non_essential_spent = float(amounts[df['type'] == ExpenseType.NON_ESSENTIAL.value].sum())
    paid_total = float(amounts[df['paid']].sum())
    pending_total = float(amounts[~df['paid']].sum())
    income = float(income)

    return FinancialSummary(
        total_spent=total_spent,
        essential_spent=essential_spent,
        non_essential_spent=non_essential_spent,
        balance=income - total_spent,
        income=income,
        paid_total=paid_total,
        pending_total=pending_total,
    )


def group_totals_by(transactions: Sequence[Transaction], field: str) -> List[Tuple[str, float]]:
    """Sum amounts per distinct value of ``field``.

    Groups are listed in order of first appearance, which drives chart
    legend and axis ordering.
    """
    if field not in GROUPABLE_FIELDS:
        raise ValueError(f"Cannot group by '{field}'; expected one of {', '.join(GROUPABLE_FIELDS)}")
    df = transactions_to_frame(transactions)
    if df.empty:
        return []
    grouped = df.groupby(field, sort=False)['amount'].sum()
    return [(str(label), float(total)) for label, total in grouped.items()]


def essential_breakdown(summary: FinancialSummary) -> List[Tuple[str, float]]:
    return [
        (ExpenseType.ESSENTIAL.value, summary.essential_spent),
        (ExpenseType.NON_ESSENTIAL.value, summary.non_essential_spent),
    ]


def balance_status(summary: FinancialSummary) -> BalanceStatus:
    if summary.balance > 0:
        return BalanceStatus.POSITIVE
    if summary.balance < 0:
        return BalanceStatus.NEGATIVE
    return BalanceStatus.ZERO


def payment_status(transactions: Sequence[Transaction]) -> PaymentStatus:
    # An empty list is "none paid", never "all paid".
    if transactions and all(t.paid for t in transactions):
        return PaymentStatus.ALL_PAID
    if all(not t.paid for t in transactions):
        return PaymentStatus.NONE_PAID
    return PaymentStatus.SOME_PENDING


def essential_ratio(summary: FinancialSummary) -> Optional[float]:
    """Share of spending that is essential, or ``None`` with no spending."""
    if summary.total_spent == 0:
        return None
    return summary.essential_spent / summary.total_spent


def essential_ratio_status(
    summary: FinancialSummary, target: float = ESSENTIAL_TARGET_RATIO
) -> EssentialRatioStatus:
    """Compare the essential share against ``target``.

    With no spending there is nothing over target, so the status is
    ``WITHIN_TARGET``.
    """
    ratio = essential_ratio(summary)
    if ratio is None or ratio <= target:
        return EssentialRatioStatus.WITHIN_TARGET
    return EssentialRatioStatus.OVER_TARGET


BALANCE_MESSAGES: Dict[BalanceStatus, str] = {
    BalanceStatus.POSITIVE: "Positive balance! 😎",
    BalanceStatus.NEGATIVE: "Negative balance! 😬",
    BalanceStatus.ZERO: "Balance at zero! 😐",
}

PAYMENT_MESSAGES: Dict[PaymentStatus, str] = {
    PaymentStatus.ALL_PAID: "All purchases paid! ✅",
    PaymentStatus.NONE_PAID: "No purchases paid! ⚠️",
    PaymentStatus.SOME_PENDING: "Some purchases pending! ⚠️",
}

RATIO_MESSAGES: Dict[EssentialRatioStatus, str] = {
    EssentialRatioStatus.WITHIN_TARGET: "Essential spending target met! 🥳",
    EssentialRatioStatus.OVER_TARGET: "Essential spending above target! 😱",
}


def status_messages(
    summary: FinancialSummary,
    transactions: Sequence[Transaction],
    target: float = ESSENTIAL_TARGET_RATIO,
) -> Dict[str, str]:
    """Banner texts for the balance, payment and essential-ratio checks."""
    return {
        'balance': BALANCE_MESSAGES[balance_status(summary)],
        'payment': PAYMENT_MESSAGES[payment_status(transactions)],
        'essential_ratio': RATIO_MESSAGES[essential_ratio_status(summary, target)],
    }
