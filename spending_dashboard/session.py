"""Dashboard session: the single state holder behind the Streamlit page.

``DashboardSession`` wires the transaction store, the row editor and the
monthly income together and saves state after every successful mutation.
Rejected commands are logged and leave both memory and disk untouched.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from .config import DEFAULT_INCOME, ESSENTIAL_TARGET_RATIO
from .edit_state import RowEditor
from .errors import NotEditing, NotFound, ValidationRejected
from .logging_setup import get_logger
from .models import Transaction
from .storage import load_state, save_state
from .store import TransactionStore
from .summary import (
    FinancialSummary,
    compute_summary,
    essential_breakdown,
    group_totals_by,
    status_messages,
)

logger = get_logger(__name__)


class DashboardSession:
    """Owns the transactions, the drafts and the income for one user."""

    def __init__(
        self,
        transactions: Optional[List[Transaction]] = None,
        income: float = DEFAULT_INCOME,
        path: Optional[Path] = None,
        essential_target: float = ESSENTIAL_TARGET_RATIO,
    ):
        self.store = TransactionStore(transactions)
        self.editor = RowEditor(self.store)
        self.income = float(income)
        self.path = path
        self.essential_target = essential_target

    @classmethod
    def load(cls, path: Optional[Path] = None) -> 'DashboardSession':
        transactions, income = load_state(path)
        logger.info("Loaded %d transactions", len(transactions))
        return cls(transactions, income, path=path)

    def save(self) -> None:
        save_state(self.store.list(), self.income, self.path)

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def add_transaction(self, values: Dict[str, Any]) -> Optional[str]:
        """Insert a transaction; returns its id, or ``None`` when rejected."""
        try:
            transaction_id = self.store.insert(values)
        except ValidationRejected as exc:
            logger.warning("Transaction rejected: %s", exc)
            return None
        except ValueError as exc:
            logger.warning("Invalid transaction: %s", exc)
            return None
        self.save()
        logger.info("Added transaction %s", transaction_id)
        return transaction_id

    def update_transaction(self, transaction_id: str, partial: Dict[str, Any]) -> bool:
        try:
            self.store.update(transaction_id, partial)
        except (NotFound, ValueError) as exc:
            logger.warning("Update ignored: %s", exc)
            return False
        self.save()
        return True

    def delete_transaction(self, transaction_id: str) -> bool:
        try:
            self.store.remove(transaction_id)
        except NotFound as exc:
            logger.warning("Delete ignored: %s", exc)
            return False
        self.editor.discard_missing()
        self.save()
        logger.info("Removed transaction %s", transaction_id)
        return True

    def set_income(self, income: float) -> None:
        self.income = float(income)
        self.save()

    def commit_edit(self, transaction_id: str) -> bool:
        try:
            self.editor.commit(transaction_id)
        except (NotFound, NotEditing) as exc:
            logger.warning("Commit ignored: %s", exc)
            return False
        self.save()
        return True

    def toggle_paid(self, transaction_id: str, paid: bool) -> bool:
        editing = self.editor.is_editing(transaction_id)
        try:
            self.editor.toggle_paid(transaction_id, paid)
        except NotFound as exc:
            logger.warning("Paid toggle ignored: %s", exc)
            return False
        if not editing:
            self.save()
        return True

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def transactions(self) -> List[Transaction]:
        return self.store.list()

    def summary(self) -> FinancialSummary:
        return compute_summary(self.store.list(), self.income)

    def messages(self) -> Dict[str, str]:
        transactions = self.store.list()
        return status_messages(compute_summary(transactions, self.income), transactions, self.essential_target)

    def chart_tables(self) -> Dict[str, List[Tuple[str, float]]]:
        transactions = self.store.list()
        return {
            'category': group_totals_by(transactions, 'category'),
            'payment_method': group_totals_by(transactions, 'payment_method'),
            'specification': group_totals_by(transactions, 'specification'),
            'essential': essential_breakdown(compute_summary(transactions, self.income)),
        }
