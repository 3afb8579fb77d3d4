"""In-memory ordered transaction store.

The store owns the transaction list.  Every command either applies fully or
raises before touching state, so callers never observe a half-applied
update.
"""

from __future__ import annotations

from copy import copy
from typing import Any, Dict, Iterable, List, Optional

from .errors import NotFound, ValidationRejected
from .logging_setup import get_logger
from .models import Transaction, coerce_fields, new_transaction_id

logger = get_logger(__name__)


class TransactionStore:
    """Insertion-ordered collection of transactions keyed by id."""

    def __init__(self, transactions: Optional[Iterable[Transaction]] = None):
        self._transactions: List[Transaction] = []
        if transactions:
            self.replace_all(transactions)

    def __len__(self) -> int:
        return len(self._transactions)

    def __contains__(self, transaction_id: object) -> bool:
        return self._find(transaction_id) is not None

    def _find(self, transaction_id: object) -> Optional[Transaction]:
        for transaction in self._transactions:
            if transaction.id == transaction_id:
                return transaction
        return None

    def list(self) -> List[Transaction]:
        """Return copies of all transactions in insertion order."""
        return [copy(t) for t in self._transactions]

    def get(self, transaction_id: str) -> Transaction:
        transaction = self._find(transaction_id)
        if transaction is None:
            raise NotFound(transaction_id)
        return copy(transaction)

    def insert(self, values: Dict[str, Any]) -> str:
        """Create a transaction from ``values`` (no id) and return its new id.

        Raises:
            ValidationRejected: If the amount is not strictly positive.
            ValueError: If a field is missing or malformed.
        """
        values = {k: v for k, v in values.items() if k != 'id'}
        transaction = Transaction.create(new_transaction_id(), values)
        if not transaction.amount > 0:
            raise ValidationRejected(f"Amount must be positive, got {transaction.amount}")
        self._transactions.append(transaction)
        logger.debug("Inserted transaction %s (%.2f)", transaction.id, transaction.amount)
        return transaction.id

    def update(self, transaction_id: str, partial: Dict[str, Any]) -> None:
        """Apply a partial field update.  Amounts are not re-validated here.

        Raises:
            NotFound: If no transaction has ``transaction_id``.
            ValueError: If a field is unknown or a value is malformed.
        """
        transaction = self._find(transaction_id)
        if transaction is None:
            raise NotFound(transaction_id)
        values = coerce_fields({k: v for k, v in partial.items() if k != 'id'})
        transaction.apply(values)
        logger.debug("Updated transaction %s fields %s", transaction_id, sorted(values))

    def remove(self, transaction_id: str) -> None:
        transaction = self._find(transaction_id)
        if transaction is None:
            raise NotFound(transaction_id)
        self._transactions.remove(transaction)
        logger.debug("Removed transaction %s", transaction_id)

    def replace_all(self, transactions: Iterable[Transaction]) -> None:
        """Swap in a full list, e.g. after loading persisted state."""
        loaded = [copy(t) for t in transactions]
        ids = [t.id for t in loaded]
        if len(set(ids)) != len(ids):
            raise ValueError("Duplicate transaction ids")
        self._transactions = loaded
