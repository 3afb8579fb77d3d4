"""Inline edit state for transaction table rows.

Each row is either *viewing* (no draft) or *editing* (a :class:`DraftEdit`
exists for its id).  Drafts are independent per id, so several rows can be
edited at once without affecting each other.

Lifecycle of a row::

    viewing --begin_edit--> editing --set_draft_field--> editing
    editing --commit--> viewing   (draft written to the store)
    editing --cancel--> viewing   (draft discarded)

Reading a field while editing returns the draft value if the field was
touched, otherwise the transaction's current value from the store.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Any, Dict, List, Optional, Set

from .errors import NotEditing, NotFound
from .logging_setup import get_logger
from .models import TRANSACTION_FIELDS, coerce_field, zero_value
from .store import TransactionStore

logger = get_logger(__name__)


@dataclass
class DraftEdit:
    """Uncommitted edits for one transaction."""

    transaction_id: str
    values: Dict[str, Any]
    touched_fields: Set[str] = field(default_factory=set)
    is_editing: bool = True


def _check_field(name: str) -> None:
    if name not in TRANSACTION_FIELDS:
        raise ValueError(f"Unknown transaction field '{name}'")


class RowEditor:
    """Per-row edit/view state machine on top of a :class:`TransactionStore`."""

    def __init__(self, store: TransactionStore):
        self._store = store
        self._drafts: Dict[str, DraftEdit] = {}

    def is_editing(self, transaction_id: str) -> bool:
        draft = self._drafts.get(transaction_id)
        return bool(draft and draft.is_editing)

    def editing_ids(self) -> List[str]:
        return list(self._drafts)

    def draft(self, transaction_id: str) -> Optional[DraftEdit]:
        return self._drafts.get(transaction_id)

    def begin_edit(self, transaction_id: str) -> None:
        """Open a draft seeded with the transaction's current values.

        Calling it on a row that is already being edited keeps the existing
        draft.
        """
        if self.is_editing(transaction_id):
            return
        transaction = self._store.get(transaction_id)
        self._drafts[transaction_id] = DraftEdit(
            transaction_id=transaction_id,
            values=transaction.field_values(),
        )
        logger.debug("Editing transaction %s", transaction_id)

    def set_draft_field(self, transaction_id: str, name: str, value: Any) -> None:
        draft = self._drafts.get(transaction_id)
        if draft is None:
            raise NotEditing(transaction_id)
        _check_field(name)
        draft.values[name] = coerce_field(name, value)
        draft.touched_fields.add(name)

    def commit(self, transaction_id: str) -> None:
        """Write the draft to the store and return the row to viewing.

        Raises:
            NotFound: If the transaction does not exist.  Any draft is
                kept so the caller can still cancel it.
            NotEditing: If the transaction exists but has no draft.
        """
        if transaction_id not in self._store:
            raise NotFound(transaction_id)
        if transaction_id not in self._drafts:
            raise NotEditing(transaction_id)
        values = {name: self.field_value(transaction_id, name) for name in TRANSACTION_FIELDS}
        self._store.update(transaction_id, values)
        del self._drafts[transaction_id]
        logger.debug("Committed edit of transaction %s", transaction_id)

    def cancel(self, transaction_id: str) -> None:
        self._drafts.pop(transaction_id, None)

    def discard_missing(self) -> List[str]:
        """Drop drafts whose transaction was removed from the store."""
        orphaned = [tid for tid in self._drafts if tid not in self._store]
        for tid in orphaned:
            del self._drafts[tid]
        return orphaned

    def toggle_paid(self, transaction_id: str, paid: bool) -> None:
        """Set the paid flag: straight to the store when viewing, to the draft when editing."""
        if self.is_editing(transaction_id):
            self.set_draft_field(transaction_id, 'paid', paid)
        else:
            self._store.update(transaction_id, {'paid': paid})

    def field_value(self, transaction_id: str, name: str) -> Any:
        _check_field(name)
        draft = self._drafts.get(transaction_id)
        if draft is not None and name in draft.touched_fields:
            return draft.values[name]
        try:
            return getattr(self._store.get(transaction_id), name)
        except NotFound:
            if draft is not None:
                return draft.values[name]
            return zero_value(name)

    def text_value(self, transaction_id: str, name: str) -> str:
        value = self.field_value(transaction_id, name)
        if isinstance(value, Enum):
            return value.value
        if isinstance(value, date):
            return value.isoformat()
        return value if isinstance(value, str) else ''

    def number_value(self, transaction_id: str, name: str) -> float:
        value = self.field_value(transaction_id, name)
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return float(value)
        return 0.0

    def bool_value(self, transaction_id: str, name: str) -> bool:
        value = self.field_value(transaction_id, name)
        return value if isinstance(value, bool) else False
