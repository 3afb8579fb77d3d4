"""Exceptions raised by the transaction store and the row editor."""

from __future__ import annotations


class SpendingDashboardError(Exception):
    """Base class for all dashboard errors."""


class ValidationRejected(SpendingDashboardError, ValueError):
    """A new transaction was refused (amount must be strictly positive)."""


class NotFound(SpendingDashboardError, KeyError):
    """No transaction with the given id exists in the store."""

    def __init__(self, transaction_id: str):
        super().__init__(transaction_id)
        self.transaction_id = transaction_id

    def __str__(self) -> str:
        return f"Transaction '{self.transaction_id}' not found"


class NotEditing(SpendingDashboardError):
    """A draft command was sent to a row that is not being edited."""

    def __init__(self, transaction_id: str):
        super().__init__(f"Transaction '{transaction_id}' is not being edited")
        self.transaction_id = transaction_id
