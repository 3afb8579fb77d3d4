"""JSON persistence for the dashboard state (transactions + monthly income)."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List, Sequence, Tuple

from .config import DEFAULT_INCOME, STATE_PATH
from .logging_setup import get_logger
from .models import Transaction

logger = get_logger(__name__)


def _default_state() -> Tuple[List[Transaction], float]:
    return [], DEFAULT_INCOME


def load_state(path: Path | None = None) -> Tuple[List[Transaction], float]:
    """Read persisted transactions and income.

    A missing or unreadable file yields an empty list and the default
    income.  Individual malformed records are skipped.
    """
    target = path or STATE_PATH
    if not target.exists():
        return _default_state()
    try:
        with target.open('r', encoding='utf-8') as handle:
            data = json.load(handle)
    except (json.JSONDecodeError, OSError) as exc:
        logger.warning("Could not read state file %s: %s", target, exc)
        return _default_state()
    if not isinstance(data, dict):
        logger.warning("Ignoring state file %s: expected an object", target)
        return _default_state()

    records = data.get('transactions') or []
    if not isinstance(records, list):
        records = []
    transactions: List[Transaction] = []
    seen_ids = set()
    for record in records:
        if not isinstance(record, dict):
            continue
        try:
            transaction = Transaction.from_record(record)
        except (ValueError, TypeError) as exc:
            logger.warning("Skipping malformed transaction record %r: %s", record.get('id'), exc)
            continue
        if transaction.id in seen_ids:
            logger.warning("Skipping duplicate transaction id %s", transaction.id)
            continue
        seen_ids.add(transaction.id)
        transactions.append(transaction)

    income = data.get('income', DEFAULT_INCOME)
    try:
        income = float(income)
    except (TypeError, ValueError):
        income = DEFAULT_INCOME
    return transactions, income


def save_state(transactions: Sequence[Transaction], income: float, path: Path | None = None) -> None:
    target = path or STATE_PATH
    target.parent.mkdir(parents=True, exist_ok=True)
    payload: Dict[str, Any] = {
        'transactions': [t.to_record() for t in transactions],
        'income': float(income),
    }
    with target.open('w', encoding='utf-8') as handle:
        json.dump(payload, handle, indent=2, sort_keys=True, ensure_ascii=False)
