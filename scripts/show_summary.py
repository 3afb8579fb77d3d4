#!/usr/bin/env python3
"""Print the spending summary and breakdowns from the saved state file."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Optional

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

import pandas as pd

from spending_dashboard.formatting import format_currency
from spending_dashboard.logging_setup import configure_logging
from spending_dashboard.session import DashboardSession


def _print_table(title: str, table) -> None:
    print(f"\n{title}:")
    if not table:
        print("  (none)")
        return
    df = pd.DataFrame(table, columns=['Group', 'Total'])
    df['Total'] = df['Total'].map(format_currency)
    print(df.to_string(index=False))


def main(path: Optional[Path] = None, income: Optional[float] = None) -> None:
    session = DashboardSession.load(path)
    if income is not None:
        session.income = income
    summary = session.summary()

    print(f"Transactions: {len(session.store)}")
    print(f"Income:        {format_currency(summary.income)}")
    print(f"Total spent:   {format_currency(summary.total_spent)}")
    print(f"Essential:     {format_currency(summary.essential_spent)}")
    print(f"Non-essential: {format_currency(summary.non_essential_spent)}")
    print(f"Paid:          {format_currency(summary.paid_total)}")
    print(f"Pending:       {format_currency(summary.pending_total)}")
    print(f"Balance:       {format_currency(summary.balance)}")

    print()
    for message in session.messages().values():
        print(message)

    tables = session.chart_tables()
    _print_table("By category", tables['category'])
    _print_table("By payment method", tables['payment_method'])
    _print_table("By specification", tables['specification'])


if __name__ == '__main__':
    parser = argparse.ArgumentParser(description='Show the spending summary.')
    parser.add_argument('--state', type=Path, default=None, help='Path to the state JSON file')
    parser.add_argument('--income', type=float, default=None, help='Override the saved monthly income')
    args = parser.parse_args()
    configure_logging()
    main(path=args.state, income=args.income)
