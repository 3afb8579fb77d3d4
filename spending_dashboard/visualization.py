"""Plotly figures for the spending dashboard.

Each function takes one of the ``(label, total)`` tables produced by
:mod:`spending_dashboard.summary` and returns a
``plotly.graph_objects.Figure`` ready for ``st.plotly_chart``.  Row order in
the table is kept as-is so legends and axes list groups in the order they
first appeared.
"""

from __future__ import annotations

from typing import Dict, Sequence, Tuple

import pandas as pd
import plotly.express as px
import plotly.graph_objects as go

COLORS = [
    '#10b981', '#3b82f6', '#8b5cf6', '#f59e0b', '#ef4444', '#06b6d4',
    '#84cc16', '#f97316', '#ec4899', '#6366f1', '#14b8a6', '#a855f7',
]

ESSENTIAL_COLORS: Dict[str, str] = {
    'Essential': '#10b981',
    'Non-essential': '#f59e0b',
}

Table = Sequence[Tuple[str, float]]


def _empty_figure() -> go.Figure:
    fig = go.Figure()
    fig.update_layout(title="No data to display")
    return fig


def _table_to_frame(table: Table) -> pd.DataFrame:
    return pd.DataFrame(list(table), columns=["Label", "Value"])


def create_pie_chart(table: Table, title: str | None = None) -> go.Figure:
    """Pie chart of a ``(label, total)`` table.

    Parameters
    ----------
    table : sequence of (label, total)
        Output of ``group_totals_by``.  Slices keep the table order.
    title : str, optional
        Chart title.
    """
    if not table:
        return _empty_figure()
    df = _table_to_frame(table)
    fig = px.pie(df, names="Label", values="Value", color_discrete_sequence=COLORS)
    fig.update_traces(sort=False)
    fig.update_layout(title=title)
    return fig


def create_category_pie_chart(table: Table, title: str | None = None) -> go.Figure:
    return create_pie_chart(table, title=title or "Spending by category")


def create_bar_chart(table: Table, title: str | None = None, horizontal: bool = False) -> go.Figure:
    """Bar chart of a ``(label, total)`` table, one bar per label."""
    if not table:
        return _empty_figure()
    df = _table_to_frame(table)
    if horizontal:
        fig = px.bar(df, x="Value", y="Label", orientation="h", color_discrete_sequence=COLORS)
        fig.update_yaxes(categoryorder="array", categoryarray=list(df["Label"]))
    else:
        fig = px.bar(df, x="Label", y="Value", color_discrete_sequence=COLORS)
        fig.update_xaxes(categoryorder="array", categoryarray=list(df["Label"]))
    fig.update_layout(title=title, xaxis_title=None, yaxis_title=None)
    return fig


def create_essential_bar_chart(table: Table, title: str | None = None) -> go.Figure:
    """Essential vs non-essential bars with fixed colours."""
    if not table or not any(value for _, value in table):
        return _empty_figure()
    df = _table_to_frame(table)
    fig = px.bar(
        df,
        x="Label",
        y="Value",
        color="Label",
        color_discrete_map=ESSENTIAL_COLORS,
    )
    fig.update_layout(title=title or "Essential vs non-essential", showlegend=False, xaxis_title=None, yaxis_title=None)
    return fig


def create_payment_method_chart(table: Table) -> go.Figure:
    return create_pie_chart(table, title="Spending by payment method")


def create_specification_chart(table: Table) -> go.Figure:
    return create_bar_chart(table, title="Spending by specification", horizontal=True)
