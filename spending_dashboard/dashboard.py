"""Streamlit app for the Spending Dashboard.

Record spending, see the month's totals against income, check the three
status banners and browse the charts.  Transactions are edited inline in
the table: each row has its own draft that is saved or discarded
independently of the others.

To run the dashboard from the command line::

    streamlit run spending_dashboard/dashboard.py

or use ``run_dashboard.py`` at the project root.
"""

from __future__ import annotations

import os
import sys
from datetime import date
from typing import Any, Dict, Optional

import streamlit as st
from streamlit.errors import StreamlitAPIException

# Support both package execution and ``streamlit run spending_dashboard/dashboard.py``.
if __package__:
    from . import visualization as viz
    from .config import ensure_data_directories
    from .formatting import format_currency, format_date
    from .logging_setup import configure_logging, get_logger
    from .models import Category, ExpenseType, PaymentMethod, Specification
    from .session import DashboardSession
    from .summary import BalanceStatus, balance_status
else:
    CURRENT_DIR = os.path.dirname(os.path.abspath(__file__))
    PARENT_DIR = os.path.dirname(CURRENT_DIR)
    if PARENT_DIR not in sys.path:
        sys.path.insert(0, PARENT_DIR)
    from spending_dashboard import visualization as viz  # type: ignore
    from spending_dashboard.config import ensure_data_directories  # type: ignore
    from spending_dashboard.formatting import format_currency, format_date  # type: ignore
    from spending_dashboard.logging_setup import configure_logging, get_logger  # type: ignore
    from spending_dashboard.models import Category, ExpenseType, PaymentMethod, Specification  # type: ignore
    from spending_dashboard.session import DashboardSession  # type: ignore
    from spending_dashboard.summary import BalanceStatus, balance_status  # type: ignore

logger = get_logger(__name__)

SESSION_KEY = 'dashboard_session'
TOAST_KEY = 'pending_toast'

ENUM_OPTIONS = {
    'specification': [s.value for s in Specification],
    'type': [t.value for t in ExpenseType],
    'payment_method': [p.value for p in PaymentMethod],
    'category': [c.value for c in Category],
}

COLUMN_LABELS = [
    "Date", "Specification", "Type", "Payment", "Category", "Amount", "Paid", "Description", "Actions",
]
COLUMN_WIDTHS = [1.2, 1.4, 1.2, 1.1, 1.4, 1.0, 0.6, 2.0, 1.0]


def _rerun() -> None:
    rerun_fn = getattr(st, 'rerun', None) or getattr(st, 'experimental_rerun', None)
    if rerun_fn:
        rerun_fn()


def _queue_toast(message: str) -> None:
    """Show ``message`` as a toast on the next script run."""
    st.session_state[TOAST_KEY] = message


def _show_pending_toast() -> None:
    message = st.session_state.pop(TOAST_KEY, None)
    if message:
        st.toast(message)


def get_session() -> DashboardSession:
    """Return the session stored in ``st.session_state``, loading it once."""
    session = st.session_state.get(SESSION_KEY)
    if session is None:
        session = DashboardSession.load()
        st.session_state[SESSION_KEY] = session
    return session


def _widget_key(kind: str, transaction_id: str) -> str:
    return f"{kind}_{transaction_id}"


# ---------------------------------------------------------------------------
# Widget callbacks
# ---------------------------------------------------------------------------


def _on_income_change() -> None:
    get_session().set_income(st.session_state['income_input'])


def _on_draft_change(transaction_id: str, field: str, key: str) -> None:
    value = st.session_state[key]
    try:
        get_session().editor.set_draft_field(transaction_id, field, value)
    except ValueError as exc:
        logger.warning("Invalid value for %s: %s", field, exc)


def _on_paid_toggle(transaction_id: str, key: str) -> None:
    get_session().toggle_paid(transaction_id, bool(st.session_state[key]))


# ---------------------------------------------------------------------------
# Sections
# ---------------------------------------------------------------------------


def render_header(session: DashboardSession) -> None:
    col1, col2, col3 = st.columns([3, 1, 1])
    with col1:
        st.title("💰 Spending Tracker")
        st.markdown("Your smart and friendly spending sheet")
    with col2:
        st.number_input(
            "Monthly income",
            value=float(session.income),
            step=100.0,
            key='income_input',
            on_change=_on_income_change,
        )
    with col3:
        if st.button("➕ New transaction", use_container_width=True):
            st.session_state['show_add_transaction'] = True


def render_summary_cards(session: DashboardSession) -> None:
    summary = session.summary()
    messages = session.messages()
    col1, col2, col3, col4 = st.columns(4)

    with col1:
        st.metric("Total spent", format_currency(summary.total_spent))

    with col2:
        st.metric("Balance", format_currency(summary.balance))
        st.caption(messages['balance'])

    with col3:
        st.markdown("**Essential vs non-essential**")
        st.markdown(f"Essential: {format_currency(summary.essential_spent)}")
        st.markdown(f"Non-essential: {format_currency(summary.non_essential_spent)}")

    with col4:
        st.markdown("**Payment status**")
        st.markdown(f"Paid: {format_currency(summary.paid_total)}")
        st.markdown(f"Pending: {format_currency(summary.pending_total)}")
        st.caption(messages['payment'])

    trend = "📈" if balance_status(summary) != BalanceStatus.NEGATIVE else "📉"
    b1, b2, b3 = st.columns(3)
    b1.info(f"{trend} {messages['balance']}")
    b2.info(messages['payment'])
    b3.info(messages['essential_ratio'])


def render_charts(session: DashboardSession) -> None:
    st.subheader("📈 Charts")
    if not len(session.store):
        st.info("Add transactions to see the charts! 📊")
        return
    tables = session.chart_tables()
    col1, col2 = st.columns(2)
    with col1:
        st.plotly_chart(viz.create_category_pie_chart(tables['category']), use_container_width=True)
        st.plotly_chart(viz.create_payment_method_chart(tables['payment_method']), use_container_width=True)
    with col2:
        st.plotly_chart(viz.create_essential_bar_chart(tables['essential']), use_container_width=True)
        st.plotly_chart(viz.create_specification_chart(tables['specification']), use_container_width=True)


def render_add_transaction_form(session: DashboardSession) -> Optional[str]:
    """Render the add form; returns the new id when a transaction was added."""
    if not st.session_state.get('show_add_transaction', False):
        return None

    st.subheader("➕ New transaction")
    with st.form("add_transaction_form", clear_on_submit=True):
        col1, col2 = st.columns(2)
        with col1:
            tx_date = st.date_input("Date", value=date.today())
            specification = st.selectbox("Specification", options=ENUM_OPTIONS['specification'])
            tx_type = st.selectbox("Type", options=ENUM_OPTIONS['type'])
            payment_method = st.selectbox("Payment method", options=ENUM_OPTIONS['payment_method'])
        with col2:
            category = st.selectbox("Category", options=ENUM_OPTIONS['category'])
            amount = st.number_input("Amount", min_value=0.0, step=0.01)
            paid = st.checkbox("Paid", value=False)
            description = st.text_input("Description")

        submitted = st.form_submit_button("Add transaction")
        cancelled = st.form_submit_button("Cancel")

    if cancelled:
        st.session_state['show_add_transaction'] = False
        _rerun()
        return None
    if not submitted:
        return None

    values: Dict[str, Any] = {
        'date': tx_date,
        'specification': specification,
        'type': tx_type,
        'payment_method': payment_method,
        'category': category,
        'amount': float(amount),
        'paid': bool(paid),
        'description': description.strip(),
    }
    transaction_id = session.add_transaction(values)
    if transaction_id is None:
        st.error("Amount must be greater than zero.")
        return None
    st.session_state['show_add_transaction'] = False
    _queue_toast("Transaction added! 💰")
    return transaction_id


def _render_view_row(session: DashboardSession, transaction, cols) -> None:
    cols[0].write(format_date(transaction.date))
    cols[1].write(transaction.specification.value)
    cols[2].write(transaction.type.value)
    cols[3].write(transaction.payment_method.value)
    cols[4].write(transaction.category.value)
    cols[5].write(format_currency(transaction.amount))
    key = _widget_key('paid_view', transaction.id)
    cols[6].checkbox(
        "Paid",
        value=transaction.paid,
        key=key,
        label_visibility="collapsed",
        on_change=_on_paid_toggle,
        args=(transaction.id, key),
    )
    cols[7].write(transaction.description or "-")
    edit_col, delete_col = cols[8].columns(2)
    if edit_col.button("✏️", key=_widget_key('edit', transaction.id), help="Edit"):
        session.editor.begin_edit(transaction.id)
        _rerun()
    if delete_col.button("🗑️", key=_widget_key('delete', transaction.id), help="Delete"):
        if session.delete_transaction(transaction.id):
            _queue_toast("Transaction removed! 🗑️")
        _rerun()


def _render_edit_row(session: DashboardSession, transaction_id: str, cols) -> None:
    editor = session.editor

    def draft_widget(widget, field: str, **kwargs):
        key = _widget_key(f"draft_{field}", transaction_id)
        return widget(
            field,
            key=key,
            label_visibility="collapsed",
            on_change=_on_draft_change,
            args=(transaction_id, field, key),
            **kwargs,
        )

    current_date = editor.field_value(transaction_id, 'date') or date.today()
    with cols[0]:
        draft_widget(st.date_input, 'date', value=current_date)
    for idx, field in ((1, 'specification'), (2, 'type'), (3, 'payment_method'), (4, 'category')):
        options = ENUM_OPTIONS[field]
        current = editor.text_value(transaction_id, field)
        with cols[idx]:
            draft_widget(
                st.selectbox, field,
                options=options,
                index=options.index(current) if current in options else 0,
            )
    with cols[5]:
        draft_widget(st.number_input, 'amount', value=editor.number_value(transaction_id, 'amount'), step=0.01)
    key = _widget_key('paid_edit', transaction_id)
    cols[6].checkbox(
        "Paid",
        value=editor.bool_value(transaction_id, 'paid'),
        key=key,
        label_visibility="collapsed",
        on_change=_on_paid_toggle,
        args=(transaction_id, key),
    )
    with cols[7]:
        draft_widget(st.text_input, 'description', value=editor.text_value(transaction_id, 'description'))
    save_col, cancel_col = cols[8].columns(2)
    if save_col.button("✅", key=_widget_key('save', transaction_id), help="Save"):
        if not session.commit_edit(transaction_id):
            st.warning("This transaction no longer exists.")
        _rerun()
    if cancel_col.button("❌", key=_widget_key('cancel', transaction_id), help="Cancel"):
        editor.cancel(transaction_id)
        _rerun()


def render_transaction_table(session: DashboardSession) -> None:
    st.subheader("📊 Transactions")
    transactions = session.transactions()
    if not transactions:
        st.info("No transactions recorded yet! 📝 Add your first one to start tracking your spending.")
        return

    header = st.columns(COLUMN_WIDTHS)
    for col, label in zip(header, COLUMN_LABELS):
        col.markdown(f"**{label}**")

    for transaction in transactions:
        cols = st.columns(COLUMN_WIDTHS)
        if session.editor.is_editing(transaction.id):
            _render_edit_row(session, transaction.id, cols)
        else:
            _render_view_row(session, transaction, cols)


def setup_page_config() -> None:
    try:
        st.set_page_config(
            page_title="Spending Tracker",
            page_icon="💰",
            layout="wide",
            initial_sidebar_state="collapsed",
        )
    except StreamlitAPIException:
        # Already configured upstream
        pass


def main() -> None:
    """Entry point for the Streamlit app."""
    configure_logging()
    ensure_data_directories()
    setup_page_config()
    _show_pending_toast()
    session = get_session()

    render_header(session)
    if render_add_transaction_form(session):
        _rerun()
    render_summary_cards(session)
    render_charts(session)
    render_transaction_table(session)


if __name__ == "__main__":
    main()
