import pytest

from spending_dashboard.models import Category, ExpenseType, PaymentMethod, Specification
from spending_dashboard.store import TransactionStore
from spending_dashboard.summary import (
    BalanceStatus,
    EssentialRatioStatus,
    PaymentStatus,
    balance_status,
    compute_summary,
    essential_breakdown,
    essential_ratio,
    essential_ratio_status,
    group_totals_by,
    payment_status,
    status_messages,
    transactions_to_frame,
)


def _values(**overrides):
    values = {
        'date': '2024-03-05',
        'specification': Specification.FIXED_EXPENSE,
        'type': ExpenseType.ESSENTIAL,
        'payment_method': PaymentMethod.DEBIT,
        'category': Category.GROCERIES,
        'amount': 10.0,
        'paid': False,
        'description': '',
    }
    values.update(overrides)
    return values


def _build(rows):
    store = TransactionStore()
    for row in rows:
        store.insert(_values(**row))
    return store.list()


def _sample():
    return _build([
        {'amount': 100.0, 'type': ExpenseType.ESSENTIAL, 'paid': True, 'category': Category.BILLS},
        {'amount': 50.0, 'type': ExpenseType.NON_ESSENTIAL, 'paid': False, 'category': Category.LEISURE,
         'payment_method': PaymentMethod.CREDIT},
        {'amount': 30.25, 'type': ExpenseType.ESSENTIAL, 'paid': False, 'category': Category.BILLS,
         'specification': Specification.URGENCY},
    ])


def test_compute_summary_totals():
    summary = compute_summary(_sample(), 1000)
    assert summary.total_spent == pytest.approx(180.25)
    assert summary.essential_spent == pytest.approx(130.25)
    assert summary.non_essential_spent == pytest.approx(50.0)
    assert summary.paid_total == pytest.approx(100.0)
    assert summary.pending_total == pytest.approx(80.25)
    assert summary.balance == pytest.approx(819.75)
    assert summary.income == 1000


def test_summary_partitions_add_up():
    summary = compute_summary(_sample(), 0)
    assert summary.essential_spent + summary.non_essential_spent == pytest.approx(summary.total_spent)
    assert summary.paid_total + summary.pending_total == pytest.approx(summary.total_spent)


@pytest.mark.parametrize('income', [-250.0, 0.0, 5000.0])
def test_balance_is_income_minus_spent(income):
    summary = compute_summary(_sample(), income)
    assert summary.balance == pytest.approx(income - summary.total_spent)


def test_empty_list_summary():
    summary = compute_summary([], -42.5)
    assert summary.total_spent == 0
    assert summary.essential_spent == 0
    assert summary.non_essential_spent == 0
    assert summary.paid_total == 0
    assert summary.pending_total == 0
    assert summary.balance == -42.5
    assert payment_status([]) == PaymentStatus.NONE_PAID


def test_inserting_pending_essential_transaction_moves_totals():
    store = TransactionStore(_sample())
    before = compute_summary(store.list(), 500)
    store.insert(_values(amount=120.50, type=ExpenseType.ESSENTIAL, paid=False))
    after = compute_summary(store.list(), 500)
    assert after.total_spent - before.total_spent == pytest.approx(120.50)
    assert after.essential_spent - before.essential_spent == pytest.approx(120.50)
    assert after.pending_total - before.pending_total == pytest.approx(120.50)
    assert after.paid_total == pytest.approx(before.paid_total)


def test_group_totals_by_category_first_seen_order():
    transactions = _build([
        {'amount': 100, 'category': Category.RESTAURANT},
        {'amount': 50, 'category': Category.RESTAURANT},
        {'amount': 30, 'category': Category.GYM},
    ])
    assert group_totals_by(transactions, 'category') == [
        (Category.RESTAURANT.value, 150.0),
        (Category.GYM.value, 30.0),
    ]


def test_group_order_is_not_sorted():
    transactions = _build([
        {'amount': 5, 'payment_method': PaymentMethod.PIX_CASH},
        {'amount': 500, 'payment_method': PaymentMethod.CREDIT},
        {'amount': 7, 'payment_method': PaymentMethod.PIX_CASH},
        {'amount': 1, 'payment_method': PaymentMethod.DEBIT},
    ])
    labels = [label for label, _ in group_totals_by(transactions, 'payment_method')]
    assert labels == ['Pix/Cash', 'Credit', 'Debit']


@pytest.mark.parametrize('field', ['category', 'payment_method', 'specification'])
def test_group_totals_sum_to_total_spent(field):
    transactions = _sample()
    total = sum(value for _, value in group_totals_by(transactions, field))
    assert total == pytest.approx(compute_summary(transactions, 0).total_spent)


def test_group_totals_empty_and_invalid_field():
    assert group_totals_by([], 'category') == []
    with pytest.raises(ValueError):
        group_totals_by(_sample(), 'amount')


def test_essential_breakdown_table():
    summary = compute_summary(_sample(), 0)
    assert essential_breakdown(summary) == [
        ('Essential', pytest.approx(130.25)),
        ('Non-essential', pytest.approx(50.0)),
    ]


def test_balance_status():
    assert balance_status(compute_summary(_sample(), 1000)) == BalanceStatus.POSITIVE
    assert balance_status(compute_summary(_sample(), 10)) == BalanceStatus.NEGATIVE
    assert balance_status(compute_summary([], 0)) == BalanceStatus.ZERO


def test_payment_status_variants():
    assert payment_status(_build([{'paid': True}, {'paid': True}])) == PaymentStatus.ALL_PAID
    assert payment_status(_build([{'paid': False}, {'paid': False}])) == PaymentStatus.NONE_PAID
    assert payment_status(_sample()) == PaymentStatus.SOME_PENDING


def test_essential_ratio_status_threshold():
    at_target = _build([
        {'amount': 70, 'type': ExpenseType.ESSENTIAL},
        {'amount': 30, 'type': ExpenseType.NON_ESSENTIAL},
    ])
    over = _build([
        {'amount': 71, 'type': ExpenseType.ESSENTIAL},
        {'amount': 29, 'type': ExpenseType.NON_ESSENTIAL},
    ])
    assert essential_ratio_status(compute_summary(at_target, 0)) == EssentialRatioStatus.WITHIN_TARGET
    assert essential_ratio_status(compute_summary(over, 0)) == EssentialRatioStatus.OVER_TARGET
    assert essential_ratio_status(compute_summary(over, 0), target=0.8) == EssentialRatioStatus.WITHIN_TARGET


def test_essential_ratio_with_no_spending_is_within_target():
    summary = compute_summary([], 100)
    assert essential_ratio(summary) is None
    assert essential_ratio_status(summary) == EssentialRatioStatus.WITHIN_TARGET


def test_status_messages_keys():
    messages = status_messages(compute_summary([], 0), [])
    assert set(messages) == {'balance', 'payment', 'essential_ratio'}
    assert 'zero' in messages['balance']
    assert 'No purchases paid' in messages['payment']


def test_transactions_to_frame_keeps_order_and_columns():
    transactions = _sample()
    df = transactions_to_frame(transactions)
    assert list(df['id']) == [t.id for t in transactions]
    assert df.loc[1, 'category'] == Category.LEISURE.value
    empty = transactions_to_frame([])
    assert empty.empty
    assert 'amount' in empty.columns
