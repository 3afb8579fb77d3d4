from datetime import date

import pytest

from spending_dashboard.errors import NotFound, ValidationRejected
from spending_dashboard.models import Category, ExpenseType, PaymentMethod, Specification
from spending_dashboard.store import TransactionStore


def _values(**overrides):
    values = {
        'date': date(2024, 1, 15),
        'specification': 'Education',
        'type': 'Essential',
        'payment_method': 'Credit',
        'category': '📚 Education',
        'amount': 199.9,
        'paid': False,
        'description': 'Course',
    }
    values.update(overrides)
    return values


def test_insert_coerces_labels_and_returns_id():
    store = TransactionStore()
    transaction_id = store.insert(_values())
    transaction = store.get(transaction_id)
    assert transaction.specification is Specification.EDUCATION
    assert transaction.type is ExpenseType.ESSENTIAL
    assert transaction.payment_method is PaymentMethod.CREDIT
    assert transaction.category is Category.EDUCATION
    assert transaction.date == date(2024, 1, 15)


def test_insert_generates_unique_ids_and_keeps_order():
    store = TransactionStore()
    ids = [store.insert(_values(description=str(i))) for i in range(3)]
    assert len(set(ids)) == 3
    assert [t.id for t in store.list()] == ids


@pytest.mark.parametrize('amount', [0, -5])
def test_insert_rejects_non_positive_amount(amount):
    store = TransactionStore()
    store.insert(_values())
    before = store.list()
    with pytest.raises(ValidationRejected):
        store.insert(_values(amount=amount))
    assert store.list() == before


def test_insert_rejects_unknown_labels():
    store = TransactionStore()
    with pytest.raises(ValueError):
        store.insert(_values(category='Travel'))
    assert len(store) == 0


def test_update_is_partial_and_allows_any_amount():
    store = TransactionStore()
    transaction_id = store.insert(_values())
    store.update(transaction_id, {'amount': -3, 'paid': True})
    transaction = store.get(transaction_id)
    assert transaction.amount == -3.0
    assert transaction.paid is True
    assert transaction.description == 'Course'


def test_update_is_all_or_nothing():
    store = TransactionStore()
    transaction_id = store.insert(_values())
    with pytest.raises(ValueError):
        store.update(transaction_id, {'amount': 5, 'type': 'Sometimes'})
    assert store.get(transaction_id).amount == pytest.approx(199.9)


def test_update_and_remove_missing_id():
    store = TransactionStore()
    store.insert(_values())
    before = store.list()
    with pytest.raises(NotFound):
        store.update('missing', {'amount': 1})
    with pytest.raises(NotFound):
        store.remove('missing')
    assert store.list() == before


def test_list_returns_copies():
    store = TransactionStore()
    transaction_id = store.insert(_values())
    store.list()[0].amount = 1.0
    assert store.get(transaction_id).amount == pytest.approx(199.9)


def test_remove():
    store = TransactionStore()
    keep = store.insert(_values())
    drop = store.insert(_values())
    store.remove(drop)
    assert [t.id for t in store.list()] == [keep]
    assert drop not in store
