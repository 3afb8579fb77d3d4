from datetime import date

from spending_dashboard.formatting import format_currency, format_date


def test_format_currency():
    assert format_currency(1234.5, symbol='R$') == 'R$ 1,234.50'
    assert format_currency(-12, symbol='$') == '-$ 12.00'
    assert format_currency(0, symbol='R$') == 'R$ 0.00'


def test_format_date_is_day_first():
    assert format_date(date(2024, 3, 7)) == '07/03/2024'
