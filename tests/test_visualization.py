import plotly.graph_objects as go

from spending_dashboard import visualization as viz


def test_empty_tables_give_placeholder_figure():
    for fig in (
        viz.create_category_pie_chart([]),
        viz.create_payment_method_chart([]),
        viz.create_specification_chart([]),
        viz.create_essential_bar_chart([('Essential', 0.0), ('Non-essential', 0.0)]),
    ):
        assert isinstance(fig, go.Figure)
        assert fig.layout.title.text == "No data to display"


def test_category_pie_keeps_table_order():
    table = [('🛒 Groceries', 30.0), ('🏋️ Gym', 150.0)]
    fig = viz.create_category_pie_chart(table)
    assert list(fig.data[0].labels) == ['🛒 Groceries', '🏋️ Gym']
    assert list(fig.data[0].values) == [30.0, 150.0]


def test_payment_method_pie_keeps_first_seen_order():
    table = [('Pix/Cash', 12.0), ('Credit', 500.0), ('Debit', 1.0)]
    fig = viz.create_payment_method_chart(table)
    assert isinstance(fig.data[0], go.Pie)
    assert list(fig.data[0].labels) == ['Pix/Cash', 'Credit', 'Debit']
    assert fig.data[0].sort is False
    assert fig.layout.title.text == "Spending by payment method"


def test_bar_chart_axis_follows_first_seen_order():
    table = [('Urgency', 12.0), ('Education', 500.0), ('Goal 1', 1.0)]
    fig = viz.create_specification_chart(table)
    assert list(fig.layout.yaxis.categoryarray) == ['Urgency', 'Education', 'Goal 1']
    assert fig.layout.title.text == "Spending by specification"


def test_essential_chart_uses_fixed_colors():
    fig = viz.create_essential_bar_chart([('Essential', 70.0), ('Non-essential', 30.0)])
    colors = {trace.name: trace.marker.color for trace in fig.data}
    assert colors == viz.ESSENTIAL_COLORS
