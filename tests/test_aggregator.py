from datetime import date
from decimal import Decimal
from types import SimpleNamespace

from cablequote.schemas.pricing_schemas import DateRange
from cablequote.services.pricing_services import (
    aggregate_by_sales_person,
    aggregate_by_status,
    calendar_month,
    daily_values,
    filter_by_date_range,
    follow_up_date,
)


def line(price, qty, discount=0):
    return SimpleNamespace(
        unit_price=price, discount_percent=discount, quantity_ordered=qty, quantity_requested=qty,
        freight_eligible=False, freight_weight_per_unit=0,
    )


def quote(id, day, status="Open", value=100, sales_person_id=None):
    return SimpleNamespace(
        id=id, quotation_date=day, status=status, sales_person_id=sales_person_id,
        lines=[line(value, 1)],
    )


def test_status_buckets():
    quotes = [
        quote(1, date(2025, 1, 1), "Open", 100),
        quote(2, date(2025, 1, 2), "Open", 50),
        quote(3, date(2025, 1, 3), "Lost", 25),
        quote(4, date(2025, 1, 4), "PO received", 10),
    ]
    summary = aggregate_by_status(quotes)
    assert summary.total.count == 4 and summary.total.value == 185
    assert summary.per_status["Open"].count == 2 and summary.per_status["Open"].value == 150
    assert summary.per_status["Lost"].value == 25
    assert summary.per_status["Expired"].count == 0

def test_unknown_status_counts_only_in_total():
    summary = aggregate_by_status([quote(1, date(2025, 1, 1), "Draft", 40)])
    assert summary.total.count == 1 and summary.total.value == 40
    assert sum(bucket.count for bucket in summary.per_status.values()) == 0

def test_value_is_discounted_goods_total():
    q = quote(1, date(2025, 1, 1))
    q.lines = [line(Decimal("120.50"), 100, 15), line(Decimal("250.75"), 40, 20)]
    assert aggregate_by_status([q]).total.value == Decimal("18266.50")

def test_by_sales_person():
    people = [SimpleNamespace(id=1, name="Ravi"), SimpleNamespace(id=2, name="Asha")]
    quotes = [quote(1, date(2025, 1, 1), value=10, sales_person_id=1),
              quote(2, date(2025, 1, 1), "Lost", 20, sales_person_id=1),
              quote(3, date(2025, 1, 1), value=5, sales_person_id=None)]
    ravi, asha = aggregate_by_sales_person(quotes, people)
    assert (ravi.name, ravi.total.count, ravi.total.value) == ("Ravi", 2, 30)
    assert ravi.per_status["Lost"].count == 1
    assert asha.total.count == 0

def test_all_range_returns_input():
    quotes = [quote(1, date(2020, 1, 1))]
    assert filter_by_date_range(quotes, DateRange.ALL, date(2025, 1, 1)) is quotes

def test_week_window_inclusive():
    quotes = [quote(i, date(2025, 1, d)) for i, d in enumerate([2, 3, 10, 11])]
    kept = filter_by_date_range(quotes, "week", date(2025, 1, 10))
    assert [q.quotation_date.day for q in kept] == [3, 10]

def test_month_window_clamps_to_month_end():
    days = [date(2025, 2, 27), date(2025, 2, 28), date(2025, 3, 31), date(2025, 4, 1)]
    kept = filter_by_date_range([quote(i, d) for i, d in enumerate(days)], "month", date(2025, 3, 31))
    assert [q.quotation_date for q in kept] == [date(2025, 2, 28), date(2025, 3, 31)]

def test_year_window():
    days = [date(2023, 2, 27), date(2023, 2, 28), date(2024, 2, 29)]
    kept = filter_by_date_range([quote(i, d) for i, d in enumerate(days)], "year", date(2024, 2, 29))
    assert [q.quotation_date for q in kept] == [date(2023, 2, 28), date(2024, 2, 29)]

def test_daily_values_sorted_and_summed():
    quotes = [quote(1, date(2025, 1, 5), value=10), quote(2, date(2025, 1, 1), value=3),
              quote(3, date(2025, 1, 5), value=7)]
    series = daily_values(quotes)
    assert [(d.quotation_date.day, d.value) for d in series] == [(1, 3), (5, 17)]

def test_calendar_creation_and_reminder():
    month = calendar_month([quote(7, date(2025, 1, 1))], 2025, 1)
    cells = {cell.day: cell for cell in month.days}
    assert cells[1].quotes == [7] and cells[1].reminders == []
    assert cells[6].reminders == [7] and cells[6].quotes == []

def test_calendar_reminder_from_previous_month():
    assert follow_up_date(date(2024, 12, 29)) == date(2025, 1, 3)
    month = calendar_month([quote(9, date(2024, 12, 29))], 2025, 1)
    assert [(c.day, c.quotes, c.reminders) for c in month.days] == [(3, [], [9])]

def test_calendar_other_year_ignored():
    assert calendar_month([quote(1, date(2024, 1, 1))], 2025, 1).days == []
