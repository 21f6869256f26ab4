# cablequote/services/pricing_services/aggregator.py
import calendar
from collections import defaultdict
from datetime import date, timedelta
from decimal import Decimal
from typing import Dict, Iterable, List, Optional, Sequence

from cablequote.schemas.pricing_schemas import (
    CalendarDay,
    CalendarMonth,
    DailyValue,
    DateRange,
    DocumentTotals,
    QuotationStatus,
    SalesPersonSummary,
    StatusSummary,
)
from cablequote.services.pricing_services.coerce import ZERO, as_date, to_decimal
from cablequote.services.pricing_services.line_pricer import price_item

# Follow-up reminder offset from the quotation date.
FOLLOW_UP_DAYS = 5

_KNOWN_STATUSES = {status.value for status in QuotationStatus}


# --------------------------
# Document totals
# --------------------------
def aggregate_totals(lines: Iterable) -> DocumentTotals:
    """Quantities summed as entered; amounts summed from each priced line."""
    total_ordered = total_requested = total_amount = total_freight = ZERO
    for line in lines or []:
        pricing = price_item(line)
        total_ordered += to_decimal(line.quantity_ordered)
        total_requested += to_decimal(line.quantity_requested)
        total_amount += pricing.line_amount
        total_freight += pricing.freight_amount

    return DocumentTotals(
        total_quantity_ordered=total_ordered,
        total_quantity_requested=total_requested,
        total_amount=total_amount,
        total_freight=total_freight,
    )


def quotation_value(quotation) -> Decimal:
    """Goods value of a quotation (freight excluded), as used on dashboards."""
    return aggregate_totals(quotation.lines).total_amount


# --------------------------
# Status summaries
# --------------------------
def _status_value(status) -> Optional[str]:
    value = getattr(status, "value", status)
    return value if value in _KNOWN_STATUSES else None


def _summarise(quotations: Iterable, summary: StatusSummary) -> StatusSummary:
    for quotation in quotations:
        value = quotation_value(quotation)
        summary.total.count += 1
        summary.total.value += value

        status = _status_value(quotation.status)
        if status is not None:
            bucket = summary.per_status[status]
            bucket.count += 1
            bucket.value += value
    return summary


def aggregate_by_status(quotations: Iterable) -> StatusSummary:
    """
    Count and value per status in one pass.

    Quotations with a status outside the known five still count towards the
    total but land in no bucket.
    """
    return _summarise(quotations, StatusSummary())


def aggregate_by_sales_person(quotations: Sequence, sales_persons: Iterable) -> List[SalesPersonSummary]:
    by_person: Dict[int, list] = defaultdict(list)
    for quotation in quotations:
        by_person[quotation.sales_person_id].append(quotation)

    return [
        _summarise(
            by_person.get(person.id, []),
            SalesPersonSummary(sales_person_id=person.id, name=person.name),
        )
        for person in sales_persons
    ]


# --------------------------
# Date windows
# --------------------------
def _months_back(day: date, months: int) -> date:
    # Clamps to the last day of the target month (31 Mar -> 28/29 Feb).
    month_index = day.year * 12 + (day.month - 1) - months
    year, month = divmod(month_index, 12)
    month += 1
    return date(year, month, min(day.day, calendar.monthrange(year, month)[1]))


def range_start(date_range, reference_date) -> Optional[date]:
    reference = as_date(reference_date)
    date_range = DateRange(date_range)
    if date_range == DateRange.WEEK:
        return reference - timedelta(days=7)
    if date_range == DateRange.MONTH:
        return _months_back(reference, 1)
    if date_range == DateRange.YEAR:
        return _months_back(reference, 12)
    return None


def filter_by_date_range(quotations: Sequence, date_range, reference_date) -> list:
    """
    Quotations dated inside [start, reference_date], both days inclusive.

    `all` hands the input back untouched.
    """
    start = range_start(date_range, reference_date)
    if start is None:
        return quotations

    end = as_date(reference_date)
    result = []
    for quotation in quotations:
        if quotation.quotation_date is None:
            continue
        if start <= as_date(quotation.quotation_date) <= end:
            result.append(quotation)
    return result


def daily_values(quotations: Iterable) -> List[DailyValue]:
    totals: Dict[date, Decimal] = defaultdict(lambda: ZERO)
    for quotation in quotations:
        if quotation.quotation_date is None:
            continue
        totals[as_date(quotation.quotation_date)] += quotation_value(quotation)
    return [DailyValue(quotation_date=day, value=totals[day]) for day in sorted(totals)]


# --------------------------
# Calendar
# --------------------------
def follow_up_date(quotation_date) -> date:
    return as_date(quotation_date) + timedelta(days=FOLLOW_UP_DAYS)


def calendar_month(quotations: Iterable, year: int, month: int) -> CalendarMonth:
    """
    Per-day events for one month grid.

    Every quotation yields a creation event on its date and a reminder on
    the follow-up date; each lands in the grid only if it falls in the
    requested month, so one quotation can show up on two different days.
    """
    days: Dict[int, CalendarDay] = {}

    def _cell(day: int) -> CalendarDay:
        if day not in days:
            days[day] = CalendarDay(day=day)
        return days[day]

    for quotation in quotations:
        if quotation.quotation_date is None:
            continue
        created = as_date(quotation.quotation_date)
        if created.year == year and created.month == month:
            _cell(created.day).quotes.append(quotation.id)

        reminder = follow_up_date(created)
        if reminder.year == year and reminder.month == month:
            _cell(reminder.day).reminders.append(quotation.id)

    return CalendarMonth(year=year, month=month, days=[days[day] for day in sorted(days)])
