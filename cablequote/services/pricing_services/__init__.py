from .aggregator import (
    FOLLOW_UP_DAYS,
    aggregate_by_sales_person,
    aggregate_by_status,
    aggregate_totals,
    calendar_month,
    daily_values,
    filter_by_date_range,
    follow_up_date,
    quotation_value,
)
from .amount_words import DISCOUNTED_CEILING, STANDARD_CEILING, TOO_LARGE, to_indian_words
from .line_pricer import FREIGHT_RATE_PER_KG, GRAMS_PER_KG, price_item, price_line
from .price_book import effective_price, enforce_exclusive, price_on, resolve_price, restamp_bands
from .stock_matcher import (
    DEMAND_HORIZON_DAYS,
    check_stock,
    classify_demand,
    compute_free_stock,
    match_orders,
    normalize,
)

__all__ = [
    "FOLLOW_UP_DAYS",
    "aggregate_by_sales_person",
    "aggregate_by_status",
    "aggregate_totals",
    "calendar_month",
    "daily_values",
    "filter_by_date_range",
    "follow_up_date",
    "quotation_value",
    "DISCOUNTED_CEILING",
    "STANDARD_CEILING",
    "TOO_LARGE",
    "to_indian_words",
    "FREIGHT_RATE_PER_KG",
    "GRAMS_PER_KG",
    "price_item",
    "price_line",
    "effective_price",
    "enforce_exclusive",
    "price_on",
    "resolve_price",
    "restamp_bands",
    "DEMAND_HORIZON_DAYS",
    "check_stock",
    "classify_demand",
    "compute_free_stock",
    "match_orders",
    "normalize",
]
