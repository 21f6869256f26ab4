# cablequote/services/pricing_services/coerce.py
import re
from datetime import date, datetime
from decimal import Decimal, InvalidOperation

ZERO = Decimal("0")

# Leading numeric prefix, the same portion a browser's parseFloat() would read.
_NUMERIC_PREFIX = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def to_decimal(value) -> Decimal:
    """
    Coerce form/ORM input into a Decimal.

    Never raises: None, blanks, NaN, infinities and unparseable text all
    come back as 0. Strings are read up to the first non-numeric character
    ("12.5%" -> 12.5).
    """
    if value is None or isinstance(value, bool):
        return ZERO

    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, int):
        result = Decimal(value)
    elif isinstance(value, float):
        result = Decimal(repr(value)) if value == value else ZERO
    else:
        match = _NUMERIC_PREFIX.match(str(value))
        if not match:
            return ZERO
        try:
            result = Decimal(match.group(1))
        except InvalidOperation:
            return ZERO

    if not result.is_finite():
        return ZERO
    return result


def to_discount(value) -> Decimal:
    """Discount percent: parse failures and negatives become 0, no upper clamp."""
    discount = to_decimal(value)
    if discount < 0:
        return ZERO
    return discount


def as_date(value) -> date:
    """Dates, datetimes and ISO strings ("2025-01-01", "2025-01-01T10:00") to a date."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return date.fromisoformat(str(value)[:10])
