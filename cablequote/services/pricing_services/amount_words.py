# cablequote/services/pricing_services/amount_words.py
from decimal import ROUND_FLOOR, ROUND_HALF_UP, Decimal

from cablequote.services.pricing_services.coerce import to_decimal

# 99,99,99,999 for the standard and air-freight layouts,
# 99,99,999 for the discounted layout.
STANDARD_CEILING = 999_999_999
DISCOUNTED_CEILING = 9_999_999

TOO_LARGE = "Number too large"

UNITS = ["", "One", "Two", "Three", "Four", "Five", "Six", "Seven", "Eight",
         "Nine", "Ten", "Eleven", "Twelve", "Thirteen", "Fourteen", "Fifteen",
         "Sixteen", "Seventeen", "Eighteen", "Nineteen"]
TENS = ["", "", "Twenty", "Thirty", "Forty", "Fifty", "Sixty", "Seventy",
        "Eighty", "Ninety"]

CRORE = 10_000_000
LAKH = 100_000
THOUSAND = 1_000
HUNDRED = 100


def number_to_words(num: int, use_crore: bool = True) -> str:
    """Convert a non-negative integer to Indian English words (lakh/crore grouping).

    Sub-hundred remainders are joined with "and" when a larger group precedes
    them: 101 -> "One Hundred and One". Zero gives an empty string.
    """
    parts = []

    if use_crore and num >= CRORE:
        parts.append(number_to_words(num // CRORE, use_crore) + " Crore")
        num %= CRORE
    if num >= LAKH:
        parts.append(number_to_words(num // LAKH, use_crore) + " Lakh")
        num %= LAKH
    if num >= THOUSAND:
        parts.append(number_to_words(num // THOUSAND, use_crore) + " Thousand")
        num %= THOUSAND
    if num >= HUNDRED:
        parts.append(number_to_words(num // HUNDRED, use_crore) + " Hundred")
        num %= HUNDRED

    if num > 0:
        if parts:
            parts.append("and")
        if num < 20:
            parts.append(UNITS[num])
        else:
            parts.append(TENS[num // 10] + (" " + UNITS[num % 10] if num % 10 else ""))

    return " ".join(parts)


def to_indian_words(amount, ceiling: int = STANDARD_CEILING, use_crore: bool = True) -> str:
    """
    Amount in words for printed quotations: "Rupees ... Only".

    Only the rupee part is spelled out (after rounding to paise). An exact
    zero is the bare word "Zero"; a rupee part above `ceiling` gives
    TOO_LARGE instead of words. Negative amounts have no words, so they
    print as "Rupees  Only" just like amounts under one rupee.
    """
    value = to_decimal(amount)
    if value == 0:
        return "Zero"

    rupees = int(value.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP).to_integral_value(rounding=ROUND_FLOOR))
    if rupees > ceiling:
        return TOO_LARGE

    return f"Rupees {number_to_words(rupees, use_crore)} Only"
