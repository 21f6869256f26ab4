# cablequote/services/pricing_services/line_pricer.py
from decimal import Decimal

from cablequote.schemas.pricing_schemas import LinePricing
from cablequote.services.pricing_services.coerce import ZERO, to_decimal, to_discount

# Air freight is charged at a flat rate per kg. Product weights are entered
# in grams per unit length, hence the divisor.
FREIGHT_RATE_PER_KG = Decimal("150")
GRAMS_PER_KG = Decimal("1000")

HUNDRED = Decimal("100")


def net_unit_price(unit_price, discount_percent) -> Decimal:
    # Discounts above 100% are accepted and give a negative net price.
    return to_decimal(unit_price) * (1 - to_discount(discount_percent) / HUNDRED)


def freight_per_unit(freight_eligible: bool, freight_weight_per_unit) -> Decimal:
    if not freight_eligible:
        return ZERO
    return to_decimal(freight_weight_per_unit) / GRAMS_PER_KG * FREIGHT_RATE_PER_KG


def price_line(
    unit_price,
    discount_percent,
    quantity,
    freight_eligible: bool = False,
    freight_weight_per_unit=0,
) -> LinePricing:
    """
    Net price, amount and air freight for one quotation line.

    `discount_percent` may still be the raw form string; anything that does
    not parse, or parses negative, counts as no discount.
    """
    qty = to_decimal(quantity)
    net = net_unit_price(unit_price, discount_percent)
    freight = freight_per_unit(bool(freight_eligible), freight_weight_per_unit)
    return LinePricing(
        net_unit_price=net,
        line_amount=net * qty,
        freight_per_unit=freight,
        freight_amount=freight * qty,
    )


def price_item(item) -> LinePricing:
    """price_line() for a QuotationItem row or QuotationLine schema."""
    return price_line(
        item.unit_price,
        item.discount_percent,
        item.quantity_ordered,
        item.freight_eligible,
        item.freight_weight_per_unit,
    )
