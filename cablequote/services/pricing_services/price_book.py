# cablequote/services/pricing_services/price_book.py
"""
Effective-dated price bands for catalog items.

A product carries a list of bands (LP or SP plus a validity window). The
quotation date picks the band; the band picks the unit price.
"""
from datetime import timedelta
from decimal import Decimal
from typing import Iterable, List, Optional, Sequence

from cablequote.schemas.pricing_schemas import OPEN_ENDED, PriceBand, PriceResolution, PriceSource
from cablequote.services.pricing_services.coerce import ZERO, as_date, to_decimal


def resolve_price(bands: Sequence, on_date) -> Optional[object]:
    """
    Pick the band that applies on `on_date`.

    1. first band (input order) whose [valid_from, valid_to] contains the date
    2. otherwise the most recent band that started on or before the date
    3. otherwise the earliest band (the date precedes every band)
    Returns None only when there are no bands.

    Bands may be PriceBand schemas or ProductPrice rows; only the
    valid_from/valid_to attributes are read. Comparing whole dates gives the
    start-of-day/end-of-day inclusive window.
    """
    if not bands:
        return None

    target = as_date(on_date)

    for band in bands:
        if as_date(band.valid_from) <= target <= as_date(band.valid_to):
            return band

    started = [band for band in bands if as_date(band.valid_from) <= target]
    if started:
        # max() keeps the first of equal keys, so input order still breaks ties
        return max(started, key=lambda band: as_date(band.valid_from))

    return min(bands, key=lambda band: as_date(band.valid_from))


def effective_price(band) -> PriceResolution:
    """LP when it is positive, SP otherwise. No band means a zero, not-found price."""
    if band is None:
        return PriceResolution(unit_price=ZERO, price_source=PriceSource.LIST, found=False)

    list_price = to_decimal(band.list_price)
    if list_price > 0:
        unit_price, source = list_price, PriceSource.LIST
    else:
        unit_price, source = to_decimal(band.special_price), PriceSource.SPECIAL

    return PriceResolution(
        unit_price=unit_price,
        price_source=source,
        found=True,
        band=PriceBand.model_validate(band),
    )


def price_on(bands: Sequence, on_date) -> PriceResolution:
    return effective_price(resolve_price(bands, on_date))


def enforce_exclusive(band: PriceBand) -> PriceBand:
    """A positive LP zeroes SP; a positive SP (with no LP) zeroes LP."""
    list_price = to_decimal(band.list_price)
    special_price = to_decimal(band.special_price)
    if list_price > 0:
        special_price = Decimal("0")
    elif special_price > 0:
        list_price = Decimal("0")
    return band.model_copy(update={"list_price": list_price, "special_price": special_price})


def _as_band(band) -> PriceBand:
    # valid_to is recomputed, so whatever the caller sent (or None) is dropped
    return PriceBand(
        list_price=to_decimal(band.list_price),
        special_price=to_decimal(band.special_price),
        valid_from=as_date(band.valid_from),
    )


def restamp_bands(bands: Iterable) -> List[PriceBand]:
    """
    Normalise a band list for saving.

    Sorted by valid_from; every band ends the day before the next one starts
    and the last band is open ended. Input objects are not modified.
    """
    ordered = sorted(
        (enforce_exclusive(_as_band(band)) for band in bands),
        key=lambda band: band.valid_from,
    )

    restamped: List[PriceBand] = []
    for index, band in enumerate(ordered):
        if index + 1 < len(ordered):
            valid_to = ordered[index + 1].valid_from - timedelta(days=1)
        else:
            valid_to = OPEN_ENDED
        restamped.append(band.model_copy(update={"valid_to": valid_to}))
    return restamped
