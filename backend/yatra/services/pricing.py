from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal, ROUND_HALF_UP
from typing import Optional

from yatra.models import Hotel, TravelType

CENT = Decimal("0.01")
WHOLE = Decimal("1")


@dataclass
class Quote:
    base_amount: Decimal
    tax_amount: Decimal
    total_amount: Decimal


def nights_between(check_in: datetime, check_out: datetime) -> int:
    """Calendar nights in a stay; same-day stays are charged as one night."""
    return max(1, (check_out.date() - check_in.date()).days)


def unit_price(item) -> Decimal:
    if isinstance(item, Hotel):
        return Decimal(item.price_per_night)
    return Decimal(item.price)


def quote_for(
    item,
    travel_type: TravelType,
    quantity: int,
    tax_rate: float,
    check_in: Optional[datetime] = None,
    check_out: Optional[datetime] = None,
) -> Quote:
    """
    Price a booking from the stored inventory price.

    Transport is priced per seat. Hotels are priced per room per night.
    Taxes are a flat rate on the base fare, rounded to a whole currency unit.
    """
    base = unit_price(item) * quantity
    if travel_type == TravelType.HOTEL:
        if check_in is None or check_out is None:
            raise ValueError("Hotel quotes need check-in and check-out dates")
        base = base * nights_between(check_in, check_out)

    base = base.quantize(CENT, rounding=ROUND_HALF_UP)
    tax = (base * Decimal(str(tax_rate))).quantize(WHOLE, rounding=ROUND_HALF_UP)
    tax = tax.quantize(CENT)
    return Quote(base_amount=base, tax_amount=tax, total_amount=base + tax)
