from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta
from decimal import ROUND_HALF_UP, Decimal

DEFAULT_NIGHTLY_RATE = Decimal("75")

# number of "$" in the price range -> nightly rate in USD
NIGHTLY_RATES = {
    1: Decimal("50"),
    2: Decimal("100"),
    3: Decimal("150"),
    4: Decimal("250"),
}

SERVICE_FEE_RATE = Decimal("0.15")
TAX_RATE = Decimal("0.10")

MIN_GUESTS = 1
MAX_GUESTS = 8

_CENTS = Decimal("0.01")


@dataclass(frozen=True)
class BookingQuote:
    nightly_rate: Decimal
    nights: int
    subtotal: Decimal
    service_fee: Decimal
    taxes: Decimal
    total: Decimal


def nightly_rate(price_range: str | None) -> Decimal:
    if not price_range:
        return DEFAULT_NIGHTLY_RATE
    return NIGHTLY_RATES.get(len(price_range), DEFAULT_NIGHTLY_RATE)


def count_nights(check_in: date, check_out: date) -> int:
    return (check_out - check_in).days


def quote_stay(price_range: str | None, check_in: date | None, check_out: date | None) -> BookingQuote | None:
    """Price a stay; returns None when dates are missing or check-out is not after check-in."""
    if check_in is None or check_out is None:
        return None

    nights = count_nights(check_in, check_out)
    if nights <= 0:
        return None

    rate = nightly_rate(price_range)
    subtotal = rate * nights
    service_fee = (subtotal * SERVICE_FEE_RATE).quantize(_CENTS, rounding=ROUND_HALF_UP)
    taxes = (subtotal * TAX_RATE).quantize(_CENTS, rounding=ROUND_HALF_UP)

    return BookingQuote(
        nightly_rate=rate,
        nights=nights,
        subtotal=subtotal.quantize(_CENTS),
        service_fee=service_fee,
        taxes=taxes,
        total=(subtotal + service_fee + taxes).quantize(_CENTS, rounding=ROUND_HALF_UP),
    )


def min_check_out(check_in: date | None, today: date | None = None) -> date:
    if check_in is None:
        return today or date.today()
    return check_in + timedelta(days=1)


def clamp_guests(guests: int | None) -> int:
    if guests is None:
        return 2
    return max(MIN_GUESTS, min(MAX_GUESTS, guests))


def format_usd(amount: Decimal) -> str:
    return f"${amount.quantize(_CENTS):,}"
