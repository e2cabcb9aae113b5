"""
Money rounding and supplier price variance for new purchase orders.

The variance draws from an injected ``random.Random``-compatible provider
(anything with ``randint`` and ``choice``) so callers can seed it.
"""
import random
from decimal import ROUND_HALF_EVEN, Decimal

from app.core.constants import PRICE_QUANTUM_DIGITS

PRICE_QUANTUM = Decimal(1).scaleb(-PRICE_QUANTUM_DIGITS)
_HUNDRED = Decimal(100)

_default_rng = random.Random()


def get_default_rng() -> random.Random:
    return _default_rng


def to_money(value) -> Decimal:
    """Round to two fractional digits (half-even, like the stored decimal(10,2))."""
    if not isinstance(value, Decimal):
        value = Decimal(str(value))
    return value.quantize(PRICE_QUANTUM, rounding=ROUND_HALF_EVEN)


def price_modifier(rng, min_percent: int = 5, max_percent: int = 10) -> Decimal:
    percent = rng.randint(min_percent, max_percent)
    sign = rng.choice((-1, 1))
    return Decimal(1) + Decimal(sign * percent) / _HUNDRED


def varied_unit_price(netto_price, rng=None, min_percent: int = 5, max_percent: int = 10) -> Decimal:
    if rng is None:
        rng = _default_rng
    base = netto_price if isinstance(netto_price, Decimal) else Decimal(str(netto_price))
    return to_money(base * price_modifier(rng, min_percent, max_percent))


__all__ = [
    "PRICE_QUANTUM",
    "get_default_rng",
    "price_modifier",
    "to_money",
    "varied_unit_price",
]
