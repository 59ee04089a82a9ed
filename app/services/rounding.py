"""Half-up rounding for displayed figures (2200.5 -> 2201, 12.5 -> 13)."""

from decimal import ROUND_HALF_UP, Decimal


def round_half_up(value: float, places: int) -> Decimal:
    """Round to `places` decimals, exact halves away from zero.

    Goes through repr() so 7.25 rounds as the decimal 7.25, not its binary neighbour.
    """
    return Decimal(repr(value)).quantize(Decimal(1).scaleb(-places), rounding=ROUND_HALF_UP)


def format_fixed(value: float, places: int) -> str:
    """Fixed-point string with `places` decimals, rounded half-up."""
    return format(round_half_up(value, places), "f")
