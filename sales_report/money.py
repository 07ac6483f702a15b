from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

TWO_DP = Decimal("0.01")
ZERO = Decimal("0")


def to_decimal(value) -> Decimal:
    """Coerce a strategy result to Decimal. Floats go through str()."""
    if isinstance(value, Decimal):
        return value
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"Expected a number, got {type(value).__name__}: {value!r}")
    try:
        return Decimal(str(value))
    except InvalidOperation as exc:
        raise TypeError(f"Cannot convert {value!r} to Decimal") from exc


def round_money(amount: Decimal) -> Decimal:
    """Return amount rounded to 2 dp, half-cents away from zero."""
    return amount.quantize(TWO_DP, rounding=ROUND_HALF_UP)
