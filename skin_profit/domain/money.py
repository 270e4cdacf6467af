"""Price parsing and cent rounding on Decimal"""

from decimal import ROUND_HALF_UP, Context, Decimal, InvalidOperation, getcontext
from typing import Union

from skin_profit.domain.errors import PriceValidationError

PriceInput = Union[str, int, float, Decimal]

TWO_PLACES = Decimal("0.01")

# Bound on the adjusted exponent, prices stay within 1e-15 .. 1e16
MAX_PRICE_EXPONENT = 15


def parse_price(value: PriceInput) -> Decimal:
    """Parse a boundary price into a finite Decimal.

    Strings are parsed directly (surrounding whitespace ignored), floats go
    through ``str()`` so ``0.1`` stays ``Decimal("0.1")``. NaN, infinities,
    empty strings, magnitudes outside ``MAX_PRICE_EXPONENT`` and anything
    else raise ``PriceValidationError``.
    """
    if isinstance(value, bool):
        raise PriceValidationError(value)

    if isinstance(value, Decimal):
        number = value
    elif isinstance(value, (int, float)):
        number = Decimal(str(value))
    elif isinstance(value, str):
        try:
            number = Decimal(value.strip())
        except InvalidOperation:
            raise PriceValidationError(value) from None
    else:
        raise PriceValidationError(value)

    if not number.is_finite():
        raise PriceValidationError(value)
    if abs(number.adjusted()) > MAX_PRICE_EXPONENT:
        raise PriceValidationError(value)
    return number


def round_money(value: Decimal) -> Decimal:
    """Round to two decimals, half away from zero."""
    # quantize needs enough precision for the integer digits
    context = Context(prec=max(getcontext().prec, value.adjusted() + 3))
    rounded = value.quantize(TWO_PLACES, rounding=ROUND_HALF_UP, context=context)
    if rounded.is_zero():
        return rounded.copy_abs()
    return rounded


def format_money(value: Decimal) -> str:
    return f"{round_money(value):f}"
