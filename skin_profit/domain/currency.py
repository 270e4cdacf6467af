"""Static USD rate table and conversions to/from the reference currency"""

from decimal import Decimal
from types import MappingProxyType
from typing import Any, Mapping

from skin_profit.domain.errors import PriceValidationError, RateTableError, UnknownCurrencyError
from skin_profit.domain.models import Currency
from skin_profit.domain.money import PriceInput, format_money, parse_price

REFERENCE_CURRENCY = Currency.USD

RateTable = Mapping[Currency, Decimal]


def validate_rate_table(rates: Mapping[Any, Any]) -> RateTable:
    """Check and freeze a units-per-USD table.

    Every supported currency must be present with a positive finite rate,
    and USD must be exactly 1.
    """
    table = {}
    for code, raw_rate in rates.items():
        currency = Currency.parse(code)
        try:
            rate = parse_price(raw_rate)
        except PriceValidationError:
            raise RateTableError(f"rate for {currency.value} is not a number: {raw_rate!r}") from None
        if rate <= 0:
            raise RateTableError(f"rate for {currency.value} must be positive, got {rate}")
        table[currency] = rate

    missing = [c.value for c in Currency if c not in table]
    if missing:
        raise RateTableError(f"rate table is missing: {', '.join(missing)}")

    if table[REFERENCE_CURRENCY] != 1:
        raise RateTableError(f"{REFERENCE_CURRENCY.value} rate must be 1, got {table[REFERENCE_CURRENCY]}")

    return MappingProxyType(table)


# Units per 1 USD, December 2024 snapshot
CURRENCY_RATES: RateTable = validate_rate_table(
    {
        Currency.USD: Decimal("1"),
        Currency.UAH: Decimal("38.92"),
        Currency.EUR: Decimal("0.92"),
        Currency.GBP: Decimal("0.79"),
        Currency.RUB: Decimal("90.50"),
    }
)


def get_rate(currency: Any, rates: RateTable = CURRENCY_RATES) -> Decimal:
    code = Currency.parse(currency)
    try:
        return rates[code]
    except KeyError:
        raise UnknownCurrencyError(currency) from None


def to_reference_currency(
    amount: PriceInput,
    from_currency: Any,
    rates: RateTable = CURRENCY_RATES,
    *,
    strict: bool = True,
) -> Decimal:
    """Convert an amount denominated in ``from_currency`` into USD.

    With ``strict=False`` an unparsable amount converts to 0 instead of
    raising ``PriceValidationError``.
    """
    rate = get_rate(from_currency, rates)
    try:
        number = parse_price(amount)
    except PriceValidationError:
        if strict:
            raise
        return Decimal(0)
    return number / rate


def from_reference_currency(
    amount_usd: PriceInput, to_currency: Any, rates: RateTable = CURRENCY_RATES
) -> str:
    """Convert a USD amount into ``to_currency``, formatted with two decimals."""
    rate = get_rate(to_currency, rates)
    return format_money(parse_price(amount_usd) * rate)
