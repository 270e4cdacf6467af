"""Pure business rules - Fee calculations and profit formulas"""

from decimal import Decimal
from typing import Any, Optional

from skin_profit.domain.currency import (
    CURRENCY_RATES,
    RateTable,
    from_reference_currency,
    to_reference_currency,
)
from skin_profit.domain.errors import PriceValidationError
from skin_profit.domain.models import CalculationOutcome, Currency, ProfitReport
from skin_profit.domain.money import PriceInput, parse_price, round_money

SELLER_FEE_PERCENT = Decimal("13")
SELLER_FEE_RATE = SELLER_FEE_PERCENT / 100


def calculate_net_price(price: Decimal, fee_rate: Decimal = SELLER_FEE_RATE) -> Decimal:
    # Seller pays the fee, the buyer side is untouched
    return price * (1 - fee_rate)


def calculate_profit(
    buy_price: Decimal, sell_price: Decimal, fee_rate: Decimal = SELLER_FEE_RATE
) -> Decimal:
    return calculate_net_price(sell_price, fee_rate) - buy_price


def calculate_roi(buy_price: Decimal, profit: Decimal) -> Optional[Decimal]:
    """Profit as a percentage of the buy price, None when buy price is zero."""
    if buy_price == 0:
        return None
    return profit / buy_price * 100


def compute_profit(
    source_price: PriceInput,
    target_price: PriceInput,
    target_currency: Any,
    rates: RateTable = CURRENCY_RATES,
    fee_rate: Decimal = SELLER_FEE_RATE,
) -> ProfitReport:
    """Profit of buying at ``source_price`` USD and selling at ``target_price``.

    Args:
        source_price: Acquisition price, already in USD
        target_price: Sale price, denominated in ``target_currency``
        target_currency: Currency code of the sale side
        rates: Units-per-USD table
        fee_rate: Seller fee taken from the sale proceeds

    Returns:
        ProfitReport with full-precision USD figures and rounded
        selected-currency figures

    Raises:
        PriceValidationError: either price is not a finite number or its
            magnitude is out of range
        UnknownCurrencyError: unsupported currency code

    Example:
        >>> report = compute_profit("10.00", "500", "UAH")
        >>> report.profit_usd_display, report.percentage_display
        ('1.18', '11.77%')
    """
    currency = Currency.parse(target_currency)

    try:
        source_price_usd = parse_price(source_price)
    except PriceValidationError:
        raise PriceValidationError(source_price, field="source_price") from None
    try:
        parse_price(target_price)
    except PriceValidationError:
        raise PriceValidationError(target_price, field="target_price") from None

    target_price_usd = to_reference_currency(target_price, currency, rates)

    proceeds_before_fee = target_price_usd
    proceeds_after_fee = calculate_net_price(target_price_usd, fee_rate)
    profit_usd = calculate_profit(source_price_usd, target_price_usd, fee_rate)

    roi = calculate_roi(source_price_usd, profit_usd)

    return ProfitReport(
        currency=currency,
        source_price_usd=source_price_usd,
        target_price_usd=target_price_usd,
        proceeds_before_fee=proceeds_before_fee,
        proceeds_after_fee=proceeds_after_fee,
        profit_usd=profit_usd,
        profit_in_selected_currency=Decimal(
            from_reference_currency(profit_usd, currency, rates)
        ),
        profit_percentage=None if roi is None else round_money(roi),
        target_price_local=from_reference_currency(target_price_usd, currency, rates),
        proceeds_before_fee_local=from_reference_currency(proceeds_before_fee, currency, rates),
        proceeds_after_fee_local=from_reference_currency(proceeds_after_fee, currency, rates),
    )


def try_compute_profit(
    source_price: PriceInput,
    target_price: PriceInput,
    target_currency: Any,
    rates: RateTable = CURRENCY_RATES,
    fee_rate: Decimal = SELLER_FEE_RATE,
) -> CalculationOutcome:
    """Same as compute_profit, but price errors come back as a failed outcome."""
    try:
        report = compute_profit(source_price, target_price, target_currency, rates, fee_rate)
    except PriceValidationError as e:
        return CalculationOutcome.failure(str(e))
    return CalculationOutcome.success(report)
