"""Calculator session - caller-owned inputs and last result"""

from typing import Any, Optional

from skin_profit.core.config import Settings
from skin_profit.core.logger import get_logger
from skin_profit.domain.currency import CURRENCY_RATES, RateTable
from skin_profit.domain.models import CalculationOutcome, Currency, ProfitReport
from skin_profit.domain.money import PriceInput
from skin_profit.domain.rules import try_compute_profit

logger = get_logger(__name__)


class CalculatorSession:
    """Form state for one calculator: two raw price inputs, a currency and
    the report of the last successful calculation.

    The session is owned and passed around by the caller. A failed
    calculation leaves ``last_report`` untouched.
    """

    def __init__(
        self,
        currency: Any = Currency.UAH,
        rates: Optional[RateTable] = None,
    ):
        self.source_price_input: PriceInput = ""
        self.target_price_input: PriceInput = ""
        self.currency = Currency.parse(currency)
        self.rates = rates if rates is not None else CURRENCY_RATES
        self.last_report: Optional[ProfitReport] = None

    @classmethod
    def from_settings(cls, settings: Settings) -> "CalculatorSession":
        return cls(currency=settings.default_currency, rates=settings.rate_table())

    def set_source_price(self, value: PriceInput) -> None:
        self.source_price_input = value

    def set_target_price(self, value: PriceInput) -> None:
        self.target_price_input = value

    def set_currency(self, code: Any) -> None:
        currency = Currency.parse(code)
        if currency != self.currency:
            logger.debug(
                "currency_changed", previous=self.currency.value, current=currency.value
            )
        self.currency = currency

    def calculate(self) -> CalculationOutcome:
        outcome = try_compute_profit(
            self.source_price_input,
            self.target_price_input,
            self.currency,
            self.rates,
        )

        if not outcome.ok:
            logger.warning(
                "invalid_price_input",
                source=str(self.source_price_input),
                target=str(self.target_price_input),
                error=outcome.error,
            )
            return outcome

        report = outcome.report
        self.last_report = report
        logger.debug(
            "profit_calculated",
            currency=report.currency.value,
            profit_usd=report.profit_usd_display,
            roi=report.percentage_display,
            classification=report.classification,
        )
        return outcome
