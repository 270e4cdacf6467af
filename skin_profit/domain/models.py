"""Domain models with Pydantic validation"""

from decimal import Decimal
from enum import Enum
from typing import Any, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from skin_profit.domain.errors import UnknownCurrencyError
from skin_profit.domain.money import format_money


class Currency(str, Enum):
    """Supported sale-side currencies. USD is the reference unit."""

    USD = "USD"
    UAH = "UAH"
    EUR = "EUR"
    GBP = "GBP"
    RUB = "RUB"

    @classmethod
    def parse(cls, code: Any) -> "Currency":
        if isinstance(code, cls):
            return code
        try:
            return cls(str(code).strip().upper())
        except ValueError:
            raise UnknownCurrencyError(code) from None


class ProfitReport(BaseModel):
    """Result of one buy-in-USD, sell-in-selected-currency calculation"""

    model_config = ConfigDict(frozen=True)

    currency: Currency = Field(..., description="Currency selected for the sale side")

    # USD figures, full precision
    source_price_usd: Decimal
    target_price_usd: Decimal
    proceeds_before_fee: Decimal
    proceeds_after_fee: Decimal
    profit_usd: Decimal = Field(..., description="proceeds_after_fee - source_price_usd")

    # Rounded figures
    profit_in_selected_currency: Decimal
    profit_percentage: Optional[Decimal] = Field(
        None, description="ROI percentage, None when the source price is zero"
    )

    # Selected-currency strings for the result panel
    target_price_local: str
    proceeds_before_fee_local: str
    proceeds_after_fee_local: str

    @property
    def classification(self) -> Literal["gain", "loss"]:
        return "gain" if self.profit_usd >= 0 else "loss"

    @property
    def is_gain(self) -> bool:
        return self.classification == "gain"

    @property
    def source_price_display(self) -> str:
        return format_money(self.source_price_usd)

    @property
    def target_price_display(self) -> str:
        return format_money(self.target_price_usd)

    @property
    def proceeds_before_fee_display(self) -> str:
        return format_money(self.proceeds_before_fee)

    @property
    def proceeds_after_fee_display(self) -> str:
        return format_money(self.proceeds_after_fee)

    @property
    def profit_usd_display(self) -> str:
        return format_money(self.profit_usd)

    @property
    def profit_local_display(self) -> str:
        return format_money(self.profit_in_selected_currency)

    @property
    def percentage_display(self) -> str:
        if self.profit_percentage is None:
            return "undefined"
        return f"{format_money(self.profit_percentage)}%"

    def to_display_dict(self) -> dict:
        """Nested, string-valued view used for JSON output"""
        return {
            "currency": self.currency.value,
            "classification": self.classification,
            "source_price_usd": self.source_price_display,
            "target_price_usd": self.target_price_display,
            "target_price_local": self.target_price_local,
            "proceeds": {
                "before_fee": self.proceeds_before_fee_display,
                "after_fee": self.proceeds_after_fee_display,
                "before_fee_local": self.proceeds_before_fee_local,
                "after_fee_local": self.proceeds_after_fee_local,
            },
            "instant_sale": {
                "profit_usd": self.profit_usd_display,
                "profit_in_selected_currency": self.profit_local_display,
                "profit_percentage": (
                    None
                    if self.profit_percentage is None
                    else format_money(self.profit_percentage)
                ),
            },
        }


class CalculationOutcome(BaseModel):
    """Tagged result: either a report or the validation error message"""

    model_config = ConfigDict(frozen=True)

    status: Literal["ok", "error"]
    report: Optional[ProfitReport] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status == "ok"

    @classmethod
    def success(cls, report: ProfitReport) -> "CalculationOutcome":
        return cls(status="ok", report=report)

    @classmethod
    def failure(cls, error: str) -> "CalculationOutcome":
        return cls(status="error", error=error)
