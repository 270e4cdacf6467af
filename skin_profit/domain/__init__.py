"""Domain module - Pure business logic"""

from skin_profit.domain.currency import (
    CURRENCY_RATES,
    from_reference_currency,
    to_reference_currency,
    validate_rate_table,
)
from skin_profit.domain.errors import (
    CalculatorError,
    PriceValidationError,
    RateTableError,
    UnknownCurrencyError,
)
from skin_profit.domain.models import CalculationOutcome, Currency, ProfitReport
from skin_profit.domain.rules import (
    SELLER_FEE_RATE,
    calculate_profit,
    calculate_roi,
    compute_profit,
    try_compute_profit,
)

__all__ = [
    "Currency",
    "ProfitReport",
    "CalculationOutcome",
    "CURRENCY_RATES",
    "SELLER_FEE_RATE",
    "to_reference_currency",
    "from_reference_currency",
    "validate_rate_table",
    "calculate_profit",
    "calculate_roi",
    "compute_profit",
    "try_compute_profit",
    "CalculatorError",
    "PriceValidationError",
    "RateTableError",
    "UnknownCurrencyError",
]
