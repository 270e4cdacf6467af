"""Calculator error taxonomy"""

from typing import Any, Optional


class CalculatorError(ValueError):
    """Base class for all calculator errors."""


class PriceValidationError(CalculatorError):
    """A price input does not parse to a finite number."""

    message = "invalid price input"

    def __init__(self, value: Any = None, field: Optional[str] = None):
        self.value = value
        self.field = field
        detail = f" ({field}={value!r})" if field else ""
        super().__init__(f"{self.message}{detail}")


class UnknownCurrencyError(CalculatorError):
    """Currency code outside the supported set."""

    def __init__(self, code: Any):
        self.code = code
        super().__init__(f"unknown currency code: {code!r}")


class RateTableError(CalculatorError):
    """Configured rate table is incomplete or holds an invalid rate."""
