"""Services module - Calculator state for the presentation layer"""

from skin_profit.services.calculator import CalculatorSession

__all__ = ["CalculatorSession"]
