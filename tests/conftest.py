import logging

import pytest
import structlog

from skin_profit.services.calculator import CalculatorSession


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop handlers bound to streams or files of a previous test."""
    yield
    structlog.reset_defaults()
    root = logging.getLogger()
    for handler in root.handlers[:]:
        handler.close()
        root.removeHandler(handler)


@pytest.fixture
def session():
    """Fresh session with the default rate table, selling in UAH."""
    return CalculatorSession(currency="UAH")
