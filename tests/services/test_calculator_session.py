import pytest
from decimal import Decimal

from skin_profit.core.config import Settings
from skin_profit.domain.currency import CURRENCY_RATES
from skin_profit.domain.errors import UnknownCurrencyError
from skin_profit.domain.models import Currency
from skin_profit.services.calculator import CalculatorSession


class TestCalculatorSession:
    """Tests for the caller-owned calculator state."""

    def test_initial_state(self, session):
        assert session.source_price_input == ""
        assert session.target_price_input == ""
        assert session.currency is Currency.UAH
        assert session.rates is CURRENCY_RATES
        assert session.last_report is None

    def test_calculate_stores_last_report(self, session):
        session.set_source_price("10.00")
        session.set_target_price("500")

        outcome = session.calculate()

        assert outcome.ok
        assert session.last_report == outcome.report
        assert session.last_report.profit_usd_display == "1.18"

    def test_failed_calculation_keeps_previous_report(self, session):
        session.set_source_price("10.00")
        session.set_target_price("500")
        previous = session.calculate().report

        session.set_target_price("not a price")
        outcome = session.calculate()

        assert not outcome.ok
        assert "invalid price input" in outcome.error
        assert session.last_report == previous

    def test_empty_inputs_fail(self, session):
        outcome = session.calculate()

        assert not outcome.ok
        assert session.last_report is None

    def test_currency_change_keeps_source_price(self, session):
        session.set_source_price("10.00")
        session.set_target_price("20")
        in_uah = session.calculate().report

        session.set_currency("USD")
        in_usd = session.calculate().report

        assert in_usd.source_price_usd == in_uah.source_price_usd == Decimal("10.00")
        assert in_usd.currency is Currency.USD
        assert in_usd.target_price_usd == Decimal("20")
        assert in_uah.target_price_usd == Decimal("20") / Decimal("38.92")

    def test_set_currency_rejects_unknown(self, session):
        with pytest.raises(UnknownCurrencyError):
            session.set_currency("BTC")

        assert session.currency is Currency.UAH

    def test_sessions_are_independent(self):
        first = CalculatorSession(currency="USD")
        second = CalculatorSession(currency="EUR")

        first.set_source_price("1")
        first.set_target_price("2")
        first.calculate()

        assert second.last_report is None
        assert second.source_price_input == ""

    def test_from_settings(self):
        settings = Settings(
            default_currency="EUR",
            currency_rates={**CURRENCY_RATES, Currency.EUR: Decimal("0.5")},
        )

        session = CalculatorSession.from_settings(settings)
        session.set_source_price("10")
        session.set_target_price("10")
        report = session.calculate().report

        assert session.currency is Currency.EUR
        assert report.target_price_usd == Decimal("20")
