import pytest
from decimal import Decimal

from skin_profit.domain.errors import PriceValidationError
from skin_profit.domain.money import format_money, parse_price, round_money


class TestParsePrice:
    """Boundary parsing of price inputs."""

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("10.00", Decimal("10.00")),
            ("  500 ", Decimal("500")),
            ("0", Decimal("0")),
            ("-3.5", Decimal("-3.5")),
            (12, Decimal("12")),
            (0.1, Decimal("0.1")),
            (Decimal("7.25"), Decimal("7.25")),
            ("9999999999999999", Decimal("9999999999999999")),
            ("1e-15", Decimal("1e-15")),
        ],
    )
    def test_accepts_finite_numbers(self, raw, expected):
        assert parse_price(raw) == expected

    @pytest.mark.parametrize(
        "raw", ["", "   ", "abc", "12abc", "1,234.56", "$5", "nan", "inf", "-Infinity", None, True, "1e16", "1e-16", "0E-999999"]
    )
    def test_rejects_non_numeric(self, raw):
        with pytest.raises(PriceValidationError) as exc_info:
            parse_price(raw)

        assert "invalid price input" in str(exc_info.value)

    def test_rejects_non_finite_floats(self):
        with pytest.raises(PriceValidationError):
            parse_price(float("inf"))
        with pytest.raises(PriceValidationError):
            parse_price(float("nan"))


class TestRounding:
    """Two-decimal rounding is half away from zero."""

    @pytest.mark.parametrize(
        "value, expected",
        [
            ("1.005", "1.01"),
            ("1.004", "1.00"),
            ("2.675", "2.68"),
            ("-1.005", "-1.01"),
            ("-2.6", "-2.60"),
            ("45.8", "45.80"),
            ("1E+3", "1000.00"),
        ],
    )
    def test_format_money(self, value, expected):
        assert format_money(Decimal(value)) == expected

    def test_negative_zero_is_normalized(self):
        assert format_money(Decimal("-0.001")) == "0.00"
        assert not round_money(Decimal("-0.004")).is_signed()

    def test_large_values_keep_cents(self):
        assert format_money(Decimal("123456789012345678901234567890.125")) == (
            "123456789012345678901234567890.13"
        )
