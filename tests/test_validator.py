"""输入校验测试"""
import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent))

import pytest
from config.constants import UnitSystem
from core.validator import (
    parse_number,
    validate_bmi,
    validate_currency,
    validate_emi,
    validate_gst,
)


class TestParseNumber:
    @pytest.mark.parametrize("raw, expected", [
        ("100", 100.0),
        (" 8.5 ", 8.5),
        ("1,00,000", 100000.0),
        (12, 12.0),
        (0.5, 0.5),
        ("-3", -3.0),
    ])
    def test_valid(self, raw, expected):
        assert parse_number(raw) == expected

    @pytest.mark.parametrize("raw", [None, "", "   ", "abc", "nan", "inf", "-inf", True, [1]])
    def test_invalid(self, raw):
        assert parse_number(raw) is None


class TestValidateEMI:
    def test_valid(self):
        assert validate_emi("500000", "8.5", "60") == {}

    def test_zero_rate_allowed(self):
        assert validate_emi("500000", "0", "12") == {}

    def test_all_missing(self):
        errors = validate_emi("", "", "")
        assert set(errors) == {"principal", "interest_rate", "tenure"}

    def test_non_positive_principal(self):
        assert "principal" in validate_emi("0", "8", "12")
        assert "principal" in validate_emi("-100", "8", "12")

    def test_negative_rate(self):
        errors = validate_emi("1000", "-1", "12")
        assert set(errors) == {"interest_rate"}

    def test_tenure(self):
        assert "tenure" in validate_emi("1000", "8", "0")
        assert validate_emi("1000", "8", "1.5") == {"tenure": "Tenure must be a whole number"}
        assert validate_emi("1000", "8", 12.0) == {}

    def test_never_raises_on_garbage(self):
        errors = validate_emi(object(), None, "twelve")
        assert set(errors) == {"principal", "interest_rate", "tenure"}


class TestValidateGST:
    def test_valid(self):
        assert validate_gst("1000", 18) == {}

    def test_amount_required(self):
        assert validate_gst("", 18) == {"amount": "Please enter a valid amount"}
        assert "amount" in validate_gst("0", 18)

    def test_rate_any_non_negative(self):
        assert validate_gst("1000", 7.5) == {}
        assert "rate" in validate_gst("1000", -5)


class TestValidateCurrency:
    def test_valid(self):
        assert validate_currency("100", "USD", "INR") == {}

    def test_same_currency_rejected(self):
        errors = validate_currency("100", "USD", "USD")
        assert errors == {"currency": "Please select different currencies"}

    def test_unknown_currency_rejected(self):
        errors = validate_currency("100", "USD", "XYZ")
        assert "XYZ" in errors["currency"]

    def test_amount_and_currency_errors_together(self):
        errors = validate_currency("-1", "EUR", "EUR")
        assert set(errors) == {"amount", "currency"}


class TestValidateBMI:
    def test_valid_metric(self):
        assert validate_bmi("70", "175") == {}

    def test_required(self):
        errors = validate_bmi("", "0")
        assert errors == {
            "weight": "Please enter a valid weight",
            "height": "Please enter a valid height",
        }

    def test_metric_soft_bounds(self):
        errors = validate_bmi("501", "301", UnitSystem.METRIC)
        assert errors["weight"] == "Weight seems too high. Please check your input."
        assert errors["height"] == "Height seems too high. Please check your input."

    def test_bounds_are_inclusive(self):
        assert validate_bmi("500", "300", "metric") == {}

    def test_imperial_skips_soft_bounds(self):
        assert validate_bmi("600", "310", UnitSystem.IMPERIAL) == {}

    def test_invalid_unit(self):
        assert "unit" in validate_bmi("70", "175", "stone")
