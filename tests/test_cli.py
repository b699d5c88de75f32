"""命令行测试"""
import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent))

import pytest
from click.testing import CliRunner

from cli import cli


@pytest.fixture
def runner():
    return CliRunner()


class TestEMICommand:
    def test_basic(self, runner):
        result = runner.invoke(cli, ["emi", "--principal", "100000", "--annual-rate", "10", "--tenure", "12"])
        assert result.exit_code == 0
        assert "Monthly EMI: ₹8,791.59" in result.output
        assert "Total interest: ₹5,499.06" in result.output

    def test_years_with_schedule(self, runner):
        result = runner.invoke(cli, [
            "emi", "--principal", "120000", "--annual-rate", "0",
            "--tenure", "1", "--tenure-unit", "years", "--schedule",
        ])
        assert result.exit_code == 0
        assert "Monthly EMI: ₹10,000.00" in result.output
        assert "period,emi,principal,interest,remaining_principal,cumulative_interest" in result.output

    def test_schedule_skipped_for_very_long_tenure(self, runner):
        result = runner.invoke(cli, [
            "emi", "--principal", "1", "--annual-rate", "0",
            "--tenure", "100000000", "--schedule",
        ])
        assert result.exit_code == 0
        assert "Schedule skipped: tenure exceeds 1200 months" in result.output
        assert "period,emi" not in result.output

    def test_high_rate_long_tenure(self, runner):
        result = runner.invoke(cli, [
            "emi", "--principal", "100000", "--annual-rate", "1000",
            "--tenure", "100", "--tenure-unit", "years",
        ])
        assert result.exit_code == 0
        assert "Monthly EMI: ₹83,333.33" in result.output

    def test_invalid_input(self, runner):
        result = runner.invoke(cli, ["emi", "--principal=-1", "--annual-rate", "10", "--tenure", "12"])
        assert result.exit_code != 0
        assert "Please enter a valid principal amount" in result.output


class TestGSTCommand:
    def test_add(self, runner):
        result = runner.invoke(cli, ["gst", "--amount", "1000"])
        assert result.exit_code == 0
        assert "GST: ₹180.00" in result.output
        assert "Final amount: ₹1,180.00" in result.output

    def test_extract(self, runner):
        result = runner.invoke(cli, ["gst", "--amount", "1180", "--rate", "18", "--mode", "extract"])
        assert result.exit_code == 0
        assert "Base amount: ₹1,000.00" in result.output


class TestConvertCommand:
    def test_default_pair(self, runner):
        result = runner.invoke(cli, ["convert", "--amount", "100"])
        assert result.exit_code == 0
        assert "$100.00 = ₹8,312.00" in result.output
        assert "1 USD = 83.1200 INR" in result.output

    def test_lowercase_codes(self, runner):
        result = runner.invoke(cli, ["convert", "--amount", "10", "--from", "eur", "--to", "gbp"])
        assert result.exit_code == 0
        assert "€10.00" in result.output

    def test_same_currency_rejected(self, runner):
        result = runner.invoke(cli, ["convert", "--amount", "10", "--from", "USD", "--to", "USD"])
        assert result.exit_code != 0
        assert "Please select different currencies" in result.output

    def test_unknown_currency_rejected(self, runner):
        result = runner.invoke(cli, ["convert", "--amount", "10", "--to", "XYZ"])
        assert result.exit_code != 0
        assert "Unsupported currency: XYZ" in result.output


class TestBMICommand:
    def test_metric(self, runner):
        result = runner.invoke(cli, ["bmi", "--weight", "70", "--height", "175"])
        assert result.exit_code == 0
        assert "BMI: 22.9" in result.output
        assert "Category: Normal" in result.output

    def test_implausible_metric(self, runner):
        result = runner.invoke(cli, ["bmi", "--weight", "700", "--height", "175"])
        assert result.exit_code != 0
        assert "Weight seems too high" in result.output


def test_currencies_lists_table(runner):
    result = runner.invoke(cli, ["currencies"])
    assert result.exit_code == 0
    assert "INR" in result.output
    assert "Swiss Franc" in result.output
    assert len(result.output.strip().splitlines()) == 10
