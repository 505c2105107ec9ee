"""Tests for the plain-text yield report."""

import math
import os
import sys

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..', 'src'))

from model.report import format_percent, format_report, format_report_line
from model.YieldInputs import YieldInputs
from calc.yield_calculator import calculate_yields


@pytest.fixture
def example_result(example_inputs):
    return calculate_yields(example_inputs)


class TestFormatPercent:

    def test_three_decimals_right_aligned(self):
        assert format_percent(3.4466) == " 3.447"
        assert format_percent(-12.5) == "-12.500"

    def test_non_finite_values(self):
        assert format_percent(math.nan) == "   NaN"
        assert format_percent(math.inf) == "  +Inf"
        assert format_percent(-math.inf) == "  -Inf"

    def test_custom_width(self):
        assert format_percent(5.0, 10) == "     5.000"
        assert format_percent(math.nan, 10) == "       NaN"


class TestReportFormatting:

    def test_line_layout(self):
        line = format_report_line("Treasury", 3.42, 4.9614)
        assert line == "Treasury:           3.420% after tax,  4.961% tax equivalent"

    def test_wide_values_are_not_truncated(self):
        line = format_report_line("AMT Free", 123.4567, -12.5)
        assert line == "AMT Free:          123.457% after tax, -12.500% tax equivalent"

    def test_nan_values(self):
        line = format_report_line("Fully Taxable", math.nan, math.nan)
        assert line == "Fully Taxable:        NaN% after tax,    NaN% tax equivalent"

    def test_infinite_values(self):
        line = format_report_line("Treasury", math.inf, -math.inf)
        assert line == "Treasury:            +Inf% after tax,   -Inf% tax equivalent"

    def test_report_order_and_line_count(self, example_result):
        lines = format_report(example_result).split("\n")
        assert len(lines) == 5
        labels = [line.split(':')[0] for line in lines]
        assert labels == ["Fully Taxable", "Treasury", "Nat'l Tax-Exempt", "State Tax-Exempt", "AMT Free"]

    def test_report_has_no_trailing_newline(self, example_result):
        assert not format_report(example_result).endswith("\n")

    def test_report_matches_example(self, example_result, expected_example_report):
        assert format_report(example_result) == expected_example_report

    def test_nan_fully_taxable_report(self):
        result = calculate_yields(YieldInputs.from_spec({'fullyTaxable': float('nan'), 'fedBracket': 24.0}))
        first_line = result.text.split("\n")[0]
        assert first_line == "Fully Taxable:        NaN% after tax,    NaN% tax equivalent"

    def test_fully_taxed_report_shows_infinite_yield(self):
        result = calculate_yields(YieldInputs(fully_taxable=5.0, amt_free=3.7, fed_bracket=100.0))
        lines = result.text.split("\n")
        assert lines[1] == "Treasury:           0.000% after tax,    NaN% tax equivalent"
        assert lines[4] == "AMT Free:           3.700% after tax,   +Inf% tax equivalent"
