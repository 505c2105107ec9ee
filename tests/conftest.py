"""Pytest configuration for the tax-equivalent yield test suite."""

import os
import sys

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..', 'src')))

from model.YieldInputs import YieldInputs


# Settings from the command-line example (5% taxable, 24% federal, 9.3% state, itemizing)
EXAMPLE_SPEC = {
    'fullyTaxable': 5.0,
    'treasury': 4.5,
    'natlTaxExempt': 3.8,
    'natlAmtPct': 20.0,
    'stateTaxExempt': 3.4,
    'stateAmtPct': 10.0,
    'amtFree': 3.7,
    'fedBracket': 24.0,
    'stateBracket': 9.3,
    'itemize': True,
    'amt': False,
    'amtBracketIndex': 0,
}


@pytest.fixture
def example_inputs():
    return YieldInputs.from_spec(EXAMPLE_SPEC)


@pytest.fixture
def expected_example_report():
    return "\n".join([
        "Fully Taxable:      3.447% after tax,  5.000% tax equivalent",
        "Treasury:           3.420% after tax,  4.961% tax equivalent",
        "Nat'l Tax-Exempt:   3.531% after tax,  5.123% tax equivalent",
        "State Tax-Exempt:   3.400% after tax,  4.932% tax equivalent",
        "AMT Free:           3.700% after tax,  5.368% tax equivalent",
    ])
