"""Plain-text report formatting for YieldResult.

Kept free of any output so the calculator can attach the report text to a
result and the renderers can print it.
"""

import math
from typing import List, Tuple

from model.YieldResult import YieldResult


# Report rows in display order: (label, after-tax field, tax-equivalent field)
REPORT_ROWS: List[Tuple[str, str, str]] = [
    ("Fully Taxable", "fully_taxable_after_tax", "fully_taxable_tey"),
    ("Treasury", "treasury_after_tax", "treasury_tey"),
    ("Nat'l Tax-Exempt", "natl_after_tax", "natl_tey"),
    ("State Tax-Exempt", "state_after_tax", "state_tey"),
    ("AMT Free", "amt_free_after_tax", "amt_free_tey"),
]

LABEL_WIDTH = 18


def format_percent(value: float, width: int = 6) -> str:
    """Format a percentage to 3 decimals; non-finite values read NaN, +Inf or -Inf."""
    if math.isnan(value):
        return f"{'NaN':>{width}}"
    if math.isinf(value):
        return f"{'+Inf' if value > 0 else '-Inf':>{width}}"
    return f"{value:{width}.3f}"


def format_report_line(label: str, after_tax: float, tey: float) -> str:
    """Format one report line, e.g. 'Treasury:  3.420% after tax,  4.961% tax equivalent'."""
    return (f"{label + ':':<{LABEL_WIDTH}} {format_percent(after_tax)}% after tax, "
            f"{format_percent(tey)}% tax equivalent")


def format_report(result: YieldResult) -> str:
    """Build the five-line report for a result (no trailing newline)."""
    return "\n".join(
        format_report_line(label, getattr(result, after_attr), getattr(result, tey_attr))
        for label, after_attr, tey_attr in REPORT_ROWS
    )
