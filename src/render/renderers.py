"""Renderer classes for displaying tax-equivalent yield results.

This module contains the renderer classes that handle the presentation logic for a calculation. Each renderer takes a
YieldResult and prints the parts it needs.
"""

from abc import ABC, abstractmethod

from model.YieldResult import YieldResult
from model.report import REPORT_ROWS, format_percent, format_report


class BaseRenderer(ABC):
    """Abstract base class for all renderers."""

    @abstractmethod
    def render(self, data: YieldResult) -> None:
        """Render the data to output.

        Args:
            data: The YieldResult to display
        """
        pass


class YieldReportRenderer(BaseRenderer):
    """Renderer for the plain five-line yield report."""

    def render(self, data: YieldResult) -> None:
        print(data.text or format_report(data))


class TaxDetailsRenderer(BaseRenderer):
    """Renderer for the applied tax settings and a per-category yield table."""

    def render(self, data: YieldResult) -> None:
        """Render the tax settings and yield breakdown.

        Args:
            data: YieldResult from the calculator
        """
        print()
        print("=" * 60)
        print(f"{'TAX-EQUIVALENT YIELDS':^60}")
        print("=" * 60)

        print()
        print("-" * 60)
        print("TAX SETTINGS")
        print("-" * 60)
        fed_label = 'Federal Rate (AMT):' if data.amt else 'Federal Rate:'
        print(f"  {fed_label:<40} {data.federal_rate:>14.3f}%")
        print(f"  {'State Rate:':<40} {data.state_rate:>14.3f}%")
        print(f"  {'Itemized Deductions:':<40} {'Yes' if data.itemize else 'No':>15}")
        print(f"  {'Gross-Up Factor:':<40} {data.grossup:>15.6f}")

        print()
        print("-" * 60)
        print("YIELDS")
        print("-" * 60)
        print(f"  {'Category':<20} {'After Tax':>14} {'Tax Equivalent':>18}")
        print(f"  {'-' * 20} {'-' * 14} {'-' * 18}")
        for label, after_attr, tey_attr in REPORT_ROWS:
            after_tax = getattr(data, after_attr)
            tey = getattr(data, tey_attr)
            print(f"  {label:<20} {format_percent(after_tax, 13)}% {format_percent(tey, 17)}%")
        print()


# Registry of available renderers by mode name
RENDERER_REGISTRY = {
    'Report': YieldReportRenderer,
    'TaxDetails': TaxDetailsRenderer,
}
