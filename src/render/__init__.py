"""Render module for tax-equivalent yield output display."""

from render.renderers import (
    BaseRenderer,
    YieldReportRenderer,
    TaxDetailsRenderer,
    RENDERER_REGISTRY,
)
from model.report import REPORT_ROWS, format_report, format_report_line

__all__ = [
    'BaseRenderer',
    'YieldReportRenderer',
    'TaxDetailsRenderer',
    'format_report',
    'format_report_line',
    'REPORT_ROWS',
    'RENDERER_REGISTRY',
]
