"""
Reporting module for the sale options engine.

Generates the Sale Options Comparison PDF from a property description,
its valuation and the comparison result.

Usage:
    from reporting import render

    pdf_bytes = render(valuation, description, comparison, generated_at)
"""

from .comparison_report import (
    DISCLAIMER_TEXT,
    GENERATOR_VERSION,
    RECOMMENDED_BADGE,
    ComparisonReportGenerator,
    render,
    report_filename,
)

__all__ = [
    "ComparisonReportGenerator",
    "render",
    "report_filename",
    "DISCLAIMER_TEXT",
    "GENERATOR_VERSION",
    "RECOMMENDED_BADGE",
]
