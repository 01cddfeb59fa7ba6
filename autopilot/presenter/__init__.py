"""
Result presenter.
Renders an AnalysisRecord as an HTML report.
"""

from .html_report import render_html, write_report, show_report

__all__ = ["render_html", "write_report", "show_report"]
