"""Rich terminal rendering of manifest size reports."""

from swprecache.report.renderer import ReportRenderer

__all__ = ["ReportRenderer"]
