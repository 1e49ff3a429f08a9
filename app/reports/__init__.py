"""app/reports/__init__.py — public API of the reports package."""

from app.reports.catalog import ReportCatalog, ReportEntry

__all__ = [
    "ReportCatalog",
    "ReportEntry",
]
