"""
app/services/report_service.py

Thin async facade over ReportCatalog: directory listings run in a worker
thread and catalogue entries are mapped to response DTOs.
"""

from __future__ import annotations

import asyncio
from typing import List, Optional

from app.core.exceptions import ValidationError
from app.core.logger import get_logger
from app.models.report_models import ReportItem
from app.reports.catalog import ReportCatalog

logger = get_logger(__name__)


class ReportService:
    def __init__(self, catalog: ReportCatalog | None = None) -> None:
        self._catalog: ReportCatalog = catalog or ReportCatalog()

    async def list_categories(self) -> List[str]:
        """
        Raises:
            NotFoundError : Reports root is missing.
            CatalogError  : Enumeration failed.
        """
        categories = await asyncio.to_thread(self._catalog.list_categories)
        logger.info("Listed %d report categor(y/ies).", len(categories))
        return categories

    async def list_reports(self, category: Optional[str]) -> List[ReportItem]:
        """
        Raises:
            ValidationError : ``category`` is missing or blank.
            NotFoundError   : No such category.
            CatalogError    : Enumeration failed.
        """
        # Checked here too so a bad request never reaches the thread pool.
        if category is None or not category.strip():
            raise ValidationError("Category is required.")

        entries = await asyncio.to_thread(self._catalog.list_reports, category)
        logger.info("Listed %d report(s) in category '%s'.", len(entries), category)
        return [ReportItem(name=e.name, file=e.file) for e in entries]


# ── Module-level singleton ─────────────────────────────────────────────────────

report_service = ReportService()
