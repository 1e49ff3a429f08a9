"""
tests/services/test_report_service.py

Unit tests for ReportService with the ReportCatalog mocked out.
"""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from app.core.exceptions import CatalogError, NotFoundError, ValidationError
from app.models.report_models import ReportItem
from app.reports.catalog import ReportEntry
from app.services.report_service import ReportService


def _make_service() -> ReportService:
    catalog = MagicMock()
    catalog.list_categories.return_value = ["Alpha", "Zeta"]
    catalog.list_reports.return_value = [
        ReportEntry(name="Annual Report 2023", file="/ProjectReports2/Finance/Annual_Report_2023.pdf"),
    ]
    return ReportService(catalog=catalog)


class TestReportService:

    @pytest.mark.asyncio
    async def test_list_categories_passthrough(self) -> None:
        service = _make_service()
        assert await service.list_categories() == ["Alpha", "Zeta"]

    @pytest.mark.asyncio
    async def test_list_reports_maps_to_dto(self) -> None:
        service = _make_service()

        result = await service.list_reports("Finance")

        assert result == [
            ReportItem(name="Annual Report 2023", file="/ProjectReports2/Finance/Annual_Report_2023.pdf")
        ]
        service._catalog.list_reports.assert_called_once_with("Finance")

    @pytest.mark.asyncio
    @pytest.mark.parametrize("category", [None, "", " "])
    async def test_missing_category_never_reaches_catalog(self, category) -> None:
        service = _make_service()

        with pytest.raises(ValidationError):
            await service.list_reports(category)

        service._catalog.list_reports.assert_not_called()

    @pytest.mark.asyncio
    async def test_catalog_errors_propagate(self) -> None:
        service = _make_service()
        service._catalog.list_categories.side_effect = CatalogError("permission denied")
        service._catalog.list_reports.side_effect = NotFoundError("Category not found: 'X'")

        with pytest.raises(CatalogError):
            await service.list_categories()
        with pytest.raises(NotFoundError):
            await service.list_reports("X")
