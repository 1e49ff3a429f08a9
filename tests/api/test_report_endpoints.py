"""
tests/api/test_report_endpoints.py

Endpoint tests for the report catalogue and the static-file mount.
The `reports_tree` fixture populates the app's configured reports
directory for the duration of each test.
"""

import shutil
from unittest.mock import AsyncMock

from fastapi.testclient import TestClient

from app.api import report_controller
from app.core.config import settings
from app.core.exceptions import CatalogError


class TestListCategories:
    """Tests for GET /api/project-report-categories."""

    def test_returns_sorted_category_names(self, client: TestClient, reports_tree) -> None:
        response = client.get("/api/project-report-categories")

        assert response.status_code == 200
        assert response.json() == ["Alpha", "Finance", "Zeta"]

    def test_missing_root_returns_404(self, client: TestClient) -> None:
        shutil.rmtree(settings.reports_dir, ignore_errors=True)

        response = client.get("/api/project-report-categories")

        assert response.status_code == 404
        assert str(settings.reports_dir) not in response.text

    def test_enumeration_failure_returns_500(self, client: TestClient, monkeypatch) -> None:
        monkeypatch.setattr(
            report_controller.report_service,
            "list_categories",
            AsyncMock(side_effect=CatalogError("Permission denied: /srv/files")),
        )

        response = client.get("/api/project-report-categories")

        assert response.status_code == 500
        assert response.json() == {"error": "Unable to list categories"}


class TestListReports:
    """Tests for GET /api/project-reports."""

    def test_returns_reports_in_category(self, client: TestClient, reports_tree) -> None:
        response = client.get("/api/project-reports", params={"category": "Finance"})

        assert response.status_code == 200
        assert response.json() == [
            {"name": "Annual Report 2023", "file": "/ProjectReports2/Finance/Annual_Report_2023.pdf"},
            {"name": "Budget", "file": "/ProjectReports2/Finance/Budget.PDF"},
        ]

    def test_missing_category_returns_400(self, client: TestClient) -> None:
        response = client.get("/api/project-reports")

        assert response.status_code == 400
        assert response.json() == {"error": "Category is required."}

    def test_blank_category_returns_400(self, client: TestClient) -> None:
        response = client.get("/api/project-reports", params={"category": ""})
        assert response.status_code == 400

    def test_unknown_category_returns_404(self, client: TestClient, reports_tree) -> None:
        response = client.get("/api/project-reports", params={"category": "Marketing"})

        assert response.status_code == 404
        assert response.json() == {"error": "Category not found."}

    def test_traversal_attempt_returns_404(self, client: TestClient, reports_tree) -> None:
        response = client.get("/api/project-reports", params={"category": "../.."})
        assert response.status_code == 404


class TestStaticDownloads:
    """Files under files_dir are served at their relative path."""

    def test_listed_link_downloads_the_pdf(self, client: TestClient, reports_tree) -> None:
        [first, _] = client.get("/api/project-reports", params={"category": "Finance"}).json()

        response = client.get(first["file"])

        assert response.status_code == 200
        assert response.content == b"%PDF-1.4\n%%EOF"

    def test_missing_file_returns_404(self, client: TestClient, reports_tree) -> None:
        response = client.get("/ProjectReports2/Finance/missing.pdf")
        assert response.status_code == 404
