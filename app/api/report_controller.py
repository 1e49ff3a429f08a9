"""
app/api/report_controller.py

Handles the report catalogue endpoints:

  GET /api/project-report-categories
  GET /api/project-reports?category=<name>

This layer is responsible only for HTTP concerns:
  - Reading the `category` query parameter.
  - Delegating the directory listing to ReportService.
  - Translating service-level errors into appropriate HTTP responses.

Responses:
  200  A JSON array — category names, or {name, file} report entries.
  400  The `category` query parameter was missing or blank.
  404  The reports root or the requested category does not exist.
  500  The directory exists but could not be listed.
"""

from typing import List, Optional

from fastapi import APIRouter, Query
from fastapi.responses import JSONResponse

from app.core.exceptions import AppBaseException, NotFoundError, ValidationError
from app.core.logger import get_logger
from app.models.report_models import ReportItem
from app.services.report_service import report_service

logger = get_logger(__name__)

router = APIRouter(prefix="/api", tags=["Reports"])


# ── Helpers ────────────────────────────────────────────────────────────────────

def _err(message: str, status: int = 400) -> JSONResponse:
    """Return a JSON error response with the standard error shape."""
    return JSONResponse(status_code=status, content={"error": message})


# ── Endpoints ──────────────────────────────────────────────────────────────────

@router.get(
    "/project-report-categories",
    response_model=List[str],
    summary="List report categories",
)
async def list_categories() -> JSONResponse:
    """Return the names of all report categories, sorted alphabetically."""
    try:
        categories = await report_service.list_categories()

    except NotFoundError as exc:
        logger.warning("Reports root missing: %s", exc)
        return _err("Reports directory not found.", status=404)

    except AppBaseException as exc:
        logger.exception("Error reading categories directory: %s", exc)
        return _err("Unable to list categories", status=500)

    except Exception as exc:  # noqa: BLE001
        logger.exception("Unexpected error listing categories: %s", exc)
        return _err("Unable to list categories", status=500)

    return JSONResponse(status_code=200, content=categories)


@router.get(
    "/project-reports",
    response_model=List[ReportItem],
    summary="List the PDF reports in a category",
)
async def list_reports(
    category: Optional[str] = Query(default=None, description="Category folder name."),
) -> JSONResponse:
    """
    Return every PDF in the given category as ``{name, file}``, where
    ``file`` is the download URL served by the static-file mount.
    """
    try:
        reports = await report_service.list_reports(category)

    except ValidationError as exc:
        logger.warning("Report listing rejected: %s", exc)
        return _err(str(exc))

    except NotFoundError as exc:
        logger.warning("Unknown report category: %s", exc)
        return _err("Category not found.", status=404)

    except AppBaseException as exc:
        logger.exception("Error listing files in category: %s", exc)
        return _err("Unable to list files for the specified category", status=500)

    except Exception as exc:  # noqa: BLE001
        logger.exception("Unexpected error listing reports: %s", exc)
        return _err("Unable to list files for the specified category", status=500)

    return JSONResponse(status_code=200, content=[r.model_dump() for r in reports])
