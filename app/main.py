"""
app/main.py

FastAPI application entry point.

Responsibilities:
  - Create the FastAPI app with metadata from config
  - Restrict cross-origin access to the single allow-listed frontend
  - Register all API routers
  - Translate malformed request bodies and uncaught AppBaseException into
    the standard { "error": "..." } shape
  - Expose a /health endpoint for liveness probes
  - Serve everything under files_dir as static downloads (mounted last so
    the API routes take precedence)
"""

from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from app.api.contact_controller import router as contact_router
from app.api.report_controller import router as report_router
from app.core.config import settings
from app.core.exceptions import AppBaseException
from app.core.logger import get_logger

logger = get_logger(__name__)

# ── App instance ───────────────────────────────────────────────────────────────

app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description=(
        "Lists downloadable project reports by category and records "
        "contact-form submissions in a spreadsheet ledger."
    ),
)

# ── Middleware ─────────────────────────────────────────────────────────────────

app.add_middleware(
    CORSMiddleware,
    allow_origins=[settings.allowed_origin],
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["*"],
)

# ── Routers ────────────────────────────────────────────────────────────────────

app.include_router(report_router)
app.include_router(contact_router)

# ── Exception handlers ─────────────────────────────────────────────────────────

@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed JSON or wrongly typed fields are caller errors: 400, not 422."""
    logger.warning("Malformed request on %s: %s", request.url.path, exc.errors())
    return JSONResponse(status_code=400, content={"error": "Invalid request body."})


@app.exception_handler(AppBaseException)
async def app_exception_handler(request: Request, exc: AppBaseException) -> JSONResponse:
    """
    Safety-net for any AppBaseException that escapes controller-level handling.
    The message is logged, never returned.
    """
    logger.exception("Unhandled application error on %s: %s", request.url.path, exc)
    return JSONResponse(status_code=500, content={"error": "Internal server error."})


# ── Health endpoint ────────────────────────────────────────────────────────────

@app.get("/health", tags=["Health"], summary="Liveness probe")
async def health() -> dict:
    """Returns 200 OK when the service is running."""
    return {"status": "ok", "version": settings.app_version}


# ── Static downloads ───────────────────────────────────────────────────────────
# e.g. files_dir/ProjectReports2/Finance/Q1.pdf → GET /ProjectReports2/Finance/Q1.pdf

Path(settings.files_dir).mkdir(parents=True, exist_ok=True)
app.mount("/", StaticFiles(directory=settings.files_dir), name="files")
