"""
tests/conftest.py

Shared pytest fixtures available to all test modules.

Fixtures defined here are auto-discovered by pytest — no import needed.

The app reads its paths from the environment when `app.core.config` is
first imported, so the environment is pointed at a throw-away directory
before anything from `app` is imported.  The real ./serve_files and
./contacts.xlsx are never touched.
"""

import os
import shutil
import tempfile
from pathlib import Path

_RUNTIME_DIR = Path(tempfile.mkdtemp(prefix="project-reports-api-"))
os.environ["FILES_DIR"] = str(_RUNTIME_DIR / "serve_files")
os.environ["REPORTS_SUBDIR"] = "ProjectReports2"
os.environ["LEDGER_PATH"] = str(_RUNTIME_DIR / "contacts.xlsx")
os.environ["ALLOWED_ORIGIN"] = "https://frontend.example"

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from app.core.config import settings  # noqa: E402
from app.main import app  # noqa: E402


# ── Core client fixture ────────────────────────────────────────────────────────

@pytest.fixture(scope="session")
def client() -> TestClient:
    """
    A synchronous TestClient wrapping the FastAPI app.

    session-scoped so the app is instantiated once per test run.
    """
    with TestClient(app, raise_server_exceptions=False) as c:
        yield c


# ── Filesystem fixtures ────────────────────────────────────────────────────────

def build_reports_tree(root: Path) -> Path:
    """
    Populate ``root`` with a small report tree:

        Alpha/            (empty)
        Finance/Annual_Report_2023.pdf
        Finance/Budget.PDF
        Finance/notes.txt
        Zeta/Plan.pdf
        README.md         (a file, not a category)
    """
    (root / "Alpha").mkdir(parents=True)
    finance = root / "Finance"
    finance.mkdir()
    (finance / "Annual_Report_2023.pdf").write_bytes(b"%PDF-1.4\n%%EOF")
    (finance / "Budget.PDF").write_bytes(b"%PDF-1.4\n%%EOF")
    (finance / "notes.txt").write_text("not a report")
    zeta = root / "Zeta"
    zeta.mkdir()
    (zeta / "Plan.pdf").write_bytes(b"%PDF-1.4\n%%EOF")
    (root / "README.md").write_text("ignored")
    return root


@pytest.fixture
def reports_tree_factory():
    """Builder for the sample report tree, for tests that want their own root."""
    return build_reports_tree


@pytest.fixture
def reports_tree() -> Path:
    """The app's configured reports directory, populated for one test."""
    root = settings.reports_dir
    shutil.rmtree(root, ignore_errors=True)
    build_reports_tree(root)
    yield root
    shutil.rmtree(root, ignore_errors=True)


@pytest.fixture
def ledger_path() -> Path:
    """The app's configured ledger path, guaranteed absent at test start."""
    path = Path(settings.ledger_path)
    path.unlink(missing_ok=True)
    yield path
    path.unlink(missing_ok=True)


@pytest.fixture
def contact_payload() -> dict:
    return {"name": "Asha Patel", "email": "asha@example.com", "mobile": "9876543210"}
