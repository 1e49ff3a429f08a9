"""
app/reports/catalog.py

Read-only view of the report tree on disk:

    <files_dir>/<reports_subdir>/<category>/<report>.pdf

Categories are the immediate subdirectories of the reports root; reports
are the PDF files directly inside a category.  Nothing here opens or
parses the PDFs themselves.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional
from urllib.parse import quote

from app.core.config import settings
from app.core.constants import REPORT_EXTENSION
from app.core.exceptions import CatalogError, NotFoundError, ValidationError
from app.core.logger import get_logger

logger = get_logger(__name__)

# Characters encodeURIComponent leaves alone on top of quote()'s defaults,
# so links look the same as the ones the frontend already builds.
_URL_SAFE = "!~*'()"


@dataclass(frozen=True)
class ReportEntry:
    """
    A downloadable report inside a category.

    Attributes:
        name : Human-readable title (file stem, underscores → spaces).
        file : URL path of the PDF under the static-file mount.
    """

    name: str
    file: str


def display_name(filename: str) -> str:
    """``Annual_Report_2023.pdf`` → ``Annual Report 2023``."""
    stem = filename
    if stem.lower().endswith(REPORT_EXTENSION):
        stem = stem[: -len(REPORT_EXTENSION)]
    return stem.replace("_", " ")


def _category_sort_key(name: str) -> tuple:
    # Case-insensitive first so "alpha" sits next to "Alpha", then exact.
    return (name.casefold(), name)


class ReportCatalog:
    """
    Enumerates report categories and the PDFs inside them.

    Stateless apart from its root paths, so one instance can safely serve
    concurrent requests.
    """

    def __init__(
        self,
        reports_dir: str | Path | None = None,
        url_prefix: Optional[str] = None,
    ) -> None:
        """
        Args:
            reports_dir : Directory holding one subdirectory per category.
                          Defaults to ``settings.reports_dir``.
            url_prefix  : First path segment of download links, i.e. the
                          reports directory's name under the static mount.
                          Defaults to ``settings.reports_subdir``.
        """
        self._root = Path(reports_dir) if reports_dir is not None else settings.reports_dir
        self._url_prefix = url_prefix if url_prefix is not None else settings.reports_subdir

    @property
    def root(self) -> Path:
        return self._root

    # ── Public API ─────────────────────────────────────────────────────────────

    def list_categories(self) -> List[str]:
        """
        Return the category names, sorted.

        Raises:
            NotFoundError : The reports root does not exist.
            CatalogError  : The root exists but could not be enumerated.
        """
        if not self._root.is_dir():
            raise NotFoundError(f"Reports directory not found: '{self._root}'")

        try:
            names = [entry.name for entry in self._root.iterdir() if entry.is_dir()]
        except OSError as exc:
            raise CatalogError(f"Unable to list categories in '{self._root}': {exc}") from exc

        names.sort(key=_category_sort_key)
        logger.debug("Found %d categor(y/ies) under '%s'.", len(names), self._root)
        return names

    def list_reports(self, category: Optional[str]) -> List[ReportEntry]:
        """
        Return the PDF reports in ``category``, ordered by filename.

        Args:
            category: Name of a subdirectory of the reports root.

        Raises:
            ValidationError : ``category`` is missing or blank. Checked before
                              any filesystem access.
            NotFoundError   : No such category directory.
            CatalogError    : The directory exists but could not be enumerated.
        """
        if category is None or not category.strip():
            raise ValidationError("Category is required.")

        category_dir = self._resolve_category(category)

        try:
            filenames = sorted(
                entry.name
                for entry in category_dir.iterdir()
                if entry.is_file() and entry.name.lower().endswith(REPORT_EXTENSION)
            )
        except OSError as exc:
            raise CatalogError(f"Unable to list reports in '{category_dir}': {exc}") from exc

        return [
            ReportEntry(name=display_name(filename), file=self.download_path(category, filename))
            for filename in filenames
        ]

    def download_path(self, category: str, filename: str) -> str:
        """Percent-encoded URL path of ``filename`` under the static mount."""
        segments = (self._url_prefix, category, filename)
        return "/" + "/".join(quote(segment, safe=_URL_SAFE) for segment in segments)

    # ── Internals ──────────────────────────────────────────────────────────────

    def _resolve_category(self, category: str) -> Path:
        """Map a category name to its directory, refusing paths outside the root."""
        root = self._root.resolve()
        candidate = (root / category).resolve()
        if candidate.parent != root or not candidate.is_dir():
            raise NotFoundError(f"Category not found: '{category}'")
        return candidate
