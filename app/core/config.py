"""
app/core/config.py

Centralised configuration loaded from environment variables.
Use a .env file locally; the deployment platform injects these at runtime.
"""

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # ── Application ────────────────────────────────────────────────────────────
    app_name: str = "Project Reports & Contact API"
    app_version: str = "1.0.0"
    debug: bool = False
    log_level: str = "INFO"

    # ── Server ─────────────────────────────────────────────────────────────────
    host: str = "0.0.0.0"
    port: int = 3000

    # ── Static files / report catalogue ────────────────────────────────────────
    files_dir: str = "./serve_files"          # everything under here is downloadable
    reports_subdir: str = "ProjectReports2"   # category folders live in files_dir/<this>

    # ── Contact ledger ─────────────────────────────────────────────────────────
    ledger_path: str = "./contacts.xlsx"

    # ── CORS ───────────────────────────────────────────────────────────────────
    allowed_origin: str = "https://mahavirmsme.netlify.app"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    @property
    def reports_dir(self) -> Path:
        """Absolute-or-relative path of the report categories root."""
        return Path(self.files_dir) / self.reports_subdir


# Single shared instance — import this everywhere.
settings = Settings()
