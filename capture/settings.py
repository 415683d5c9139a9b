# capture/settings.py
from __future__ import annotations

import logging
import sys
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field, field_validator

log = logging.getLogger(__name__)

WEBHOOK_PLACEHOLDER = "PASTE_WEBHOOK_URL_HERE"


class Settings(BaseSettings):
    # -------- Server ----------
    landing_port: int = Field(8080, alias="LANDING_PORT")
    log_level: str = Field("INFO", alias="LOG_LEVEL")

    # -------- Google Apps Script webhook ----------
    # Left as the placeholder, the form still works; submissions fail at dispatch.
    webhook_url: str = Field(WEBHOOK_PLACEHOLDER, alias="GOOGLE_SCRIPT_URL")
    webhook_timeout: float | None = Field(default=None, alias="WEBHOOK_TIMEOUT")  # None = wait forever

    # -------- Timers (milliseconds) ----------
    success_reenable_delay_ms: int = Field(2000, alias="SUCCESS_REENABLE_DELAY_MS")
    download_delay_ms: int = Field(500, alias="DOWNLOAD_DELAY_MS")

    # -------- Ebook delivery ----------
    ebook_path: str = Field("static/ebook.pdf", alias="EBOOK_PATH")
    ebook_href: str = Field("/ebook.pdf", alias="EBOOK_HREF")
    ebook_filename: str = Field("Overcome_Procrastination_Guide.pdf", alias="EBOOK_FILENAME")
    spam_receives_download: bool = Field(True, alias="SPAM_RECEIVES_DOWNLOAD")

    # -------- Gateway ----------
    max_visitor_forms: int = Field(1000, alias="MAX_VISITOR_FORMS")  # oldest evicted past this

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        populate_by_name=True,
        extra="ignore",
    )

    @field_validator("webhook_url")
    @classmethod
    def _strip_url(cls, v: str) -> str:
        return v.strip()

    @field_validator("max_visitor_forms")
    @classmethod
    def _positive(cls, v: int) -> int:
        if v < 1:
            raise ValueError("MAX_VISITOR_FORMS must be >= 1")
        return v

    @field_validator("success_reenable_delay_ms", "download_delay_ms")
    @classmethod
    def _non_negative(cls, v: int) -> int:
        if v < 0:
            raise ValueError("delays must be >= 0 ms")
        return v

    @property
    def webhook_configured(self) -> bool:
        return bool(self.webhook_url) and self.webhook_url != WEBHOOK_PLACEHOLDER


def check_configuration(cfg: Settings) -> bool:
    """Warn, never fail, when the webhook URL was left as the placeholder."""
    if not cfg.webhook_configured:
        log.warning("Warning: Google Apps Script URL not configured!")
        log.warning(
            "Set GOOGLE_SCRIPT_URL (environment or .env) to your webhook URL. "
            "Submissions will fail until it is configured."
        )
        return False
    log.info("Google Apps Script configured")
    return True


def _pretty_fail(msg: str) -> None:
    print(f"\n[settings] {msg}\n", file=sys.stderr)
    sys.exit(1)


try:
    settings = Settings()
except Exception as e:
    _pretty_fail(
        "Invalid settings. Check .env (repo root) or the environment:\n"
        "  GOOGLE_SCRIPT_URL=https://script.google.com/macros/s/<id>/exec\n"
        "Optional:\n"
        "  WEBHOOK_TIMEOUT=<seconds>\n"
        "  SUCCESS_REENABLE_DELAY_MS=2000, DOWNLOAD_DELAY_MS=500\n"
        "  EBOOK_PATH, EBOOK_HREF, EBOOK_FILENAME, SPAM_RECEIVES_DOWNLOAD\n"
        "  MAX_VISITOR_FORMS=1000\n"
        "  LANDING_PORT=8080, LOG_LEVEL=INFO\n\n"
        f"Raw error: {e}"
    )
