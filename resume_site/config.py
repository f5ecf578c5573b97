"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - get_settings() is cached (lru_cache) — single instance per process
    - site_url never ends with "/"
    - contact_endpoint unset (or blank) means the contact form is disabled

Design Decisions:
    - Defaults provided for every setting: the bundled resume works out of the box
"""

from functools import lru_cache
from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_CONTENT_PATH = Path(__file__).parent / "content" / "resume.json"


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Site
    site_url: str = "http://localhost:8000"
    resume_content_path: Path = DEFAULT_CONTENT_PATH
    google_site_verification: str | None = None

    @field_validator("site_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    # Contact form relay (Formspree-style endpoint)
    contact_endpoint: str | None = None
    contact_timeout_seconds: float = 10.0

    @field_validator("contact_endpoint")
    @classmethod
    def blank_endpoint_is_unset(cls, v: str | None) -> str | None:
        if v is not None and not v.strip():
            return None
        return v

    # API
    cors_origins: list[str] = ["http://localhost:8000"]
    host: str = "127.0.0.1"
    port: int = 8000

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
