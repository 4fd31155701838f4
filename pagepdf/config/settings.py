"""
Application settings loaded from environment variables (PAGEPDF_*).
"""

import tempfile
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEVELOPMENT = "development"

DEFAULT_CHROMIUM_PACK_URL = (
    "https://github.com/Sparticuz/chromium/releases/download/"
    "v131.0.1/chromium-v131.0.1-pack.tar"
)


class Settings(BaseSettings):
    """Runtime configuration."""

    model_config = SettingsConfigDict(
        env_prefix="PAGEPDF_",
        env_file=".env",
        extra="ignore",
    )

    # Runtime indicator; only the exact value "development" selects the local browser
    environment: str = "production"

    host: str = "127.0.0.1"
    port: int = 8000
    log_level: str = "INFO"
    cors_origins: list[str] = Field(default_factory=lambda: ["http://localhost:3000"])

    # Minimal Chromium used outside development
    chromium_pack_url: str = DEFAULT_CHROMIUM_PACK_URL
    chromium_dir: Path = Field(default_factory=lambda: Path(tempfile.gettempdir()))
    chromium_download_timeout: float = 120.0

    @property
    def is_development(self) -> bool:
        return self.environment == DEVELOPMENT


_settings: Settings | None = None


def get_settings() -> Settings:
    """Return the process-wide settings, loading them on first use."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def init_settings(settings: Settings) -> Settings:
    """Install explicit settings (tests, embedding)."""
    global _settings
    _settings = settings
    return _settings


def reset_settings() -> None:
    """Drop cached settings so the next get_settings() reloads them."""
    global _settings
    _settings = None
