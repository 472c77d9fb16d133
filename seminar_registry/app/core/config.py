"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
service starts without any configuration; the image generation key is
the only value needed for the certificate designer to work.
"""

import os
from dataclasses import dataclass
from typing import Optional


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Seminar Registry")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = _env_flag("DEBUG", "false")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: Optional[str] = os.getenv("LOG_FILE") or None

    # Simulated latency of the gateway, in milliseconds.  Bulk certificate
    # sending uses its own, longer delay to mimic heavier server work.
    api_delay_ms: int = int(os.getenv("API_DELAY_MS", "500"))
    bulk_delay_ms: int = int(os.getenv("BULK_DELAY_MS", "1500"))

    # Reject registrations for seminars that do not exist.
    enforce_seminar_reference: bool = _env_flag("ENFORCE_SEMINAR_REFERENCE", "true")

    # Certificate background generation (Gemini REST API).
    image_api_key: str = os.getenv("IMAGE_API_KEY", "")
    image_api_url: str = os.getenv(
        "IMAGE_API_URL", "https://generativelanguage.googleapis.com/v1beta"
    )
    image_model: str = os.getenv("IMAGE_MODEL", "gemini-2.5-flash-image")
    image_timeout_seconds: float = float(os.getenv("IMAGE_TIMEOUT_SECONDS", "60"))
    image_max_bytes: int = int(os.getenv("IMAGE_MAX_BYTES", str(4 * 1024 * 1024)))

    @property
    def api_delay(self) -> float:
        """Gateway delay in seconds."""
        return self.api_delay_ms / 1000

    @property
    def bulk_delay(self) -> float:
        """Bulk certificate delay in seconds."""
        return self.bulk_delay_ms / 1000


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Because the dataclass
# computes values at class creation time, environment variables should
# be set before importing this module.
settings = Settings()
