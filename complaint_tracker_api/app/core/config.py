"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields, so the
service starts with no configuration at all and listens on the
historical port ``8080``.
"""

import os
from dataclasses import dataclass
from typing import Optional


# Level names understood by both the ``logging`` module and uvicorn.
LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")
_LOG_LEVEL_ALIASES = {"WARN": "WARNING", "FATAL": "CRITICAL"}


def normalise_log_level(name: str) -> str:
    """Return the canonical upper‑case level name; unknown names become ``INFO``."""
    level = name.strip().upper()
    level = _LOG_LEVEL_ALIASES.get(level, level)
    return level if level in LOG_LEVELS else "INFO"


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Complaint Tracker API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: Optional[str] = os.getenv("LOG_FILE") or None

    # The single secret code that grants administrative operations
    # (listing every complaint and resolving complaints).  It is not a
    # registered user; a user registering with the same code gains no
    # extra rights through registration.
    admin_secret_code: str = os.getenv("ADMIN_SECRET_CODE", "admin")

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "8080"))

    def __post_init__(self) -> None:
        self.log_level = normalise_log_level(self.log_level)


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should be set before importing this module.
settings = Settings()
