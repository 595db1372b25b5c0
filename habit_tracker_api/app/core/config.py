"""
Simple configuration management.

To avoid an external dependency on the ``pydantic_settings`` package,
the ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
service starts without any configuration at all.
"""

import os
from dataclasses import dataclass, field


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = field(default_factory=lambda: os.getenv("PROJECT_NAME", "Habit Tracker API"))
    api_version: str = field(default_factory=lambda: os.getenv("API_VERSION", "1.0.0"))
    debug: bool = field(default_factory=lambda: _env_flag("DEBUG"))
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))

    # Optional path of a log file.  Empty means console logging only.
    log_file: str = field(default_factory=lambda: os.getenv("LOG_FILE", ""))

    # Prefix under which the habit routes are mounted, e.g. ``/api/Habits``.
    api_prefix: str = field(default_factory=lambda: os.getenv("API_PREFIX", "/api"))

    # Bind address used by ``run.py``.
    host: str = field(default_factory=lambda: os.getenv("HOST", "0.0.0.0"))
    port: int = field(default_factory=lambda: int(os.getenv("PORT", "8000")))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should be set before importing this module; tests that need other
# values construct their own ``Settings()``.
settings = Settings()
