"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
service starts with no configuration at all.  Override them via
environment variables in a deployment, or pass a ``Settings``
instance to ``create_app`` in tests.
"""

import os
from dataclasses import dataclass, field
from typing import List


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


def _env_list(name: str, default: str) -> List[str]:
    raw = os.getenv(name, default).strip()
    if not raw or raw == "*":
        return ["*"]
    return [part.strip() for part in raw.split(",") if part.strip()]


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Blog Posts API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    # Optional path of a log file in addition to the console handler.
    log_file: str = os.getenv("LOG_FILE", "")

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "8080"))
    # Seconds uvicorn waits for in‑flight requests on SIGINT/SIGTERM.
    shutdown_timeout: int = int(os.getenv("SHUTDOWN_TIMEOUT", "30"))

    # JSON file with initial posts, read once at startup.  A relative
    # path is resolved against the current working directory.
    data_file: str = os.getenv("DATA_FILE", "blog_data.json")
    load_data: bool = _env_bool("LOAD_DATA", "true")

    cors_origins: List[str] = field(default_factory=lambda: _env_list("CORS_ORIGINS", "*"))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should be set before importing this module.
settings = Settings()
