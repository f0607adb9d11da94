"""
Logging setup for the Blog Posts API.

``setup_logging`` attaches a console handler, and optionally a file
handler, to the root logger.  Records look like::

    2026-01-01 12:00:00 [INFO] blog_api.app.services.post_service: Created post 1

A root logger that already has handlers is left alone, so calling
``create_app`` several times (as the tests do) never duplicates
output.
"""

import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def resolve_level(level: Optional[str]) -> int:
    """Map a level name such as ``"debug"`` to its number; default ``INFO``."""
    value = getattr(logging, (level or "").strip().upper(), None)
    return value if isinstance(value, int) else logging.INFO


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configure the root logger for the service.

    Parameters
    ----------
    level : str
        Level name, case insensitive.  Unknown names mean ``INFO``.
    logfile : Optional[str]
        Extra file to write records to, resolved against the current
        working directory.
    """
    root = logging.getLogger()
    if root.handlers:
        return

    root.setLevel(resolve_level(level))
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    handlers = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)
