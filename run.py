"""Entry point for the Blog Posts API server.

This script serves the FastAPI application with Uvicorn.  It is
intended to be executed from the project root, for example inside a
Docker container where you only specify a single Python file to run.

Host, port, data file and log level are read from environment
variables (see ``blog_api.app.core.config``).  On SIGINT or SIGTERM
Uvicorn stops accepting connections, waits up to
``SHUTDOWN_TIMEOUT`` seconds for in‑flight requests, runs the
application's shutdown handlers and exits.

Usage:
    python run.py
"""
import asyncio
import logging
from typing import Optional

from uvicorn import Config, Server

from blog_api.app.core.config import Settings, settings as default_settings
from blog_api.app.main import create_app

logger = logging.getLogger("blog_api")


def build_server(settings: Optional[Settings] = None) -> Server:
    """Create a Uvicorn server for a freshly built application."""
    settings = settings or default_settings
    app = create_app(settings)
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
        timeout_graceful_shutdown=settings.shutdown_timeout,
    )
    return Server(config)


async def main() -> None:
    server = build_server()
    logger.info("Starting server on %s:%s", server.config.host, server.config.port)
    await server.serve()
    logger.info("Server stopped")


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
