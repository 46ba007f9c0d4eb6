"""Entry point for the PaLevel backend.

Serves the FastAPI application with Uvicorn.  It is intended to be
executed from the project root, for example on Render, Heroku or in
Docker, where you only specify a single Python file to run.

Host and port are read from the ``HOST`` and ``PORT`` environment
variables (defaults ``0.0.0.0`` and ``5000``); see
``palevel_api/app/core/config.py`` for the other supported variables.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from palevel_api.app.core.config import settings
from palevel_api.app.main import app as api_app


async def run_api() -> None:
    """Start the API using Uvicorn."""
    config = Config(
        app=api_app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    logging.info("PaLevel backend running on port %s", settings.port)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(run_api())
    except (KeyboardInterrupt, SystemExit):
        pass
