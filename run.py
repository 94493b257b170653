"""Entry point for the Complaint Tracker API.

This script serves the FastAPI application with Uvicorn.  It is
intended to be executed from the project root, for example under
Docker, where you only specify a single Python file to run.

Host, port, log level and the admin secret code are read from
environment variables (``HOST``, ``PORT``, ``LOG_LEVEL``,
``ADMIN_SECRET_CODE``); see ``complaint_tracker_api/app/core/config.py``.
All data lives in memory and is lost when the process stops.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from complaint_tracker_api.app.core.config import settings
from complaint_tracker_api.app.main import app


async def run_api() -> None:
    """Start the API using Uvicorn on ``settings.host:settings.port``."""
    config = Config(app=app, host=settings.host, port=settings.port, reload=False, log_level=settings.log_level.lower())
    server = Server(config)
    logging.getLogger(__name__).info("Server is running on %s:%s", settings.host, settings.port)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(run_api())
    except (KeyboardInterrupt, SystemExit):
        pass
