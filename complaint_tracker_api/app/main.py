"""
Main entrypoint for the Complaint Tracker API.

This module assembles the FastAPI application, sets up logging,
creates the in‑memory store and admin authority, installs the error
handlers and includes the versioned router.  The ``create_app``
function builds and configures the app, which is then instantiated at
module import time as ``app``, e.g.::

    uvicorn complaint_tracker_api.app.main:app

The routes are mounted twice: at the root, where existing clients
call them (``/login``, ``/register``, ...), and under ``/api/v1``.
Both mounts share the same store.
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .api.v1.router import router as v1_router
from .core.config import Settings, settings as default_settings
from .core.errors import ComplaintTrackerError
from .core.logging_config import setup_logging
from .core.security import AdminAuthority
from .core.store import ComplaintStore


logger = logging.getLogger(__name__)


def error_response(message: str, status_code: int, headers: Optional[dict] = None) -> JSONResponse:
    """Render the ``{"error": message}`` body used by every failure."""
    return JSONResponse(status_code=status_code, content={"error": message}, headers=headers)


def install_error_handlers(app: FastAPI) -> None:
    """Register the handlers mapping every failure to ``{"error": ...}``."""

    @app.exception_handler(ComplaintTrackerError)
    async def complaint_tracker_error_handler(request: Request, exc: ComplaintTrackerError) -> JSONResponse:
        return error_response(exc.message, exc.status_code)

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        return error_response(str(exc.detail), exc.status_code, getattr(exc, "headers", None))


def create_app(
    app_settings: Optional[Settings] = None,
    store: Optional[ComplaintStore] = None,
) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    app_settings : Optional[Settings]
        Settings to use instead of the ones read from the environment.
    store : Optional[ComplaintStore]
        Store to serve.  A fresh, empty store is created when omitted.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    cfg = app_settings or default_settings
    # Initialise logging before anything else so that the setup below
    # can log.
    setup_logging(cfg)

    app = FastAPI(title=cfg.project_name, version=cfg.api_version, debug=cfg.debug)
    app.state.settings = cfg
    app.state.store = store if store is not None else ComplaintStore()
    app.state.admin_authority = AdminAuthority(cfg.admin_secret_code)

    install_error_handlers(app)

    app.include_router(v1_router)
    app.include_router(v1_router, prefix="/api/v1")

    logger.info("%s %s configured", cfg.project_name, cfg.api_version)
    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
