"""
Main entrypoint for the Jay Auto Repair API.

This module assembles the FastAPI application: logging, CORS, the
repository, exception handlers and the versioned routers.  The
``create_app`` function builds and configures the app, which is then
instantiated at module import time as ``app``, e.g.::

    uvicorn jay_auto_api.app.main:app --reload

Routes are served under ``/api/v1``.  The same routes are mirrored
under ``/api``, the paths the site's front‑end requests.
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .api.v1.router import router as v1_router
from .core.config import Settings, settings as default_settings
from .core.errors import DuplicateUsernameError, StorageError, ValidationError
from .core.logging_config import setup_logging
from .core.storage import Storage, init_storage

logger = logging.getLogger(__name__)


def register_exception_handlers(app: FastAPI) -> None:
    """Translate domain errors raised by services into HTTP responses."""

    @app.exception_handler(ValidationError)
    async def validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content={"detail": "Validation failed", "errors": exc.errors},
        )

    @app.exception_handler(DuplicateUsernameError)
    async def duplicate_username_handler(request: Request, exc: DuplicateUsernameError) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_409_CONFLICT,
            content={"detail": "Username already taken"},
        )

    @app.exception_handler(StorageError)
    async def storage_error_handler(request: Request, exc: StorageError) -> JSONResponse:
        logger.error("Storage failure on %s %s", request.method, request.url.path, exc_info=exc)
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"detail": "Storage unavailable"},
        )


def create_app(settings: Optional[Settings] = None, storage: Optional[Storage] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Configuration to use.  Defaults to the environment‑derived
        module settings.
    storage : Optional[Storage]
        Repository to serve from.  Defaults to a freshly seeded
        ``MemStorage``; each app owns its own repository.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings
    # Initialise logging before anything else so the seeding below is
    # logged with the configured format.
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)
    app.state.settings = settings
    app.state.storage = storage if storage is not None else init_storage()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials="*" not in settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)

    @app.get("/", include_in_schema=False)
    async def read_root() -> dict:
        return {"message": f"{settings.project_name} is running"}

    @app.get("/health", tags=["health"])
    async def health() -> dict:
        return {"status": "ok"}

    app.include_router(v1_router, prefix="/api/v1")
    # Unversioned alias used by the site's front‑end.
    app.include_router(v1_router, prefix="/api", include_in_schema=False)

    logger.info("%s %s ready", settings.project_name, settings.api_version)
    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
