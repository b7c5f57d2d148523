"""
Main entrypoint for the Orders API.

This module assembles the FastAPI application: it sets up logging,
creates the lifecycle registry, installs error handlers and includes
the routers.  ``create_app`` builds a fresh application (with its own
registry, hence its own singleton store) every time it is called; the
module-level ``app`` is the instance served by uvicorn::

    uvicorn orders_api.app.main:app --reload
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.middleware.httpsredirect import HTTPSRedirectMiddleware

from .api.deps import is_known_lifecycle, lifecycle_not_found
from .api.endpoints import root
from .api.router import router as api_router
from .core.config import settings
from .core.lifecycle import LifecycleRegistry
from .core.logging_config import setup_logging


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report malformed request bodies as 400 Bad Request.

    The body is validated before any dependency runs, so an unknown
    ``{lifecycle}`` is checked here first and still answers 404.
    """
    lifecycle = request.path_params.get("lifecycle")
    if lifecycle is not None and not is_known_lifecycle(lifecycle):
        not_found = lifecycle_not_found(lifecycle)
        return JSONResponse(status_code=not_found.status_code, content={"detail": not_found.detail})

    logging.getLogger(__name__).info("Rejected %s %s: %s", request.method, request.url.path, exc.errors())
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_encoder(exc.errors())},
    )


def create_app() -> FastAPI:
    """Create and configure a FastAPI application.

    Returns
    -------
    FastAPI
        A configured application with an empty :class:`LifecycleRegistry`
        stored on ``app.state.registry``.
    """
    # Logging first so that everything below can log.
    setup_logging(settings.log_level, settings.log_file)
    logger = logging.getLogger(__name__)

    docs = settings.docs_enabled
    app = FastAPI(
        title=settings.project_name,
        version=settings.api_version,
        debug=settings.debug,
        docs_url="/docs" if docs else None,
        redoc_url="/redoc" if docs else None,
        openapi_url="/openapi.json" if docs else None,
    )
    app.state.registry = LifecycleRegistry()

    if settings.https_redirect:
        app.add_middleware(HTTPSRedirectMiddleware)

    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    app.include_router(root.router, tags=["status"])
    app.include_router(api_router, prefix="/api")

    logger.info(
        "Created %s %s (environment=%s, docs=%s)",
        settings.project_name,
        settings.api_version,
        settings.environment,
        "on" if docs else "off",
    )
    return app


# Created at import time so uvicorn can discover it without calling
# create_app manually.
app = create_app()
