"""
Main entrypoint for the Task Board API.

This module assembles the FastAPI application, sets up logging,
middleware and versioned routers.  The ``create_app`` function builds
and configures the app, which is then instantiated at module import
time as ``app``, e.g.::

    uvicorn task_board_api.app.main:app --reload

One task store and one task service are created per application and
kept on ``app.state``; routes obtain the service through a dependency.
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .api.v1.router import router as v1_router
from .core.config import Settings, settings as default_settings
from .core.logging_config import setup_logging
from .core.middleware import CorrelationIdMiddleware, RequestLoggingMiddleware
from .repositories import TaskStore, build_task_store
from .services.task_service import TaskService

logger = logging.getLogger(__name__)


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Reject malformed requests with 400, like every other declined request.

    Only the location, message and type of each error are echoed; the
    offending input is left out because it may not be encodable.
    """
    detail = [
        {"loc": error.get("loc"), "msg": error.get("msg"), "type": error.get("type")}
        for error in exc.errors()
    ]
    logger.warning("Rejected %s %s: %s", request.method, request.url.path, detail)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_encoder(detail)},
    )


def create_app(settings: Optional[Settings] = None, store: Optional[TaskStore] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Settings to use instead of the ones read from the environment.
    store : Optional[TaskStore]
        Task store to use instead of the one selected by
        ``settings.task_store_backend``.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings

    # Logging first so that store construction below can log.
    setup_logging(settings.log_level, settings.log_file)

    docs_url = "/swagger" if settings.debug else None
    app = FastAPI(
        title=settings.project_name,
        version=settings.api_version,
        docs_url=docs_url,
        redoc_url=None,
        openapi_url="/swagger/v1/swagger.json" if settings.debug else None,
    )

    task_store = store if store is not None else build_task_store(settings)
    app.state.settings = settings
    app.state.task_store = task_store
    app.state.task_service = TaskService(task_store)

    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    # Added last runs first: the correlation id is bound before the
    # request is logged.
    if settings.request_logging:
        app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(CorrelationIdMiddleware, header_name=settings.correlation_header)

    app.include_router(v1_router, prefix=settings.api_prefix)

    @app.on_event("shutdown")
    async def shutdown_event() -> None:
        logger.info("Shutting down with %s tasks stored", await task_store.count())
        task_store.close()

    logger.info("%s ready with %s", settings.project_name, type(task_store).__name__)
    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
