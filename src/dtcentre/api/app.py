"""FastAPI application factory.

Routes only validate transport details and delegate to QueryService.
Errors are reported as {"error": message} bodies.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from dtcentre.core.config import Settings
from dtcentre.core.errors import QueryError, message_for, status_for
from dtcentre.core.service import QueryService
from dtcentre.db.session import get_engine
from dtcentre.models.types import ErrorResponse, ServiceStatus
from dtcentre.stores.base import RowStore
from dtcentre.stores.sql import SqlRowStore

logger = logging.getLogger(__name__)

SERVICE_NAME = "MCP DTcentre"


def get_query_service(request: Request) -> QueryService:
    """Dependency to get the application's query service."""
    return request.app.state.query_service


def build_service(settings: Settings, store: RowStore | None = None) -> QueryService:
    """Create the query service, connecting to the configured store by default.

    Args:
        settings: Process configuration.
        store: Optional store to use instead of the configured database.

    Returns:
        QueryService ready to serve requests.
    """
    if store is None:
        engine = get_engine(settings.database_url, settings.query_timeout)
        store = SqlRowStore(engine, schema=settings.db_schema)
    return QueryService(store, settings)


def _error_response(exc: Exception) -> JSONResponse:
    return JSONResponse(
        status_code=status_for(exc),
        content=ErrorResponse(error=message_for(exc)).model_dump(),
    )


def create_app(settings: Settings | None = None, store: RowStore | None = None) -> FastAPI:
    """Create FastAPI application.

    Args:
        settings: Optional configuration. Defaults to the environment.
        store: Optional row store. Defaults to the configured database.

    Returns:
        Configured FastAPI application.
    """
    if settings is None:
        settings = Settings.from_env()

    app = FastAPI(
        title="DTcentre API",
        description="Read-only statistics and lookups over the PV tables",
        version="1.0.0",
    )
    app.state.query_service = build_service(settings, store)

    @app.exception_handler(QueryError)
    async def query_error_handler(request: Request, exc: QueryError) -> JSONResponse:
        return _error_response(exc)

    # Caught here rather than by an Exception handler, which Starlette
    # re-raises to the server after responding
    @app.middleware("http")
    async def catch_unhandled_errors(request: Request, call_next):
        try:
            return await call_next(request)
        except Exception as exc:
            logger.error(f"Unhandled error on {request.url.path}", exc_info=exc)
            return _error_response(exc)

    # Include routes
    from dtcentre.api.routes import records, stats

    app.include_router(stats.router)
    app.include_router(records.router)

    @app.get("/", response_model=ServiceStatus)
    def root() -> ServiceStatus:
        """Service identification endpoint."""
        return ServiceStatus(ok=True, service=SERVICE_NAME)

    @app.get("/health")
    def health_check():
        """Health check endpoint."""
        return {"status": "ok"}

    return app
