import secrets
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Any

from asgi_correlation_id import CorrelationIdMiddleware, correlation_id
from fastapi import Depends, FastAPI, HTTPException, Request, Response, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.security import APIKeyHeader
from prometheus_fastapi_instrumentator import Instrumentator
from starlette.middleware.base import RequestResponseEndpoint

from src.party_planner.api.routes.router import api_router
from src.party_planner.core.config import get_settings
from src.party_planner.core.db import Database, run_migrations_async
from src.party_planner.core.exceptions import setup_exception_handlers
from src.party_planner.core.logging import (
    bind_request_context,
    clear_request_context,
    get_logger,
    setup_logging,
)
from src.party_planner.core.rate_limit import limiter
from src.party_planner.core.security import SecurityHeadersMiddleware
from src.party_planner.seed import seed_catalog

logger = get_logger(__name__)

HTTP_METHODS = frozenset({"get", "post", "put", "patch", "delete"})


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    """Application lifespan - open the store, migrate, optionally reseed, close."""
    settings = get_settings()
    setup_logging(settings.debug)
    logger.info(f"Starting {settings.app_name}", env=settings.app_env)

    owns_database = app.state.database is None
    if owns_database:
        app.state.database = Database.from_settings(settings)
    database: Database = app.state.database

    if owns_database and settings.migrate_on_startup:
        logger.info("Running database migrations")
        await run_migrations_async()

    if settings.reset_db:
        logger.info("RESET_DB set, reseeding catalog")
        async with database.session() as session:
            await seed_catalog(session)

    yield

    logger.info("Closing connections...")
    if owns_database:
        await database.dispose()
        app.state.database = None
    logger.info("Shutdown complete")


OPENAPI_TAGS = [
    {"name": "auth", "description": "Sign-up and sign-in"},
    {"name": "account", "description": "Account administration"},
    {"name": "catalog", "description": "Themes, decorations, food, drinks and activities"},
    {"name": "projects", "description": "Project board"},
    {"name": "guests", "description": "Project guest lists"},
    {"name": "selections", "description": "Catalog items chosen for a project"},
]


def create_app(database: Database | None = None) -> FastAPI:
    """Build the application.

    Pass ``database`` to use an already opened store handle; the lifespan then
    skips migrations and leaves disposal to the caller.
    """
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Party planning API: catalog browsing, projects and guest lists",
        version="0.1.0",
        openapi_tags=OPENAPI_TAGS,
        lifespan=lifespan,
    )
    app.state.database = database

    setup_exception_handlers(app)

    app.state.limiter = limiter

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PATCH", "DELETE"],
        allow_headers=["Authorization", "Content-Type", "X-Request-ID"],
    )

    app.add_middleware(SecurityHeadersMiddleware)

    @app.middleware("http")
    async def logging_context_middleware(
        request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        """Bind request_id and route to the log context of each request."""
        clear_request_context()
        bind_request_context(correlation_id.get(), request.method, request.url.path)
        try:
            response = await call_next(request)
            return response
        finally:
            clear_request_context()

    # Starlette wraps in reverse order of registration: added last, runs first,
    # so the id exists before the logging middleware reads it
    app.add_middleware(CorrelationIdMiddleware)

    app.include_router(api_router)

    # Prometheus metrics instrumentation
    instrumentator = Instrumentator().instrument(app)

    # Protect /metrics endpoint if API key is configured
    if settings.metrics_api_key:
        api_key_header = APIKeyHeader(name="X-Metrics-Key", auto_error=False)

        async def verify_metrics_key(api_key: str | None = Depends(api_key_header)) -> None:
            if (
                api_key is None
                or settings.metrics_api_key is None
                or not secrets.compare_digest(api_key, settings.metrics_api_key)
            ):
                raise HTTPException(
                    status_code=status.HTTP_401_UNAUTHORIZED,
                    detail="Invalid or missing metrics API key",
                )

        instrumentator.expose(app, endpoint="/metrics", dependencies=[Depends(verify_metrics_key)])
    else:
        instrumentator.expose(app, endpoint="/metrics")

    @app.get("/", tags=["meta"])
    async def list_routes() -> list[dict[str, Any]]:
        """Every API route with its methods."""
        return [
            {"path": path, "methods": sorted(method.upper() for method in operations if method in HTTP_METHODS)}
            for path, operations in app.openapi()["paths"].items()
        ]

    @app.get("/health", tags=["meta"])
    async def health(request: Request) -> JSONResponse:
        """Report whether the store answers a trivial query."""
        store: Database | None = request.app.state.database
        if store is None:
            return JSONResponse(
                content={"status": "unhealthy", "database": "not_connected"},
                status_code=503,
            )
        try:
            await store.ping()
        except Exception as e:
            logger.warning("Health check failed", error_type=type(e).__name__, exc_info=e)
            return JSONResponse(
                content={"status": "unhealthy", "database": "unhealthy"},
                status_code=503,
            )
        return JSONResponse(content={"status": "healthy", "database": "healthy"})

    return app


app = create_app()
