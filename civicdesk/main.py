"""CivicDesk — FastAPI application factory."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from civicdesk.adapters.persistence.database import engine
from civicdesk.config import settings
from civicdesk.domain.exceptions import (
    AuthorizationError,
    DependencyError,
    DomainError,
    NotFoundError,
    ValidationError,
)
from civicdesk.infrastructure.api.routes_analytics import router as analytics_router
from civicdesk.infrastructure.api.routes_complaints import router as complaints_router
from civicdesk.infrastructure.api.routes_health import router as health_router
from civicdesk.infrastructure.api.routes_managers import router as managers_router
from civicdesk.infrastructure.api.routes_notifications import router as notifications_router
from civicdesk.infrastructure.api.routes_sla import router as sla_router
from civicdesk.infrastructure.api.routes_workers import router as workers_router

logger = logging.getLogger(__name__)

# Most specific first; the handler walks this list
ERROR_STATUS: list[tuple[type[DomainError], int]] = [
    (ValidationError, 400),
    (AuthorizationError, 403),
    (NotFoundError, 404),
    (DependencyError, 503),
]


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events."""
    try:
        async with engine.begin():
            pass  # Connection pool warmed up
        logger.info("Database connection established")
    except Exception as e:
        logger.warning("Database not available on startup: %s", e)
    yield
    await engine.dispose()


async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    status_code = 500
    for error_type, code in ERROR_STATUS:
        if isinstance(exc, error_type):
            status_code = code
            break
    if status_code >= 500:
        logger.warning("%s %s failed: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=status_code, content={"detail": exc.message})


def create_app() -> FastAPI:
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s | %(message)s",
    )

    app = FastAPI(
        title="CivicDesk — Civic Complaint Routing",
        description="Complaint intake, least-loaded assignment and SLA tracking",
        version="0.1.0",
        lifespan=lifespan,
    )

    # CORS for the citizen / staff frontends
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(DomainError, domain_error_handler)

    # Register routers
    app.include_router(health_router, prefix="/api")
    app.include_router(complaints_router, prefix="/api")
    app.include_router(workers_router, prefix="/api")
    app.include_router(managers_router, prefix="/api")
    app.include_router(notifications_router, prefix="/api")
    app.include_router(sla_router, prefix="/api")
    app.include_router(analytics_router, prefix="/api")

    return app


app = create_app()
