"""
jpashop - Order Query API.

FastAPI application exposing every order fetch strategy side by side.
"""
from contextlib import asynccontextmanager
import logging
import time

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from sqlalchemy.exc import MissingGreenlet, StatementError
from sqlalchemy.orm.exc import DetachedInstanceError

# deps loads .env before the settings are first read
from apps.api.deps import get_app_settings
from apps.api.endpoints import orders, simple_orders
from core.infrastructure.database.config import (
    close_database,
    get_session_factory,
    init_database,
)
from core.infrastructure.database.seed import seed_sample_data
from core.infrastructure.logging import configure_logging


settings = get_app_settings()

# Setup logging
configure_logging(settings.api.log_level)
logger = logging.getLogger(__name__)


# =============================================================================
# STARTUP/SHUTDOWN
# =============================================================================

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create the schema (and sample data) on startup, dispose the pool on shutdown."""
    logger.info("🚀 Order Query API starting up...")
    await init_database()
    if settings.api.seed_data:
        await seed_sample_data(get_session_factory())
    logger.info("📚 Swagger UI available at: /docs")

    yield

    await close_database()
    logger.info("👋 Order Query API shutting down...")


# =============================================================================
# CREATE FASTAPI APP
# =============================================================================

app = FastAPI(
    title=settings.api.title,
    description="""
    Order listing API comparing ORM fetch strategies.

    - V1: entities exposed directly
    - V2: entities to DTOs, lazy loading (N+1)
    - V3: collection fetch join (1 query, no paging)
    - V3.1: to-one fetch join + batched collections (pageable)
    - V4: DTO projection, 1 + N
    - V5: DTO projection, 1 + 1
    - V6: DTO projection, single flat query
    """,
    version=settings.api.version,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
    lifespan=lifespan,
)


# =============================================================================
# CORS MIDDLEWARE
# =============================================================================

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.api.cors_origins,
    allow_credentials=True,
    allow_methods=["GET", "OPTIONS"],
    allow_headers=["*"],
)


# =============================================================================
# REQUEST LOGGING MIDDLEWARE
# =============================================================================

@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log all requests with timing."""
    start_time = time.time()

    logger.info(f"→ {request.method} {request.url.path}")

    response = await call_next(request)

    duration = time.time() - start_time
    logger.info(
        f"← {request.method} {request.url.path} "
        f"[{response.status_code}] ({duration:.3f}s)"
    )

    return response


# =============================================================================
# EXCEPTION HANDLERS
# =============================================================================

async def value_error_handler(request: Request, exc: ValueError) -> JSONResponse:
    """Handle ValueError exceptions.

    Args:
        request: FastAPI request
        exc: ValueError exception

    Returns:
        JSONResponse with error details
    """
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": str(exc)},
    )


async def lazy_loading_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle a lazy association touched outside an active session.

    ``MissingGreenlet``: plain attribute access under AsyncSession.
    ``DetachedInstanceError``: access after the session was closed.
    """
    logger.error(
        f"Lazy loading failed on {request.url.path}: {type(exc).__name__}: {exc}",
        exc_info=True,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "detail": "Lazy association accessed outside an active session",
            "error": type(exc).__name__,
            "path": request.url.path,
        },
    )


async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle all uncaught exceptions."""
    logger.error(f"Unhandled exception: {exc}", exc_info=True)

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )


async def statement_error_handler(request: Request, exc: StatementError) -> JSONResponse:
    """Unwrap a lazy-load fault that SQLAlchemy reports as a StatementError.

    Any other statement failure is an internal error.
    """
    if isinstance(exc.orig, MissingGreenlet):
        return await lazy_loading_error_handler(request, exc.orig)
    return await general_exception_handler(request, exc)


def register_exception_handlers(target: FastAPI) -> None:
    # ValidationError subclasses ValueError but means a broken response model
    target.add_exception_handler(ValidationError, general_exception_handler)
    target.add_exception_handler(ValueError, value_error_handler)
    target.add_exception_handler(StatementError, statement_error_handler)
    target.add_exception_handler(MissingGreenlet, lazy_loading_error_handler)
    target.add_exception_handler(DetachedInstanceError, lazy_loading_error_handler)
    target.add_exception_handler(Exception, general_exception_handler)


register_exception_handlers(app)


# =============================================================================
# INCLUDE ROUTERS
# =============================================================================

app.include_router(orders.router)
app.include_router(simple_orders.router)


@app.get("/health", tags=["Health"])
async def health_check() -> dict[str, str]:
    """Health check endpoint.

    Returns:
        Health status
    """
    return {"status": "healthy"}


@app.get("/", tags=["Root"])
async def root():
    """API root endpoint."""
    return {
        "message": settings.api.title,
        "version": settings.api.version,
        "docs": "/docs",
        "health": "/health",
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)
