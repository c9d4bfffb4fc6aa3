# =============================================================================
# app/main.py - FastAPI Application Entry Point
# =============================================================================
# Configures the FastAPI application with middleware, routers and exception
# handlers, and owns process startup (configuration, schema, seed data).
#
# Usage:
#   uvicorn --factory app.main:create_app --reload
#   moneytale            (console script, see pyproject.toml)
# =============================================================================

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError

from app.config import Settings, get_settings
from app.db.session import build_engine, build_session_factory, init_models
from app.exceptions.http import AppException
from app.models.seed import seed_default_categories
from app.routers import auth, categories, dashboard, health, users

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    - Startup: create the engine, ensure the tables exist, seed default categories
    - Shutdown: dispose the engine and its connection pool
    """
    settings: Settings = app.state.settings
    logger.info("Starting MoneyTale API in %s mode", settings.ENVIRONMENT)

    engine = build_engine(settings)
    app.state.session_factory = build_session_factory(engine)

    await init_models(engine)
    if settings.SEED_DEFAULT_CATEGORIES:
        async with app.state.session_factory() as session:
            await seed_default_categories(session)

    yield

    logger.info("Shutting down MoneyTale API")
    await engine.dispose()


# =============================================================================
# Exception Handlers
# =============================================================================


async def handle_app_exception(request: Request, exc: AppException) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


async def handle_request_validation(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed request bodies and parameters are client errors (400)."""
    errors = [
        {"loc": list(error.get("loc", ())), "msg": error.get("msg", "")}
        for error in exc.errors()
    ]
    return JSONResponse(
        status_code=400,
        content={"detail": "Request validation failed", "code": "VALIDATION_ERROR", "details": {"errors": errors}},
    )


async def handle_integrity_error(request: Request, exc: IntegrityError) -> JSONResponse:
    # Constraint text can include column values, keep it out of the response
    logger.warning("Constraint violation on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=409,
        content={"detail": "The request conflicts with existing data", "code": "CONFLICT"},
    )


async def handle_general_exception(request: Request, exc: Exception) -> JSONResponse:
    """Handle unexpected exceptions without leaking internal detail."""
    logger.exception("Unexpected error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=500,
        content={"detail": "An unexpected error occurred", "code": "INTERNAL_ERROR"},
    )


# =============================================================================
# Application Factory
# =============================================================================


def create_app(settings: Settings | None = None) -> FastAPI:
    """
    Builds the FastAPI application.

    Raises pydantic.ValidationError before anything else happens when required
    configuration is missing or blank.
    """
    settings = settings or get_settings()

    logging.basicConfig(
        level=logging.DEBUG if settings.DEBUG else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    app = FastAPI(
        title="MoneyTale API",
        description="Personal finance backend: users and transaction categories.",
        version="1.0.0",
        docs_url="/docs" if not settings.is_production else None,
        redoc_url=None,
        lifespan=lifespan,
    )
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.ALLOWED_ORIGIN],
        allow_headers=["*"],
        allow_methods=["*"],
    )

    app.add_exception_handler(AppException, handle_app_exception)
    app.add_exception_handler(RequestValidationError, handle_request_validation)
    app.add_exception_handler(IntegrityError, handle_integrity_error)
    app.add_exception_handler(Exception, handle_general_exception)

    app.include_router(health.router, tags=["Health"])
    app.include_router(dashboard.router, tags=["Dashboard"])
    app.include_router(auth.router, prefix="/auth", tags=["Auth"])
    app.include_router(users.router, prefix="/users", tags=["Users"])
    app.include_router(categories.router, prefix="/categories", tags=["Categories"])

    return app


def main() -> None:
    import uvicorn

    uvicorn.run("app.main:create_app", factory=True, host="0.0.0.0", port=8000)
