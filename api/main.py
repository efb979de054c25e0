"""FastAPI application factory and main entrypoint."""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

import structlog
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import ORJSONResponse

from api.config import get_settings
from api.exceptions import SeoDoctorError, ValidationError
from api.logging import setup_logging
from engine.graph.models import MissingRelationError
from engine.scoring.registry import build_all

# Initialize logging
setup_logging()
logger = structlog.get_logger()

VERSION = "0.1.0"


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler for startup/shutdown events."""
    settings = get_settings()
    logger.info(
        "api_starting",
        env=settings.env,
        debug=settings.debug,
        version=VERSION,
    )

    yield

    logger.info("api_shutting_down")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()

    # Build every registry up front; catalog errors raise here
    registries = build_all(settings.seo_thresholds())
    logger.info(
        "registries_ready",
        ceilings={kind.value: registry.max_score for kind, registry in registries.items()},
    )

    app = FastAPI(
        title="SEO Doctor",
        description="SEO readiness scoring and JSON-LD knowledge graphs for CMS content",
        version=VERSION,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        openapi_url="/openapi.json" if settings.debug else None,
        default_response_class=ORJSONResponse,
        lifespan=lifespan,
    )

    # Middleware (order matters - first added = last executed)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    from api.middleware import LoggingMiddleware, RequestIDMiddleware

    app.add_middleware(LoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    register_exception_handlers(app)

    from api.routers import health, v1

    app.include_router(health.router, prefix="/api")
    app.include_router(v1.router, prefix="/v1")

    return app


def _error_response(exc: SeoDoctorError) -> ORJSONResponse:
    return ORJSONResponse(status_code=exc.status_code, content=exc.to_envelope())


def register_exception_handlers(app: FastAPI) -> None:
    """Register custom exception handlers."""

    @app.exception_handler(SeoDoctorError)
    async def seo_doctor_error_handler(request: Request, exc: SeoDoctorError) -> ORJSONResponse:
        """Handle application exceptions."""
        logger.warning(
            "application_error",
            error_code=exc.code,
            message=exc.message,
            path=request.url.path,
        )
        return _error_response(exc)

    @app.exception_handler(MissingRelationError)
    async def missing_relation_handler(
        request: Request, exc: MissingRelationError
    ) -> ORJSONResponse:
        """An article arrived without its author or publisher."""
        logger.warning(
            "missing_relation",
            relation=exc.relation,
            path=request.url.path,
        )
        return _error_response(ValidationError(str(exc), field=exc.relation))

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError
    ) -> ORJSONResponse:
        """Handle Pydantic validation errors."""
        errors = exc.errors()
        first_error = errors[0] if errors else {"msg": "Validation error"}

        field = ".".join(str(loc) for loc in first_error.get("loc", [])[1:])

        logger.warning(
            "request_validation_error",
            path=request.url.path,
            error_count=len(errors),
        )
        return ORJSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content={
                "error": {
                    "code": "validation_error",
                    "message": first_error.get("msg", "Validation error"),
                    "details": {
                        "field": field or None,
                        "errors": [
                            {"loc": list(error.get("loc", ())), "msg": error.get("msg")}
                            for error in errors
                        ],
                    },
                }
            },
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception) -> ORJSONResponse:
        """Handle unhandled exceptions."""
        logger.error(
            "unhandled_exception",
            exc_info=exc,
            path=request.url.path,
            method=request.method,
        )
        return ORJSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "error": {
                    "code": "internal_error",
                    "message": "An unexpected error occurred",
                }
            },
        )


app = create_app()
