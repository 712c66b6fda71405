"""Main FastAPI application for the Inclusive Hiring Toolkit."""

import asyncio
from contextlib import asynccontextmanager
from typing import Dict, Any
from datetime import datetime, timezone
from fastapi import FastAPI, Request, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder

from inclusive_hiring import __version__
from inclusive_hiring.config import settings
from inclusive_hiring.utils.logging import configure_logging, get_logger
from inclusive_hiring.api.routes import all_routers
from inclusive_hiring.api.models import ErrorResponse
from inclusive_hiring.analysis.bias import BiasDetector
from inclusive_hiring.analysis.feedback import FeedbackGenerator
from inclusive_hiring.monitoring.analytics import AnalyticsManager

# Configure logging
configure_logging()
logger = get_logger(__name__)

# Global application state
app_state: Dict[str, Any] = {}


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    # Startup
    logger.info("Starting Inclusive Hiring API", environment=settings.environment)

    bias_detector = BiasDetector()
    feedback_generator = FeedbackGenerator()
    analytics = AnalyticsManager()

    app_state["bias_detector"] = bias_detector
    app_state["feedback_generator"] = feedback_generator
    app_state["analytics"] = analytics

    # Update global references in routes module
    import inclusive_hiring.api.routes as routes_module
    routes_module.bias_detector = bias_detector
    routes_module.feedback_generator = feedback_generator
    routes_module.analytics = analytics

    logger.info("Application startup completed successfully")

    yield

    # Shutdown
    logger.info("Shutting down Inclusive Hiring API")

    routes_module.bias_detector = None
    routes_module.feedback_generator = None
    routes_module.analytics = None

    await app_state.pop("analytics").close()
    app_state.clear()

    logger.info("Application shutdown completed successfully")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""

    app = FastAPI(
        title="Inclusive Hiring API",
        description="Bias checks for job postings and constructive feedback for candidates",
        version=__version__,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        lifespan=lifespan
    )

    # Add middleware
    setup_middleware(app)

    # Add exception handlers
    setup_exception_handlers(app)

    # Include routers
    for router in all_routers:
        app.include_router(router, prefix="/api/v1")

    # Add root endpoint
    @app.get("/")
    async def root():
        return {
            "name": "Inclusive Hiring API",
            "version": __version__,
            "status": "running",
            "docs": "/docs" if settings.debug else "disabled"
        }

    return app


def setup_middleware(app: FastAPI) -> None:
    """Setup application middleware."""

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
    )

    # Request logging middleware
    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        start_time = asyncio.get_running_loop().time()

        logger.info(
            "Request started",
            method=request.method,
            path=request.url.path,
            client_ip=request.client.host if request.client else None
        )

        try:
            response = await call_next(request)
        except Exception as e:
            logger.error(
                "Request failed",
                method=request.method,
                path=request.url.path,
                error=str(e),
                duration_seconds=asyncio.get_running_loop().time() - start_time
            )
            raise

        logger.info(
            "Request completed",
            method=request.method,
            path=request.url.path,
            status_code=response.status_code,
            duration_seconds=asyncio.get_running_loop().time() - start_time
        )

        return response


def _error_response(status_code: int, error: ErrorResponse) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=jsonable_encoder(error))


def setup_exception_handlers(app: FastAPI) -> None:
    """Setup global exception handlers."""

    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException):
        logger.warning(
            "HTTP exception",
            status_code=exc.status_code,
            detail=exc.detail,
            path=request.url.path
        )

        return _error_response(exc.status_code, ErrorResponse(
            error="HTTPException",
            message=str(exc.detail),
            timestamp=datetime.now(timezone.utc)
        ))

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        logger.warning(
            "Validation error",
            errors=exc.errors(),
            path=request.url.path
        )

        return _error_response(422, ErrorResponse(
            error="ValidationError",
            message="Request validation failed",
            details={"validation_errors": exc.errors()},
            timestamp=datetime.now(timezone.utc)
        ))

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        logger.error(
            "Unhandled exception",
            error=str(exc),
            error_type=type(exc).__name__,
            path=request.url.path
        )

        return _error_response(500, ErrorResponse(
            error="InternalServerError",
            message="An unexpected error occurred",
            details={"error_type": type(exc).__name__} if settings.debug else None,
            timestamp=datetime.now(timezone.utc)
        ))


# Create the application instance
app = create_app()
