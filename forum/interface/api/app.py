"""FastAPI application."""

from dishka import AsyncContainer
import logfire
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import pydantic
from sqlalchemy.exc import SQLAlchemyError

from forum.config import Settings
from forum.domain.error import (
    DomainError,
    DuplicateVoteError,
    ForbiddenError,
    NotFoundError,
    NoVoteFoundError,
    StorageFailureError,
    ValidationError,
)
from forum.interface.api.routes import (
    articles,
    comments,
    conversations,
    health,
    portfolios,
    stocks,
    users,
)
from forum.util.di.container import create_container, setup_di
from forum.util.observability import instrument_fastapi

# Most specific first; lookup stops at the first isinstance match
ERROR_STATUS: list[tuple[type[Exception], int]] = [
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (ForbiddenError, status.HTTP_403_FORBIDDEN),
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (DuplicateVoteError, status.HTTP_400_BAD_REQUEST),
    (NoVoteFoundError, status.HTTP_400_BAD_REQUEST),
    (pydantic.ValidationError, status.HTTP_400_BAD_REQUEST),
    (StorageFailureError, status.HTTP_500_INTERNAL_SERVER_ERROR),
    (SQLAlchemyError, status.HTTP_500_INTERNAL_SERVER_ERROR),
]


def status_for(error: Exception) -> int:
    """Get the HTTP status code for an error raised below the routes."""
    for error_type, status_code in ERROR_STATUS:
        if isinstance(error, error_type):
            return status_code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


async def handle_error(request: Request, exc: Exception) -> JSONResponse:
    """Turn a domain, validation or storage error into a JSON response."""
    status_code = status_for(exc)

    if status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        logfire.error(
            "Request failed",
            path=request.url.path,
            error_type=type(exc).__name__,
            error=str(exc),
        )
        # Storage details stay in the logs
        detail = "Internal server error"
    else:
        logfire.info(
            "Request rejected",
            path=request.url.path,
            status_code=status_code,
            error_type=type(exc).__name__,
            error=str(exc),
        )
        detail = str(exc)

    return JSONResponse(status_code=status_code, content={"detail": detail})


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.

    Args:
        container: DI container to serve requests from (production container
            when omitted; tests pass one with in-memory persistence)
    """
    settings = Settings()

    app_instance = FastAPI(
        title="Stock Forum API",
        description="Backend API for the stock forum - stocks, conversations and portfolios with threaded comments and votes, plus editorial articles",
        version="0.1.0",
    )

    # Instrument FastAPI for automatic tracing of HTTP requests
    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=[
            settings.api.frontend_url,
            "http://localhost:3000",  # Local development
            "http://localhost:5173",  # Vite default
        ],
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS", "PATCH"],
        allow_headers=[
            "Authorization",
            "Content-Type",
            "Accept",
            "Origin",
            "User-Agent",
            "Cache-Control",
            "X-Requested-With",
            "X-Session-Id",
        ],
        expose_headers=["Content-Length", "Content-Type"],
        max_age=600,  # Cache preflight requests for 10 minutes
    )

    # Setup dependency injection
    # Settings are loaded from environment automatically
    setup_di(app_instance, container or create_container())

    # Register routes
    app_instance.include_router(health.router)
    app_instance.include_router(stocks.router)
    app_instance.include_router(comments.router)
    app_instance.include_router(conversations.router)
    app_instance.include_router(portfolios.router)
    app_instance.include_router(articles.router)
    app_instance.include_router(users.router)

    for error_type in (DomainError, pydantic.ValidationError, SQLAlchemyError):
        app_instance.add_exception_handler(error_type, handle_error)

    return app_instance


# Create app instance for uvicorn
# Note: Logfire must be configured before this module is imported
# In production: start_app.py handles this
app = create_app()
