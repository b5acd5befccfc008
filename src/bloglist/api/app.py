"""FastAPI application factory."""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from bloglist.api.blogs import router as blogs_router
from bloglist.api.login import router as login_router
from bloglist.api.testing import router as testing_router
from bloglist.api.users import router as users_router
from bloglist.app_logging import configure_logging
from bloglist.containers import AppContainer
from bloglist.domain.errors import (
    AuthError,
    BlogListError,
    ConflictError,
    ForbiddenError,
    NotFoundError,
    ValidationError,
)

_STATUS_BY_ERROR: list[tuple[type[BlogListError], int]] = [
    (ValidationError, 400),
    (ConflictError, 400),
    (AuthError, 401),
    (ForbiddenError, 403),
    (NotFoundError, 404),
]


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    app = FastAPI(title="Bloglist")
    app.state.container = container

    @app.exception_handler(BlogListError)
    async def handle_domain_error(request: Request, exc: BlogListError) -> JSONResponse:
        status_code = _status_for(exc)
        logger.info(
            "%s %s -> %s: %s",
            request.method,
            request.url.path,
            status_code,
            exc.message,
        )
        return JSONResponse(status_code=status_code, content={"error": exc.message})

    @app.exception_handler(RequestValidationError)
    async def handle_malformed_request(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        fields = sorted(
            {str(error["loc"][-1]) for error in exc.errors() if error.get("loc")}
        )
        message = "malformed request"
        if fields:
            message = f"malformed request: {', '.join(fields)}"
        return JSONResponse(status_code=400, content={"error": message})

    app.include_router(users_router)
    app.include_router(login_router)
    app.include_router(blogs_router)
    if container.settings.testing_enabled:
        logger.warning("Test maintenance routes are enabled")
        app.include_router(testing_router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app


def _status_for(exc: BlogListError) -> int:
    for error_type, status_code in _STATUS_BY_ERROR:
        if isinstance(exc, error_type):
            return status_code
    return 400
