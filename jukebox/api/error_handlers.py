"""Error Handlers — global exception handlers for the Jukebox API.

Invariants:
    - Every error body is {"error": <string>}
    - JukeboxError -> its own http_status; client errors logged below ERROR
    - Unmatched path or method -> 404 "Route <METHOD> <PATH> not found"
    - RequestValidationError -> 400
    - Exception (catch-all) -> 500, never leaks internal details

Design Decisions:
    - Four-layer handler: domain (JukeboxError), routing (HTTPException), framework
      validation (Pydantic), catch-all (Exception)
    - 405 folded into 404: an unsupported method on a known path is just another
      route that does not exist
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from jukebox.core.errors import JukeboxError

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Internal server error"


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_jukebox_error_handler(app)
    _register_http_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def route_not_found_message(request: Request) -> str:
    path = request.url.path
    if request.url.query:
        path = f"{path}?{request.url.query}"
    return f"Route {request.method} {path} not found"


def _register_jukebox_error_handler(app: FastAPI) -> None:

    @app.exception_handler(JukeboxError)
    async def jukebox_error_handler(request: Request, exc: JukeboxError):
        """Handle all Jukebox domain/infrastructure errors."""
        extra = {**exc.log_extra(), "method": request.method, "path": request.url.path}
        if exc.is_client_error:
            logger.info(f"{exc.code}: {exc.message}", extra=extra)
        else:
            logger.error(f"{exc.code}: {exc.message}", extra=extra)
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_http_error_handler(app: FastAPI) -> None:

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        if exc.status_code in (
            status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED,
        ):
            message = route_not_found_message(request)
            logger.info(
                message, extra={"method": request.method, "path": request.url.path},
            )
            return JSONResponse(
                status_code=status.HTTP_404_NOT_FOUND,
                content={"error": message},
            )
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": "Invalid request data"},
        )


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": INTERNAL_ERROR_MESSAGE},
        )
