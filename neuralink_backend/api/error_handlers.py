# This file defines consistent API error payloads and exception handlers.
# It exists so every failure, from a missing record to an unmatched route, returns `{error, message}`.
# Unexpected failures are logged server-side and reduced to a fixed 500 body.
# Centralized error handling prevents stack traces from leaking into responses.

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

ROUTE_NOT_FOUND_ERROR = "Not Found"
ROUTE_NOT_FOUND_MESSAGE = "The requested endpoint does not exist"
INTERNAL_ERROR = "Internal Server Error"
INTERNAL_ERROR_MESSAGE = "Something went wrong!"


class APIError(Exception):
    """Error with a status code and the client-facing `{error, message}` pair."""

    def __init__(self, *, status_code: int, error: str, message: str) -> None:
        self.status_code = status_code
        self.error = error
        self.message = message
        super().__init__(message)


def error_body(error: str, message: str) -> dict[str, str]:
    return {"error": error, "message": message}


def error_response(status_code: int, error: str, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=error_body(error, message))


def route_not_found_response() -> JSONResponse:
    return error_response(404, ROUTE_NOT_FOUND_ERROR, ROUTE_NOT_FOUND_MESSAGE)


def internal_error_response(request: Request, exc: Exception) -> JSONResponse:
    """Log `exc` with its traceback and return the fixed 500 body."""

    logger.exception(
        "Unhandled error on %s %s (request_id=%s)",
        request.method,
        request.url.path,
        getattr(request.state, "request_id", "unknown"),
        exc_info=exc,
    )
    return error_response(500, INTERNAL_ERROR, INTERNAL_ERROR_MESSAGE)


def _is_malformed_json(exc: RequestValidationError) -> bool:
    return any(error.get("type") == "json_invalid" for error in exc.errors())


def register_error_handlers(app: FastAPI) -> None:
    """Register global exception handlers."""

    @app.exception_handler(APIError)
    async def api_error_handler(request: Request, exc: APIError) -> JSONResponse:
        return error_response(exc.status_code, exc.error, exc.message)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        if _is_malformed_json(exc):
            message = "Request body contains malformed JSON."
        else:
            message = "Request body must be a JSON object with string fields."
        logger.info("Rejected request body on %s %s: %s", request.method, request.url.path, exc.errors())
        return error_response(400, "Invalid request body", message)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        # Unknown paths and known paths with an unsupported method share one fallback.
        if exc.status_code in (404, 405):
            return route_not_found_response()
        return error_response(exc.status_code, "HTTP Error", str(exc.detail))

    # Route failures are converted by `UnhandledErrorMiddleware` so transport headers still apply;
    # this catches anything raised by the middleware stack itself.
    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        return internal_error_response(request, exc)
