"""Exception handlers that give every error response a `message` field."""

from typing import Any

from fastapi import FastAPI, HTTPException
from protean.exceptions import ObjectNotFoundError, ValidationError
from starlette.requests import Request
from starlette.responses import JSONResponse, Response

from store.utils.logging import get_logger

logger = get_logger(__name__)


def first_message(messages: Any) -> str:
    """The first human-readable message in a Protean error payload."""
    if isinstance(messages, dict):
        for value in messages.values():
            return first_message(value)
        return "Invalid request"
    if isinstance(messages, list | tuple):
        return first_message(messages[0]) if messages else "Invalid request"
    return str(messages)


def register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(ValidationError)
    async def _validation_error_handler(request: Request, exc: ValidationError) -> Response:
        messages = exc.messages
        logger.info("Request rejected", path=request.url.path, errors=messages)
        return JSONResponse(status_code=400, content={"message": first_message(messages), "errors": messages})

    @app.exception_handler(ObjectNotFoundError)
    async def _not_found_handler(request: Request, exc: ObjectNotFoundError) -> Response:
        return JSONResponse(status_code=404, content={"message": "Resource not found"})

    @app.exception_handler(HTTPException)
    async def _http_exception_handler(request: Request, exc: HTTPException) -> Response:
        payload: dict[str, Any] = {"message": exc.detail}
        return JSONResponse(status_code=exc.status_code, content=payload, headers=dict(exc.headers or {}))

    @app.exception_handler(Exception)
    async def _unhandled_exception_handler(request: Request, exc: Exception) -> Response:
        logger.exception("Unhandled exception", path=request.url.path, error=str(exc))
        return JSONResponse(status_code=500, content={"message": "Server error", "error": str(exc)})
