"""API error type and its JSON translation."""

import logging

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class TodoAPIError(Exception):
    """Raised by route handlers; rendered as ``{"error": message}``."""

    def __init__(self, status_code: int, message: str):
        super().__init__(message)
        self.status_code = status_code
        self.message = message


def fails_with(message: str):
    """Attach the fixed 500 message a route answers with on any failure."""
    def decorator(func):
        func.error_message = message
        return func
    return decorator


def todo_api_error_handler(request: Request, exc: TodoAPIError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    # id non entier, date invalide... même réponse qu'une erreur du store
    endpoint = request.scope.get("endpoint")
    message = getattr(endpoint, "error_message", "Something went wrong")
    logger.warning("Rejected request on %s: %s", request.url.path, exc.errors())
    return JSONResponse(status_code=500, content={"error": message})
