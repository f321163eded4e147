from fastapi import Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from sqlalchemy.exc import SQLAlchemyError
import logging

logger = logging.getLogger(__name__)


class StudioException(Exception):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, status_code: int = None, details: dict = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        self.details = details or {}


class ValidationError(StudioException):
    """Malformed or missing input."""
    status_code = status.HTTP_400_BAD_REQUEST


class NotFoundError(StudioException):
    """A referenced campaign, headline, image or creative does not exist."""
    status_code = status.HTTP_404_NOT_FOUND


class ConflictError(StudioException):
    """Duplicate creative pairing."""
    status_code = status.HTTP_400_BAD_REQUEST


class GenerationError(StudioException):
    """The generation provider failed or returned unusable output."""


class StoreError(StudioException):
    """Persistence failure."""


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "error": message},
    )


async def studio_exception_handler(request: Request, exc: StudioException):
    return error_response(exc.status_code, exc.message)


def first_validation_message(errors) -> str:
    """Render the first pydantic error as a single human-readable message."""
    if not errors:
        return "Validation error"
    err = errors[0]
    field = next((str(p) for p in reversed(err.get("loc", ())) if isinstance(p, str) and p != "body"), None)
    if err.get("type") == "value_error" and err.get("ctx", {}).get("error") is not None:
        return str(err["ctx"]["error"])
    if err.get("type") == "missing" and field:
        return f"{field} is required"
    if field:
        return f"{field}: {err.get('msg', 'invalid value')}"
    return err.get("msg") or "Validation error"


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    return error_response(status.HTTP_400_BAD_REQUEST, first_validation_message(exc.errors()))


async def sqlalchemy_exception_handler(request: Request, exc: SQLAlchemyError):
    logger.exception("Database error")
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Database error occurred")
