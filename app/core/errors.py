"""Error responses shaped the way the client expects them.

Every error body carries a human readable ``message``; validation failures
additionally carry ``errors``, a mapping of field name to a list of messages.
"""

import logging
from typing import Dict, List

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from starlette.exceptions import HTTPException

logger = logging.getLogger(__name__)

# Location prefixes FastAPI adds that are not part of the field name
_LOCATION_ROOTS = {"body", "query", "path", "header", "cookie", "form"}


class ValidationFailed(Exception):
    """Raised by route handlers for checks pydantic can't express (e.g. foreign keys)."""

    def __init__(self, errors: Dict[str, List[str]], message: str = None):
        self.errors = errors
        if message is None:
            first = next(iter(errors.values()), [])
            message = first[0] if first else "The given data was invalid."
        self.message = message
        super().__init__(self.message)


def field_errors(raw_errors) -> Dict[str, List[str]]:
    """Group pydantic error dicts by dotted field name."""
    errors: Dict[str, List[str]] = {}
    for error in raw_errors:
        loc = [str(part) for part in error.get("loc", ())]
        if loc and loc[0] in _LOCATION_ROOTS:
            loc = loc[1:]
        field = ".".join(loc) or "body"
        errors.setdefault(field, []).append(error.get("msg", "Invalid value"))
    return errors


def from_pydantic(exc: ValidationError) -> ValidationFailed:
    return ValidationFailed(field_errors(exc.errors()))


def _validation_response(errors: Dict[str, List[str]], message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={"message": message, "errors": errors},
    )


def register_error_handlers(app: FastAPI) -> None:

    @app.exception_handler(HTTPException)
    async def http_error_handler(request: Request, exc: HTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"message": exc.detail},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(ValidationFailed)
    async def validation_failed_handler(request: Request, exc: ValidationFailed):
        logger.info(f"Validation failed on {request.url.path}: {exc.errors}")
        return _validation_response(exc.errors, exc.message)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        errors = field_errors(exc.errors())
        logger.info(f"Validation failed on {request.url.path}: {errors}")
        first = next(iter(errors.values()))
        return _validation_response(errors, first[0])

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.error(f"Unhandled exception on {request.url.path}: {exc}", exc_info=True)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"message": "Server Error"},
        )
