"""Classification of failed API calls.

A failed call is either a transport failure (no response at all) or a
non-2xx response. ``classify`` maps both onto a closed set of variants so
each one can be handled exactly once.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional

import httpx

VALIDATION_FALLBACK = "Please check your input."
SERVER_ERROR_FALLBACK = "An unexpected error occurred."


@dataclass(frozen=True)
class ApiFailure:
    status: Optional[int] = None
    message: Optional[str] = None


@dataclass(frozen=True)
class NetworkUnreachable(ApiFailure):
    pass


@dataclass(frozen=True)
class Unauthenticated(ApiFailure):
    pass


@dataclass(frozen=True)
class BadRequest(ApiFailure):
    pass


@dataclass(frozen=True)
class Forbidden(ApiFailure):
    pass


@dataclass(frozen=True)
class NotFound(ApiFailure):
    pass


@dataclass(frozen=True)
class ValidationFailed(ApiFailure):
    errors: Dict[str, List[str]] = field(default_factory=dict)

    def messages(self) -> List[str]:
        flat = []
        for value in self.errors.values():
            if isinstance(value, (list, tuple)):
                flat.extend(str(item) for item in value)
            else:
                flat.append(str(value))
        return flat


@dataclass(frozen=True)
class ServerError(ApiFailure):
    pass


@dataclass(frozen=True)
class Unclassified(ApiFailure):
    pass


FAILURE_TYPES = (
    NetworkUnreachable,
    Unauthenticated,
    BadRequest,
    Forbidden,
    NotFound,
    ValidationFailed,
    ServerError,
    Unclassified,
)


def _body(response: httpx.Response) -> dict:
    try:
        data = response.json()
    except ValueError:
        return {}
    return data if isinstance(data, dict) else {}


def classify(response: Optional[httpx.Response]) -> ApiFailure:
    """Turn a failed response (or its absence) into a failure variant."""
    if response is None:
        return NetworkUnreachable()

    status = response.status_code
    data = _body(response)
    message = data.get("message")

    if status in (401, 419):
        return Unauthenticated(status, message)
    if status == 400:
        return BadRequest(status, message)
    if status == 403:
        return Forbidden(status, message)
    if status == 404:
        return NotFound(status, message)
    if status == 422:
        errors = data.get("errors") or {}
        if not isinstance(errors, dict):
            errors = {}
        return ValidationFailed(status, message, errors)
    if status == 500:
        return ServerError(status, message)
    return Unclassified(status, message)


def classify_exception(exc: Exception) -> ApiFailure:
    if isinstance(exc, httpx.HTTPStatusError):
        return classify(exc.response)
    if isinstance(exc, httpx.TransportError):
        return NetworkUnreachable()
    return Unclassified(message=str(exc))
