from dataclasses import dataclass
from typing import Any, Generic, Optional, TypeVar

from app.client.errors import ApiFailure, Unclassified, classify_exception

T = TypeVar("T")


@dataclass(frozen=True)
class ApiResult(Generic[T]):
    """Outcome of a service call: either a value or a classified failure."""

    value: Optional[T] = None
    failure: Optional[ApiFailure] = None

    @property
    def ok(self) -> bool:
        return self.failure is None

    @classmethod
    def success(cls, value: T) -> "ApiResult[T]":
        return cls(value=value)

    @classmethod
    def from_exception(cls, exc: Exception) -> "ApiResult[Any]":
        return cls(failure=classify_exception(exc))

    @classmethod
    def malformed(cls, status: int, exc: Exception) -> "ApiResult[Any]":
        return cls(failure=Unclassified(status, f"Malformed response: {exc!r}"))

    @classmethod
    def unexpected_status(cls, status: int) -> "ApiResult[Any]":
        return cls(failure=Unclassified(status, f"Unexpected status {status}"))
