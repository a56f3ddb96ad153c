"""
Store error taxonomy.

Every store method converts driver exceptions into one of these errors,
carrying the offending key (email, user id, jwt) in ``context``. Callers
translate them into HTTP responses with ``error_status``.
"""
from enum import Enum
from http import HTTPStatus
from typing import Any, Mapping, Optional


class ErrorKind(str, Enum):
    """Closed set of store failure kinds."""
    CONFLICT = "conflict"
    NOT_FOUND = "not_found"
    VALIDATION = "validation"
    TRANSIENT = "transient"


_STATUS_BY_KIND = {
    ErrorKind.CONFLICT: HTTPStatus.CONFLICT,
    ErrorKind.NOT_FOUND: HTTPStatus.NOT_FOUND,
    ErrorKind.VALIDATION: HTTPStatus.UNPROCESSABLE_ENTITY,
    ErrorKind.TRANSIENT: HTTPStatus.SERVICE_UNAVAILABLE,
}


def error_status(kind: ErrorKind) -> HTTPStatus:
    """HTTP status code a web layer should answer with for this kind."""
    return _STATUS_BY_KIND[kind]


class StoreError(Exception):
    """Base class for all store failures."""

    kind: ErrorKind = ErrorKind.TRANSIENT

    def __init__(self, message: str, context: Optional[Mapping[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.context = dict(context or {})

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "error": self.kind.value,
            "detail": self.message,
        }
        if self.context:
            payload["context"] = dict(self.context)
        return payload


class ConflictError(StoreError):
    """An insert violated a uniqueness constraint."""
    kind = ErrorKind.CONFLICT


class InvalidInputError(StoreError):
    """Caller supplied a disallowed value; no database call was made."""
    kind = ErrorKind.VALIDATION


class TransientStoreError(StoreError):
    """The database driver failed (network, timeout, serialization)."""
    kind = ErrorKind.TRANSIENT
