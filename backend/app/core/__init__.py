"""
Core module - Error taxonomy and logging setup.
"""
from app.core.errors import (
    ErrorKind,
    StoreError,
    ConflictError,
    InvalidInputError,
    TransientStoreError,
    error_status,
)
from app.core.logging import configure_logging

__all__ = [
    "ErrorKind",
    "StoreError",
    "ConflictError",
    "InvalidInputError",
    "TransientStoreError",
    "error_status",
    "configure_logging",
]
