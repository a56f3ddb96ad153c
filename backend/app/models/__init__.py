"""
Pydantic models for database documents.
"""
from app.models.user import User
from app.models.session import Session

__all__ = [
    "User",
    "Session",
]
