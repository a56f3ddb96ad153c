"""
Dependencies for dependency injection in routes.
"""
from app.dependencies.stores import (
    get_catalog_db,
    get_session_store,
    get_user_store,
    SessionStoreDep,
    UserStoreDep,
)

__all__ = [
    "get_catalog_db",
    "get_session_store",
    "get_user_store",
    "SessionStoreDep",
    "UserStoreDep",
]
