"""
Data access stores for users and sessions.
"""
from app.services.session_store import SessionStore
from app.services.user_store import UserStore

__all__ = [
    "SessionStore",
    "UserStore",
]
