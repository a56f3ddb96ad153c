"""
Store dependencies for route handlers.
"""
from typing import Annotated

from fastapi import Depends
from motor.motor_asyncio import AsyncIOMotorDatabase

from app.database.connections import get_database
from app.services.session_store import SessionStore
from app.services.user_store import UserStore


async def get_catalog_db() -> AsyncIOMotorDatabase:
    """Catalog database on the process-wide MongoDB client."""
    return await get_database()


async def get_session_store(
    db: Annotated[AsyncIOMotorDatabase, Depends(get_catalog_db)]
) -> SessionStore:
    """Session store bound to the shared database connection."""
    return SessionStore(db)


async def get_user_store(
    db: Annotated[AsyncIOMotorDatabase, Depends(get_catalog_db)],
    session_store: Annotated[SessionStore, Depends(get_session_store)],
) -> UserStore:
    """User store sharing the request's session store for cascades."""
    return UserStore(db, session_store=session_store)


# Type aliases for cleaner route signatures
SessionStoreDep = Annotated[SessionStore, Depends(get_session_store)]
UserStoreDep = Annotated[UserStore, Depends(get_user_store)]
