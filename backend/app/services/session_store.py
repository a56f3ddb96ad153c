"""
Session store for login sessions.
"""
import logging
from typing import Optional

from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo.errors import DuplicateKeyError

from app.core.errors import ConflictError, TransientStoreError
from app.database.databases import mflix_db
from app.models.session import Session

logger = logging.getLogger(__name__)

# Newest first; _id breaks ties between sessions created in the same millisecond
NEWEST_FIRST = [("created_at", -1), ("_id", -1)]


class SessionStore:
    """Data access for the sessions collection."""

    def __init__(self, db: AsyncIOMotorDatabase):
        """Initialize with the catalog database."""
        self.db = db
        self.sessions = db[mflix_db.Collections.SESSIONS]

    async def create_session(self, user_id: str, jwt: str) -> bool:
        """
        Store a new session for a user.

        Args:
            user_id: User identifier (the user's email)
            jwt: Token issued at login

        Returns:
            True once the session is stored

        Raises:
            ConflictError: If a session with the same jwt already exists
            TransientStoreError: If the insert fails for any other reason
        """
        session = Session(user_id=user_id, jwt=jwt)
        try:
            await self.sessions.insert_one(session.to_document())
        except DuplicateKeyError as exc:
            raise ConflictError(
                f"Session already exists for jwt of user {user_id}",
                {"user_id": user_id, "jwt": jwt},
            ) from exc
        except Exception as exc:
            logger.error(f"Failed to create session for user {user_id}: {exc}")
            raise TransientStoreError(
                f"Could not create session for user {user_id}",
                {"user_id": user_id},
            ) from exc

        logger.debug(f"Created session for user {user_id}")
        return True

    async def get_session(self, user_id: str) -> Optional[Session]:
        """
        Get the most recently created session of a user.

        Args:
            user_id: User identifier (the user's email)

        Returns:
            Session model or None if the user has no session
        """
        try:
            session_doc = await self.sessions.find_one(
                {"user_id": user_id},
                sort=NEWEST_FIRST,
            )
            if not session_doc:
                return None
            return Session(**session_doc)
        except Exception as exc:
            logger.error(f"Failed to look up session for user {user_id}: {exc}")
            raise TransientStoreError(
                f"Could not look up session for user {user_id}",
                {"user_id": user_id},
            ) from exc

    async def delete_sessions(self, user_id: str) -> bool:
        """
        Delete every session of a user.

        Deleting when nothing matches is not an error, so the call is
        safe to repeat.
        """
        try:
            result = await self.sessions.delete_many({"user_id": user_id})
        except Exception as exc:
            logger.error(f"Failed to delete sessions for user {user_id}: {exc}")
            raise TransientStoreError(
                f"Could not delete sessions for user {user_id}",
                {"user_id": user_id},
            ) from exc

        logger.debug(f"Deleted {result.deleted_count} session(s) for user {user_id}")
        return True
