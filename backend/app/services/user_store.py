"""
User store for account records and preferences.
"""
import logging
from typing import Any, Optional

from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo.errors import DuplicateKeyError

from app.core.errors import (
    ConflictError,
    InvalidInputError,
    StoreError,
    TransientStoreError,
)
from app.database.databases import mflix_db
from app.models.user import User
from app.services.session_store import SessionStore

EMAIL_FIELD = "email"

logger = logging.getLogger(__name__)


class UserStore:
    """Data access for the users collection."""

    def __init__(self, db: AsyncIOMotorDatabase, session_store: Optional[SessionStore] = None):
        """Initialize with the catalog database and the store used for cascades."""
        self.db = db
        self.users = db[mflix_db.Collections.USERS]
        self.session_store = session_store or SessionStore(db)

    async def add_user(self, user: User) -> bool:
        """
        Insert a new user.

        Uniqueness of the email is enforced by the unique index on
        users.email, not by a lookup before the insert.

        Args:
            user: User to insert, password already hashed

        Returns:
            True once the user is stored

        Raises:
            ConflictError: If a user with that email exists
            TransientStoreError: If the insert fails for any other reason
        """
        try:
            await self.users.insert_one(user.to_document())
        except DuplicateKeyError as exc:
            raise ConflictError(
                f"User already exists with email {user.email}",
                {"email": user.email},
            ) from exc
        except Exception as exc:
            logger.error(f"Failed to insert user {user.email}: {exc}")
            raise TransientStoreError(
                f"Could not insert user {user.email}",
                {"email": user.email},
            ) from exc

        logger.debug(f"Added user {user.email}")
        return True

    async def get_user(self, email: str) -> Optional[User]:
        """
        Get user by email.

        Args:
            email: User email address

        Returns:
            User model or None if not found
        """
        try:
            user_doc = await self.users.find_one({EMAIL_FIELD: email})
            if not user_doc:
                return None
            return User(**user_doc)
        except Exception as exc:
            logger.error(f"Failed to look up user {email}: {exc}")
            raise TransientStoreError(
                f"Could not look up user {email}",
                {"email": email},
            ) from exc

    async def delete_user(self, email: str) -> bool:
        """
        Delete a user and all of their sessions.

        Sessions go first, then the user document. The two deletes are not
        atomic, but both are idempotent: after a failure part way through,
        calling delete_user again finishes the job.
        """
        try:
            await self.session_store.delete_sessions(email)
            result = await self.users.delete_many({EMAIL_FIELD: email})
        except StoreError:
            raise
        except Exception as exc:
            logger.error(f"Failed to delete user {email}: {exc}")
            raise TransientStoreError(
                f"Could not delete user {email}",
                {"email": email},
            ) from exc

        logger.debug(f"Deleted {result.deleted_count} user document(s) for {email}")
        return True

    async def update_user_preferences(
        self,
        email: str,
        preferences: Optional[dict[str, Any]],
    ) -> bool:
        """
        Replace the preferences of a user.

        The stored mapping is overwritten, never merged.

        Args:
            email: Email of the user to update
            preferences: New preferences; None is rejected

        Returns:
            True, including when the write changed nothing

        Raises:
            InvalidInputError: If preferences is None (no write is made)
            TransientStoreError: If the update fails
        """
        if preferences is None:
            raise InvalidInputError(
                "preferences cannot be set to None",
                {"email": email},
            )

        try:
            result = await self.users.update_one(
                {EMAIL_FIELD: email},
                {"$set": {"preferences": preferences}},
            )
        except Exception as exc:
            logger.error(f"Failed to update preferences of user {email}: {exc}")
            raise TransientStoreError(
                f"Could not update preferences of user {email}",
                {"email": email},
            ) from exc

        if result.modified_count < 1:
            logger.warning(
                f"User `{email}` was not updated. "
                f"Trying to re-write the same `preferences` field: `{preferences}`"
            )

        return True
