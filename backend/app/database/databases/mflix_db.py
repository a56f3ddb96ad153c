"""
Movie catalog database configuration.
Stores user accounts and login sessions.
"""
from motor.motor_asyncio import AsyncIOMotorDatabase

DB_NAME = "mflix_db"


class Collections:
    """Collection names in mflix_db."""
    USERS = "users"
    SESSIONS = "sessions"

    # Index definitions for each collection
    INDEXES = {
        "users": [
            {"keys": [("email", 1)], "unique": True},
        ],
        "sessions": [
            {"keys": [("jwt", 1)], "unique": True},
            {"keys": [("user_id", 1), ("created_at", -1)]},
        ],
    }


async def create_mflix_indexes(db: AsyncIOMotorDatabase) -> None:
    """Create indexes for the users and sessions collections."""
    for collection_name, indexes in Collections.INDEXES.items():
        collection = db[collection_name]
        for index_def in indexes:
            keys = index_def["keys"]
            kwargs = {k: v for k, v in index_def.items() if k != "keys"}
            await collection.create_index(keys, **kwargs)
