"""
Index management run on application startup.
"""
import logging

from motor.motor_asyncio import AsyncIOMotorDatabase

from app.database.databases import mflix_db

logger = logging.getLogger(__name__)


async def create_indexes(db: AsyncIOMotorDatabase) -> None:
    """
    Create the indexes the stores rely on.

    The unique indexes on users.email and sessions.jwt are what turn
    duplicate inserts into conflicts; without them duplicates are accepted,
    so a failure here is logged at ERROR by the app lifespan.
    create_index is a no-op when the index already exists.
    """
    await mflix_db.create_mflix_indexes(db)
    logger.info(f"Indexes ensured on database '{db.name}'")
