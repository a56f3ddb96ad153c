"""
Database module - MongoDB connection and database definitions.
"""
from app.database.connections import (
    get_mongo_client,
    close_connections,
    get_database,
)
from app.database.databases import mflix_db

__all__ = [
    "get_mongo_client",
    "close_connections",
    "get_database",
    "mflix_db",
]
