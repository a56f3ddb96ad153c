"""
Database definitions and collection constants.
"""
from app.database.databases import mflix_db

__all__ = ["mflix_db"]
