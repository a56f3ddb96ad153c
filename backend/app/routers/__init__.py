"""
API Routers module.
"""
from app.routers import health

__all__ = ["health"]
