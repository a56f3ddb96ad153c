"""
Backend-specific test fixtures and configuration.

These fixtures extend the global fixtures with helpers for simulating
driver failures underneath the stores.
"""

from unittest.mock import AsyncMock, MagicMock

import pytest
from pymongo.errors import ServerSelectionTimeoutError


# =============================================================================
# Driver Failure Fixtures
# =============================================================================

@pytest.fixture
def driver_error():
    """A transport-level failure as raised by pymongo."""
    return ServerSelectionTimeoutError("mongodb:27017: connection refused")


@pytest.fixture
def failing_collection(driver_error):
    """
    A collection whose every operation fails with a transport error.

    Usage in tests:
        store.users = failing_collection
    """
    collection = MagicMock()
    collection.insert_one = AsyncMock(side_effect=driver_error)
    collection.find_one = AsyncMock(side_effect=driver_error)
    collection.delete_many = AsyncMock(side_effect=driver_error)
    collection.update_one = AsyncMock(side_effect=driver_error)
    return collection
