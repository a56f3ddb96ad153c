"""
Movie catalog accounts backend - FastAPI application

Hosts the user and session stores behind the shared MongoDB connection.
"""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from app.core.errors import StoreError, error_status
from app.core.logging import configure_logging
from app.database.connections import get_database, close_connections
from app.database.registry import create_indexes
from app.routers import health

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.

    Startup:
    - Configure logging
    - Open the shared MongoDB connection
    - Create indexes

    Shutdown:
    - Close the MongoDB connection
    """
    configure_logging()
    logger.info("Starting up accounts backend...")

    try:
        db = await get_database()
        await create_indexes(db)
    except Exception as e:
        logger.error(f"Index creation failed, duplicates will not be rejected: {e}")

    yield

    logger.info("Shutting down accounts backend...")
    await close_connections()
    logger.info("Database connections closed")


app = FastAPI(
    title="Movie Catalog Accounts API",
    description="User accounts and login sessions for the movie catalog.",
    version="0.1.0",
    lifespan=lifespan,
)


@app.exception_handler(StoreError)
async def store_error_handler(request: Request, exc: StoreError) -> JSONResponse:
    """Translate store failures into HTTP responses."""
    return JSONResponse(
        status_code=int(error_status(exc.kind)),
        content=exc.to_dict(),
    )


app.include_router(health.router)
