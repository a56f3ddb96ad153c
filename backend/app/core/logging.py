"""
Logging setup shared by the API process.
"""
import logging

from app.config import get_settings


def configure_logging(level: str | None = None) -> None:
    """Configure root logging once, using LOG_LEVEL when no level is given."""
    if level is None:
        level = get_settings().log_level

    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
