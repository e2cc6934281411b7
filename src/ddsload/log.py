"""Logging setup for the command-line tool"""
import logging

logger = logging.getLogger("ddsload")

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_logging(level: str = "WARNING", force: bool = False) -> None:
    """
    Configure logging without clobbering handlers installed by a host application.

    Args:
        level: Level name such as "DEBUG" or "INFO"
        force: Replace existing root handlers
    """
    numeric_level = getattr(logging, level.upper(), None)
    if not isinstance(numeric_level, int):
        logger.warning("Invalid log level '%s', defaulting to WARNING", level)
        numeric_level = logging.WARNING

    root = logging.getLogger()
    if force or not root.handlers:
        logging.basicConfig(level=numeric_level, format=LOG_FORMAT, force=force)
        return

    # Embedded mode: only touch our own logger hierarchy
    logger.setLevel(numeric_level)
