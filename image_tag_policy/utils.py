"""
Utility Functions Module for Image Tag Policy

This module provides helper functions used by the command line shell.

Functions:
    setup_logging: Configures application logging
    parse_log_level: Converts a level name into a logging level
    parse_image_arg: Parses a ``TAG[@TIMESTAMP]`` argument
"""

import logging
from datetime import datetime, timezone

from .images import ImageInfo

logger = logging.getLogger(__name__)


def setup_logging(level: int = logging.INFO) -> None:
    """Configure logging for the application."""
    logging.basicConfig(
        level=level, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )


def parse_log_level(name: str) -> int:
    """Convert a level name such as ``debug`` into a logging level.

    Raises:
        ValueError: If the name is not a known level
    """
    level = logging.getLevelName(name.strip().upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: '{name}'")
    return level


def parse_image_arg(arg: str) -> ImageInfo:
    """Parse a candidate image given as ``TAG`` or ``TAG@ISO-8601-TIMESTAMP``.

    Timestamps without a timezone are read as UTC.

    Raises:
        ValueError: If the tag is empty or the timestamp is malformed
    """
    tag, sep, timestamp = arg.partition("@")
    tag = tag.strip()
    if not tag:
        raise ValueError(f"Missing tag in '{arg}'")
    if not sep:
        return ImageInfo(tag=tag)
    try:
        created_at = datetime.fromisoformat(timestamp.strip())
    except ValueError as e:
        raise ValueError(f"Invalid timestamp in '{arg}': {e}") from e
    if created_at.tzinfo is None:
        created_at = created_at.replace(tzinfo=timezone.utc)
    return ImageInfo(tag=tag, created_at=created_at)
