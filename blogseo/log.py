"""loguru sink configuration shared by the API and the CLI."""

from __future__ import annotations

import sys

from loguru import logger

from blogseo.config import settings

_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan> - <level>{message}</level>"
)


def configure_logging(level: str | None = None) -> None:
    """Replace loguru's default handler with a single stderr sink.

    Args:
        level: Minimum level to emit.  Defaults to ``settings.log_level``.
    """
    logger.remove()
    logger.add(sys.stderr, level=(level or settings.log_level).upper(), format=_FORMAT)
