"""Helpers for configuring consistent project logging output."""

from __future__ import annotations

import logging
import os
from typing import Optional

LOG_LEVEL_ENV = "RHYME_FINDER_LOG_LEVEL"

_DEFAULT_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
_CONFIGURED = False


def _resolve_level(level: str | int | None) -> int:
    if level is None:
        return logging.INFO
    if isinstance(level, int):
        return level
    text = str(level).strip()
    if text.isdigit():
        return int(text)
    resolved = logging.getLevelName(text.upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def configure_logging(level: Optional[str | int] = None, *, force: bool = False) -> int:
    """Initialise root logging handlers for the application.

    The level comes from ``level`` when given, otherwise from the
    ``RHYME_FINDER_LOG_LEVEL`` environment variable, defaulting to ``INFO``.
    Repeated calls are no-ops unless ``force`` is set. Returns the level in
    effect for the ``rhyme_finder`` logger.
    """

    global _CONFIGURED

    package_logger = logging.getLogger("rhyme_finder")
    if _CONFIGURED and not force:
        return package_logger.level

    resolved_level = _resolve_level(level if level is not None else os.environ.get(LOG_LEVEL_ENV))

    logging.basicConfig(level=resolved_level, format=_DEFAULT_FORMAT, force=force)
    package_logger.setLevel(resolved_level)
    _CONFIGURED = True
    return resolved_level


__all__ = ["configure_logging", "LOG_LEVEL_ENV"]
