"""Runtime logging helpers."""

from __future__ import annotations

import sys
from typing import TextIO

from loguru import logger

from lispy.config import get_log_level

_FORMAT = "{time:HH:mm:ss.SSS} | {level:<7} | {name}:{function}:{line} | {message}"
_CONFIGURED_LEVEL: str | None = None


def configure_logging(level: str | None = None, sink: TextIO | None = None) -> None:
    """Configure process-level logging once per level.

    The level defaults to LISPY_LOG_LEVEL (WARNING when unset). Logs go to
    stderr so they never mix with printed results on stdout.
    """
    global _CONFIGURED_LEVEL
    resolved = (level or get_log_level()).upper()
    if resolved == _CONFIGURED_LEVEL and sink is None:
        return

    logger.remove()
    logger.add(
        sink or sys.stderr,
        level=resolved,
        format=_FORMAT,
        backtrace=False,
        diagnose=False,
    )
    logger.enable("lispy")
    _CONFIGURED_LEVEL = resolved
