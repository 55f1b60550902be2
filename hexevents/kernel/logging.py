"""Loguru setup shared by every hexevents module.

Modules obtain their logger with ``get_logger(__name__)``. The first call
installs a stderr sink whose level and format come from
``HEXEVENTS_LOG_LEVEL`` / ``HEXEVENTS_LOG_FORMAT``; hosts replace it with
:func:`configure_logging` or ``hexevents.kernel.config.apply_config()``.

>>> from hexevents.kernel.logging import get_logger
>>> get_logger(__name__).debug("Prepared {count} listeners", count=2)
"""

from __future__ import annotations

import os
import sys
from contextlib import suppress
from functools import lru_cache
from typing import TYPE_CHECKING, Literal

from loguru import logger
from rich.logging import RichHandler

if TYPE_CHECKING:
    from loguru import Logger

LogLevel = Literal["TRACE", "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
LogFormat = Literal["structured", "json", "rich"]

_CURRENT_CONFIG: dict | None = None
_HANDLER_IDS: list[int] = []


def configure_logging(
    level: LogLevel = "INFO",
    format: LogFormat = "structured",
    include_timestamp: bool = True,
    force_reconfigure: bool = False,
) -> None:
    """Install the hexevents stderr sink.

    Repeating the current settings does nothing, so it is safe to call from
    constructors. Sinks added by other code (pytest, the host) are kept.

    Parameters
    ----------
    level : LogLevel, default="INFO"
        Minimum level written
    format : LogFormat, default="structured"
        - "structured": one line with module/function/line, colored on a TTY
        - "json": one serialized record per line
        - "rich": Rich console handler
    include_timestamp : bool, default=True
        Prefix records with the time
    force_reconfigure : bool, default=False
        Replace the sink even if the settings are unchanged
    """
    global _CURRENT_CONFIG

    requested = {"level": level, "format": format, "include_timestamp": include_timestamp}
    if not force_reconfigure and requested == _CURRENT_CONFIG:
        return

    for handler_id in _HANDLER_IDS:
        with suppress(ValueError):
            logger.remove(handler_id)
    _HANDLER_IDS.clear()

    if format == "rich":
        sink = RichHandler(rich_tracebacks=True, show_time=include_timestamp, show_path=True)
        _HANDLER_IDS.append(logger.add(sink, level=level, format="{message}"))
    elif format == "json":
        _HANDLER_IDS.append(logger.add(sys.stderr, level=level, serialize=True))
    else:
        colorize = sys.stderr.isatty()
        line = "<cyan>{name}:{function}:{line}</cyan> | <level>{level: <8}</level> | {message}"
        if include_timestamp:
            line = "<green>{time:YYYY-MM-DD HH:mm:ss}</green> " + line
        _HANDLER_IDS.append(logger.add(sys.stderr, level=level, format=line, colorize=colorize))

    _CURRENT_CONFIG = requested


@lru_cache(maxsize=256)
def get_logger(name: str) -> Logger:
    """Return the shared Loguru logger bound with ``module=name`` (cached)."""
    if _CURRENT_CONFIG is None:
        level = os.getenv("HEXEVENTS_LOG_LEVEL", "INFO").upper()
        format_type = os.getenv("HEXEVENTS_LOG_FORMAT", "structured").lower()
        configure_logging(level=level, format=format_type)  # type: ignore[arg-type]
    return logger.bind(module=name)


__all__ = ["LogFormat", "LogLevel", "configure_logging", "get_logger"]
