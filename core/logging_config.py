"""Logging configuration for the contact relay."""

from __future__ import annotations

import logging
import sys
from typing import Optional, Union


_CONSOLE_HANDLER_ATTR = "_is_contact_relay_console_handler"

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _resolve_level(level: Union[int, str, None]) -> int:
    if isinstance(level, int):
        return level
    if not level:
        return logging.INFO
    resolved = logging.getLevelName(str(level).upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def _create_console_handler(level: int) -> logging.Handler:
    """Create the stdout handler shared by the app and module loggers."""

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    setattr(handler, _CONSOLE_HANDLER_ATTR, True)
    return handler


def configure_logging(
    level: Union[int, str, None] = None,
    logger: Optional[logging.Logger] = None,
) -> logging.Logger:
    """Attach the console handler to *logger* (root by default) if missing.

    Calling this more than once only adjusts the level.
    """

    target = logger if logger is not None else logging.getLogger()
    resolved = _resolve_level(level)

    for handler in target.handlers:
        if getattr(handler, _CONSOLE_HANDLER_ATTR, False):
            handler.setLevel(resolved)
            break
    else:
        target.addHandler(_create_console_handler(resolved))

    target.setLevel(resolved)
    return target
