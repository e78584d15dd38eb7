"""Logging setup shared by all graphsearch modules.

Every module obtains its logger through :func:`get_logger`, which attaches it
below the package logger ``graphsearch``. The package logger owns the only
handler, so output format and level are controlled in one place.

The initial level can be set with the ``GRAPHSEARCH_LOG_LEVEL`` environment
variable (e.g. ``DEBUG``); it defaults to ``INFO``.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Optional

PACKAGE_LOGGER_NAME = "graphsearch"
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LEVEL_ENV_VAR = "GRAPHSEARCH_LOG_LEVEL"

_configured = False


def _level_from_env(default: int) -> int:
    """Return the level named by ``GRAPHSEARCH_LOG_LEVEL`` or ``default``."""
    name = os.environ.get(LEVEL_ENV_VAR)
    if not name:
        return default
    level = logging.getLevelName(name.strip().upper())
    # getLevelName returns a "Level X" string for unknown names
    return level if isinstance(level, int) else default


def setup_root_logger(
    level: Optional[int] = None,
    format_string: Optional[str] = None,
    handler: Optional[logging.Handler] = None,
) -> None:
    """Attach a single handler to the ``graphsearch`` package logger.

    Repeated calls are no-ops until :func:`reset_logging` is called.

    Args:
        level: Logging level. When omitted, taken from the environment or INFO.
        format_string: Custom format string (optional).
        handler: Custom handler (optional, defaults to a stdout StreamHandler).
    """
    global _configured

    if _configured:
        return

    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    package_logger.setLevel(level if level is not None else _level_from_env(logging.INFO))
    package_logger.handlers.clear()

    if handler is None:
        handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(format_string or DEFAULT_FORMAT))
    package_logger.addHandler(handler)

    # Propagate so pytest's caplog sees the records
    package_logger.propagate = True

    _configured = True


def get_logger(name: str) -> logging.Logger:
    """Return a logger that inherits the package configuration.

    Args:
        name: Logger name, normally ``__name__`` of the calling module.

    Returns:
        The logger, with its own level left unset so the package level applies.
    """
    setup_root_logger()
    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    return logger


def set_global_log_level(level: int) -> None:
    """Set the level of the package logger and its handlers."""
    setup_root_logger()
    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    package_logger.setLevel(level)
    for handler in package_logger.handlers:
        handler.setLevel(level)


def enable_debug_logging() -> None:
    """Switch the whole package to DEBUG, which includes per-search traces."""
    set_global_log_level(logging.DEBUG)


def disable_debug_logging() -> None:
    set_global_log_level(logging.INFO)


def reset_logging() -> None:
    """Drop the package handler so the next call reconfigures (used by tests)."""
    global _configured
    _configured = False

    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    package_logger.handlers.clear()
    package_logger.setLevel(logging.NOTSET)


setup_root_logger()
