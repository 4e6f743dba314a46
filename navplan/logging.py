"""Package-wide logging setup for navplan.

All modules obtain loggers through :func:`get_logger` so that a single handler
on the ``navplan`` root logger controls output for the whole planner. The
initial level may be overridden with the ``NAVPLAN_LOG_LEVEL`` environment
variable (e.g. ``DEBUG``).
"""

import logging
import os
import sys
from typing import Optional

ROOT_LOGGER_NAME = "navplan"
LOG_LEVEL_ENV = "NAVPLAN_LOG_LEVEL"

_ROOT_LOGGER_CONFIGURED = False


def level_from_name(name: Optional[str], default: int = logging.INFO) -> int:
    """Translate a level name such as ``"debug"`` into a logging constant.

    Unknown or empty names fall back to ``default``.
    """
    if not name:
        return default
    level = logging.getLevelName(name.strip().upper())
    return level if isinstance(level, int) else default


def setup_root_logger(
    level: Optional[int] = None,
    format_string: Optional[str] = None,
    handler: Optional[logging.Handler] = None,
) -> None:
    """Attach a single handler to the ``navplan`` logger.

    Repeated calls are no-ops until :func:`reset_logging` is called.

    Args:
        level: Logging level. Defaults to ``NAVPLAN_LOG_LEVEL`` or INFO.
        format_string: Custom format string (optional).
        handler: Custom handler (optional, defaults to a stdout StreamHandler).
    """
    global _ROOT_LOGGER_CONFIGURED

    if _ROOT_LOGGER_CONFIGURED:
        return

    if level is None:
        level = level_from_name(os.environ.get(LOG_LEVEL_ENV))

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    if format_string is None:
        format_string = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    if handler is None:
        handler = logging.StreamHandler(sys.stdout)

    handler.setFormatter(logging.Formatter(format_string))
    root_logger.addHandler(handler)

    # Propagate so pytest's caplog sees planner records
    root_logger.propagate = True

    _ROOT_LOGGER_CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    """Return a logger that inherits the ``navplan`` root configuration.

    Args:
        name: Logger name (typically ``__name__`` of the calling module).

    Returns:
        Logger instance with level NOTSET so the root level applies.
    """
    setup_root_logger()

    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    return logger


def set_global_log_level(level: int) -> None:
    """Set the level of the ``navplan`` root logger and its handlers."""
    setup_root_logger()

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(level)
    for handler in root_logger.handlers:
        handler.setLevel(level)


def enable_debug_logging() -> None:
    """Enable debug logging for the entire package."""
    set_global_log_level(logging.DEBUG)


def disable_debug_logging() -> None:
    """Return to INFO level."""
    set_global_log_level(logging.INFO)


def reset_logging() -> None:
    """Drop the root handler and configured flag (mainly for tests)."""
    global _ROOT_LOGGER_CONFIGURED
    _ROOT_LOGGER_CONFIGURED = False

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.handlers.clear()
    root_logger.setLevel(logging.NOTSET)


setup_root_logger()
