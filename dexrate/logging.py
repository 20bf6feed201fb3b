"""Centralized logging configuration for dexrate.

All modules obtain loggers through :func:`get_logger`, which hangs them under
the package logger ``"dexrate"``. Log records go to stderr so that command
output written to stdout (tables, JSON) stays machine-readable.
"""

import logging
import sys
from typing import Optional

PACKAGE_LOGGER = "dexrate"
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_configured = False


def setup_root_logger(
    level: int = logging.INFO,
    format_string: Optional[str] = None,
    handler: Optional[logging.Handler] = None,
) -> None:
    """Attach a single handler to the package logger.

    Subsequent calls are no-ops until :func:`reset_logging` is called.

    Args:
        level: Logging level for the package logger.
        format_string: Custom format string. Defaults to ``DEFAULT_FORMAT``.
        handler: Custom handler. Defaults to a stderr ``StreamHandler``.
    """
    global _configured

    if _configured:
        return

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(level)
    package_logger.handlers.clear()

    if handler is None:
        handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(format_string or DEFAULT_FORMAT))
    package_logger.addHandler(handler)

    # Propagate so pytest's caplog sees records
    package_logger.propagate = True

    _configured = True


def get_logger(name: str) -> logging.Logger:
    """Return a logger under the package logger hierarchy.

    Args:
        name: Logger name, normally ``__name__`` of the calling module.

    Returns:
        Logger that inherits level and handlers from ``"dexrate"``.
    """
    setup_root_logger()
    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    return logger


def set_global_log_level(level: int) -> None:
    """Set the level of the package logger and its handlers.

    Args:
        level: Logging level (e.g., ``logging.DEBUG``).
    """
    setup_root_logger()

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(level)
    for handler in package_logger.handlers:
        handler.setLevel(level)


def enable_debug_logging() -> None:
    """Switch every dexrate logger to DEBUG."""
    set_global_log_level(logging.DEBUG)


def disable_debug_logging() -> None:
    """Switch every dexrate logger back to INFO."""
    set_global_log_level(logging.INFO)


def reset_logging() -> None:
    """Drop handlers and forget the configuration (used by tests)."""
    global _configured
    _configured = False

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.handlers.clear()
    package_logger.setLevel(logging.NOTSET)

