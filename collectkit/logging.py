import logging
import sys
from typing import Any, Dict, Optional

DEFAULT_LOG_LEVEL = logging.INFO
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

PACKAGE_LOGGER = "collectkit"

# Map string log levels to logging constants
LOG_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
    "critical": logging.CRITICAL,
}

_handler: Optional[logging.Handler] = None


def get_logger(name: str) -> logging.Logger:
    """Return a logger with the specified name.

    No handler is attached here; records propagate to the ``collectkit``
    package logger and from there to the host application's handlers.

    Args:
        name: The name for the logger, typically __name__

    Returns:
        Logger instance
    """
    return logging.getLogger(name)


def configure_logging(
    verbose: bool = False,
    quiet: bool = False,
    level: Optional[str] = None,
) -> None:
    """Configure the collectkit package logger.

    Installs a single stdout handler on the ``collectkit`` logger. Records
    still propagate, so handlers on the root logger keep receiving them.

    Args:
        verbose: Whether to enable verbose mode (shows all debug logs)
        quiet: Whether to enable quiet mode (only shows warnings and errors)
        level: Optional level name from ``LOG_LEVELS``; overrides the flags

    Raises:
        ValueError: If ``level`` is not a known level name
    """
    global _handler

    if level is not None:
        try:
            log_level = LOG_LEVELS[level.lower()]
        except KeyError:
            raise ValueError(
                f"Unknown log level '{level}'. Valid levels: {sorted(LOG_LEVELS)}"
            ) from None
    elif quiet:
        log_level = logging.WARNING
    elif verbose:
        log_level = logging.DEBUG
    else:
        log_level = DEFAULT_LOG_LEVEL

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(log_level)

    # Replace our own handler only, leaving anything the host added
    if _handler is not None:
        package_logger.removeHandler(_handler)

    _handler = logging.StreamHandler(sys.stdout)
    _handler.setFormatter(logging.Formatter(DEFAULT_FORMAT))
    package_logger.addHandler(_handler)


def get_logging_status() -> Dict[str, Any]:
    """Get the current logging status of the collectkit loggers.

    Returns:
        Dictionary with logging status information
    """
    package_logger = logging.getLogger(PACKAGE_LOGGER)

    modules = {}
    for name in _package_logger_names():
        logger = logging.getLogger(name)
        modules[name] = {
            "level": logging.getLevelName(logger.getEffectiveLevel()),
            "propagate": logger.propagate,
            "has_handlers": bool(logger.handlers),
        }

    return {
        "package_level": logging.getLevelName(package_logger.getEffectiveLevel()),
        "modules": modules,
    }


def _package_logger_names():
    return [
        name
        for name in list(logging.root.manager.loggerDict)
        if name == PACKAGE_LOGGER or name.startswith(PACKAGE_LOGGER + ".")
    ]
