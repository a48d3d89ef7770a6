"""collectkit - generic List and Map collection utilities."""

__version__ = "0.1.0"
__package_name__ = "collectkit"

import logging as _logging

# Logging is not configured on import; call configure_logging() to opt in.
from collectkit.logging import PACKAGE_LOGGER, configure_logging, get_logger

_logging.getLogger(PACKAGE_LOGGER).addHandler(_logging.NullHandler())

from .config import DEFAULT_CONFIG, CollectionConfig
from .exceptions import (
    CollectionError,
    EmptyError,
    IndexOutOfRangeError,
    NotFoundError,
)
from .mapping import Map
from .sequence import List, reduce

__all__ = [
    "List",
    "Map",
    "reduce",
    "CollectionError",
    "EmptyError",
    "IndexOutOfRangeError",
    "NotFoundError",
    "CollectionConfig",
    "DEFAULT_CONFIG",
    "configure_logging",
    "get_logger",
]
