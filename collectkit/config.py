"""Container configuration for collectkit.

A ``CollectionConfig`` is passed to each container explicitly; there is no
global mutable state. The defaults keep the historical behaviour of ``chunk``
and ``insert``.
"""

from dataclasses import dataclass, fields
from typing import Any, Dict, Optional

from collectkit.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class CollectionConfig:
    """Immutable behaviour switches for ``List``.

    Attributes:
        strict_chunk_size: Raise ``ValueError`` from ``chunk`` on a non-positive
            size instead of returning an empty result.
        allow_insert_at_end: Let ``insert`` target the one-past-end position,
            appending the element.
    """

    strict_chunk_size: bool = False
    allow_insert_at_end: bool = False

    @classmethod
    def from_dict(cls, options: Optional[Dict[str, Any]] = None) -> "CollectionConfig":
        """Build a configuration from a plain dictionary.

        Args:
            options: Mapping of option name to value. ``None`` gives the defaults.

        Returns:
            CollectionConfig instance

        Raises:
            ValueError: If an option is unknown or is not a bool
        """
        if not options:
            return cls()

        known = {f.name for f in fields(cls)}
        unknown = sorted(set(options) - known)
        if unknown:
            raise ValueError(
                f"Unknown collection options: {unknown}. Valid options: {sorted(known)}"
            )

        for name, value in options.items():
            if not isinstance(value, bool):
                raise ValueError(
                    f"Option '{name}' must be a bool, got {type(value).__name__}"
                )

        config = cls(**options)
        logger.debug(f"Built collection config: {config}")
        return config

    def merge(self, **overrides: Any) -> "CollectionConfig":
        """Return a copy of this configuration with ``overrides`` applied.

        Overrides go through the same validation as ``from_dict``.
        """
        return self.from_dict({**self.to_dict(), **overrides})

    def to_dict(self) -> Dict[str, bool]:
        return {f.name: getattr(self, f.name) for f in fields(self)}


DEFAULT_CONFIG = CollectionConfig()
