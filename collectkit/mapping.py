"""Key/value mapping adapter."""

from typing import Any, Dict, Generic, Iterator, Mapping, Optional, TypeVar

K = TypeVar("K")
V = TypeVar("V")


class Map(Generic[K, V]):
    """Thin adapter over a ``dict`` exposing its keys and values as lists.

    Each key maps to exactly one value. Iteration order of keys and values
    is unspecified: callers must not depend on it, even though the current
    backing ``dict`` happens to keep insertion order.
    """

    __slots__ = ("_data",)

    def __init__(self, data: Optional[Mapping[K, V]] = None, **kwargs: V):
        self._data: Dict[K, V] = dict(data) if data is not None else {}
        self._data.update(kwargs)

    def keys(self) -> "list[K]":
        """Return a new list of all keys, in unspecified order."""
        return list(self._data)

    def vals(self) -> "list[V]":
        """Return a new list of all values, in unspecified order."""
        return list(self._data.values())

    def get(self, key: K, default: Optional[V] = None) -> Optional[V]:
        return self._data.get(key, default)

    def to_dict(self) -> Dict[K, V]:
        return dict(self._data)

    def __getitem__(self, key: K) -> V:
        return self._data[key]

    def __setitem__(self, key: K, value: V) -> None:
        self._data[key] = value

    def __delitem__(self, key: K) -> None:
        del self._data[key]

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[K]:
        return iter(self._data)

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, Map):
            return self._data == other._data
        if isinstance(other, dict):
            return self._data == other
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Map({self._data!r})"
