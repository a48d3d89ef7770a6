"""Ordered, index-addressable sequence container."""

import operator
from typing import (
    Any,
    Callable,
    Generic,
    Iterable,
    Iterator,
    Optional,
    TypeVar,
)

from collectkit.config import DEFAULT_CONFIG, CollectionConfig
from collectkit.exceptions import EmptyError, IndexOutOfRangeError, NotFoundError
from collectkit.logging import get_logger

logger = get_logger(__name__)

T = TypeVar("T")
A = TypeVar("A")

EqualityFunc = Callable[[Any, Any], bool]


class List(Generic[T]):
    """Mutable ordered collection with linear-scan search.

    Elements keep insertion order unless an index operation moves them.
    Searches (``index``, ``contains``, ``remove``, ``replace``) scan left to
    right and always resolve to the first match. Equality uses ``==`` unless
    an ``eq`` predicate is supplied.

    Operations that produce containers (``chunk``, ``filter``, ``map``) return
    independent copies that share the receiver's configuration and equality
    predicate, never views onto its storage.

    Instances are not thread-safe.
    """

    __slots__ = ("_items", "_eq", "_config")

    def __init__(
        self,
        items: Optional[Iterable[T]] = None,
        *,
        eq: Optional[EqualityFunc] = None,
        config: Optional[CollectionConfig] = None,
    ):
        """Initialize a List.

        Args:
        ----
            items: Optional iterable whose elements are copied in order.
            eq: Optional equality predicate ``eq(a, b) -> bool``. Defaults to ``==``.
            config: Optional behaviour switches. Defaults to ``DEFAULT_CONFIG``.

        """
        self._items: "list[T]" = list(items) if items is not None else []
        self._eq: EqualityFunc = eq if eq is not None else operator.eq
        self._config: CollectionConfig = config if config is not None else DEFAULT_CONFIG

    @classmethod
    def new(cls, **kwargs: Any) -> "List[T]":
        """Create an empty List."""
        return cls(**kwargs)

    @property
    def config(self) -> CollectionConfig:
        return self._config

    def add(self, element: T) -> None:
        self._items.append(element)

    def add_all(self, elements: Iterable[T]) -> None:
        """Append every element of ``elements`` in order."""
        # list() first so that lst.add_all(lst) terminates
        self._items.extend(list(elements))

    def chunk(self, size: int) -> "list[List[T]]":
        """Split the list into consecutive groups of ``size`` elements.

        The final group holds the remainder. When ``size`` is at least the
        length, the whole list comes back as a single chunk, so an empty list
        yields one empty chunk.

        A non-positive ``size`` returns an empty result without raising, unless
        the list was configured with ``strict_chunk_size``.

        Args:
        ----
            size: Number of elements per chunk

        Returns:
        -------
            List of independent ``List`` chunks

        Raises:
        ------
            ValueError: If ``size`` is not positive and ``strict_chunk_size`` is set

        """
        if size <= 0:
            if self._config.strict_chunk_size:
                raise ValueError(f"Chunk size must be positive, got {size}")
            logger.debug(f"chunk called with non-positive size {size}, returning []")
            return []

        if size >= len(self._items):
            return [self._derive(self._items)]

        return [
            self._derive(self._items[start : start + size])
            for start in range(0, len(self._items), size)
        ]

    def contains(self, element: T) -> bool:
        return self._find(element) != -1

    def contains_all(self, elements: Iterable[T]) -> bool:
        """Return True if every element of ``elements`` is present."""
        return all(self._find(element) != -1 for element in elements)

    def clear(self) -> None:
        self._items = []

    def is_empty(self) -> bool:
        return not self._items

    def filter(self, predicate: Callable[[T], bool]) -> "List[T]":
        """Return a new List with the elements for which ``predicate`` is true.

        Args:
        ----
            predicate: Function called once per element, in order

        Returns:
        -------
            A new List; the receiver is not modified

        """
        return self._derive(element for element in self._items if predicate(element))

    def first(self) -> T:
        """Return the first element.

        Raises:
            EmptyError: If the list is empty
        """
        self._require_items("first")
        return self._items[0]

    def last(self) -> T:
        """Return the last element.

        Raises:
            EmptyError: If the list is empty
        """
        self._require_items("last")
        return self._items[-1]

    def get(self, index: int) -> T:
        """Return the element at ``index``.

        Negative indices are out of range; they do not count from the end.

        Raises:
            EmptyError: If the list is empty
            IndexOutOfRangeError: If ``index`` is outside ``[0, len)``
            TypeError: If ``index`` is not an int
        """
        self._validate_index(index, "get")
        return self._items[index]

    def index(self, element: T) -> int:
        """Return the position of the first match, or -1."""
        return self._find(element)

    def insert(self, index: int, element: T) -> None:
        """Insert ``element`` before position ``index``.

        Only existing positions are accepted, so appending must go through
        ``add`` unless the list was configured with ``allow_insert_at_end``.

        Raises:
            EmptyError: If the list is empty
            IndexOutOfRangeError: If ``index`` is outside ``[0, len)``
        """
        if (
            self._config.allow_insert_at_end
            and _is_index(index)
            and index == len(self._items)
        ):
            self._items.append(element)
            return
        self._validate_index(index, "insert")
        self._items.insert(index, element)

    def map(self, func: Callable[[T], T]) -> "List[T]":
        """Return a new List with ``func`` applied to every element, in order."""
        return self._derive(func(element) for element in self._items)

    def pop_first(self) -> T:
        """Remove and return the first element.

        Raises:
            EmptyError: If the list is empty
        """
        self._require_items("pop_first")
        return self._items.pop(0)

    def pop_last(self) -> T:
        """Remove and return the last element.

        Raises:
            EmptyError: If the list is empty
        """
        self._require_items("pop_last")
        return self._items.pop()

    def remove(self, element: T) -> bool:
        """Remove the first match of ``element``.

        Returns:
            True if an element was removed, False if there was no match
        """
        position = self._find(element)
        if position == -1:
            return False
        del self._items[position]
        return True

    def remove_index(self, index: int) -> T:
        """Remove and return the element at ``index``.

        Raises:
            EmptyError: If the list is empty
            IndexOutOfRangeError: If ``index`` is outside ``[0, len)``
        """
        self._validate_index(index, "remove_index")
        return self._items.pop(index)

    def replace(self, old: T, new: T) -> None:
        """Replace the first occurrence of ``old`` with ``new``.

        Raises:
            NotFoundError: If ``old`` is not in the list
        """
        position = self._find(old)
        if position == -1:
            logger.debug(f"replace: no element equal to {old!r}")
            raise NotFoundError(old, operation="replace")
        self._items[position] = new

    def replace_index(self, index: int, element: T) -> None:
        """Overwrite the element at ``index``.

        Raises:
            EmptyError: If the list is empty
            IndexOutOfRangeError: If ``index`` is outside ``[0, len)``
        """
        self._validate_index(index, "replace_index")
        self._items[index] = element

    def to_list(self) -> "list[T]":
        """Return a shallow copy of the elements as a built-in list."""
        return list(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __contains__(self, element: object) -> bool:
        return self._find(element) != -1

    def __eq__(self, other: Any) -> bool:
        """Compare element-wise with another List or a built-in list."""
        if isinstance(other, List):
            return self._items == other._items
        if isinstance(other, list):
            return self._items == other
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"List({self._items!r})"

    def _derive(self, items: Iterable[T]) -> "List[T]":
        return List(items, eq=self._eq, config=self._config)

    def _find(self, element: Any) -> int:
        for position, candidate in enumerate(self._items):
            if self._eq(element, candidate):
                return position
        return -1

    def _require_items(self, operation: str) -> None:
        if not self._items:
            logger.debug(f"{operation} called on an empty list")
            raise EmptyError(operation)

    def _check_index_type(self, index: Any, operation: str) -> None:
        if not _is_index(index):
            raise TypeError(
                f"{operation}: index must be an int, got {type(index).__name__}"
            )

    def _validate_index(self, index: int, operation: str) -> None:
        # Empty takes precedence over out-of-range
        self._require_items(operation)
        self._check_index_type(index, operation)
        if index < 0 or index >= len(self._items):
            logger.debug(
                f"{operation}: index {index} out of range for length {len(self._items)}"
            )
            raise IndexOutOfRangeError(index, len(self._items), operation=operation)


def _is_index(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)

def reduce(items: Iterable[T], seed: A, func: Callable[[A, T], A]) -> A:
    """Left-fold ``items`` into an accumulator.

    A module-level function rather than a method so that the accumulator type
    can differ from the element type.

    Args:
        items: A ``List`` or any other iterable of elements
        seed: Initial accumulator value
        func: Combining function ``func(accumulator, element)``

    Returns:
        The final accumulator; ``seed`` itself for an empty input
    """
    accumulator = seed
    for element in items:
        accumulator = func(accumulator, element)
    return accumulator
