"""Exceptions raised by collectkit containers."""

from typing import Any, Optional


class CollectionError(Exception):
    """Base exception for collection errors."""


class EmptyError(CollectionError):
    """Raised when an operation needs at least one element and there is none."""

    def __init__(self, operation: Optional[str] = None):
        self.operation = operation
        message = "list is empty"
        if operation:
            message = f"{operation}: {message}"
        super().__init__(message)


class IndexOutOfRangeError(CollectionError, IndexError):
    """Raised when an index lies outside ``[0, length)``."""

    def __init__(
        self,
        index: Optional[int] = None,
        length: Optional[int] = None,
        operation: Optional[str] = None,
    ):
        """Initialize an index error.

        Args:
            index: Optional index that was requested
            length: Optional length of the container at the time of the call
            operation: Optional name of the failing operation
        """
        self.index = index
        self.length = length
        self.operation = operation
        message = "index out of range"
        if index is not None and length is not None:
            message += f" (index {index}, length {length})"
        if operation:
            message = f"{operation}: {message}"
        super().__init__(message)


class NotFoundError(CollectionError, LookupError):
    """Raised when a value-based lookup finds no matching element."""

    def __init__(self, element: Any = None, operation: Optional[str] = None):
        self.element = element
        self.operation = operation
        message = "element not found"
        if operation:
            message = f"{operation}: {message}"
        super().__init__(message)
