"""A singly linked list of integers with a movable active element."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

ERROR_MESSAGE = "*ERROR* The program has performed an illegal operation."


class ListError(Exception):
    """Raised when an operation is illegal in the list's current state."""

    def __init__(self, message: str = ERROR_MESSAGE) -> None:
        super().__init__(message)


@dataclass(eq=False)
class _Node:
    data: int
    next: _Node | None = None


class SinglyLinkedList:
    """Singly linked list with one optional active element."""

    def __init__(self) -> None:
        self._first: _Node | None = None
        self._active: _Node | None = None
        self._length = 0

    def __len__(self) -> int:
        return self._length

    def __iter__(self) -> Iterator[int]:
        node = self._first
        while node is not None:
            yield node.data
            node = node.next

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def dispose(self) -> None:
        """Remove every element and return to the empty, inactive state."""
        self._first = None
        self._active = None
        self._length = 0

    def insert_first(self, data: int) -> None:
        """Insert a new element at the start of the list."""
        self._first = _Node(data, self._first)
        self._length += 1

    def first(self) -> None:
        """Make the first element active (the list becomes inactive if empty)."""
        self._active = self._first

    def get_first(self) -> int:
        """Return the value of the first element."""
        if self._first is None:
            raise ListError()
        return self._first.data

    def delete_first(self) -> None:
        """Remove the first element; activity is lost if it was active."""
        if self._first is None:
            return
        removed = self._first
        if removed is self._active:
            self._active = None
        self._first = removed.next
        self._length -= 1

    def delete_after(self) -> None:
        """Remove the element after the active one, if there is one."""
        active = self._active
        if active is None or active.next is None:
            return
        active.next = active.next.next
        self._length -= 1

    def insert_after(self, data: int) -> None:
        """Insert a new element after the active one; nothing if inactive."""
        active = self._active
        if active is None:
            return
        active.next = _Node(data, active.next)
        self._length += 1

    def get_value(self) -> int:
        """Return the value of the active element."""
        if self._active is None:
            raise ListError()
        return self._active.data

    def set_value(self, data: int) -> None:
        """Overwrite the active element's value; nothing if inactive."""
        if self._active is not None:
            self._active.data = data

    def next(self) -> None:
        """Move activity to the following element; nothing if inactive."""
        if self._active is not None:
            self._active = self._active.next

    def is_active(self) -> bool:
        """Whether the list has an active element."""
        return self._active is not None