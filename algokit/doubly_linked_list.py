"""A doubly linked list of integers with a movable active element."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

ERROR_MESSAGE = "*ERROR* The program has performed an illegal operation."


class DLListError(Exception):
    """Raised when an operation is illegal in the list's current state."""

    def __init__(self, message: str = ERROR_MESSAGE) -> None:
        super().__init__(message)


@dataclass(eq=False)
class _Node:
    data: int
    previous: _Node | None = None
    next: _Node | None = None


class DoublyLinkedList:
    """Doubly linked list with one optional active element."""

    def __init__(self) -> None:
        self._first: _Node | None = None
        self._last: _Node | None = None
        self._active: _Node | None = None
        self._length = 0

    def __len__(self) -> int:
        return self._length

    def __iter__(self) -> Iterator[int]:
        node = self._first
        while node is not None:
            yield node.data
            node = node.next

    def __reversed__(self) -> Iterator[int]:
        node = self._last
        while node is not None:
            yield node.data
            node = node.previous

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def dispose(self) -> None:
        """Remove every element and return to the empty, inactive state."""
        self._first = None
        self._last = None
        self._active = None
        self._length = 0

    def insert_first(self, data: int) -> None:
        """Insert a new element at the start of the list."""
        node = _Node(data, None, self._first)
        if self._first is not None:
            self._first.previous = node
        else:
            self._last = node
        self._first = node
        self._length += 1

    def insert_last(self, data: int) -> None:
        """Insert a new element at the end of the list."""
        node = _Node(data, self._last, None)
        if self._last is not None:
            self._last.next = node
        else:
            self._first = node
        self._last = node
        self._length += 1

    def first(self) -> None:
        """Make the first element active (inactive if the list is empty)."""
        self._active = self._first

    def last(self) -> None:
        """Make the last element active (inactive if the list is empty)."""
        self._active = self._last

    def get_first(self) -> int:
        """Return the value of the first element."""
        if self._first is None:
            raise DLListError()
        return self._first.data

    def get_last(self) -> int:
        """Return the value of the last element."""
        if self._last is None:
            raise DLListError()
        return self._last.data

    def delete_first(self) -> None:
        """Remove the first element; activity is lost if it was active."""
        removed = self._first
        if removed is None:
            return
        if removed is self._active:
            self._active = None
        if removed is self._last:
            self._first = None
            self._last = None
        else:
            assert removed.next is not None
            removed.next.previous = None
            self._first = removed.next
        self._length -= 1

    def delete_last(self) -> None:
        """Remove the last element; activity is lost if it was active."""
        removed = self._last
        if removed is None:
            return
        if removed is self._active:
            self._active = None
        if removed is self._first:
            self._first = None
            self._last = None
        else:
            assert removed.previous is not None
            removed.previous.next = None
            self._last = removed.previous
        self._length -= 1

    def delete_after(self) -> None:
        """Remove the element after the active one, if there is one."""
        active = self._active
        if active is None or active.next is None:
            return
        removed = active.next
        active.next = removed.next
        if removed is self._last:
            self._last = active
        else:
            assert removed.next is not None
            removed.next.previous = active
        self._length -= 1

    def delete_before(self) -> None:
        """Remove the element before the active one, if there is one."""
        active = self._active
        if active is None or active.previous is None:
            return
        removed = active.previous
        active.previous = removed.previous
        if removed is self._first:
            self._first = active
        else:
            assert removed.previous is not None
            removed.previous.next = active
        self._length -= 1

    def insert_after(self, data: int) -> None:
        """Insert a new element after the active one; nothing if inactive."""
        active = self._active
        if active is None:
            return
        node = _Node(data, active, active.next)
        active.next = node
        if active is self._last:
            self._last = node
        else:
            assert node.next is not None
            node.next.previous = node
        self._length += 1

    def insert_before(self, data: int) -> None:
        """Insert a new element before the active one; nothing if inactive."""
        active = self._active
        if active is None:
            return
        node = _Node(data, active.previous, active)
        active.previous = node
        if active is self._first:
            self._first = node
        else:
            assert node.previous is not None
            node.previous.next = node
        self._length += 1

    def get_value(self) -> int:
        """Return the value of the active element."""
        if self._active is None:
            raise DLListError()
        return self._active.data

    def set_value(self, data: int) -> None:
        """Overwrite the active element's value; nothing if inactive."""
        if self._active is not None:
            self._active.data = data

    def next(self) -> None:
        """Move activity to the following element; nothing if inactive."""
        if self._active is not None:
            self._active = self._active.next

    def previous(self) -> None:
        """Move activity to the preceding element; nothing if inactive."""
        if self._active is not None:
            self._active = self._active.previous

    def is_active(self) -> bool:
        """Whether the list has an active element."""
        return self._active is not None