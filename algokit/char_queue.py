"""A bounded FIFO queue of characters kept in a circular array."""

from __future__ import annotations

import enum

EMPTY_SLOT = "*"


class QueueErrorKind(enum.Enum):
    """Kinds of queue errors, each with its report message."""

    UNKNOWN = "Unknown error"
    ENQUEUE = "Queue error: ENQUEUE"
    FRONT = "Queue error: FRONT"
    REMOVE = "Queue error: REMOVE"
    DEQUEUE = "Queue error: DEQUEUE"
    INIT = "Queue error: INIT"


class QueueError(Exception):
    """Raised when a queue operation is illegal in the current state."""

    def __init__(self, kind: QueueErrorKind = QueueErrorKind.UNKNOWN) -> None:
        super().__init__(kind.value)
        self.kind = kind


class CharQueue:
    """Circular-array queue of characters; one slot always stays unused."""

    def __init__(self, size: int) -> None:
        if size < 1:
            raise QueueError(QueueErrorKind.INIT)
        self._size = size
        self._array = [EMPTY_SLOT] * size
        self._first_index = 0
        self._free_index = 0

    @property
    def size(self) -> int:
        """Number of slots in the array."""
        return self._size

    @property
    def array(self) -> tuple[str, ...]:
        """Snapshot of the underlying slots."""
        return tuple(self._array)

    @property
    def first_index(self) -> int:
        """Index of the first element."""
        return self._first_index

    @property
    def free_index(self) -> int:
        """Index of the first free slot."""
        return self._free_index

    def __len__(self) -> int:
        return (self._free_index - self._first_index) % self._size

    def next_index(self, index: int) -> int:
        """Index following index, wrapping around the array."""
        return (index + 1) % self._size

    def is_empty(self) -> bool:
        """Whether the queue holds no characters."""
        return self._first_index == self._free_index

    def is_full(self) -> bool:
        """Whether no more characters fit."""
        return self.next_index(self._free_index) == self._first_index

    def front(self) -> str:
        """Return the character at the front without removing it."""
        if self.is_empty():
            raise QueueError(QueueErrorKind.FRONT)
        return self._array[self._first_index]

    def remove(self) -> None:
        """Drop the character at the front; its slot is left as it was."""
        if self.is_empty():
            raise QueueError(QueueErrorKind.REMOVE)
        self._first_index = self.next_index(self._first_index)

    def dequeue(self) -> str:
        """Remove and return the character at the front."""
        if self.is_empty():
            raise QueueError(QueueErrorKind.DEQUEUE)
        data = self.front()
        self.remove()
        return data

    def enqueue(self, data: str) -> None:
        """Append a single character at the back."""
        if len(data) != 1:
            raise ValueError("enqueue takes exactly one character")
        if self.is_full():
            raise QueueError(QueueErrorKind.ENQUEUE)
        self._array[self._free_index] = data
        self._free_index = self.next_index(self._free_index)