"""Fixed-capacity circular buffer of the most recent samples.

A ``Window`` is created already full: every slot holds the initial value, so
the owning method never has to deal with a partially filled window. The only
mutation is ``push``, which replaces the oldest sample and hands it back.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from slidingstats.errors import InvalidParameters

if TYPE_CHECKING:
    from collections.abc import Iterator


class Window:
    """Circular buffer of the last ``capacity`` samples.

    Args:
        capacity: Number of samples kept. Must be >= 1.
        value: Value every slot is filled with.

    Example:
        w = Window(3, 0.0)
        w.push(1.0)  # -> 0.0
        w.push(2.0)  # -> 0.0
        w.push(3.0)  # -> 0.0
        w.push(4.0)  # -> 1.0
        list(w)      # -> [2.0, 3.0, 4.0]
    """

    __slots__ = ("_buf", "_index")

    def __init__(self, capacity: int, value: float):
        if capacity < 1:
            raise InvalidParameters(f"capacity must be positive, got {capacity}")

        self._buf: list[float] = [value] * capacity
        # slot holding the oldest sample
        self._index = 0

    @property
    def capacity(self) -> int:
        """Number of samples held by the window."""
        return len(self._buf)

    def push(self, value: float) -> float:
        """Replace the oldest sample with ``value``.

        Returns:
            The sample that was evicted.
        """
        index = self._index
        evicted = self._buf[index]
        self._buf[index] = value

        index += 1
        self._index = 0 if index == len(self._buf) else index

        return evicted

    def oldest(self) -> float:
        """The sample that the next ``push`` will evict."""
        return self._buf[self._index]

    def newest(self) -> float:
        """The most recently pushed sample."""
        return self._buf[self._index - 1]

    def to_list(self) -> list[float]:
        """Window contents ordered oldest to newest."""
        return self._buf[self._index :] + self._buf[: self._index]

    def __getitem__(self, position: int) -> float:
        """Sample at a logical position, 0 being the oldest and -1 the newest."""
        size = len(self._buf)
        if not -size <= position < size:
            raise IndexError(f"window index out of range: {position}")
        return self._buf[(self._index + position) % size]

    def __iter__(self) -> Iterator[float]:
        yield from self._buf[self._index :]
        yield from self._buf[: self._index]

    def __len__(self) -> int:
        return len(self._buf)

    def __repr__(self) -> str:
        return f"Window(capacity={len(self._buf)}, values={self.to_list()})"
