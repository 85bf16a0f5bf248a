"""Base protocol for sliding window methods.

Every method keeps a fixed-length ``Window`` of the most recent samples plus
whatever running state it needs, and turns each incoming sample into an
updated statistic:

- Construction (``Method(length, value)`` or ``Method.new``) validates the
  parameters and pre-fills the window with the first value.
- ``next(value)`` consumes one sample and returns the current statistic.

Methods are single-stream objects. Use one instance per stream.
"""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Self

from slidingstats.errors import InvalidInput, InvalidParameters

if TYPE_CHECKING:
    from collections.abc import Iterable

    from slidingstats.window import Window


def check_length(length: int, minimum: int, method: str) -> int:
    """Validate a window length parameter.

    Raises:
        TypeError: If length is not an integer.
        InvalidParameters: If length is below ``minimum``.
    """
    if isinstance(length, bool) or not isinstance(length, int):
        raise TypeError(f"{method} length must be an int, got {type(length).__name__}")
    if length < minimum:
        raise InvalidParameters(f"{method} length must be >= {minimum}, got {length}")
    return length


def check_finite(value: float, method: str) -> float:
    """Raise InvalidInput unless ``value`` is a finite number."""
    if not math.isfinite(value):
        raise InvalidInput(f"{method} cannot operate with non-finite values, got {value}")
    return value


class Method(ABC):
    """Base class for all streaming window methods.

    Subclasses implement ``__init__(length, value)`` and ``next(value)``.
    """

    @classmethod
    def new(cls, length: int, value: float, **kwargs) -> Self:
        """Create a method of window ``length`` pre-filled with ``value``.

        Raises:
            InvalidParameters: If length is below the method's minimum.
            InvalidInput: If the method requires a finite first value.
        """
        return cls(length, value, **kwargs)

    @abstractmethod
    def next(self, value: float) -> float:
        """Consume one sample and return the current statistic."""

    @property
    @abstractmethod
    def window(self) -> Window:
        """The window of recent samples, oldest first."""

    @property
    def length(self) -> int:
        """Window length the method was created with."""
        return self.window.capacity

    def over(self, values: Iterable[float]) -> list[float]:
        """Feed every value through ``next`` and collect the outputs."""
        return [self.next(value) for value in values]
