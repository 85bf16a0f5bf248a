"""Simple moving median over a sliding window.

Alongside the window, SMM keeps a sorted copy of the same samples. When a
sample arrives, the evicted sample is located in the sorted copy by binary
search, the insertion point of the new sample is located the same way, and
only the run of values between the two positions is shifted by one slot.
The median is then read straight from the middle of the sorted copy.

Key properties:
- Update: O(log N) search + O(k) shift, k = distance between the two positions
- Query: O(1)
- Space: O(N)

All samples must be finite; NaN has no place in a sorted order.
"""

from __future__ import annotations

import logging
from bisect import bisect_left

from slidingstats.methods.base import Method, check_finite, check_length
from slidingstats.window import Window

logger = logging.getLogger(__name__)


class SMM(Method):
    """Moving median of the last ``length`` samples.

    Args:
        length: Window length. Must be > 0.
        value: First sample; the window is pre-filled with it. Must be finite.

    Raises:
        InvalidParameters: If length is 0.
        InvalidInput: If value is NaN or infinite.

    Example:
        smm = SMM(3, 1.0)
        smm.next(1.0)
        smm.next(2.0)
        smm.next(3.0)    # -> 2.0
        smm.next(100.0)  # -> 3.0
    """

    def __init__(self, length: int, value: float):
        length = check_length(length, 1, "SMM")
        check_finite(value, "SMM")

        half = length // 2
        self._half = half
        self._half_m1 = half - 1 if length % 2 == 0 else half

        self._window = Window(length, value)
        self._sorted: list[float] = [value] * length

        logger.debug("SMM created: length=%d", length)

    @property
    def window(self) -> Window:
        return self._window

    @property
    def sorted_values(self) -> list[float]:
        """Copy of the window contents in non-decreasing order."""
        return list(self._sorted)

    def median(self) -> float:
        """Median of the current window."""
        return (self._sorted[self._half] + self._sorted[self._half_m1]) * 0.5

    def next(self, value: float) -> float:
        check_finite(value, "SMM")

        evicted = self._window.push(value)
        values = self._sorted

        # any occurrence of an equal value is interchangeable
        old_index = bisect_left(values, evicted)
        index = bisect_left(values, value)

        # removing the old slot moves everything after it one step left
        if old_index < index:
            index -= 1

        # del + insert move only the run between the two slots, in place
        if index == old_index:
            values[index] = value
        else:
            del values[old_index]
            values.insert(index, value)

        return (values[self._half] + values[self._half_m1]) * 0.5

    def __repr__(self) -> str:
        return f"SMM(length={self.length}, median={self.median()})"
