"""Linear regression moving average (LSMA) over a sliding window.

Fits ``y = a*x + b`` by least squares to the last N samples and returns the
fitted value at the newest sample. Samples are indexed by reversed rank: x = 0
for the newest sample up to x = N - 1 for the oldest, so the fitted value is
the intercept ``b``.

Only four running quantities are needed. Sx and Sx2 depend on N alone and are
computed once; Sy and Sxy are updated in O(1) as the window advances:

- every remaining sample moves one rank back, adding Sy to Sxy, and the
  evicted sample at rank N leaves it: ``Sxy += Sy - N*evicted``
- ``Sy += value - evicted``

Key properties:
- Update: O(1), independent of N
- Space: O(N) for the window

The recurrences never re-synchronize with the window on their own, so very
long streams accumulate floating point drift. ``resync_every`` bounds it by
recomputing the sums from the window periodically.
"""

from __future__ import annotations

import logging
import math

from slidingstats.config import get_settings
from slidingstats.methods.base import Method, check_length
from slidingstats.window import Window

logger = logging.getLogger(__name__)


class LinReg(Method):
    """Least squares moving average of the last ``length`` samples.

    Args:
        length: Window length. Must be > 1.
        value: First sample; the window is pre-filled with it.
        resync_every: Recompute the running sums from the window every this
            many samples. 0 disables it. Defaults to the configured
            ``Settings.resync_every``.

    Example:
        lsma = LinReg(3, 1.0)
        lsma.next(2.0)
        lsma.next(3.0)  # -> 3.0, the window 1, 2, 3 lies on a line
    """

    def __init__(self, length: int, value: float, resync_every: int | None = None):
        length = check_length(length, 2, "LinReg")

        if resync_every is None:
            resync_every = get_settings().resync_every
        if isinstance(resync_every, bool) or not isinstance(resync_every, int):
            raise TypeError(f"resync_every must be an int, got {type(resync_every).__name__}")
        if resync_every < 0:
            raise ValueError(f"resync_every must be non-negative, got {resync_every}")

        n = float(length)
        s_x = length * (length - 1) // 2
        s_x2 = s_x * (2 * length - 1) // 3

        self._n = n
        self._s_x = float(s_x)
        self._divider = 1.0 / (length * s_x2 - s_x * s_x)

        self._s_y = value * n
        self._s_xy = value * self._s_x

        self._window = Window(length, value)
        self._resync_every = resync_every
        self._since_resync = 0

        logger.debug("LinReg created: length=%d, resync_every=%d", length, resync_every)

    @property
    def window(self) -> Window:
        return self._window

    @property
    def resync_every(self) -> int:
        """Samples between full recomputations of the running sums (0 = never)."""
        return self._resync_every

    @property
    def s_y(self) -> float:
        """Running sum of the window values."""
        return self._s_y

    @property
    def s_xy(self) -> float:
        """Running sum of rank times value, rank 0 being the newest sample."""
        return self._s_xy

    def _slope(self) -> float:
        # slope over reversed rank, i.e. per step back in time
        return math.fma(self._n, self._s_xy, -self._s_x * self._s_y) * self._divider

    def tan(self) -> float:
        """Slope of the fitted line per step forward in time."""
        return -self._slope()

    def b(self) -> float:
        """Fitted value at the newest sample."""
        return math.fma(-self._s_x, self._slope(), self._s_y) / self._n

    def next(self, value: float) -> float:
        evicted = self._window.push(value)

        self._s_xy += math.fma(-evicted, self._n, self._s_y)
        self._s_y += value - evicted

        if self._resync_every:
            self._since_resync += 1
            if self._since_resync >= self._resync_every:
                self.resync()

        return self.b()

    def resync(self) -> None:
        """Recompute the running sums directly from the window contents."""
        s_y = 0.0
        s_xy = 0.0
        rank = len(self._window) - 1
        for sample in self._window:
            s_y += sample
            s_xy = math.fma(rank, sample, s_xy)
            rank -= 1

        logger.debug(
            "LinReg resync: drift s_y=%g s_xy=%g",
            self._s_y - s_y,
            self._s_xy - s_xy,
        )

        self._s_y = s_y
        self._s_xy = s_xy
        self._since_resync = 0

    def __repr__(self) -> str:
        return f"LinReg(length={self.length}, value={self.b()})"


LSMA = LinReg
