"""Error classes for slidingstats."""


class SlidingStatsError(Exception):
    """Base error for slidingstats."""
    pass


class InvalidParameters(SlidingStatsError, ValueError):
    """Window length (or another method parameter) is out of range."""
    pass


class InvalidInput(SlidingStatsError, ValueError):
    """A sample is NaN or infinite where a finite value is required."""
    pass
