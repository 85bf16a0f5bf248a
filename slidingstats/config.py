"""Process-wide defaults for slidingstats, read from the environment.

Environment variables:
    SLIDINGSTATS_RESYNC_EVERY: Default resync interval for ``LinReg``.
        Every N samples the running sums are recomputed from the window.
        0 (the default) disables resyncing.

Logging has its own variables, see ``slidingstats.logging_config``.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

__all__ = [
    "RESYNC_ENV",
    "Settings",
    "get_settings",
    "reset_settings",
]

RESYNC_ENV = "SLIDINGSTATS_RESYNC_EVERY"


@dataclass(frozen=True, slots=True)
class Settings:
    """Defaults applied when a method is created without explicit options.

    Attributes:
        resync_every: Samples between full recomputations of ``LinReg``'s
            running sums. 0 disables it.
    """

    resync_every: int = 0

    def __post_init__(self) -> None:
        if self.resync_every < 0:
            raise ValueError(f"resync_every must be non-negative, got {self.resync_every}")

    @classmethod
    def from_env(cls) -> Settings:
        """Build settings from environment variables.

        Raises:
            ValueError: If a variable is set to an invalid value.
        """
        raw = os.environ.get(RESYNC_ENV, "").strip()
        if not raw:
            return cls()

        try:
            resync_every = int(raw)
        except ValueError:
            raise ValueError(f"{RESYNC_ENV} must be an integer, got {raw!r}") from None

        return cls(resync_every=resync_every)


_settings: Settings | None = None


def get_settings() -> Settings:
    """Return the process-wide settings, reading the environment on first use."""
    global _settings
    if _settings is None:
        _settings = Settings.from_env()
    return _settings


def reset_settings() -> None:
    """Forget cached settings so the next ``get_settings`` re-reads the environment."""
    global _settings
    _settings = None
