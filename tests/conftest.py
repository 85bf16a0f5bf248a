"""
Shared pytest fixtures for slidingstats tests.
"""

import logging
import random

import pytest

from slidingstats.config import reset_settings


@pytest.fixture
def prices() -> list[float]:
    """
    300 samples of a seeded random walk around 100, shaped like a close price
    series. Rounded to 2 decimals so duplicates show up regularly.
    """
    rng = random.Random(42)
    price = 100.0
    out = []
    for _ in range(300):
        price = max(1.0, price + rng.gauss(0.0, 1.5))
        out.append(round(price, 2))
    return out


@pytest.fixture(autouse=True)
def reset_slidingstats_settings(monkeypatch):
    """Start every test from default settings, unaffected by the environment."""
    monkeypatch.delenv("SLIDINGSTATS_RESYNC_EVERY", raising=False)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture(autouse=True)
def reset_slidingstats_logging():
    """Reset the library logger to its silent default before and after each test."""
    logger = logging.getLogger("slidingstats")

    def reset():
        for handler in logger.handlers[:]:
            logger.removeHandler(handler)
            if not isinstance(handler, logging.NullHandler):
                handler.close()
        logger.addHandler(logging.NullHandler())
        logger.setLevel(logging.NOTSET)

    reset()
    yield
    reset()
