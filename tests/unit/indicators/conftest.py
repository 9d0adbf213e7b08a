"""Shared fixtures and helpers for indicator tests."""

import random
from datetime import datetime, timedelta

import pytest

from tickwindow.models import Bar


def naive_window_min(values: list[float], length: int) -> list[float]:
    """Reference: min of the last ``length`` inputs after every step, by full rescan."""
    return [min(values[max(0, i + 1 - length) : i + 1]) for i in range(len(values))]


def naive_window_max(values: list[float], length: int) -> list[float]:
    """Reference: max of the last ``length`` inputs after every step, by full rescan."""
    return [max(values[max(0, i + 1 - length) : i + 1]) for i in range(len(values))]


def random_walk(count: int, seed: int, start: float = 100.0, step: float = 2.0) -> list[float]:
    """Seeded random walk rounded to 1 decimal so ties occur regularly."""
    rng = random.Random(seed)
    values = []
    price = start
    for _ in range(count):
        price += rng.uniform(-step, step)
        values.append(round(price, 1))
    return values


def _create_bars(count: int, base_price: float = 50.0, trend: str = "flat") -> list[Bar]:
    """
    Create test bars with specified trend.

    Args:
        count: Number of bars to create
        base_price: Starting price
        trend: "flat", "up", "down", or "ranging"
    """
    base_time = datetime(2024, 1, 1, 9, 30)
    bars = []

    for i in range(count):
        if trend == "up":
            close = base_price + i * 0.5
            low = close - 0.3
            high = close + 0.5
        elif trend == "down":
            close = base_price - i * 0.5
            high = close + 0.3
            low = close - 0.5
        elif trend == "ranging":
            close = base_price + (i % 4 - 2) * 0.3
            high = close + 0.5
            low = close - 0.5
        else:
            close = base_price
            high = close
            low = close

        bars.append(
            Bar(
                trade_datetime=base_time + timedelta(minutes=i),
                open=close,
                high=high,
                low=low,
                close=close,
                volume=1000 + i * 100,
            )
        )

    return bars


@pytest.fixture(scope="module")
def uptrend_bars() -> list[Bar]:
    """Bars with a consistent uptrend (25 bars)."""
    return _create_bars(25, base_price=50.0, trend="up")


@pytest.fixture(scope="module")
def downtrend_bars() -> list[Bar]:
    """Bars with a consistent downtrend (25 bars)."""
    return _create_bars(25, base_price=50.0, trend="down")


@pytest.fixture(scope="module")
def ranging_bars() -> list[Bar]:
    """Bars moving sideways (25 bars)."""
    return _create_bars(25, base_price=50.0, trend="ranging")


@pytest.fixture(scope="module")
def flat_bars() -> list[Bar]:
    """Bars with high == low == close == 100.0 (25 bars)."""
    return _create_bars(25, base_price=100.0, trend="flat")


@pytest.fixture(scope="module")
def walk_values() -> list[float]:
    """300 seeded random-walk prices with frequent ties."""
    return random_walk(300, seed=7)


@pytest.fixture
def naive_min():
    """Naive O(N * length) sliding-minimum reference."""
    return naive_window_min


@pytest.fixture
def naive_max():
    """Naive O(N * length) sliding-maximum reference."""
    return naive_window_max


@pytest.fixture
def make_walk():
    """Factory for seeded random-walk sequences."""
    return random_walk
