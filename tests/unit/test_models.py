"""Unit tests for tickwindow.models.Bar."""

from datetime import datetime

import pytest
from pydantic import ValidationError

from tickwindow.models import Bar


class TestBar:
    """Test Bar construction and validation."""

    def test_minimal_bar(self):
        bar = Bar(high=151.0, low=149.5, close=150.5)

        assert bar.high == 151.0
        assert bar.low == 149.5
        assert bar.close == 150.5
        assert bar.open is None
        assert bar.volume == 0
        assert bar.trade_datetime is None

    def test_full_bar(self):
        bar = Bar(
            trade_datetime=datetime(2024, 1, 2, 16, 0),
            open=150.0,
            high=151.0,
            low=149.5,
            close=150.5,
            volume=1_000_000,
        )
        assert bar.volume == 1_000_000
        assert bar.trade_datetime == datetime(2024, 1, 2, 16, 0)

    def test_high_below_low_rejected(self):
        with pytest.raises(ValidationError, match="High"):
            Bar(high=1.0, low=2.0, close=1.5)

    def test_negative_volume_rejected(self):
        with pytest.raises(ValidationError):
            Bar(high=2.0, low=1.0, close=1.5, volume=-1)

    def test_negative_prices_allowed(self):
        bar = Bar(high=-1.0, low=-9.0, close=-5.0)
        assert bar.low == -9.0

    def test_bar_is_frozen(self):
        bar = Bar(high=2.0, low=1.0, close=1.5)
        with pytest.raises(ValidationError):
            bar.close = 3.0  # type: ignore[misc]

    def test_repr(self):
        assert repr(Bar(high=2.0, low=1.0, close=1.5)) == "Bar(h=2.0, l=1.0, c=1.5)"
