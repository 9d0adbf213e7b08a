"""
Oscillator Indicators.

- FastStochastic: position of the latest value within its recent range (%K)

Built by composition: a Minimum and a Maximum tracker of the same length,
each advanced exactly once per tick.
"""

from tickwindow.indicators.base import BaseIndicator, PriceBar
from tickwindow.indicators.buildin.extremum import Maximum, Minimum

# Returned when the window range is flat (max == min)
DEGENERATE_RANGE_VALUE = 50.0


class FastStochastic(BaseIndicator):
    """
    Fast Stochastic Oscillator (%K).

    Momentum indicator comparing the latest price to its range over the
    last ``length`` periods. Values lie in [0, 100].

    Formula:
        %K = (Reference - LowestLow) / (HighestHigh - LowestLow) * 100

        Scalar form: Reference, LowestLow and HighestHigh all come from the value stream.
        Bar form: HighestHigh from highs, LowestLow from lows, Reference is the close.

    Degenerate range:
        When HighestHigh == LowestLow (first tick, or a flat window) the
        result is exactly 50.0, the midpoint, instead of dividing by zero.

    Parameters:
        length: Lookback period (default: 14)

    Example:
        >>> stoch = FastStochastic(5)
        >>> [stoch.update_value(v) for v in (20.0, 30.0, 40.0, 35.0, 15.0)]
        [50.0, 100.0, 100.0, 75.0, 0.0]
    """

    label_prefix = "FAST_STOCH"

    def __init__(self, length: int):
        """
        Initialize FastStochastic.

        Args:
            length: Lookback period for high/low

        Raises:
            InvalidParameterError: If length < 1
        """
        super().__init__(length)
        self._minimum = Minimum(length)
        self._maximum = Maximum(length)
        self._value: float | None = None

    def update_value(self, value: float) -> float:
        """
        Update with a single price stream.

        The value feeds both trackers and is also the reference.

        Args:
            value: New price

        Returns:
            %K value
        """
        lowest = self._minimum.update_value(value)
        highest = self._maximum.update_value(value)
        return self._store(value, lowest, highest)

    def update_hlc(self, high: float, low: float, close: float) -> float:
        """
        Update with separate high/low/close channels.

        Args:
            high: Feeds the maximum tracker
            low: Feeds the minimum tracker
            close: Reference value

        Returns:
            %K value
        """
        highest = self._maximum.update_value(high)
        lowest = self._minimum.update_value(low)
        return self._store(close, lowest, highest)

    def update(self, bar: PriceBar) -> float:
        """
        Update with a bar (high, low, close).

        Args:
            bar: Any object with high/low/close

        Returns:
            %K value
        """
        return self.update_hlc(bar.high, bar.low, bar.close)

    def _store(self, reference: float, lowest: float, highest: float) -> float:
        if highest == lowest:
            k = DEGENERATE_RANGE_VALUE
        else:
            k = (reference - lowest) / (highest - lowest) * 100.0
        self._value = k
        return k

    def reset(self) -> None:
        """Reset both trackers."""
        self._minimum.reset()
        self._maximum.reset()
        self._value = None

    @property
    def value(self) -> float | None:
        """Last %K value without updating."""
        return self._value

    @property
    def is_ready(self) -> bool:
        """Check if the lookback window has been filled."""
        return self._minimum.is_ready and self._maximum.is_ready
