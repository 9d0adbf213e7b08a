"""
Rate of Change.

Percentage change of the current value against the value ``length``
observations back. Stateful but non-extremal: a bounded queue remembers
the baseline, nothing is ever rescanned.
"""

import math
from collections import deque

from tickwindow.indicators.base import BaseIndicator, PriceBar


class RateOfChange(BaseIndicator):
    """
    Rate of Change (ROC).

    Formula:
        ROC = (Price_t - Price_t-n) / Price_t-n * 100

    Before ``length`` earlier values exist, the baseline is the oldest value
    seen so far. The very first tick has no baseline and returns 0.0.

    A zero baseline is not special-cased: the result is inf, -inf or NaN
    according to IEEE-754 and no exception is raised.

    Parameters:
        length: Number of periods back (default: 9)

    Example:
        >>> roc = RateOfChange(2)
        >>> roc.update_value(10.0)
        0.0
        >>> round(roc.update_value(9.7), 6)   # (9.7 - 10) / 10 * 100
        -3.0
        >>> round(roc.update_value(20.0), 6)  # (20 - 10) / 10 * 100
        100.0
        >>> round(roc.update_value(20.0))     # (20 - 9.7) / 9.7 * 100
        106
    """

    label_prefix = "ROC"
    default_length = 9

    def __init__(self, length: int):
        """
        Initialize RateOfChange.

        Args:
            length: Number of periods back

        Raises:
            InvalidParameterError: If length < 1
        """
        super().__init__(length)
        self._prices: deque[float] = deque(maxlen=length + 1)
        self._count = 0
        self._value: float | None = None

    def update_value(self, value: float) -> float:
        """
        Update with a raw price.

        Args:
            value: New price

        Returns:
            Percentage change against the baseline (0.0 on the first tick)
        """
        self._prices.append(value)
        self._count += 1

        if len(self._prices) == 1:
            self._value = 0.0
            return self._value

        if len(self._prices) > self._length:
            baseline = self._prices.popleft()
        else:
            baseline = self._prices[0]

        self._value = self._percent_change(value, baseline)
        return self._value

    def update(self, bar: PriceBar) -> float:
        """
        Update with a bar's close.

        Args:
            bar: Any object with a close

        Returns:
            Current ROC value
        """
        return self.update_value(bar.close)

    @staticmethod
    def _percent_change(value: float, baseline: float) -> float:
        try:
            return (value - baseline) / baseline * 100.0
        except ZeroDivisionError:
            # Python raises where IEEE-754 yields a signed infinity or NaN
            change = value - baseline
            if change == 0.0 or math.isnan(change):
                return math.nan
            return math.copysign(math.inf, change) * math.copysign(1.0, baseline)

    def reset(self) -> None:
        """Empty the queue."""
        self._prices.clear()
        self._count = 0
        self._value = None

    @property
    def value(self) -> float | None:
        """Last ROC value without updating."""
        return self._value

    @property
    def is_ready(self) -> bool:
        """Check if a full ``length``-back baseline exists."""
        return self._count > self._length
