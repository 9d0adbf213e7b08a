"""
Extremum Indicators.

Running minimum / maximum over the last N observations:
- ExtremumTracker: generic sliding-window extremum, direction chosen at construction
- Minimum: lowest value (bars feed their low)
- Maximum: highest value (bars feed their high)

The window is a fixed circular buffer plus a cached index of the slot
holding the extremum. An update is O(1) except when the slot being
overwritten held the extremum and the new value does not replace it; only
then is the whole window rescanned (O(N), at most once per N ticks on
average). Unlike a monotonic deque this never allocates after construction.
"""

import math
import operator
from enum import Enum
from typing import Callable

from tickwindow.indicators.base import BaseIndicator, PriceBar


class Extremum(Enum):
    """
    Comparison direction of an ExtremumTracker.

    Each member carries:
    - sentinel: value of unfilled slots, never wins a comparison
    - bar_field: bar attribute fed by update(bar)
    - prefers: "at least as extreme as" (ties count, so the newest write wins)
    """

    MIN = (math.inf, "low", operator.le)
    MAX = (-math.inf, "high", operator.ge)

    def __init__(self, sentinel: float, bar_field: str, prefers: Callable[[float, float], bool]):
        self.sentinel = sentinel
        self.bar_field = bar_field
        self.prefers = prefers


class ExtremumTracker(BaseIndicator):
    """
    Sliding-window extremum.

    Returns the minimum (or maximum) of the last ``length`` observations,
    or of all observations so far before the window first fills.

    Parameters:
        length: Window size (default: 14)
        direction: Extremum.MIN or Extremum.MAX (default: MIN)

    Example:
        >>> low = ExtremumTracker(3, Extremum.MIN)
        >>> [low.update_value(v) for v in (10.0, 11.0, 12.0, 13.0)]
        [10.0, 10.0, 10.0, 11.0]

    Note:
        Equal values are resolved in favour of the most recent one, so an
        expiring duplicate is never mistaken for the surviving extremum.
        Plain float comparison: NaN is not special-cased.
    """

    def __init__(self, length: int, direction: Extremum = Extremum.MIN):
        """
        Initialize tracker.

        Args:
            length: Window size
            direction: Which extremum to track

        Raises:
            InvalidParameterError: If length < 1
        """
        super().__init__(length)
        self.direction = direction

        # Unfilled slots hold the sentinel so they never win a comparison
        self._window: list[float] = [direction.sentinel] * length
        self._cursor = 0  # Most recently written slot
        self._extremum_index = 0  # Slot holding the current extremum
        self._count = 0
        self._value: float | None = None

    def update_value(self, value: float) -> float:
        """
        Push a value, evicting the oldest, and return the current extremum.

        Args:
            value: New observation

        Returns:
            Extremum over the last ``length`` observations
        """
        window = self._window
        prefers = self.direction.prefers
        incumbent = window[self._extremum_index]

        self._cursor = (self._cursor + 1) % self._length
        window[self._cursor] = value

        # A NaN holder is displaced by any write
        if prefers(value, incumbent) or math.isnan(incumbent):
            self._extremum_index = self._cursor
        elif self._extremum_index == self._cursor:
            # The extremum was just evicted
            self._extremum_index = self._find_extremum_index()

        self._count += 1
        self._value = window[self._extremum_index]
        return self._value

    def update(self, bar: PriceBar) -> float:
        """
        Update with a bar's low (MIN) or high (MAX).

        Args:
            bar: Any object with high/low/close

        Returns:
            Current extremum
        """
        return self.update_value(getattr(bar, self.direction.bar_field))

    def _find_extremum_index(self) -> int:
        """
        Full scan from oldest to newest slot; the newest of equal values wins.

        NaN slots never qualify. If no slot does (all NaN), the newest slot
        is returned.
        """
        window = self._window
        prefers = self.direction.prefers
        best = self._cursor
        best_value = self.direction.sentinel

        for offset in range(1, self._length + 1):
            index = (self._cursor + offset) % self._length
            if prefers(window[index], best_value):
                best = index
                best_value = window[index]

        return best

    def reset(self) -> None:
        """Refill the window with the sentinel and rewind the cursor."""
        sentinel = self.direction.sentinel
        for i in range(self._length):
            self._window[i] = sentinel
        self._cursor = 0
        self._extremum_index = 0
        self._count = 0
        self._value = None

    @property
    def value(self) -> float | None:
        """Current extremum without updating."""
        return self._value

    @property
    def is_ready(self) -> bool:
        """Check if the window has been filled once."""
        return self._count >= self._length

    @property
    def label(self) -> str:
        """MIN(n) or MAX(n)."""
        return f"{self.direction.name}({self._length})"


class Minimum(ExtremumTracker):
    """
    Lowest value over the last ``length`` observations.

    Bars feed their ``low``.

    Parameters:
        length: Window size (default: 14)

    Example:
        >>> low = Minimum(3)
        >>> low.update_value(4.0), low.update_value(1.2), low.update_value(5.0)
        (4.0, 1.2, 1.2)
        >>> str(low)
        'MIN(3)'
    """

    def __init__(self, length: int):
        super().__init__(length, Extremum.MIN)


class Maximum(ExtremumTracker):
    """
    Highest value over the last ``length`` observations.

    Bars feed their ``high``.

    Parameters:
        length: Window size (default: 14)

    Example:
        >>> high = Maximum(2)
        >>> high.update_value(7.0), high.update_value(3.0), high.update_value(1.0)
        (7.0, 7.0, 3.0)
    """

    def __init__(self, length: int):
        super().__init__(length, Extremum.MAX)
