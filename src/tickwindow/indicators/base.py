"""
Base Indicator Abstract Class.

All indicators inherit from BaseIndicator and implement the required methods.
Indicators are stateful streaming transforms: one input tick in, one float out.

Philosophy:
- Indicators are calculation engines, not storage (fixed memory, sized at construction)
- Every update is a synchronous state transition returning the new value
- Update operations never raise: NaN/inf inputs propagate per IEEE-754
- Only construction can fail (non-positive window length)
- No internal locking: one instance belongs to one stream

Registry Name: Derived from class name (e.g., FastStochastic → "fast_stochastic")
"""

from abc import ABC, abstractmethod
from typing import Protocol, runtime_checkable

import structlog

from tickwindow.errors import InvalidParameterError

logger = structlog.get_logger(__name__)


def snake_case(name: str) -> str:
    """CamelCase → snake_case (FastStochastic → fast_stochastic)."""
    return "".join(["_" + c.lower() if c.isupper() else c for c in name]).lstrip("_")


@runtime_checkable
class PriceBar(Protocol):
    """
    Input capability for bar-based updates.

    Any object exposing ``high``, ``low`` and ``close`` works: the bundled
    ``tickwindow.models.Bar``, a dataclass, a named tuple, a vendor object.
    Indicators read only the fields they need.
    """

    @property
    def high(self) -> float: ...

    @property
    def low(self) -> float: ...

    @property
    def close(self) -> float: ...


class BaseIndicator(ABC):
    """
    Abstract base class for streaming indicators.

    Responsibilities:
    - Own a fixed-length window and update it once per tick
    - Return the newly computed value synchronously
    - Return to the post-construction state on reset()

    Does NOT:
    - Store output history (callers keep what they need)
    - Validate input values (pathological inputs propagate)
    - Provide batch/backfill calculation

    Class Attributes:
    - label_prefix: Prefix of the diagnostic label, e.g. "MIN" → "MIN(14)"
    - default_length: Domain-conventional length used by default()

    Usage Patterns:

    1. Scalar stream:
        ```python
        low = Minimum(length=3)
        for price in prices:
            value = low.update_value(price)
        ```

    2. Bar stream:
        ```python
        stoch = FastStochastic(length=14)
        for bar in bars:
            value = stoch.update(bar)  # high/low/close
        ```
    """

    label_prefix: str = ""
    default_length: int = 14

    def __init__(self, length: int):
        """
        Initialize indicator with its window length.

        Args:
            length: Number of observations in the window (>= 1)

        Raises:
            InvalidParameterError: If length < 1
        """
        self._validate_length(length)
        self._length = length

    @classmethod
    def default(cls) -> "BaseIndicator":
        """
        Create an instance with the domain-conventional length.

        Example:
            >>> Minimum.default().length
            14
            >>> RateOfChange.default().length
            9
        """
        return cls(cls.default_length)

    @abstractmethod
    def update_value(self, value: float) -> float:
        """
        Update indicator with a raw float value and return the new value.

        Useful for chaining indicators without creating Bar objects.

        Args:
            value: New observation

        Returns:
            Indicator value after this tick
        """
        pass

    @abstractmethod
    def update(self, bar: PriceBar) -> float:
        """
        Update indicator with a bar and return the new value.

        Each indicator reads the field(s) it needs (low, high, close).

        Args:
            bar: Any object satisfying PriceBar

        Returns:
            Indicator value after this tick
        """
        pass

    @abstractmethod
    def reset(self) -> None:
        """
        Reset indicator state to initial conditions.

        Clears accumulated observations without reallocating, so replaying
        the same inputs reproduces the same outputs.

        Note:
            Does NOT change the window length
        """
        pass

    @property
    @abstractmethod
    def value(self) -> float | None:
        """Last emitted value without updating (None before the first tick)."""
        pass

    @property
    @abstractmethod
    def is_ready(self) -> bool:
        """True once the window has been completely filled."""
        pass

    @property
    def length(self) -> int:
        """Window length (read-only)."""
        return self._length

    @property
    def label(self) -> str:
        """
        Diagnostic label embedding the configured length.

        Example:
            >>> FastStochastic(21).label
            'FAST_STOCH(21)'
        """
        return f"{self.label_prefix}({self._length})"

    @property
    def name(self) -> str:
        """
        Indicator name for registry and logging.

        Returns:
            Snake_case of the class name

        Example:
            FastStochastic → "fast_stochastic"
            RateOfChange → "rate_of_change"
        """
        return snake_case(self.__class__.__name__)

    @classmethod
    def _validate_length(cls, length: int) -> None:
        """Reject non-positive window lengths."""
        if length < 1:
            logger.warning("indicator.invalid_parameter", indicator=cls.__name__, length=length)
            raise InvalidParameterError("length", length, "positive integer (>= 1)", cls.__name__)

    def __str__(self) -> str:
        return self.label

    def __repr__(self) -> str:
        status = "ready" if self.is_ready else "warming up"
        return f"{self.__class__.__name__}(length={self._length}, {status})"
