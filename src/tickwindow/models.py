"""
Price bar data model.

Indicators only depend on the ``PriceBar`` capability (``high``, ``low``,
``close`` attributes, see ``tickwindow.indicators.base``). ``Bar`` is the
concrete, immutable implementation shipped with the library for drivers
that do not bring their own bar type.

Design Principles:
- Immutability: frozen=True (a bar is a fact)
- Validation: High >= Low enforced at construction
- No price sign constraints: indicators accept any float
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field, model_validator


class Bar(BaseModel):
    """
    OHLCV price bar.

    Attributes:
        high: High price
        low: Low price (must be <= high)
        close: Closing price
        open: Opening price (optional, unused by the built-in indicators)
        volume: Traded volume (optional)
        trade_datetime: Bar timestamp (optional)

    Examples:
        >>> bar = Bar(high=151.0, low=149.5, close=150.5)
        >>> bar.close
        150.5
        >>>
        >>> bar = Bar(
        ...     trade_datetime=datetime(2024, 1, 2, 16, 0),
        ...     open=150.0,
        ...     high=151.0,
        ...     low=149.5,
        ...     close=150.5,
        ...     volume=1000000,
        ... )
    """

    high: float = Field(..., description="High price")
    low: float = Field(..., description="Low price")
    close: float = Field(..., description="Close price")
    open: Optional[float] = Field(default=None, description="Open price")
    volume: int = Field(default=0, ge=0, description="Volume")
    trade_datetime: Optional[datetime] = Field(default=None, description="Trade datetime")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_range(self) -> "Bar":
        """
        Validate the high/low relationship.

        Raises:
            ValueError: If High < Low
        """
        if self.high < self.low:
            raise ValueError(f"[{self.trade_datetime}] OHLC violation: High ({self.high}) < Low ({self.low})")
        return self

    def __repr__(self) -> str:
        """Human-readable representation."""
        return f"Bar(h={self.high}, l={self.low}, c={self.close})"
