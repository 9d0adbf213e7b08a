"""
tickwindow - Streaming Sliding-Window Indicators

Incremental, fixed-memory technical indicators: one tick in, one value out.

Example:
    >>> from tickwindow import FastStochastic, Minimum
    >>> low = Minimum(3)
    >>> [low.update_value(v) for v in (4.0, 1.2, 5.0, 3.0, 4.0)]
    [4.0, 1.2, 1.2, 1.2, 3.0]
"""

from importlib.metadata import PackageNotFoundError, version

from tickwindow.errors import IndicatorError, InvalidParameterError
from tickwindow.indicators import (
    BaseIndicator,
    Extremum,
    ExtremumTracker,
    FastStochastic,
    Maximum,
    Minimum,
    PriceBar,
    RateOfChange,
)
from tickwindow.models import Bar

try:
    __version__ = version("tickwindow")
except PackageNotFoundError:
    __version__ = "0.0.0.dev"  # Fallback for development


__all__ = [
    "__version__",
    "BaseIndicator",
    "PriceBar",
    "Bar",
    "Extremum",
    "ExtremumTracker",
    "Minimum",
    "Maximum",
    "FastStochastic",
    "RateOfChange",
    "IndicatorError",
    "InvalidParameterError",
]
