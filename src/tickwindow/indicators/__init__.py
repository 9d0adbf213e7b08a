"""
Indicators Library.

Streaming indicators, one value per tick:
- Extremum: Minimum, Maximum (generic ExtremumTracker)
- Oscillator: FastStochastic
- Momentum: RateOfChange
"""

from tickwindow.indicators.base import BaseIndicator, PriceBar
from tickwindow.indicators.buildin.extremum import Extremum, ExtremumTracker, Maximum, Minimum
from tickwindow.indicators.buildin.oscillator import FastStochastic
from tickwindow.indicators.buildin.rate_of_change import RateOfChange

__all__ = [
    # Base
    "BaseIndicator",
    "PriceBar",
    # Extremum
    "Extremum",
    "ExtremumTracker",
    "Minimum",
    "Maximum",
    # Oscillator
    "FastStochastic",
    # Momentum
    "RateOfChange",
]
