"""Series module for tsparams.

Provides the plain and forecast series types checked by a registry.
"""

from .forecasts import Deterministic, DeterministicSingleTimeSeries, Forecast, Probabilistic
from .single import SingleTimeSeries

TimeSeriesData = SingleTimeSeries | Forecast

__all__ = [
    "TimeSeriesData",
    # Plain
    "SingleTimeSeries",
    # Forecasts
    "Forecast",
    "Deterministic",
    "Probabilistic",
    "DeterministicSingleTimeSeries",
]
