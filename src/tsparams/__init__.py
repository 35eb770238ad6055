"""tsparams - consistency checks for registries of time series and forecasts.

The first series added to a registry fixes its resolution and the first
forecast fixes its schedule (horizon, first issuance, interval, count).
Every later series must agree, otherwise it is rejected.

Basic usage:
    >>> from tsparams import SingleTimeSeries, TimeSeriesRegistry
    >>> registry = TimeSeriesRegistry()
    >>> registry.add_time_series(SingleTimeSeries.from_series("load", data))  # doctest: +SKIP

Without a registry:
    >>> from tsparams import TimeSeriesParameters, check_add_time_series
    >>> params = TimeSeriesParameters()
    >>> check_add_time_series(params, forecast)  # doctest: +SKIP
    >>> params.forecast_window_count  # doctest: +SKIP
    12
"""

__version__ = "1.0.0"

from tsparams.core.config import CheckConfig
from tsparams.core.errors import (
    EConflictingInputs,
    EMalformedInput,
    TSParamsError,
)
from tsparams.parameters import (
    ForecastParameters,
    TimeSeriesParameters,
    check_add_time_series,
    check_time_series_lengths,
)
from tsparams.registry import TimeSeriesRegistry
from tsparams.series import (
    Deterministic,
    DeterministicSingleTimeSeries,
    Forecast,
    Probabilistic,
    SingleTimeSeries,
    TimeSeriesData,
)
from tsparams.time import compute_forecast_count, get_initial_times, get_total_period

__all__ = [
    "__version__",
    # Parameters
    "ForecastParameters",
    "TimeSeriesParameters",
    "check_add_time_series",
    "check_time_series_lengths",
    # Series
    "TimeSeriesData",
    "SingleTimeSeries",
    "Forecast",
    "Deterministic",
    "Probabilistic",
    "DeterministicSingleTimeSeries",
    # Registry
    "TimeSeriesRegistry",
    # Time helpers
    "get_initial_times",
    "get_total_period",
    "compute_forecast_count",
    # Config
    "CheckConfig",
    # Errors
    "TSParamsError",
    "EMalformedInput",
    "EConflictingInputs",
]
