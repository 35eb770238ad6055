"""Parameter types and the consistency checks built on them."""

from .checks import check_add_time_series, check_time_series_lengths
from .forecast import ForecastParameters
from .time_series import TimeSeriesParameters

__all__ = [
    "ForecastParameters",
    "TimeSeriesParameters",
    "check_add_time_series",
    "check_time_series_lengths",
]
