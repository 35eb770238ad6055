"""Parameters shared by every series in a registry."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from datetime import datetime, timedelta

from pydantic import BaseModel, ConfigDict, Field

from tsparams.core.types import UNINITIALIZED_PERIOD
from tsparams.parameters.forecast import ForecastParameters
from tsparams.series import Forecast, SingleTimeSeries, TimeSeriesData
from tsparams.time import compute_forecast_count, get_total_period

logger = logging.getLogger(__name__)


class TimeSeriesParameters(BaseModel):
    """Resolution plus forecast schedule of a registry.

    A registry holding only plain series keeps ``forecast_params``
    uninitialized. Whether the whole object is initialized depends only on
    ``resolution``.

    Attributes:
        resolution: Sampling period shared by all series; zero when unset
        forecast_params: Schedule shared by all forecasts
    """

    model_config = ConfigDict(extra="forbid")

    resolution: timedelta = UNINITIALIZED_PERIOD
    forecast_params: ForecastParameters = Field(default_factory=ForecastParameters)

    @classmethod
    def from_time_series(cls, ts: TimeSeriesData) -> TimeSeriesParameters:
        """Build parameters from one concrete series.

        Forecast fields are read from the forecast as-is; the count is not
        re-derived.

        Raises:
            TypeError: If ``ts`` is neither a plain series nor a forecast.
        """
        if isinstance(ts, SingleTimeSeries):
            return cls(resolution=ts.resolution)
        if isinstance(ts, Forecast):
            forecast_params = ForecastParameters(
                horizon=ts.horizon,
                initial_timestamp=ts.initial_timestamp,
                interval=ts.interval,
                count=ts.count,
            )
            return cls(resolution=ts.resolution, forecast_params=forecast_params)
        raise TypeError(f"unsupported time series type: {type(ts).__name__}")

    @classmethod
    def from_shape(
        cls,
        initial_timestamp: datetime,
        resolution: timedelta,
        length: int,
        horizon: int,
        interval: timedelta,
    ) -> TimeSeriesParameters:
        """Build forecast parameters from the shape of a series.

        Args:
            initial_timestamp: First timestamp of the series and first issuance
            resolution: Sampling period
            length: Total number of points in the series
            horizon: Steps covered by each issuance
            interval: Spacing between issuances

        Returns:
            Parameters whose count is the number of issuances that fit.
        """
        count = compute_forecast_count(
            initial_timestamp, resolution, length, horizon, interval
        )
        forecast_params = ForecastParameters(
            horizon=horizon,
            initial_timestamp=initial_timestamp,
            interval=interval,
            count=count,
        )
        return cls(resolution=resolution, forecast_params=forecast_params)

    def is_uninitialized(self) -> bool:
        return self.resolution == UNINITIALIZED_PERIOD

    def reset_info(self) -> None:
        """Return every field to its sentinel value."""
        self.resolution = UNINITIALIZED_PERIOD
        self.forecast_params.reset_info()
        logger.info("Reset time series parameters.")

    @property
    def forecast_window_count(self) -> int:
        return self.forecast_params.count

    @property
    def forecast_horizon(self) -> int:
        return self.forecast_params.horizon

    @property
    def forecast_initial_timestamp(self) -> datetime:
        return self.forecast_params.initial_timestamp

    @property
    def forecast_interval(self) -> timedelta:
        return self.forecast_params.interval

    @property
    def forecast_total_period(self) -> timedelta:
        """Span from the first issuance to the end of the last one.

        Zero when no forecast has been accepted.
        """
        f = self.forecast_params
        if f.is_uninitialized():
            return UNINITIALIZED_PERIOD
        return get_total_period(
            f.initial_timestamp,
            f.count,
            f.interval,
            f.horizon,
            self.resolution,
        )

    def forecast_initial_times(self) -> Iterator[datetime]:
        return self.forecast_params.initial_times()


__all__ = ["TimeSeriesParameters"]
