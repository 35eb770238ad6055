"""Forecast series made of repeated issuances.

A forecast holds ``count`` issuances spaced ``interval`` apart, each covering
``horizon`` steps at the forecast's ``resolution``. ``iterate_windows`` yields
one slice per issuance; its first axis is time.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterator, Mapping, Sequence
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Any

import numpy as np
import pandas as pd

from tsparams.core.errors import EMalformedInput
from tsparams.core.types import UNINITIALIZED_PERIOD
from tsparams.series.single import SingleTimeSeries
from tsparams.time import compute_forecast_count, get_initial_times


class Forecast(ABC):
    """Base class for forecasts.

    Subclasses expose ``name``, ``resolution``, ``initial_timestamp``,
    ``horizon``, ``interval`` and ``count``.
    """

    name: str
    resolution: timedelta
    initial_timestamp: datetime
    horizon: int
    interval: timedelta
    count: int

    @abstractmethod
    def iterate_windows(self) -> Iterator[pd.Series | pd.DataFrame]:
        """Yield one time-indexed window per issuance, in issuance order."""

    def initial_times(self) -> Iterator[datetime]:
        return get_initial_times(self.initial_timestamp, self.count, self.interval)


def _normalize_windows(
    name: str,
    data: Mapping[datetime, Any],
    ndim: int,
) -> dict[pd.Timestamp, np.ndarray]:
    if not data:
        raise EMalformedInput(
            f"forecast '{name}' has no issuances",
            context={"name": name},
        )

    windows: dict[pd.Timestamp, np.ndarray] = {}
    for initial_time in sorted(data, key=pd.Timestamp):
        values = np.asarray(data[initial_time])
        if values.ndim != ndim:
            raise EMalformedInput(
                f"forecast '{name}' windows must be {ndim}-dimensional, got {values.ndim}",
                context={"name": name, "initial_time": str(initial_time), "ndim": values.ndim},
            )
        windows[pd.Timestamp(initial_time)] = values

    keys = list(windows)
    gaps = {keys[i + 1] - keys[i] for i in range(len(keys) - 1)}
    if len(gaps) > 1:
        raise EMalformedInput(
            f"forecast '{name}' issuances are not evenly spaced",
            context={"name": name, "gaps": sorted(str(g) for g in gaps)},
        )
    return windows


@dataclass(frozen=True, eq=False)
class _WindowedForecast(Forecast):
    """Forecast stored as a mapping from issuance time to window values."""

    name: str
    data: Mapping[datetime, Any]
    resolution: timedelta

    _ndim = 1

    def __post_init__(self) -> None:
        object.__setattr__(self, "data", _normalize_windows(self.name, self.data, self._ndim))

    @property
    def initial_timestamp(self) -> datetime:
        return next(iter(self.data))

    @property
    def horizon(self) -> int:
        return next(iter(self.data.values())).shape[0]

    @property
    def interval(self) -> timedelta:
        keys = list(self.data)
        if len(keys) < 2:
            return UNINITIALIZED_PERIOD
        return (keys[1] - keys[0]).to_pytimedelta()

    @property
    def count(self) -> int:
        return len(self.data)

    def iterate_windows(self) -> Iterator[pd.Series | pd.DataFrame]:
        for initial_time, values in self.data.items():
            index = pd.date_range(initial_time, periods=values.shape[0], freq=self.resolution)
            yield self._make_window(values, index)

    def _make_window(self, values: np.ndarray, index: pd.DatetimeIndex) -> pd.Series | pd.DataFrame:
        return pd.Series(values, index=index, name=self.name)


@dataclass(frozen=True, eq=False)
class Deterministic(_WindowedForecast):
    """Point forecast: one value per step of each issuance.

    Examples:
        >>> from datetime import datetime, timedelta
        >>> forecast = Deterministic(
        ...     name="load",
        ...     data={
        ...         datetime(2024, 1, 1, 0): [1.0, 2.0, 3.0],
        ...         datetime(2024, 1, 1, 1): [2.0, 3.0, 4.0],
        ...     },
        ...     resolution=timedelta(hours=1),
        ... )
        >>> forecast.count, forecast.horizon
        (2, 3)
    """


@dataclass(frozen=True, eq=False)
class Probabilistic(_WindowedForecast):
    """Forecast with one column per percentile for each step of each issuance."""

    percentiles: Sequence[float] = ()

    _ndim = 2

    def __post_init__(self) -> None:
        super().__post_init__()
        object.__setattr__(self, "percentiles", tuple(self.percentiles))
        for initial_time, values in self.data.items():
            if values.shape[1] != len(self.percentiles):
                raise EMalformedInput(
                    f"forecast '{self.name}' window has {values.shape[1]} columns, "
                    f"expected {len(self.percentiles)} percentiles",
                    context={
                        "name": self.name,
                        "initial_time": str(initial_time),
                        "columns": values.shape[1],
                        "expected": len(self.percentiles),
                    },
                )

    def _make_window(self, values: np.ndarray, index: pd.DatetimeIndex) -> pd.DataFrame:
        return pd.DataFrame(values, index=index, columns=list(self.percentiles))


@dataclass(frozen=True, eq=False)
class DeterministicSingleTimeSeries(Forecast):
    """Forecast view over a plain series.

    Each window is a slice of the underlying data starting at an issuance
    time; no values are copied.
    """

    single_time_series: SingleTimeSeries
    horizon: int
    interval: timedelta
    initial_timestamp: datetime
    count: int

    def __post_init__(self) -> None:
        if self.count < 1:
            raise EMalformedInput(
                f"forecast '{self.name}' needs at least one issuance, got count={self.count}",
                context={"name": self.name, "count": self.count},
            )

    @classmethod
    def from_single_time_series(
        cls,
        single_time_series: SingleTimeSeries,
        horizon: int,
        interval: timedelta,
    ) -> DeterministicSingleTimeSeries:
        """Build the view with as many issuances as fit in the series."""
        count = compute_forecast_count(
            single_time_series.initial_timestamp,
            single_time_series.resolution,
            len(single_time_series.data),
            horizon,
            interval,
        )
        return cls(
            single_time_series=single_time_series,
            horizon=horizon,
            interval=interval,
            initial_timestamp=single_time_series.initial_timestamp,
            count=count,
        )

    @property
    def name(self) -> str:
        return self.single_time_series.name

    @property
    def resolution(self) -> timedelta:
        return self.single_time_series.resolution

    def iterate_windows(self) -> Iterator[pd.Series]:
        data = self.single_time_series.data
        span = self.resolution * (self.horizon - 1)
        for initial_time in self.initial_times():
            yield data.loc[initial_time : initial_time + span]


__all__ = [
    "Forecast",
    "Deterministic",
    "Probabilistic",
    "DeterministicSingleTimeSeries",
]
