"""In-memory registry that keeps its series mutually consistent.

The registry owns one ``TimeSeriesParameters`` instance and serializes every
insertion, so the parameters are never mutated by two callers at once.
"""

from __future__ import annotations

import logging
import threading
from datetime import timedelta

from tsparams.core.config import CheckConfig
from tsparams.core.errors import EConflictingInputs
from tsparams.parameters import (
    TimeSeriesParameters,
    check_add_time_series,
    check_time_series_lengths,
)
from tsparams.series import (
    DeterministicSingleTimeSeries,
    SingleTimeSeries,
    TimeSeriesData,
)

logger = logging.getLogger(__name__)

SeriesKey = tuple[type, str]


class TimeSeriesRegistry:
    """Named collection of series sharing one set of parameters.

    Series are keyed by ``(type, name)``, so a plain series and a forecast
    may share a name.
    """

    def __init__(self, config: CheckConfig | None = None) -> None:
        self.config = config or CheckConfig()
        self._lock = threading.RLock()
        self._params = TimeSeriesParameters()
        self._series: dict[SeriesKey, TimeSeriesData] = {}

    @property
    def parameters(self) -> TimeSeriesParameters:
        return self._params

    def add_time_series(self, ts: TimeSeriesData) -> None:
        """Check ``ts`` against the registry and store it.

        Raises:
            EConflictingInputs: If a series of the same type and name is
                already stored, or ``ts`` disagrees with the registry.
            EMalformedInput: If ``ts`` fails its own shape checks.
        """
        key = (type(ts), ts.name)
        with self._lock:
            self._ensure_absent(key)
            check_add_time_series(self._params, ts, self.config)
            self._series[key] = ts
            logger.debug("Added %s '%s'", type(ts).__name__, ts.name)

    def get_time_series(self, kind: type, name: str) -> TimeSeriesData:
        with self._lock:
            try:
                return self._series[(kind, name)]
            except KeyError:
                raise KeyError(f"no {kind.__name__} named '{name}'") from None

    def list_time_series(self, kind: type | None = None) -> list[TimeSeriesData]:
        """Return stored series in insertion order, optionally filtered by type."""
        with self._lock:
            if kind is None:
                return list(self._series.values())
            return [ts for ts in self._series.values() if isinstance(ts, kind)]

    def remove_time_series(self, kind: type, name: str) -> TimeSeriesData:
        """Remove and return a series. Registry parameters are left unchanged."""
        with self._lock:
            ts = self.get_time_series(kind, name)
            del self._series[(kind, name)]
            return ts

    def clear(self) -> None:
        """Drop every series and reset the parameters."""
        with self._lock:
            self._series.clear()
            self._params.reset_info()

    def transform_single_time_series(
        self,
        horizon: int,
        interval: timedelta,
    ) -> list[DeterministicSingleTimeSeries]:
        """Add a forecast view over every stored plain series.

        All views are checked before any is added; if one fails, the
        registry is left unchanged.

        Args:
            horizon: Steps covered by each issuance
            interval: Spacing between issuances

        Returns:
            The added views, in the order of their plain series.
        """
        with self._lock:
            views = [
                DeterministicSingleTimeSeries.from_single_time_series(ts, horizon, interval)
                for ts in self.list_time_series(SingleTimeSeries)
            ]
            candidate = self._params.model_copy(deep=True)
            for view in views:
                self._ensure_absent((DeterministicSingleTimeSeries, view.name))
                check_time_series_lengths(view, self.config)
                check_add_time_series(
                    candidate,
                    TimeSeriesParameters.from_time_series(view),
                    self.config,
                )

            for view in views:
                self.add_time_series(view)
            logger.info(
                "Transformed %d single time series with horizon=%s interval=%s",
                len(views),
                horizon,
                interval,
            )
            return views

    def _ensure_absent(self, key: SeriesKey) -> None:
        kind, name = key
        if key in self._series:
            raise EConflictingInputs(
                f"{kind.__name__} '{name}' is already stored",
                context={"type": kind.__name__, "name": name},
                fix_hint="Remove the existing series first or use a different name.",
            )

    def __len__(self) -> int:
        return len(self._series)

    def __contains__(self, key: object) -> bool:
        return key in self._series


__all__ = ["TimeSeriesRegistry"]
