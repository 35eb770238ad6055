"""Plain chronological series sampled at a fixed resolution."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from datetime import datetime, timedelta

import numpy as np
import pandas as pd

from tsparams.core.errors import EMalformedInput


@dataclass(frozen=True, eq=False)
class SingleTimeSeries:
    """A single series of observations.

    The series keeps a reference to the caller's data; it does not copy it.

    Attributes:
        name: Series name, unique per series type within a registry
        data: Values indexed by a sorted ``DatetimeIndex``
        resolution: Declared sampling period
        length: Declared number of points

    Examples:
        >>> import pandas as pd
        >>> data = pd.Series(
        ...     [1.0, 2.0, 3.0],
        ...     index=pd.date_range("2024-01-01", periods=3, freq="h"),
        ... )
        >>> ts = SingleTimeSeries.from_series("load", data)
        >>> ts.resolution
        datetime.timedelta(seconds=3600)
    """

    name: str
    data: pd.Series
    resolution: timedelta
    length: int

    def __post_init__(self) -> None:
        _require_datetime_index(self.name, self.data)
        if not self.data.index.is_monotonic_increasing:
            raise EMalformedInput(
                f"time series '{self.name}' timestamps must be sorted",
                context={"name": self.name},
                fix_hint="Sort the data first: data = data.sort_index()",
            )

    @classmethod
    def from_series(
        cls,
        name: str,
        data: pd.Series,
        resolution: timedelta | None = None,
    ) -> SingleTimeSeries:
        """Create a series from a timestamp-indexed ``pd.Series``.

        When ``resolution`` is omitted it is taken from the first two
        timestamps.
        """
        _require_datetime_index(name, data)
        if resolution is None:
            if len(data) < 2:
                raise EMalformedInput(
                    f"cannot infer resolution of '{name}' from {len(data)} points",
                    context={"name": name, "length": len(data)},
                    fix_hint="Pass resolution explicitly.",
                )
            resolution = pd.Timedelta(data.index[1] - data.index[0]).to_pytimedelta()
        return cls(name=name, data=data, resolution=resolution, length=len(data))

    @classmethod
    def from_values(
        cls,
        name: str,
        values: Sequence[float] | np.ndarray,
        initial_timestamp: datetime,
        resolution: timedelta,
    ) -> SingleTimeSeries:
        """Create a regularly spaced series starting at ``initial_timestamp``."""
        index = pd.date_range(initial_timestamp, periods=len(values), freq=resolution)
        data = pd.Series(np.asarray(values), index=index, name=name)
        return cls(name=name, data=data, resolution=resolution, length=len(values))

    @property
    def initial_timestamp(self) -> datetime:
        return self.data.index[0]

    def __len__(self) -> int:
        return self.length


def _require_datetime_index(name: str, data: pd.Series) -> None:
    if not isinstance(data.index, pd.DatetimeIndex):
        raise EMalformedInput(
            f"time series '{name}' must be indexed by timestamps",
            context={"name": name, "index_type": type(data.index).__name__},
        )


__all__ = ["SingleTimeSeries"]
