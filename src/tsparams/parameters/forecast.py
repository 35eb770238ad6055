"""Scheduling parameters of rolling forecasts."""

from __future__ import annotations

from collections.abc import Iterator
from datetime import datetime, timedelta

from pydantic import BaseModel, ConfigDict, Field, model_validator

from tsparams.core.types import (
    UNINITIALIZED_DATETIME,
    UNINITIALIZED_LENGTH,
    UNINITIALIZED_PERIOD,
)
from tsparams.time import get_initial_times


class ForecastParameters(BaseModel):
    """Horizon, first issuance, spacing and count shared by all forecasts.

    Either every field holds its sentinel (uninitialized) or none does.
    Fields are only changed together, through ``adopt`` and ``reset_info``.

    Attributes:
        horizon: Number of steps covered by one issuance
        initial_timestamp: Time of the first issuance
        interval: Spacing between issuances; zero means a single issuance
        count: Number of issuances
    """

    model_config = ConfigDict(extra="forbid")

    horizon: int = Field(default=UNINITIALIZED_LENGTH, ge=0)
    initial_timestamp: datetime = UNINITIALIZED_DATETIME
    interval: timedelta = UNINITIALIZED_PERIOD
    count: int = Field(default=UNINITIALIZED_LENGTH, ge=0)

    @model_validator(mode="after")
    def _all_or_none_initialized(self) -> ForecastParameters:
        # A single-issuance forecast legitimately keeps the zero interval.
        flags = [
            self.horizon == UNINITIALIZED_LENGTH,
            self.initial_timestamp == UNINITIALIZED_DATETIME,
            self.count == UNINITIALIZED_LENGTH,
        ]
        if self.count != 1:
            flags.append(self.interval == UNINITIALIZED_PERIOD)
        if any(flags) and not all(flags):
            raise ValueError(
                "forecast parameters must be fully initialized or fully uninitialized: "
                f"{self._as_context()}"
            )
        return self

    def is_uninitialized(self) -> bool:
        return (
            self.horizon == UNINITIALIZED_LENGTH
            and self.initial_timestamp == UNINITIALIZED_DATETIME
            and self.interval == UNINITIALIZED_PERIOD
            and self.count == UNINITIALIZED_LENGTH
        )

    def adopt(self, other: ForecastParameters) -> None:
        """Copy all four fields from ``other`` in place."""
        self.horizon = other.horizon
        self.initial_timestamp = other.initial_timestamp
        self.interval = other.interval
        self.count = other.count

    def reset_info(self) -> None:
        self.horizon = UNINITIALIZED_LENGTH
        self.initial_timestamp = UNINITIALIZED_DATETIME
        self.interval = UNINITIALIZED_PERIOD
        self.count = UNINITIALIZED_LENGTH

    def initial_times(self) -> Iterator[datetime]:
        """Lazily yield the issuance timestamps."""
        return get_initial_times(self.initial_timestamp, self.count, self.interval)

    def _as_context(self) -> dict[str, object]:
        return {
            "horizon": self.horizon,
            "initial_timestamp": str(self.initial_timestamp),
            "interval": str(self.interval),
            "count": self.count,
        }


__all__ = ["ForecastParameters"]
