"""Configuration for series consistency checks."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CheckConfig:
    """Settings applied when a series is checked against registry parameters.

    Args:
        min_length: Minimum number of points in a plain series
        min_horizon: Minimum horizon of a forecast
        compare_interval: Whether forecast intervals must match in addition
            to count, horizon and initial timestamp
        transactional: If True, registry parameters are only updated once the
            incoming series has passed every check. If False, resolution and
            forecast fields are adopted first and a later mismatch leaves them
            adopted.
        match_forecast_status: If True, plain series are rejected once the
            registry has accepted a forecast. If False, they only need a
            matching resolution.
    """

    min_length: int = 2
    min_horizon: int = 2
    compare_interval: bool = True
    transactional: bool = True
    match_forecast_status: bool = False

    def __post_init__(self) -> None:
        if self.min_length < 2:
            raise ValueError(f"min_length must be at least 2, got {self.min_length}")
        if self.min_horizon < 2:
            raise ValueError(f"min_horizon must be at least 2, got {self.min_horizon}")

    @classmethod
    def strict(cls) -> CheckConfig:
        """Default preset: atomic adoption, intervals compared."""
        return cls()

    @classmethod
    def compat(cls) -> CheckConfig:
        """Legacy preset.

        Adopts registry parameters before validating, does not compare
        forecast intervals and rejects plain series once a forecast is accepted.
        """
        return cls(
            compare_interval=False,
            transactional=False,
            match_forecast_status=True,
        )


DEFAULT_CONFIG = CheckConfig()

__all__ = ["CheckConfig", "DEFAULT_CONFIG"]
