"""Error types for time series parameter checks.

Two failure kinds exist: a single series that is invalid on its own
(malformed input) and a valid series that disagrees with parameters already
accepted by a registry (conflicting inputs). Neither is recovered internally.
"""

# ruff: noqa: N818

from __future__ import annotations

from typing import Any


class TSParamsError(Exception):
    """Root of the tsparams error hierarchy.

    Subclasses fix ``error_code`` and a default ``fix_hint``. ``context``
    carries the offending values (series name, observed and expected
    values) so callers can report a failure without parsing the message.
    """

    error_code: str = "E_UNKNOWN"
    fix_hint: str = ""

    def __init__(
        self,
        message: str,
        context: dict[str, Any] | None = None,
        fix_hint: str | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.context = dict(context) if context else {}
        if fix_hint is not None:
            self.fix_hint = fix_hint

    def __str__(self) -> str:
        text = f"[{self.error_code}] {self.message}"
        if self.context:
            text += f" (context: {self.context})"
        if self.fix_hint:
            text += f" [hint: {self.fix_hint}]"
        return text

    def to_agent_dict(self) -> dict[str, Any]:
        """Serialize the error for callers that report failures as data."""
        return {
            "error_code": self.error_code,
            "message": self.message,
            "context": self.context,
            "fix_hint": self.fix_hint,
        }


class EMalformedInput(TSParamsError, ValueError):
    """A single series violates its own shape preconditions."""

    error_code = "E_MALFORMED_INPUT"
    fix_hint = "Series need at least 2 points and forecasts a horizon of at least 2."


class EConflictingInputs(TSParamsError):
    """A series disagrees with parameters already accepted by the registry."""

    error_code = "E_CONFLICTING_INPUTS"
    fix_hint = (
        "All series in one registry must share resolution, and all forecasts "
        "must share horizon, initial timestamp, interval and count."
    )


ERROR_REGISTRY: dict[str, type[TSParamsError]] = {
    "E_MALFORMED_INPUT": EMalformedInput,
    "E_CONFLICTING_INPUTS": EConflictingInputs,
}


def get_error_class(error_code: str) -> type[TSParamsError]:
    """Get error class by code."""
    return ERROR_REGISTRY.get(error_code, TSParamsError)


__all__ = [
    "TSParamsError",
    "EMalformedInput",
    "EConflictingInputs",
    "ERROR_REGISTRY",
    "get_error_class",
]
