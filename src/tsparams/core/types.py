"""Sentinel values marking uninitialized parameters."""

from __future__ import annotations

from datetime import datetime, timedelta

UNINITIALIZED_DATETIME = datetime.min
UNINITIALIZED_PERIOD = timedelta(0)
UNINITIALIZED_LENGTH = 0

__all__ = [
    "UNINITIALIZED_DATETIME",
    "UNINITIALIZED_PERIOD",
    "UNINITIALIZED_LENGTH",
]
