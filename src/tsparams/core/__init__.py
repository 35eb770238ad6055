"""Core module - errors, configuration and sentinel values."""

from tsparams.core.config import DEFAULT_CONFIG, CheckConfig
from tsparams.core.errors import (
    ERROR_REGISTRY,
    EConflictingInputs,
    EMalformedInput,
    TSParamsError,
    get_error_class,
)
from tsparams.core.types import (
    UNINITIALIZED_DATETIME,
    UNINITIALIZED_LENGTH,
    UNINITIALIZED_PERIOD,
)

__all__ = [
    # Config
    "CheckConfig",
    "DEFAULT_CONFIG",
    # Errors
    "TSParamsError",
    "EMalformedInput",
    "EConflictingInputs",
    "ERROR_REGISTRY",
    "get_error_class",
    # Sentinels
    "UNINITIALIZED_DATETIME",
    "UNINITIALIZED_PERIOD",
    "UNINITIALIZED_LENGTH",
]
