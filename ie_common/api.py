"""Public API surface for ie_common."""

from ie_common.errors import (
    EditValidationError,
    InvariantViolationError,
    ItemEditError,
    MalformedInputError,
    UsageError,
    wrap_error,
)
from ie_common.logging import configure_logging

__all__ = [
    "configure_logging",
    "EditValidationError",
    "InvariantViolationError",
    "ItemEditError",
    "MalformedInputError",
    "UsageError",
    "wrap_error",
]
