"""Shared error taxonomy for item-edit."""

from __future__ import annotations

from typing import Any, Mapping, TypeVar


def _normalize_context_value(value: Any) -> Any:
    if isinstance(value, Mapping):
        return normalize_context(value)
    if isinstance(value, (list, tuple)):
        return [_normalize_context_value(item) for item in value]
    if isinstance(value, (str, int, float, bool)) or value is None:
        return value
    return str(value)


def normalize_context(context: Mapping[str, Any]) -> dict[str, Any]:
    """Return a JSON-friendly copy of an error context mapping."""
    return {key: _normalize_context_value(val) for key, val in context.items()}


class ItemEditError(Exception):
    """Base error type for typed failure handling."""

    exit_code: int = 1

    def __init__(
        self,
        message: str,
        *,
        context: Mapping[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.context = normalize_context(context or {})
        if cause is not None:
            self.__cause__ = cause

    @property
    def error_type(self) -> str:
        return self.__class__.__name__

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.error_type, "message": str(self), "context": self.context}


class MalformedInputError(ItemEditError):
    """The supplied JSON does not describe a valid item set."""


class UsageError(ItemEditError):
    """Invalid command line usage, such as a missing input source."""

    exit_code = 2


class EditValidationError(ItemEditError):
    """A submitted edit was rejected; the item keeps its previous value."""


class InvariantViolationError(ItemEditError):
    """An operation was invoked in a session state that does not allow it."""

    exit_code = 70


T = TypeVar("T", bound=ItemEditError)


def wrap_error(
    error_cls: type[T],
    message: str,
    *,
    context: Mapping[str, Any] | None = None,
    cause: Exception | None = None,
) -> T:
    """Create a typed ItemEditError with optional context and cause."""
    return error_cls(message, context=context, cause=cause)
