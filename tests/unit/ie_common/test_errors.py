"""Tests for shared error helpers."""

from __future__ import annotations

from pathlib import Path

import pytest

from ie_common.errors import (
    EditValidationError,
    InvariantViolationError,
    ItemEditError,
    MalformedInputError,
    UsageError,
    normalize_context,
    wrap_error,
)

pytestmark = pytest.mark.unit_common


def test_normalize_context_makes_values_json_friendly() -> None:
    context = normalize_context(
        {
            "path": Path("/tmp/items.json"),
            "count": 3,
            "nested": {"value": Path("nested")},
            "options": ("a", Path("b")),
            "missing": None,
        }
    )
    assert context["path"].endswith("items.json")
    assert context["count"] == 3
    assert context["nested"]["value"] == "nested"
    assert context["options"] == ["a", "b"]
    assert context["missing"] is None


def test_to_dict_carries_type_message_and_context() -> None:
    err = EditValidationError("'x' is not a valid integer", context={"input": "x"})
    assert err.to_dict() == {
        "type": "EditValidationError",
        "message": "'x' is not a valid integer",
        "context": {"input": "x"},
    }


@pytest.mark.parametrize(
    ("error_cls", "exit_code"),
    [
        (MalformedInputError, 1),
        (EditValidationError, 1),
        (UsageError, 2),
        (InvariantViolationError, 70),
    ],
)
def test_exit_codes(error_cls: type[ItemEditError], exit_code: int) -> None:
    err = error_cls("boom")
    assert isinstance(err, ItemEditError)
    assert err.exit_code == exit_code
    assert err.context == {}


def test_wrap_error_sets_cause() -> None:
    cause = ValueError("inner")
    err = wrap_error(UsageError, "outer", context={"flag": "--file"}, cause=cause)
    assert isinstance(err, UsageError)
    assert err.__cause__ is cause
    assert err.context == {"flag": "--file"}
