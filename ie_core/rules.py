"""Commit rules turning a selection or typed text into a new item value."""

from __future__ import annotations

import logging
import math
import re
from typing import TypeVar, assert_never

from ie_common.errors import EditValidationError
from ie_core.items import BoolItem, EnumItem, FloatItem, IntItem, StringItem

logger = logging.getLogger(__name__)

N = TypeVar("N", int, float)

_ESCAPED_MINUS = "\\-"
# Plain ASCII notation only: no digit separators, no non-ASCII digits.
_INT_PATTERN = re.compile(r"[+-]?\d+", re.ASCII)
_FLOAT_PATTERN = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)


def _normalize_number_text(text: str) -> str:
    return text.replace(_ESCAPED_MINUS, "-").strip()


def parse_int(text: str) -> int:
    """Parse integer input, accepting an escaped minus sign."""
    normalized = _normalize_number_text(text)
    if not _INT_PATTERN.fullmatch(normalized):
        raise EditValidationError(
            f"{text!r} is not a valid integer",
            context={"input": text},
        )
    try:
        return int(normalized, 10)
    except ValueError as exc:
        # Digit strings beyond the interpreter's conversion limit.
        raise EditValidationError(
            f"{text!r} is too long for an integer",
            context={"input": text},
            cause=exc,
        ) from exc


def parse_float(text: str) -> float:
    """Parse real-number input, accepting an escaped minus sign."""
    normalized = _normalize_number_text(text)
    if not _FLOAT_PATTERN.fullmatch(normalized):
        raise EditValidationError(
            f"{text!r} is not a valid number",
            context={"input": text},
        )
    value = float(normalized)
    if not math.isfinite(value):
        raise EditValidationError(
            f"{text!r} is not a finite number",
            context={"input": text},
        )
    return value


def clamp(value: N, lower: N | None, upper: N | None) -> N:
    """Force ``value`` into ``[lower, upper]``; an absent bound imposes nothing."""
    if lower is not None and value < lower:
        value = lower
    if upper is not None and value > upper:
        value = upper
    return value


def commit(
    item: BoolItem | IntItem | FloatItem | StringItem | EnumItem,
    selection: int | None = None,
    free_text: str | None = None,
) -> bool:
    """Apply an edit to ``item`` in place and return whether its value changed.

    ``selection`` is the index of a picked option line and ``free_text`` the
    text the user submitted; each item type only looks at the one it uses.
    Rejected input raises EditValidationError and leaves the item untouched.
    """
    previous = item.value
    if isinstance(item, BoolItem):
        if selection == 0:
            item.value = True
        elif selection == 1:
            item.value = False
    elif isinstance(item, IntItem):
        if free_text is not None:
            item.value = clamp(parse_int(free_text), item.min, item.max)
    elif isinstance(item, FloatItem):
        if free_text is not None:
            item.value = clamp(parse_float(free_text), item.min, item.max)
    elif isinstance(item, StringItem):
        if free_text is not None:
            item.value = free_text
    elif isinstance(item, EnumItem):
        if selection is not None:
            if not 0 <= selection < len(item.options):
                raise EditValidationError(
                    f"option {selection} is out of range",
                    context={"selection": selection, "options": item.options},
                )
            item.value = selection
    else:
        assert_never(item)

    changed = item.value != previous
    logger.debug(
        "Committed %s edit: %r -> %r", item.kind, previous, item.value
    )
    return changed
