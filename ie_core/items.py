"""Typed item models.

Each item variant is a pydantic model carrying a ``kind`` discriminator that is
never serialized; on the wire a variant is written externally tagged, e.g.
``{"Int": {"value": 5, "min": 0, "max": null}}``.
"""

from __future__ import annotations

import math
from decimal import Decimal
from typing import Annotated, Any, Literal, Union, assert_never

from pydantic import BaseModel, Field, field_serializer, field_validator, model_validator

ITEM_KINDS = ("Bool", "Int", "Float", "String", "Enum")


class BoolItem(BaseModel):
    """A true/false switch."""

    kind: Literal["Bool"] = Field(default="Bool", exclude=True, repr=False)
    value: bool = Field(default=False, strict=True)

    model_config = {"extra": "ignore"}


class _BoundedItem(BaseModel):
    """Shared bound checks for numeric items."""

    model_config = {"extra": "ignore"}

    @model_validator(mode="after")
    def _validate_bounds(self) -> "_BoundedItem":
        lower = getattr(self, "min")
        upper = getattr(self, "max")
        value = getattr(self, "value")
        if lower is not None and upper is not None and lower > upper:
            raise ValueError(f"min ({lower}) must be <= max ({upper})")
        if lower is not None and value < lower:
            raise ValueError(f"value ({value}) is below min ({lower})")
        if upper is not None and value > upper:
            raise ValueError(f"value ({value}) is above max ({upper})")
        return self


class IntItem(_BoundedItem):
    """An integer with optional inclusive bounds."""

    kind: Literal["Int"] = Field(default="Int", exclude=True, repr=False)
    value: int = Field(default=0, strict=True)
    min: int | None = Field(default=None, strict=True, frozen=True)
    max: int | None = Field(default=None, strict=True, frozen=True)


class FloatItem(_BoundedItem):
    """A real number with optional inclusive bounds."""

    kind: Literal["Float"] = Field(default="Float", exclude=True, repr=False)
    value: float = Field(default=0.0, strict=True, allow_inf_nan=False)
    min: float | None = Field(default=None, strict=True, frozen=True, allow_inf_nan=False)
    max: float | None = Field(default=None, strict=True, frozen=True, allow_inf_nan=False)

    @field_validator("value", "min", "max", mode="after")
    @classmethod
    def _as_float(cls, value: float | None) -> float | None:
        # JSON integers are accepted for floats; store them as floats.
        return None if value is None else float(value)


class StringItem(BaseModel):
    """Free-form text."""

    kind: Literal["String"] = Field(default="String", exclude=True, repr=False)
    value: str = Field(default="", strict=True)

    model_config = {"extra": "ignore"}


class EnumItem(BaseModel):
    """A single choice out of a fixed list of options, stored by index."""

    kind: Literal["Enum"] = Field(default="Enum", exclude=True, repr=False)
    value: int = Field(default=0, ge=0, strict=True)
    options: list[str] = Field(min_length=1, frozen=True)

    model_config = {"extra": "ignore"}

    @model_validator(mode="after")
    def _validate_index(self) -> "EnumItem":
        if self.value >= len(self.options):
            raise ValueError(
                f"value index {self.value} is out of range for {len(self.options)} options"
            )
        return self


Item = Annotated[
    Union[BoolItem, IntItem, FloatItem, StringItem, EnumItem],
    Field(discriminator="kind"),
]


class NamedItem(BaseModel):
    """An item together with its display name."""

    name: str = Field(strict=True, frozen=True)
    item: Item

    model_config = {"extra": "ignore"}

    @field_validator("item", mode="before")
    @classmethod
    def _unwrap_tag(cls, value: Any) -> Any:
        if isinstance(value, BaseModel):
            return value
        if not isinstance(value, dict) or len(value) != 1:
            raise ValueError(
                f"item must be an object with exactly one of {', '.join(ITEM_KINDS)}"
            )
        tag, fields = next(iter(value.items()))
        if tag not in ITEM_KINDS:
            raise ValueError(f"unknown item type {tag!r}")
        if not isinstance(fields, dict):
            raise ValueError(f"{tag} item fields must be an object")
        return {**fields, "kind": tag}

    @field_serializer("item")
    def _wrap_tag(self, item: BoolItem | IntItem | FloatItem | StringItem | EnumItem) -> dict[str, Any]:
        return tagged(item)


def tagged(item: BoolItem | IntItem | FloatItem | StringItem | EnumItem) -> dict[str, Any]:
    """Return the externally tagged representation of an item."""
    return {item.kind: item.model_dump(mode="json")}


def format_float(value: float) -> str:
    """Render a float as plain decimal text, without exponent or trailing ``.0``."""
    if not math.isfinite(value):
        return str(value)
    text = format(Decimal(repr(value)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def _number_text(value: int | float) -> str:
    if isinstance(value, float):
        return format_float(value)
    return str(value)


def value_text(item: BoolItem | IntItem | FloatItem | StringItem | EnumItem) -> str:
    """Return the item's current value as display text."""
    if isinstance(item, BoolItem):
        return "true" if item.value else "false"
    elif isinstance(item, IntItem):
        return str(item.value)
    elif isinstance(item, FloatItem):
        return format_float(item.value)
    elif isinstance(item, StringItem):
        return item.value
    elif isinstance(item, EnumItem):
        return item.options[item.value]
    else:
        assert_never(item)


def bounds_text(item: BoolItem | IntItem | FloatItem | StringItem | EnumItem) -> str:
    """Return ``"Min: a; Max: b;"`` for the bounds an item declares."""
    if not isinstance(item, (IntItem, FloatItem)):
        return ""
    parts = []
    if item.min is not None:
        parts.append(f"Min: {_number_text(item.min)};")
    if item.max is not None:
        parts.append(f"Max: {_number_text(item.max)};")
    return " ".join(parts)


def accepts_free_text(item: BoolItem | IntItem | FloatItem | StringItem | EnumItem) -> bool:
    """Return True when the item's value is entered as text rather than picked."""
    return isinstance(item, (IntItem, FloatItem, StringItem))
