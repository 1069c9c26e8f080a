import pytest
from pydantic import ValidationError

from ie_core.items import (
    BoolItem,
    EnumItem,
    FloatItem,
    IntItem,
    NamedItem,
    StringItem,
    accepts_free_text,
    bounds_text,
    format_float,
    tagged,
    value_text,
)

pytestmark = pytest.mark.unit_core


def test_value_text_per_variant() -> None:
    assert value_text(BoolItem(value=True)) == "true"
    assert value_text(BoolItem()) == "false"
    assert value_text(IntItem(value=-3)) == "-3"
    assert value_text(FloatItem(value=2.5)) == "2.5"
    assert value_text(StringItem(value="hello world")) == "hello world"
    assert value_text(EnumItem(value=1, options=["a", "b"])) == "b"


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (5.0, "5"),
        (0.1, "0.1"),
        (-0.25, "-0.25"),
        (1e21, "1000000000000000000000"),
        (1e-7, "0.0000001"),
    ],
)
def test_format_float_is_plain_decimal(value: float, expected: str) -> None:
    assert format_float(value) == expected


def test_bounds_text_lists_present_bounds_only() -> None:
    assert bounds_text(IntItem(value=5, min=0, max=10)) == "Min: 0; Max: 10;"
    assert bounds_text(IntItem(value=5, min=0)) == "Min: 0;"
    assert bounds_text(FloatItem(value=1.0, max=69.0)) == "Max: 69;"
    assert bounds_text(IntItem()) == ""
    assert bounds_text(BoolItem()) == ""


def test_accepts_free_text() -> None:
    assert accepts_free_text(IntItem())
    assert accepts_free_text(FloatItem())
    assert accepts_free_text(StringItem())
    assert not accepts_free_text(BoolItem())
    assert not accepts_free_text(EnumItem(options=["x"]))


def test_bounds_and_options_are_frozen() -> None:
    item = IntItem(value=1, min=0, max=2)
    with pytest.raises(ValidationError):
        item.min = 5
    enum = EnumItem(options=["a", "b"])
    with pytest.raises(ValidationError):
        enum.options = ["c"]
    item.value = 2
    assert item.value == 2


def test_named_item_unwraps_and_rewraps_tag() -> None:
    entry = NamedItem.model_validate({"name": "n", "item": {"Int": {"value": 3}}})
    assert isinstance(entry.item, IntItem)
    assert entry.model_dump() == {
        "name": "n",
        "item": {"Int": {"value": 3, "min": None, "max": None}},
    }
    assert tagged(entry.item) == {"Int": {"value": 3, "min": None, "max": None}}


def test_named_item_rejects_multiple_tags() -> None:
    with pytest.raises(ValidationError):
        NamedItem.model_validate(
            {"name": "n", "item": {"Int": {"value": 3}, "Bool": {"value": True}}}
        )


def test_float_accepts_integers_and_stores_floats() -> None:
    entry = NamedItem.model_validate({"name": "f", "item": {"Float": {"value": 3, "min": 1}}})
    assert isinstance(entry.item, FloatItem)
    assert entry.item.value == 3.0
    assert isinstance(entry.item.value, float)
    assert isinstance(entry.item.min, float)
