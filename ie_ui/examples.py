"""Sample payloads printed by ``item-edit --example``."""

from __future__ import annotations

from ie_core.item_set import ItemSet
from ie_core.items import BoolItem, EnumItem, FloatItem, IntItem, NamedItem, StringItem


def example_items() -> ItemSet:
    return ItemSet(
        [
            NamedItem(name="bool item", item=BoolItem(value=False)),
            NamedItem(name="int item", item=IntItem(value=0, min=0)),
            NamedItem(name="float item", item=FloatItem(value=0.0, max=69.0)),
            NamedItem(name="string item", item=StringItem(value="hello")),
            NamedItem(
                name="enum items",
                item=EnumItem(value=0, options=["opt1", "opt2", "other_opt"]),
            ),
        ]
    )


def example_text() -> str:
    """Describe the input format and both output shapes."""
    items = example_items()
    return (
        "Example input:\n"
        f"{items.serialize()}\n\n"
        "Output is the same with changed value keys.\n"
        "Keys with a value of null can be omitted.\n\n"
        "Example output when using --out-singleobj:\n"
        f"{items.serialize(single_object=True)}"
    )
