"""Public API surface for ie_core."""

from ie_core.events import (
    Action,
    Cancel,
    Complete,
    EditEvent,
    Outcome,
    Select,
    SubmitText,
    parse_event,
)
from ie_core.item_set import ItemSet, load, serialize
from ie_core.items import (
    BoolItem,
    EnumItem,
    FloatItem,
    IntItem,
    Item,
    NamedItem,
    StringItem,
    accepts_free_text,
    bounds_text,
    value_text,
)
from ie_core.rules import clamp, commit, parse_float, parse_int
from ie_core.session import (
    APPLY_LINE,
    CANCEL_LINE,
    Browsing,
    EditSession,
    Editing,
    SessionState,
)

__all__ = [
    "Action",
    "APPLY_LINE",
    "BoolItem",
    "Browsing",
    "Cancel",
    "CANCEL_LINE",
    "clamp",
    "commit",
    "Complete",
    "EditEvent",
    "EditSession",
    "Editing",
    "EnumItem",
    "FloatItem",
    "IntItem",
    "Item",
    "ItemSet",
    "NamedItem",
    "Outcome",
    "SessionState",
    "Select",
    "StringItem",
    "SubmitText",
    "accepts_free_text",
    "bounds_text",
    "load",
    "parse_event",
    "parse_float",
    "parse_int",
    "serialize",
    "value_text",
]
