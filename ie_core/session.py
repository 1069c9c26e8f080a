"""Edit session state machine.

A session is either browsing the whole item set or editing one item by
position. The lines a host renders, the status message and the display name
are derived from (state, items) and recomputed on every transition.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Union, assert_never

from ie_common.errors import EditValidationError, InvariantViolationError
from ie_core import rules
from ie_core.events import (
    Action,
    Cancel,
    Complete,
    EditEvent,
    Outcome,
    Select,
    SubmitText,
)
from ie_core.item_set import ItemSet
from ie_core.items import (
    BoolItem,
    EnumItem,
    FloatItem,
    IntItem,
    StringItem,
    accepts_free_text,
    bounds_text,
    value_text,
)

logger = logging.getLogger(__name__)

APPLY_LINE = "Apply"
CANCEL_LINE = "Cancel"
BROWSE_TITLE = "edit"


@dataclass(frozen=True)
class Browsing:
    """The whole item set is listed for selection."""


@dataclass(frozen=True)
class Editing:
    """The item at ``position`` is being edited."""

    position: int


SessionState = Union[Browsing, Editing]


def render_lines(state: SessionState, items: ItemSet) -> tuple[str, ...]:
    """Return the selectable lines for a state."""
    if isinstance(state, Browsing):
        lines = [f"{entry.name}: {value_text(entry.item)}" for entry in items]
        lines.append(APPLY_LINE)
        return tuple(lines)

    item = items[state.position].item
    if isinstance(item, BoolItem):
        choices = ["true", "false"]
    elif isinstance(item, (IntItem, FloatItem, StringItem)):
        choices = []
    elif isinstance(item, EnumItem):
        choices = list(item.options)
    else:
        assert_never(item)
    choices.append(CANCEL_LINE)
    return tuple(choices)


def render_message(state: SessionState, items: ItemSet) -> str:
    """Return the status message for a state."""
    if isinstance(state, Browsing):
        return ""
    item = items[state.position].item
    if not isinstance(item, (IntItem, FloatItem)):
        return f"Old value: {value_text(item)}"
    message = f"Old value: {value_text(item)};"
    bounds = bounds_text(item)
    if bounds:
        message = f"{message}\n{bounds}"
    return message


def render_title(state: SessionState, items: ItemSet) -> str:
    """Return the display name a host shows for a state."""
    if isinstance(state, Browsing):
        return BROWSE_TITLE
    return f"editing {items[state.position].name}"


class EditSession:
    """Drives browsing and editing of one item set.

    Not thread-safe; a host delivers events one at a time.
    """

    def __init__(self, items: ItemSet, *, single_object: bool = False) -> None:
        self._items = items
        self._single_object = single_object
        self._state: SessionState = Browsing()
        self._finished = False
        self._lines: tuple[str, ...] = ()
        self._message = ""
        self._title = BROWSE_TITLE
        self._refresh()

    @property
    def items(self) -> ItemSet:
        return self._items

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def lines(self) -> tuple[str, ...]:
        return self._lines

    @property
    def message(self) -> str:
        return self._message

    @property
    def title(self) -> str:
        return self._title

    @property
    def finished(self) -> bool:
        return self._finished

    @property
    def is_editing(self) -> bool:
        return isinstance(self._state, Editing)

    @property
    def accepts_free_text(self) -> bool:
        """True while editing an item whose value is typed rather than picked."""
        if not isinstance(self._state, Editing):
            return False
        return accepts_free_text(self._items[self._state.position].item)

    def _refresh(self) -> None:
        self._lines = render_lines(self._state, self._items)
        self._message = render_message(self._state, self._items)
        self._title = render_title(self._state, self._items)

    def _transition(self, state: SessionState) -> None:
        logger.debug("Session transition %s -> %s", self._state, state)
        self._state = state
        self._refresh()

    def _require_open(self, operation: str) -> None:
        if self._finished:
            raise InvariantViolationError(
                f"{operation} called on a finished session",
                context={"operation": operation},
            )

    def _require_editing(self, operation: str) -> Editing:
        self._require_open(operation)
        if not isinstance(self._state, Editing):
            raise InvariantViolationError(
                f"{operation} called while browsing",
                context={"operation": operation},
            )
        return self._state

    def _require_browsing(self, operation: str) -> None:
        self._require_open(operation)
        if not isinstance(self._state, Browsing):
            raise InvariantViolationError(
                f"{operation} called while editing",
                context={"operation": operation, "position": self._state.position},
            )

    def enter_edit(self, position: int) -> str:
        """Start editing the item at ``position``; return its current value text."""
        self._require_browsing("enter_edit")
        if not 0 <= position < len(self._items):
            raise InvariantViolationError(
                f"No editable item at position {position}",
                context={"position": position, "items": len(self._items)},
            )
        self._transition(Editing(position))
        return value_text(self._items[position].item)

    def commit_edit(self, selection: int | None = None, free_text: str | None = None) -> bool:
        """Apply the edit to the current item and return to browsing.

        Raises EditValidationError when the input is rejected; the session then
        stays in the editing state with the value unchanged.
        """
        state = self._require_editing("commit_edit")
        entry = self._items[state.position]
        try:
            changed = rules.commit(entry.item, selection=selection, free_text=free_text)
        except EditValidationError:
            logger.debug("Rejected edit for %r", entry.name, exc_info=True)
            raise
        self._transition(Browsing())
        return changed

    def cancel_edit(self) -> None:
        """Leave the editing state without touching the item."""
        self._require_editing("cancel_edit")
        self._transition(Browsing())

    def finalize(self, single_object: bool | None = None) -> str:
        """Serialize the item set and finish the session."""
        self._require_browsing("finalize")
        shape = self._single_object if single_object is None else single_object
        output = self._items.serialize(single_object=shape)
        self._finished = True
        logger.debug("Session finalized with %d items", len(self._items))
        return output

    def complete(self, row: int) -> str:
        """Return the text of a rendered line for input completion."""
        self._require_open("complete")
        self._check_row(row)
        return self._lines[row]

    def _check_row(self, row: int) -> None:
        if not 0 <= row < len(self._lines):
            raise InvariantViolationError(
                f"Row {row} is not a rendered line",
                context={"row": row, "lines": len(self._lines)},
            )

    def _is_control_row(self, row: int) -> bool:
        return row == len(self._lines) - 1

    def handle(self, event: EditEvent) -> Outcome:
        """Apply one host event and tell the host what to do next."""
        self._require_open("handle")
        if isinstance(event, Select):
            return self._on_select(event.row)
        elif isinstance(event, SubmitText):
            return self._on_text(event.text)
        elif isinstance(event, Cancel):
            return self._on_cancel()
        elif isinstance(event, Complete):
            return Outcome(input_text=self.complete(event.row))
        else:
            assert_never(event)

    def _on_select(self, row: int) -> Outcome:
        self._check_row(row)
        if isinstance(self._state, Browsing):
            if self._is_control_row(row):
                return Outcome(Action.EXIT, output=self.finalize())
            current = self.enter_edit(row)
            return Outcome(input_text=current if self.accepts_free_text else "")
        if self._is_control_row(row):
            self.cancel_edit()
        else:
            self.commit_edit(selection=row)
        return Outcome(input_text="")

    def _on_text(self, text: str) -> Outcome:
        if isinstance(self._state, Editing):
            self.commit_edit(free_text=text)
        return Outcome(input_text="")

    def _on_cancel(self) -> Outcome:
        # Leaving the browse screen keeps the current values, same as Apply.
        if isinstance(self._state, Browsing):
            return Outcome(Action.EXIT, output=self.finalize())
        self.cancel_edit()
        return Outcome(input_text="")
