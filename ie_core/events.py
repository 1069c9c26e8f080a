"""Input events a host forwards to an edit session."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union

from ie_common.errors import UsageError


@dataclass(frozen=True)
class Select:
    """A rendered line was picked."""

    row: int


@dataclass(frozen=True)
class SubmitText:
    """Free text was submitted from the input line."""

    text: str


@dataclass(frozen=True)
class Cancel:
    """The user backed out of the current screen."""


@dataclass(frozen=True)
class Complete:
    """Tab completion was requested for a rendered line."""

    row: int


EditEvent = Union[Select, SubmitText, Cancel, Complete]


class Action(str, Enum):
    """What the host should do after an event was handled."""

    RELOAD = "reload"
    EXIT = "exit"


@dataclass(frozen=True)
class Outcome:
    """Result of handling one event.

    ``input_text`` is the new content for the host's input line, or None to
    leave it as it is. ``output`` is the serialized item set once the session
    exits.
    """

    action: Action = Action.RELOAD
    output: str | None = None
    input_text: str | None = None

    @property
    def finished(self) -> bool:
        return self.action is Action.EXIT


def _row(spec: str, value: str) -> int:
    try:
        return int(value)
    except ValueError as exc:
        raise UsageError(f"Event {spec!r} needs a row number", cause=exc) from exc


def parse_event(spec: str) -> EditEvent:
    """Parse a scripted event: ``select:N``, ``text:VALUE``, ``cancel`` or ``complete:N``."""
    name, sep, value = spec.partition(":")
    name = name.strip().lower()
    if name == "cancel" and not sep:
        return Cancel()
    if name == "select" and sep:
        return Select(_row(spec, value))
    if name == "complete" and sep:
        return Complete(_row(spec, value))
    if name == "text" and sep:
        return SubmitText(value)
    raise UsageError(
        f"Unknown event {spec!r}; expected select:N, text:VALUE, complete:N or cancel",
        context={"event": spec},
    )
