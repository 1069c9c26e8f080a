from __future__ import annotations

from typing import Protocol

from ie_ui.tui.system.protocols import Presenter


class PresenterSink(Protocol):
    def emit(self, level: str, message: str) -> None: ...


class PresenterBase(Presenter):
    """Routes CLI status messages to a sink by level."""

    def __init__(self, sink: PresenterSink) -> None:
        self._sink = sink

    def warning(self, message: str) -> None:
        self._sink.emit("warning", message)

    def error(self, message: str) -> None:
        self._sink.emit("error", message)
