from dataclasses import dataclass, field

from ie_common.errors import EditValidationError
from ie_core.events import Cancel, EditEvent
from ie_core.session import EditSession
from ie_ui.tui.system.components.presenter_base import PresenterBase, PresenterSink
from ie_ui.tui.system.protocols import UI, Editor


@dataclass
class HeadlessUI(UI):
    recorded_messages: list[str] = field(default_factory=list)
    recorded_screens: list[tuple[str, ...]] = field(default_factory=list)

    # Scripted events replayed by the editor, in order
    next_events: list[EditEvent] = field(default_factory=list)

    def __post_init__(self):
        self.editor = _HeadlessEditor(self)
        self.present = _HeadlessPresenter(self)


class _HeadlessEditor(Editor):
    def __init__(self, ui: HeadlessUI):
        self._ui = ui

    def run(self, session: EditSession) -> str | None:
        try:
            return self._replay(session)
        finally:
            # Scripted events belong to a single run.
            self._ui.next_events.clear()

    def _replay(self, session: EditSession) -> str | None:
        self._ui.recorded_screens.append(session.lines)
        while self._ui.next_events:
            event = self._ui.next_events.pop(0)
            try:
                outcome = session.handle(event)
            except EditValidationError as exc:
                self._ui.recorded_messages.append(f"REJECTED: {exc}")
                continue
            self._ui.recorded_screens.append(session.lines)
            if outcome.finished:
                return outcome.output
        # Out of events: back out of any open edit, then leave the browse screen.
        while True:
            outcome = session.handle(Cancel())
            if outcome.finished:
                return outcome.output


class _HeadlessPresenterSink(PresenterSink):
    def __init__(self, ui: HeadlessUI) -> None:
        self._ui = ui

    def emit(self, level: str, message: str) -> None:
        self._ui.recorded_messages.append(f"{level.upper()}: {message}")


class _HeadlessPresenter(PresenterBase):
    def __init__(self, ui: HeadlessUI) -> None:
        super().__init__(_HeadlessPresenterSink(ui))
