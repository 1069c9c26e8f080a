from __future__ import annotations

import logging
import sys
from typing import IO, Any

from prompt_toolkit.application import Application
from prompt_toolkit.formatted_text import ANSI
from prompt_toolkit.input import create_input
from prompt_toolkit.key_binding import KeyBindings
from prompt_toolkit.layout import HSplit, Layout, Window
from prompt_toolkit.layout.controls import FormattedTextControl
from prompt_toolkit.output import create_output
from prompt_toolkit.styles import Style
from prompt_toolkit.widgets import Frame
from rich.console import Console
from rich.text import Text

from ie_common.errors import EditValidationError, UsageError
from ie_core.events import Cancel, Complete, EditEvent, Outcome, Select, SubmitText
from ie_core.session import EditSession
from ie_ui.tui.core import theme
from ie_ui.tui.system.components.flat_picker_panel import FlatPickerPanel
from ie_ui.tui.system.models import PickItem, pick_items_from_lines

logger = logging.getLogger(__name__)

_HINT = "Enter=select/submit  Alt+Enter=submit text  Tab=complete  Esc=back"


def _open_terminal() -> IO[str] | None:
    """Return a handle on the controlling terminal when stdio is redirected."""
    if sys.stdin.isatty() and sys.stdout.isatty():
        return None
    try:
        return open("/dev/tty", "r+", encoding="utf-8")
    except OSError as exc:
        raise UsageError(
            "Interactive editing requires a terminal; use --headless for scripted runs.",
            cause=exc,
        ) from exc


class EditorScreen:
    """Full-screen prompt_toolkit host for one EditSession."""

    def __init__(self, session: EditSession, *, terminal: IO[str] | None = None) -> None:
        self._session = session
        self._error = ""
        self._rich = Console(force_terminal=True, color_system="truecolor")

        self._panel = FlatPickerPanel(
            pick_items_from_lines(session.lines),
            row_renderer=self._render_row,
        )
        self.search = self._panel.search
        self.list_control = self._panel.list_control
        self._message_control = FormattedTextControl(self._render_message)
        self._error_control = FormattedTextControl(self._render_error)
        self._kb = self._bindings()

        inner_layout = HSplit(
            [
                Window(self._message_control, dont_extend_height=True),
                self.search,
                Window(height=1, char="-", style="class:separator"),
                Window(self.list_control),
                Window(self._error_control, height=1, style="class:error"),
                Window(
                    FormattedTextControl([("class:hint", _HINT)]),
                    height=1,
                ),
            ]
        )
        self._frame = Frame(inner_layout, title=lambda: self._session.title)

        io_kwargs: dict[str, Any] = {}
        if terminal is not None:
            io_kwargs["input"] = create_input(stdin=terminal)
            io_kwargs["output"] = create_output(stdout=terminal)

        self._app: Application[str | None] = Application(
            layout=Layout(self._frame, focused_element=self.search),
            key_bindings=self._kb,
            style=Style.from_dict(dict(theme.prompt_toolkit_editor_style())),
            full_screen=True,
            **io_kwargs,
        )

        self.search.buffer.on_text_changed += lambda _: self._on_query_changed()

    def run(self) -> str | None:
        return self._app.run()

    def _on_query_changed(self) -> None:
        self._panel.apply_filter(reset_index=True)
        self._app.invalidate()

    def _render_row(self, item: PickItem, is_selected: bool) -> tuple[str, str]:
        style = ""
        if "control" in item.tags:
            style = "class:control"
        if is_selected:
            style = "class:selected"
        marker = "▸" if is_selected else " "
        return style, f" {marker} {item.title}"

    def _render_message(self) -> ANSI:
        message = self._session.message
        if not message:
            return ANSI("")
        with self._rich.capture() as cap:
            self._rich.print(Text(message, style=theme.STATUS_STYLE))
        return ANSI(cap.get())

    def _render_error(self) -> str:
        return self._error

    def _dispatch(self, event: EditEvent) -> None:
        try:
            outcome = self._session.handle(event)
        except EditValidationError as exc:
            logger.debug("Edit rejected: %s", exc)
            self._error = str(exc)
            self._app.invalidate()
            return
        self._error = ""
        self._apply(outcome)

    def _apply(self, outcome: Outcome) -> None:
        if outcome.finished:
            self._app.exit(result=outcome.output)
            return
        text = outcome.input_text if outcome.input_text is not None else self.search.text
        self._panel.set_items(
            pick_items_from_lines(self._session.lines),
            text=text,
            filtering=not self._session.accepts_free_text,
        )
        self._app.invalidate()

    def _submit(self, *, force_text: bool) -> None:
        text = self.search.text
        current = self._panel.selected_item
        wants_text = self._session.accepts_free_text and bool(text)
        if force_text or wants_text or (current is None and text):
            self._dispatch(SubmitText(text))
            return
        if current is not None:
            self._dispatch(Select(current.payload))

    def _bindings(self) -> KeyBindings:
        kb = KeyBindings()

        @kb.add("down")
        def _(event: Any) -> None:
            self._panel.move(1)
            event.app.invalidate()

        @kb.add("up")
        def _(event: Any) -> None:
            self._panel.move(-1)
            event.app.invalidate()

        @kb.add("enter")
        def _(event: Any) -> None:
            self._submit(force_text=False)

        @kb.add("escape", "enter")
        def _(event: Any) -> None:
            self._submit(force_text=True)

        @kb.add("tab")
        def _(event: Any) -> None:
            current = self._panel.selected_item
            if current is not None:
                self._dispatch(Complete(current.payload))

        @kb.add("escape")
        @kb.add("c-c")
        def _(event: Any) -> None:
            self._dispatch(Cancel())

        return kb


class PromptToolkitEditor:
    """Editor that runs a session in a full-screen terminal application."""

    def run(self, session: EditSession) -> str | None:
        terminal = _open_terminal()
        try:
            return EditorScreen(session, terminal=terminal).run()
        finally:
            if terminal is not None:
                terminal.close()
