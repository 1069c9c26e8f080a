"""Editor screen behavior without a running application loop."""

from __future__ import annotations

from collections.abc import Iterator

import pytest
from prompt_toolkit.application import create_app_session
from prompt_toolkit.input import create_pipe_input
from prompt_toolkit.output import DummyOutput

from ie_core.item_set import ItemSet
from ie_core.session import EditSession, Editing
from ie_ui.tui.screens.editor_screen import EditorScreen

pytestmark = pytest.mark.unit_ui


@pytest.fixture
def screen(sample_items: ItemSet) -> Iterator[EditorScreen]:
    with create_pipe_input() as pipe_input:
        with create_app_session(input=pipe_input, output=DummyOutput()):
            yield EditorScreen(EditSession(sample_items))


def _titles(screen: EditorScreen) -> list[str]:
    return [item.title for item in screen._panel.filtered]


def test_starts_on_browse_list(screen: EditorScreen) -> None:
    assert _titles(screen)[-1] == "Apply"
    assert screen.search.text == ""


def test_enter_on_numeric_item_prefills_value(screen: EditorScreen) -> None:
    screen._panel.move(1)
    screen._submit(force_text=False)
    assert screen._session.state == Editing(1)
    assert screen.search.text == "5"
    assert _titles(screen) == ["Cancel"]
    assert not screen._panel.filtering


def test_typed_value_is_committed(screen: EditorScreen) -> None:
    screen._panel.move(1)
    screen._submit(force_text=False)
    screen.search.text = "8"
    screen._submit(force_text=False)
    assert screen._session.items[1].item.value == 8
    assert _titles(screen)[1] == "count: 8"
    assert screen.search.text == ""


def test_rejected_value_shows_error(screen: EditorScreen) -> None:
    screen._panel.move(1)
    screen._submit(force_text=False)
    screen.search.text = "eight"
    screen._submit(force_text=False)
    assert "eight" in screen._render_error()
    assert screen._session.state == Editing(1)

    screen.search.text = "4"
    screen._submit(force_text=False)
    assert screen._render_error() == ""


def test_filter_then_select_uses_row_payload(screen: EditorScreen) -> None:
    screen.search.text = "mode"
    assert _titles(screen)[0] == "mode: fast"
    screen._submit(force_text=False)
    assert screen._session.state == Editing(4)
    assert screen.search.text == ""
    assert _titles(screen) == ["fast", "safe", "off", "Cancel"]


def test_message_is_rendered_while_editing(screen: EditorScreen) -> None:
    assert screen._render_message().value == ""
    screen._panel.move(1)
    screen._submit(force_text=False)
    assert "Old value: 5;" in screen._render_message().value
