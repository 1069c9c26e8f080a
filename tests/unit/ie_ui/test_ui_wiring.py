import io

import pytest
from rich.console import Console

from ie_ui.tui.system.components.presenter import RichPresenter
from ie_ui.tui.system.facade import TUI
from ie_ui.tui.system.headless import HeadlessUI
from ie_ui.wiring.dependencies import UIContext

pytestmark = pytest.mark.unit_ui


def test_switching_mode_rebuilds_ui() -> None:
    ctx = UIContext()
    assert isinstance(ctx.ui, TUI)

    ctx.set_headless(True)
    headless = ctx.ui
    assert isinstance(headless, HeadlessUI)

    ctx.set_headless(True)
    assert ctx.ui is headless

    ctx.set_headless(False)
    assert isinstance(ctx.ui, TUI)


def test_injected_ui_is_kept_while_mode_is_unchanged() -> None:
    ctx = UIContext(headless=True)
    ui = HeadlessUI()
    ctx.ui = ui
    ctx.set_headless(True)
    assert ctx.ui is ui


def test_rich_presenter_escapes_markup() -> None:
    buffer = io.StringIO()
    presenter = RichPresenter(Console(file=buffer, width=120, color_system=None))
    presenter.error("bad value [bold]x[/bold]")
    presenter.warning("no result")
    text = buffer.getvalue()
    assert "✖ bad value [bold]x[/bold]" in text
    assert "⚠ no result" in text
