"""Stable UI API surface."""

from __future__ import annotations

from ie_ui.cli import app, ctx_store, main
from ie_ui.examples import example_items, example_text
from ie_ui.input_sources import read_framed_stdin, read_input
from ie_ui.tui.screens.editor_screen import EditorScreen, PromptToolkitEditor
from ie_ui.tui.system.facade import TUI
from ie_ui.tui.system.headless import HeadlessUI
from ie_ui.tui.system.models import PickItem

__all__ = [
    "app",
    "main",
    "ctx_store",
    "example_items",
    "example_text",
    "read_framed_stdin",
    "read_input",
    "EditorScreen",
    "PromptToolkitEditor",
    "TUI",
    "HeadlessUI",
    "PickItem",
]
