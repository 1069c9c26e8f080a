"""
UI adapter package providing prompt_toolkit-based and headless hosts.
"""

from ie_ui.tui.system.protocols import UI, Editor, Presenter
from ie_ui.tui.system.facade import TUI
from ie_ui.tui.system.headless import HeadlessUI

__all__ = [
    "UI",
    "TUI",
    "HeadlessUI",
    "Editor",
    "Presenter",
]
