"""UI facade for the item-edit CLI/TUI components.

Keeps the terminal host separate from the ie_core session so either can
evolve on its own.
"""

from ie_ui.cli import app
from ie_ui.tui.system.headless import HeadlessUI

__all__ = ["app", "HeadlessUI"]
