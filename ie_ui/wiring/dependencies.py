from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ie_common.api import configure_logging
from ie_ui.tui.system.protocols import UI


@dataclass
class UIContext:
    """Container for UI services and state, initialized lazily."""
    headless: bool = False

    _ui: Optional[UI] = None

    @property
    def ui(self) -> UI:
        if self._ui is None:
            if self.headless:
                from ie_ui.tui.system.headless import HeadlessUI
                self._ui = HeadlessUI()
            else:
                from ie_ui.tui.system.facade import TUI
                self._ui = TUI()
        return self._ui

    @ui.setter
    def ui(self, value: UI):
        self._ui = value

    def set_headless(self, headless: bool) -> None:
        """Switch UI mode; a UI built for the other mode is dropped."""
        if headless != self.headless:
            self._ui = None
        self.headless = headless


__all__ = [
    "UIContext",
    "configure_logging",
]
