from rich.console import Console

from ie_ui.tui.screens.editor_screen import PromptToolkitEditor
from ie_ui.tui.system.components.presenter import RichPresenter
from ie_ui.tui.system.protocols import UI, Editor, Presenter


class TUI(UI):
    def __init__(self, console: Console | None = None):
        # stdout carries the edited items, so messages go to stderr.
        self._console = console or Console(stderr=True)
        self.editor: Editor = PromptToolkitEditor()
        self.present: Presenter = RichPresenter(self._console)
