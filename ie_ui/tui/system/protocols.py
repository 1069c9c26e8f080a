from typing import Protocol

from ie_core.session import EditSession


class Editor(Protocol):
    def run(self, session: EditSession) -> str | None: ...


class Presenter(Protocol):
    def warning(self, message: str) -> None: ...

    def error(self, message: str) -> None: ...


class UI(Protocol):
    editor: Editor
    present: Presenter
