from __future__ import annotations

from typing import Mapping

PRESENTER_TEMPLATES: dict[str, str] = {
    "warning": "[yellow]⚠ {message}[/yellow]",
    "error": "[red]✖ {message}[/red]",
}

STATUS_STYLE = "cyan"


def presenter_message(level: str, message: str) -> str:
    template = PRESENTER_TEMPLATES.get(level, "{message}")
    return template.format(message=message)


def prompt_toolkit_editor_style() -> Mapping[str, str]:
    return {
        "selected": "bg:#0000aa fg:white bold",
        "control": "fg:#888888 italic",
        "separator": "fg:#0000aa",
        "frame.border": "fg:#0000aa",
        "frame.label": "fg:#0000aa bold",
        "search": "bg:#eeeeee fg:#000000",
        "error": "fg:#aa0000 bold",
        "hint": "fg:#888888",
    }
