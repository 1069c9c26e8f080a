from dataclasses import dataclass
from typing import Any, Tuple


@dataclass(frozen=True)
class PickItem:
    id: str
    title: str
    tags: Tuple[str, ...] = ()
    search_blob: str = ""
    payload: Any = None  # session row index
    disabled: bool = False


def pick_items_from_lines(lines: tuple[str, ...] | list[str]) -> list[PickItem]:
    """Wrap rendered session lines; the last line is the control line."""
    last = len(lines) - 1
    return [
        PickItem(
            id=str(row),
            title=line,
            tags=("control",) if row == last else (),
            payload=row,
        )
        for row, line in enumerate(lines)
    ]
