"""Ordered item collections and their JSON (de)serialization."""

from __future__ import annotations

import json
import logging
from typing import Any, Iterable, Iterator

from pydantic import TypeAdapter, ValidationError

from ie_common.errors import MalformedInputError
from ie_core.items import NamedItem, tagged

logger = logging.getLogger(__name__)

_ADAPTER: TypeAdapter[list[NamedItem]] = TypeAdapter(list[NamedItem])


def _validation_context(exc: ValidationError) -> dict[str, Any]:
    return {
        "errors": [
            {
                "loc": ".".join(str(part) for part in err["loc"]),
                "msg": err["msg"],
                "type": err["type"],
            }
            for err in exc.errors(include_url=False)
        ]
    }


def _malformed(exc: ValidationError) -> MalformedInputError:
    first = exc.errors(include_url=False)[0]
    where = ".".join(str(part) for part in first["loc"]) or "<root>"
    return MalformedInputError(
        f"Invalid item set at {where}: {first['msg']}",
        context=_validation_context(exc),
        cause=exc,
    )


class ItemSet:
    """Ordered sequence of named items, addressed strictly by position."""

    def __init__(self, items: Iterable[NamedItem]) -> None:
        self._items: list[NamedItem] = list(items)

    @classmethod
    def load(cls, source: str | bytes) -> "ItemSet":
        """Parse a JSON document into an ItemSet."""
        try:
            items = _ADAPTER.validate_json(source)
        except ValidationError as exc:
            raise _malformed(exc) from exc
        logger.debug("Loaded %d items", len(items))
        return cls(items)

    @classmethod
    def from_data(cls, data: Any) -> "ItemSet":
        """Build an ItemSet from already decoded JSON data."""
        try:
            items = _ADAPTER.validate_python(data)
        except ValidationError as exc:
            raise _malformed(exc) from exc
        return cls(items)

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, position: int) -> NamedItem:
        return self._items[position]

    def __iter__(self) -> Iterator[NamedItem]:
        return iter(self._items)

    def to_data(self, *, single_object: bool = False) -> list[dict[str, Any]] | dict[str, Any]:
        """Return the JSON-ready structure; keyed by name when ``single_object``."""
        if single_object:
            return {entry.name: tagged(entry.item) for entry in self._items}
        return _ADAPTER.dump_python(self._items, mode="json")

    def serialize(self, *, single_object: bool = False) -> str:
        """Return the compact JSON text of the current values."""
        if single_object:
            return json.dumps(self.to_data(single_object=True), separators=(",", ":"), ensure_ascii=False)
        return _ADAPTER.dump_json(self._items).decode("utf-8")


def load(source: str | bytes) -> ItemSet:
    """Parse a JSON item set document."""
    return ItemSet.load(source)


def serialize(item_set: ItemSet, *, single_object: bool = False) -> str:
    """Serialize an item set back to JSON text."""
    return item_set.serialize(single_object=single_object)
