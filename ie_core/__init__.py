"""Typed item model and edit session core."""

from ie_core.api import EditSession, ItemSet, load, serialize

__all__ = ["EditSession", "ItemSet", "load", "serialize"]
