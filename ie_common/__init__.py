"""Shared helpers for item-edit."""

from ie_common.api import ItemEditError, configure_logging

__all__ = ["configure_logging", "ItemEditError"]
