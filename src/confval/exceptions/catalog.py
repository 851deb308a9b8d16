"""Message catalog exceptions."""

from __future__ import annotations

from confval.exceptions.base import ConfvalError


class CatalogError(ConfvalError, LookupError):
    """Raised when the message catalog is unreadable or lacks a referenced code."""
