"""Settings-related exceptions."""

from __future__ import annotations

from confval.exceptions.base import ConfvalError


class SettingsError(ConfvalError, ValueError):
    """Raised when confval settings are invalid."""
