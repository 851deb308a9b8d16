"""Shared exception hierarchy for confval."""

from __future__ import annotations

from .base import ConfvalError
from .catalog import CatalogError
from .rules import RuleSetError
from .settings import SettingsError

__all__ = [
    "CatalogError",
    "ConfvalError",
    "RuleSetError",
    "SettingsError",
]
