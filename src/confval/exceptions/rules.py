"""Rule registry exceptions."""

from __future__ import annotations

from confval.exceptions.base import ConfvalError


class RuleSetError(ConfvalError, ValueError):
    """Raised when a rule set is unknown or declares its rules incorrectly."""
