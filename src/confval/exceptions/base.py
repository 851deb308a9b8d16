"""Root exception type."""

from __future__ import annotations


class ConfvalError(Exception):
    """Base class for failures of the tool itself, as opposed to an invalid document."""
