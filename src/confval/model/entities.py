"""Value types passed between the tokenizer, the rules and the reporters."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True)
class ConfigProperty:
    """A scalar leaf of a JSON document addressed by its dotted path."""

    path: str
    value: str
    line_number: int


@dataclass(frozen=True)
class ConfigError:
    """A single validation error with a stable code.

    ``line_number`` is 0 when the error does not point at a specific line.
    """

    number: str
    line_number: int
    message: str

    def format(self) -> str:
        """Format as a human-readable single-line message."""
        return f"Error:{self.number} - Line:{self.line_number} - {self.message}"


def sort_errors(errors: Iterable[ConfigError]) -> list[ConfigError]:
    """Sort errors deterministically by code, then line."""
    return sorted(errors, key=lambda e: (e.number, e.line_number, e.message))


def format_errors(errors: Iterable[ConfigError]) -> str:
    """Format errors as a multi-line string."""
    return "\n".join(e.format() for e in sort_errors(errors))
