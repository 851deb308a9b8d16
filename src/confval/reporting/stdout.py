"""Stdout reporter for validation results."""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from confval.constants.reporting import (
    ANSI_GREEN,
    ANSI_RED,
    ANSI_RESET,
    ANSI_YELLOW,
    CODES_HEADING,
    DOCUMENT_HEADING,
    ERRORS_HEADING,
    VALID_MESSAGE,
)
from confval.model import ConfigError, sort_errors


def _colorize(text: str, color: str, enabled: bool) -> str:
    return f"{color}{text}{ANSI_RESET}" if enabled else text


def render_catalog(catalog: Mapping[str, str], *, color: bool = False) -> str:
    """Render the code listing shown before a run."""
    lines = [CODES_HEADING]
    lines.extend(_colorize(f"{code} - {catalog[code]}", ANSI_YELLOW, color) for code in sorted(catalog))
    return "\n".join(lines)


class StdoutReporter:
    """Formats validation errors as plain or ANSI-colored text."""

    def __init__(
        self,
        errors: Sequence[ConfigError],
        *,
        color: bool = True,
        document: str | None = None,
    ) -> None:
        self._errors = sort_errors(errors)
        self._color = color
        self._document = document

    def render(self) -> str:
        """Render the report as a single string."""
        sections: list[str] = []
        if self._document is not None:
            body = "\n".join(_colorize(line, ANSI_GREEN, self._color) for line in self._document.splitlines())
            sections.append(f"{DOCUMENT_HEADING}\n{body}\n")

        if not self._errors:
            sections.append(_colorize(VALID_MESSAGE, ANSI_GREEN, self._color))
            return "\n".join(sections)

        lines = [ERRORS_HEADING]
        lines.extend(_colorize(error.format(), ANSI_RED, self._color) for error in self._errors)
        sections.append("\n".join(lines))
        return "\n".join(sections)
