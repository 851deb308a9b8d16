"""Tests for stdout reporting."""

from __future__ import annotations

from confval.constants.reporting import ANSI_RED, CODES_HEADING, ERRORS_HEADING, VALID_MESSAGE
from confval.model import ConfigError, format_errors, sort_errors
from confval.reporting import StdoutReporter, render_catalog

ERRORS = [
    ConfigError(number="CV006", line_number=4, message="last"),
    ConfigError(number="CV004", line_number=0, message="location"),
]


def test_error_format_matches_console_layout() -> None:
    assert ERRORS[0].format() == "Error:CV006 - Line:4 - last"


def test_sort_and_format_errors_are_deterministic() -> None:
    assert [e.number for e in sort_errors(ERRORS)] == ["CV004", "CV006"]
    assert format_errors(ERRORS) == "Error:CV004 - Line:0 - location\nError:CV006 - Line:4 - last"


def test_render_plain_errors() -> None:
    output = StdoutReporter(ERRORS, color=False).render()

    assert output == "\n".join(
        [ERRORS_HEADING, "Error:CV004 - Line:0 - location", "Error:CV006 - Line:4 - last"]
    )


def test_render_valid_document() -> None:
    assert StdoutReporter([], color=False).render() == VALID_MESSAGE


def test_render_colored_errors() -> None:
    assert ANSI_RED in StdoutReporter(ERRORS, color=True).render()


def test_render_includes_document_when_given() -> None:
    output = StdoutReporter([], color=False, document='{\n  "a": 1\n}').render()

    assert '  "a": 1' in output
    assert output.endswith(VALID_MESSAGE)


def test_render_catalog_lists_codes_sorted() -> None:
    output = render_catalog({"CV002": "two", "CV001": "one"})

    assert output.splitlines() == [CODES_HEADING, "CV001 - one", "CV002 - two"]
