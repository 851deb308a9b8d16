"""Flatten a JSON document into dotted-path leaf properties.

Objects are recursed into; every other value (string, number, boolean, null
and arrays) is a leaf. Numbers and arrays keep their source text. Line
numbers are approximate: a single counter starts at 1 and, after each leaf
is emitted, advances by the number of line breaks found inside that leaf's
textual value. Line breaks in keys, punctuation or whitespace between values
are not counted.
"""

from __future__ import annotations

import json
import re
from collections.abc import Generator, Iterator, Sequence

from confval.constants.config import PATH_SEPARATOR
from confval.model import ConfigProperty

_LINE_BREAK_PATTERN: re.Pattern[str] = re.compile(r"\r\n|\r|\n")
_WHITESPACE_PATTERN: re.Pattern[str] = re.compile(r"[ \t\n\r]*")


class JsonObject(tuple):
    """Decoded JSON object as ordered ``(key, value)`` pairs; duplicate keys are kept."""


def _reject_constant(name: str) -> object:
    raise ValueError(f"non-standard JSON constant: {name}")


_DECODER: json.JSONDecoder = json.JSONDecoder(
    object_pairs_hook=JsonObject,
    parse_constant=_reject_constant,
)


def parse_document(text: str) -> object:
    """Parse strict JSON text, preserving key order and duplicate keys."""
    return json.loads(text, object_pairs_hook=JsonObject, parse_constant=_reject_constant)


def is_valid_json(text: str) -> bool:
    """Return whether ``text`` is a single well-formed JSON value."""
    try:
        parse_document(text)
    except (ValueError, RecursionError):
        return False
    return True


def iter_properties(text: str) -> Iterator[ConfigProperty]:
    """Yield leaf properties of the JSON object in ``text`` in depth-first order.

    A root that is not an object yields nothing. Raises ``ValueError`` when
    ``text`` is not valid JSON.
    """
    root = parse_document(text)
    if not isinstance(root, JsonObject):
        return

    line_number = 1
    stack: list[str] = []

    def walk(start: int) -> Generator[ConfigProperty, None, int]:
        # ``start`` points at the opening brace; returns the index past the closing one.
        nonlocal line_number
        idx = _skip_whitespace(text, start + 1)
        if text[idx] == "}":
            return idx + 1
        while True:
            key, idx = _DECODER.raw_decode(text, idx)
            idx = _skip_whitespace(text, _skip_whitespace(text, idx) + 1)
            full_path = PATH_SEPARATOR.join((*stack, key))
            if text[idx] == "{":
                stack.append(key)
                idx = yield from walk(idx)
                stack.pop()
            else:
                value, end = _DECODER.raw_decode(text, idx)
                text_value = _leaf_text(value, text[idx:end])
                yield ConfigProperty(path=full_path, value=text_value, line_number=line_number)
                line_number += count_line_breaks(text_value)
                idx = end
            idx = _skip_whitespace(text, idx)
            if text[idx] == "}":
                return idx + 1
            idx = _skip_whitespace(text, idx + 1)

    yield from walk(_skip_whitespace(text, 0))


def tokenize(text: str) -> tuple[ConfigProperty, ...]:
    """Materialize :func:`iter_properties` into an ordered tuple."""
    return tuple(iter_properties(text))


def find_property(properties: Sequence[ConfigProperty], path: str) -> ConfigProperty | None:
    """Return the first property at ``path`` in traversal order, or ``None``."""
    for prop in properties:
        if prop.path == path:
            return prop
    return None


def count_line_breaks(text: str) -> int:
    """Count ``\\r\\n``, ``\\n`` and ``\\r`` sequences in ``text``."""
    return len(_LINE_BREAK_PATTERN.findall(text))


def _skip_whitespace(text: str, idx: int) -> int:
    match = _WHITESPACE_PATTERN.match(text, idx)
    return match.end() if match else idx


def _leaf_text(value: object, source: str) -> str:
    """Return the text rules see for a leaf decoded from ``source``."""
    if value is None:
        return ""
    if value is True:
        return "True"
    if value is False:
        return "False"
    if isinstance(value, str):
        return value
    return source
