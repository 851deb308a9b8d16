"""JSON document parsing and tokenization."""

from .tokenizer import (
    JsonObject,
    find_property,
    is_valid_json,
    iter_properties,
    parse_document,
    tokenize,
)

__all__ = [
    "JsonObject",
    "find_property",
    "is_valid_json",
    "iter_properties",
    "parse_document",
    "tokenize",
]
