"""Tests for JSON Schema conformance checks."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from confval.schema import SchemaResult, validate_schema


def test_conforming_document_passes(person_schema: Path) -> None:
    result = validate_schema(person_schema, json.dumps({"location": "x", "name": {"first": "a", "last": "b"}}))

    assert result == SchemaResult(valid=True, errors=())
    assert result


def test_empty_object_passes_when_nothing_required(person_schema: Path) -> None:
    assert validate_schema(person_schema, "{}").valid is True


def test_violations_are_reported_per_location(strict_schema: Path) -> None:
    result = validate_schema(strict_schema, json.dumps({"location": "DC", "age": "ten"}))

    assert result.valid is False
    assert len(result.errors) == 2
    assert any("'ten' is not of type 'integer'" in e and "$.age" in e for e in result.errors)
    assert any("too short" in e and "$.location" in e for e in result.errors)


def test_missing_required_property_is_reported(strict_schema: Path) -> None:
    result = validate_schema(strict_schema, json.dumps({"location": "Seattle"}))

    assert result.valid is False
    assert result.errors == ("'age' is a required property. Path '$'.",)


def test_missing_schema_file_fails_without_errors(tmp_path: Path) -> None:
    result = validate_schema(tmp_path / "absent.json", "{}")

    assert result == SchemaResult(valid=False, errors=())
    assert not result


def test_malformed_schema_fails_without_errors(tmp_path: Path) -> None:
    schema = tmp_path / "bad.schema.json"
    schema.write_text("{not json", encoding="utf-8")

    assert validate_schema(schema, "{}") == SchemaResult(valid=False)


def test_invalid_schema_definition_fails_without_errors(tmp_path: Path) -> None:
    schema = tmp_path / "bad.schema.json"
    schema.write_text(json.dumps({"type": 12}), encoding="utf-8")

    assert validate_schema(schema, "{}") == SchemaResult(valid=False)


def test_malformed_document_fails_without_errors(person_schema: Path) -> None:
    assert validate_schema(person_schema, "{") == SchemaResult(valid=False)


def test_non_object_document_fails_without_errors(person_schema: Path) -> None:
    assert validate_schema(person_schema, "[1, 2]") == SchemaResult(valid=False)


def test_schema_without_dialect_uses_latest_draft(tmp_path: Path) -> None:
    schema = tmp_path / "plain.schema.json"
    schema.write_text(json.dumps({"type": "object", "dependentRequired": {"a": ["b"]}}), encoding="utf-8")

    result = validate_schema(schema, '{"a": 1}')

    assert result.valid is False
    assert result.errors == ("'b' is a dependency of 'a'. Path '$'.",)


@pytest.mark.parametrize(
    "ref",
    [
        "#/$defs/missing",
        "https://nowhere.invalid/x.json",
    ],
)
def test_unresolvable_reference_fails_without_errors(tmp_path: Path, ref: str) -> None:
    schema = tmp_path / "ref.schema.json"
    schema.write_text(json.dumps({"properties": {"a": {"$ref": ref}}}), encoding="utf-8")

    assert validate_schema(schema, '{"a": 1}') == SchemaResult(valid=False)
