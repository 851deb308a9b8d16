"""Validate a JSON document against a JSON Schema file using ``jsonschema``."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import jsonschema
from jsonschema.exceptions import SchemaError
from jsonschema.validators import validator_for
from referencing import Registry
from referencing.exceptions import Unresolvable

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SchemaResult:
    """Outcome of a schema check.

    ``errors`` may be empty even when ``valid`` is false: failures to load the
    schema or parse the document carry no violation strings.
    """

    valid: bool
    errors: tuple[str, ...] = ()

    def __bool__(self) -> bool:
        return self.valid


def validate_schema(schema_path: Path, json_text: str) -> SchemaResult:
    """Check ``json_text`` against the schema stored at ``schema_path``."""
    try:
        schema = _load_schema(schema_path)
        document = json.loads(json_text)
        if not isinstance(document, dict):
            raise TypeError(f"document root must be an object, got {type(document).__name__}")
        validator_cls = validator_for(schema, default=jsonschema.Draft202012Validator)
        validator_cls.check_schema(schema)
        validator = validator_cls(schema, registry=Registry())
        violations = sorted(validator.iter_errors(document), key=lambda e: (e.json_path, e.message))
    except (OSError, ValueError, TypeError, SchemaError, Unresolvable) as exc:
        logger.warning("Schema check could not run against %s: %s", schema_path, exc)
        return SchemaResult(valid=False)

    errors = tuple(_format_violation(v) for v in violations)
    if errors:
        logger.debug("Schema check found %d violation(s)", len(errors))
    return SchemaResult(valid=not errors, errors=errors)


def _load_schema(path: Path) -> dict[str, Any] | bool:
    schema = json.loads(Path(path).read_text(encoding="utf-8"))
    if not isinstance(schema, (dict, bool)):
        raise TypeError(f"schema {path} must be a JSON object")
    return schema


def _format_violation(error: jsonschema.ValidationError) -> str:
    return f"{error.message}. Path '{error.json_path}'."
