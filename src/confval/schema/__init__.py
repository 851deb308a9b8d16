"""JSON Schema conformance checks."""

from .checker import SchemaResult, validate_schema

__all__ = ["SchemaResult", "validate_schema"]
