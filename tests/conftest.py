"""Shared pytest fixtures for repository-local test data."""

from __future__ import annotations

import json
from pathlib import Path

import pytest


@pytest.fixture(scope="session")
def fixtures_root() -> Path:
    """Return root directory for test fixtures."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture(scope="session")
def person_schema(fixtures_root: Path) -> Path:
    """Return the schema accepting ``location`` plus a ``name`` object."""
    return fixtures_root / "schemas" / "person.schema.json"


@pytest.fixture(scope="session")
def strict_schema(fixtures_root: Path) -> Path:
    """Return a draft-07 schema requiring ``location`` and an integer ``age``."""
    return fixtures_root / "schemas" / "strict.schema.json"


@pytest.fixture(scope="session")
def documents_root(fixtures_root: Path) -> Path:
    """Return the directory of sample documents."""
    return fixtures_root / "documents"


@pytest.fixture()
def write_json(tmp_path: Path):
    """Write a JSON payload (or raw text) to a temp file and return its path."""

    def _write(payload: object, name: str = "config.json") -> Path:
        path = tmp_path / name
        text = payload if isinstance(payload, str) else json.dumps(payload, indent=2)
        path.write_text(text, encoding="utf-8")
        return path

    return _write
