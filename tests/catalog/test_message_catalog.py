"""Tests for the message catalog."""

from __future__ import annotations

from pathlib import Path

import pytest

from confval.catalog import MessageCatalog, create_error, default_catalog, load_catalog
from confval.constants.codes import GATE_CODES, SAMPLE_RULE_CODES
from confval.exceptions import CatalogError
from confval.model import ConfigError


def test_bundled_catalog_defines_every_shipped_code() -> None:
    catalog = default_catalog()

    for code in (*GATE_CODES, *SAMPLE_RULE_CODES):
        assert catalog.lookup(code)


def test_default_catalog_is_loaded_once() -> None:
    assert default_catalog() is default_catalog()


def test_lookup_of_unknown_code_fails_fast() -> None:
    with pytest.raises(CatalogError, match="CV999"):
        default_catalog().lookup("CV999")


def test_catalog_is_read_only_and_iterates_sorted() -> None:
    catalog = MessageCatalog({"B2": "two", "A1": "one"})

    assert list(catalog) == ["A1", "B2"]
    assert len(catalog) == 2
    with pytest.raises(TypeError):
        catalog["C3"] = "three"  # type: ignore[index]


def test_create_error_resolves_or_overrides_message() -> None:
    catalog = MessageCatalog({"CV001": "missing"})

    assert create_error("CV001", catalog=catalog) == ConfigError(number="CV001", line_number=0, message="missing")
    assert create_error("CV001", 7, "custom", catalog=catalog) == ConfigError(
        number="CV001", line_number=7, message="custom"
    )


def test_load_catalog_from_file(tmp_path: Path) -> None:
    path = tmp_path / "messages.yaml"
    path.write_text("XX001: custom text\n", encoding="utf-8")

    assert load_catalog(path).lookup("XX001") == "custom text"


@pytest.mark.parametrize(
    "content",
    [
        "- a\n- b\n",
        "XX001: [not, text]\n",
        "XX001: 'unterminated\n",
    ],
)
def test_load_catalog_rejects_malformed_files(tmp_path: Path, content: str) -> None:
    path = tmp_path / "messages.yaml"
    path.write_text(content, encoding="utf-8")

    with pytest.raises(CatalogError):
        load_catalog(path)


def test_load_catalog_missing_file(tmp_path: Path) -> None:
    with pytest.raises(CatalogError, match="Cannot read"):
        load_catalog(tmp_path / "absent.yaml")
