"""Settings defaults and filenames."""

from __future__ import annotations

SETTINGS_FILENAME: str = "confval.yaml"
CATALOG_FILENAME: str = "messages.yaml"

DEFAULT_RULE_SET: str = "sample"
DEFAULT_MAX_WORKERS: int = 1

ALLOWED_SETTINGS_KEYS: frozenset[str] = frozenset({"schema", "rule_set", "max_workers", "catalog"})

PATH_SEPARATOR: str = "."
