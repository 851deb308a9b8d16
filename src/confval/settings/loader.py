"""Settings loading and normalization."""

from __future__ import annotations

import difflib
import logging
from pathlib import Path
from typing import Any

import yaml

from confval.constants.config import ALLOWED_SETTINGS_KEYS, SETTINGS_FILENAME
from confval.exceptions import SettingsError
from confval.settings.model import ValidatorSettings

logger = logging.getLogger(__name__)


def load_settings(root: Path, config_path: Path | None = None) -> ValidatorSettings:
    """Load settings from ``confval.yaml`` under ``root`` or an explicit path.

    A missing implicit settings file yields defaults; a missing explicit one
    is an error. Relative ``schema`` and ``catalog`` paths are resolved
    against the settings file's directory.
    """
    path = config_path.resolve() if config_path else (root.resolve() / SETTINGS_FILENAME)
    if not path.exists():
        if config_path is not None:
            raise SettingsError(f"Settings file not found: {path}")
        return ValidatorSettings()

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise SettingsError(f"Invalid YAML settings file at {path}: {exc}") from exc

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise SettingsError(f"Settings file at {path} must be a YAML mapping")

    for key in sorted(raw, key=str):
        if key not in ALLOWED_SETTINGS_KEYS:
            hint = _suggest_key(str(key), ALLOWED_SETTINGS_KEYS)
            raise SettingsError(f"unknown key `{key}` in {path}" + (f" ({hint})" if hint else ""))

    base = path.parent
    settings = ValidatorSettings().with_overrides(
        schema=_optional_path(raw, "schema", base),
        rule_set=_optional_string(raw, "rule_set"),
        max_workers=_optional_positive_int(raw, "max_workers"),
        catalog=_optional_path(raw, "catalog", base),
    )

    logger.debug("Loaded settings from %s", path)
    return settings


def _optional_string(raw: dict[str, Any], key: str) -> str | None:
    value = raw.get(key)
    if value is None:
        return None
    if not isinstance(value, str) or not value.strip():
        raise SettingsError(f"`{key}` must be a non-empty string")
    return value.strip()


def _optional_path(raw: dict[str, Any], key: str, base: Path) -> Path | None:
    value = _optional_string(raw, key)
    if value is None:
        return None
    path = Path(value)
    return path if path.is_absolute() else base / path


def _optional_positive_int(raw: dict[str, Any], key: str) -> int | None:
    value = raw.get(key)
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        raise SettingsError(f"`{key}` must be a positive integer")
    if value <= 0:
        raise SettingsError(f"`{key}` must be a positive integer, got {value}")
    return value


def _suggest_key(key: str, allowed: frozenset[str]) -> str:
    """Return a 'did you mean' hint for a misspelled key."""
    matches = difflib.get_close_matches(key, sorted(allowed), n=1, cutoff=0.6)
    return f"did you mean `{matches[0]}`?" if matches else ""
