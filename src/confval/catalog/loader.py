"""Loader for the bundled message catalog.

The catalog is a flat YAML mapping from error code to message template. It is
read once and treated as read-only afterwards; a lookup for a code that the
catalog does not define is a defect in the rule set and raises immediately.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType

import yaml

from confval.constants.config import CATALOG_FILENAME
from confval.exceptions import CatalogError
from confval.model import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_CATALOG_PATH: Path = Path(__file__).parent / CATALOG_FILENAME


class MessageCatalog(Mapping[str, str]):
    """Read-only mapping of error codes to message templates."""

    def __init__(self, messages: Mapping[str, str]) -> None:
        self._messages: Mapping[str, str] = MappingProxyType(dict(messages))

    def lookup(self, code: str) -> str:
        """Return the template for ``code`` or raise :class:`CatalogError`."""
        try:
            return self._messages[code]
        except KeyError:
            raise CatalogError(f"Resource key not found: {code}") from None

    def __getitem__(self, code: str) -> str:
        return self._messages[code]

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._messages))

    def __len__(self) -> int:
        return len(self._messages)


def load_catalog(path: Path) -> MessageCatalog:
    """Load a message catalog from a YAML file."""
    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise CatalogError(f"Cannot read message catalog {path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise CatalogError(f"Invalid YAML in message catalog {path}: {exc}") from exc

    if not isinstance(raw, dict):
        raise CatalogError(f"Message catalog {path} must contain a mapping")

    messages: dict[str, str] = {}
    for code, template in raw.items():
        if not isinstance(code, str) or not isinstance(template, str):
            raise CatalogError(f"Message catalog {path} entry {code!r} must map a string code to a string")
        messages[code] = template

    logger.debug("Loaded %d message(s) from %s", len(messages), path)
    return MessageCatalog(messages)


@lru_cache(maxsize=1)
def default_catalog() -> MessageCatalog:
    """Return the bundled catalog, loaded on first use."""
    return load_catalog(DEFAULT_CATALOG_PATH)


def create_error(
    code: str,
    line_number: int = 0,
    message: str | None = None,
    *,
    catalog: MessageCatalog | None = None,
) -> ConfigError:
    """Build a :class:`ConfigError`, resolving its message from the catalog unless given."""
    if message is None:
        message = (catalog if catalog is not None else default_catalog()).lookup(code)
    return ConfigError(number=code, line_number=line_number, message=message)
