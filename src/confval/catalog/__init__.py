"""Error code to message lookup."""

from .loader import (
    DEFAULT_CATALOG_PATH,
    MessageCatalog,
    create_error,
    default_catalog,
    load_catalog,
)

__all__ = [
    "DEFAULT_CATALOG_PATH",
    "MessageCatalog",
    "create_error",
    "default_catalog",
    "load_catalog",
]
