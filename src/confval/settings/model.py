"""Settings data model."""

from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path

from confval.constants.config import DEFAULT_MAX_WORKERS, DEFAULT_RULE_SET


@dataclass(frozen=True)
class ValidatorSettings:
    """Resolved validator settings."""

    schema: Path | None = None
    rule_set: str = DEFAULT_RULE_SET
    max_workers: int = DEFAULT_MAX_WORKERS
    catalog: Path | None = None

    def with_overrides(
        self,
        *,
        schema: Path | None = None,
        rule_set: str | None = None,
        max_workers: int | None = None,
        catalog: Path | None = None,
    ) -> ValidatorSettings:
        """Return a copy with every non-``None`` override applied."""
        changes: dict[str, object] = {}
        if schema is not None:
            changes["schema"] = schema
        if rule_set is not None:
            changes["rule_set"] = rule_set
        if max_workers is not None:
            changes["max_workers"] = max_workers
        if catalog is not None:
            changes["catalog"] = catalog
        return replace(self, **changes)
