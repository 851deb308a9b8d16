"""Validation orchestrator.

Runs the gates in order (document exists, document is well-formed JSON,
document conforms to the schema) and stops at the first one that fails with
exactly one error. When every gate passes, the document is tokenized and all
rules of the rule set run to completion.
"""

from __future__ import annotations

import logging
from pathlib import Path

from confval.catalog import MessageCatalog, create_error, default_catalog
from confval.constants.codes import CV001, CV002, VC003
from confval.constants.config import DEFAULT_RULE_SET
from confval.model import ConfigError
from confval.parsing import is_valid_json, tokenize
from confval.rules import RuleSet, build_rule_set, run_rules
from confval.schema import validate_schema

logger = logging.getLogger(__name__)


class ConfigValidator:
    """Validate JSON documents against one schema and one rule set."""

    def __init__(
        self,
        schema_path: Path,
        *,
        rule_set: RuleSet | None = None,
        catalog: MessageCatalog | None = None,
        max_workers: int | None = None,
    ) -> None:
        self.schema_path = Path(schema_path)
        self.catalog = catalog if catalog is not None else default_catalog()
        self.rule_set = rule_set or build_rule_set(DEFAULT_RULE_SET, self.catalog)
        self.max_workers = max_workers

    def validate(self, path: Path) -> list[ConfigError]:
        """Return every error found in the document at ``path``; empty when valid."""
        path = Path(path)
        if not path.is_file():
            logger.info("Document not found: %s", path)
            return [self._error(CV001)]

        try:
            text = path.read_text(encoding="utf-8")
        except UnicodeDecodeError:
            logger.info("Document is not UTF-8 text: %s", path)
            return [self._error(CV002)]

        if not is_valid_json(text):
            logger.info("Document is not valid JSON: %s", path)
            return [self._error(CV002)]

        result = validate_schema(self.schema_path, text)
        if not result.valid:
            logger.info("Document fails schema %s with %d violation(s)", self.schema_path, len(result.errors))
            message = "\n".join(result.errors) if result.errors else None
            return [self._error(VC003, message=message)]

        properties = tokenize(text)
        logger.debug("Tokenized %d propert(ies) from %s", len(properties), path)
        return run_rules(self.rule_set, properties, max_workers=self.max_workers)

    def _error(self, code: str, *, message: str | None = None) -> ConfigError:
        return create_error(code, 0, message, catalog=self.catalog)


def validate_file(
    path: Path,
    schema_path: Path,
    *,
    rule_set: str = DEFAULT_RULE_SET,
    catalog: MessageCatalog | None = None,
    max_workers: int | None = None,
) -> list[ConfigError]:
    """Validate ``path`` with the named shipped rule set."""
    validator = ConfigValidator(
        schema_path,
        rule_set=build_rule_set(rule_set, catalog),
        catalog=catalog,
        max_workers=max_workers,
    )
    return validator.validate(path)
