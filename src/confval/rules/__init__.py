"""Rule sets and the rule executor."""

from __future__ import annotations

from confval.catalog import MessageCatalog
from confval.exceptions import RuleSetError

from .base import RuleHandle, RuleSet, config_rule, discover_rules
from .executor import run_rules
from .sample import SampleRules

RULE_SET_CLASSES: tuple[type[RuleSet], ...] = (SampleRules,)


def build_rule_set(name: str, catalog: MessageCatalog | None = None) -> RuleSet:
    """Instantiate the shipped rule set called ``name``."""
    known = {rule_set_cls.name: rule_set_cls for rule_set_cls in RULE_SET_CLASSES}
    rule_set_cls = known.get(name)
    if rule_set_cls is None:
        raise RuleSetError(f"unknown rule set {name!r}; expected one of: {', '.join(sorted(known))}")
    return rule_set_cls(catalog)


__all__ = [
    "RULE_SET_CLASSES",
    "RuleHandle",
    "RuleSet",
    "SampleRules",
    "build_rule_set",
    "config_rule",
    "discover_rules",
    "run_rules",
]
