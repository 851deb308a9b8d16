"""Run every rule of a rule set against a tokenized document."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor

from confval.model import ConfigError, ConfigProperty
from confval.rules.base import RuleHandle, RuleSet, discover_rules

logger = logging.getLogger(__name__)


def run_rules(
    rule_set: RuleSet,
    properties: Sequence[ConfigProperty],
    *,
    max_workers: int | None = None,
) -> list[ConfigError]:
    """Invoke each rule exactly once and collect the errors they return.

    With ``max_workers`` greater than 1 the rules run on a thread pool. Each
    rule fills its own result slot, so no collector is shared between
    workers. Exceptions raised by a rule are not caught.
    """
    handles = discover_rules(rule_set)
    snapshot = tuple(properties)

    if max_workers is not None and max_workers > 1 and len(handles) > 1:
        with ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="confval-rule") as pool:
            results = list(pool.map(lambda handle: _invoke(handle, snapshot), handles))
    else:
        results = [_invoke(handle, snapshot) for handle in handles]

    errors = [result for result in results if result is not None]
    logger.debug("Ran %d rule(s) from %s: %d failed", len(handles), rule_set.name, len(errors))
    return errors


def _invoke(handle: RuleHandle, properties: tuple[ConfigProperty, ...]) -> ConfigError | None:
    result = handle(properties)
    if result is not None:
        logger.debug("Rule %s reported %s", handle.name, result.number)
    return result
