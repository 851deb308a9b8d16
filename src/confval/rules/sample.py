"""Sample rule set: location and name checks."""

from __future__ import annotations

from collections.abc import Sequence

from confval.constants.codes import CV004, CV005, CV006
from confval.model import ConfigError, ConfigProperty
from confval.parsing import find_property
from confval.rules.base import RuleSet, config_rule

EXPECTED_LOCATION: str = "washington"
MIN_NAME_LENGTH: int = 5


class SampleRules(RuleSet):
    """Rules for documents shaped like ``{"location": ..., "name": {"first": ..., "last": ...}}``.

    A missing property fails its rule and is reported on line 0.
    """

    name = "sample"

    @config_rule(CV004)
    def location_washington(self, properties: Sequence[ConfigProperty]) -> ConfigError | None:
        prop = find_property(properties, "location")
        if prop is not None and prop.value.lower() == EXPECTED_LOCATION:
            return None
        return self.error(CV004, prop)

    @config_rule(CV005)
    def name_first_length(self, properties: Sequence[ConfigProperty]) -> ConfigError | None:
        return self._check_min_length(properties, "name.first", CV005)

    @config_rule(CV006)
    def name_last_length(self, properties: Sequence[ConfigProperty]) -> ConfigError | None:
        return self._check_min_length(properties, "name.last", CV006)

    def _check_min_length(
        self,
        properties: Sequence[ConfigProperty],
        path: str,
        code: str,
    ) -> ConfigError | None:
        prop = find_property(properties, path)
        if prop is not None and len(prop.value) >= MIN_NAME_LENGTH:
            return None
        return self.error(code, prop)
