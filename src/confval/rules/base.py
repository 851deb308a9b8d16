"""Rule set interface and the rule marking decorator.

A rule is a method of a :class:`RuleSet` subclass decorated with
:func:`config_rule`. Marked methods are collected into the subclass's
``rules`` registry when the class is defined, so adding a rule never
requires touching the executor.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import ClassVar, TypeVar

from confval.catalog import MessageCatalog, create_error, default_catalog
from confval.model import ConfigError, ConfigProperty

_CODE_PATTERN: re.Pattern[str] = re.compile(r"^[A-Z][A-Z0-9]+$")
_RULE_SET_NAME_PATTERN: re.Pattern[str] = re.compile(r"^[a-z][a-z0-9_-]*$")
_RULE_MARKER: str = "__config_rule_code__"

Rule = Callable[[Sequence[ConfigProperty]], "ConfigError | None"]
_F = TypeVar("_F", bound=Callable[..., "ConfigError | None"])


def config_rule(code: str) -> Callable[[_F], _F]:
    """Mark a :class:`RuleSet` method as a validation rule reporting ``code``."""
    if not _CODE_PATTERN.match(code):
        raise TypeError(f"rule code must be upper-case alphanumeric (got {code!r})")

    def decorator(func: _F) -> _F:
        setattr(func, _RULE_MARKER, code)
        return func

    return decorator


@dataclass(frozen=True)
class RuleHandle:
    """A discovered rule bound to its rule set instance."""

    name: str
    code: str
    func: Rule

    def __call__(self, properties: Sequence[ConfigProperty]) -> ConfigError | None:
        return self.func(properties)


class RuleSet:
    """Base class for a named, fixed collection of validation rules."""

    name: ClassVar[str]
    rules: ClassVar[dict[str, str]] = {}

    def __init_subclass__(cls, **kwargs: object) -> None:
        """Validate the rule set name and register its marked methods."""
        super().__init_subclass__(**kwargs)
        name = getattr(cls, "name", None)
        if not isinstance(name, str) or not _RULE_SET_NAME_PATTERN.match(name):
            raise TypeError(f"{cls.__name__} must define a lower-case class attribute `name` (got {name!r})")

        registry: dict[str, str] = {}
        for base in reversed(cls.__mro__[1:]):
            registry.update(getattr(base, "rules", {}))
        for attr, member in vars(cls).items():
            code = getattr(member, _RULE_MARKER, None)
            if code is not None:
                registry[attr] = code
        cls.rules = registry

    def __init__(self, catalog: MessageCatalog | None = None) -> None:
        self.catalog = catalog if catalog is not None else default_catalog()

    def error(self, code: str, prop: ConfigProperty | None = None) -> ConfigError:
        """Build the error for ``code``, attributed to ``prop``'s line when present."""
        line_number = prop.line_number if prop is not None else 0
        return create_error(code, line_number, catalog=self.catalog)


def discover_rules(rule_set: RuleSet) -> tuple[RuleHandle, ...]:
    """Return handles for every rule registered on ``rule_set``, sorted by name."""
    return tuple(
        RuleHandle(name=name, code=code, func=getattr(rule_set, name))
        for name, code in sorted(type(rule_set).rules.items())
    )
