"""Checker — evaluate an ordered rule set and collect failure messages.

Every rule is evaluated against the value; there is no short-circuit on
the first failure. Messages are reported in rule order. An empty result
means the value is valid.

Validation failures are data, never exceptions. Only misconfiguration
(a non-:class:`Rule` in the rule set) raises :class:`RuleError`.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, computed_field

from fnkit.domain.rules import Rule, RuleError

T = TypeVar("T")

logger = logging.getLogger(__name__)


class ValidationResult(BaseModel):
    """Outcome of running a :class:`Checker` against one value.

    Attributes:
        messages: Failure messages in rule order. Empty means valid.
    """

    model_config = {"frozen": True}

    messages: tuple[str, ...] = ()

    @computed_field  # type: ignore[prop-decorator]
    @property
    def ok(self) -> bool:
        return not self.messages


def _validate_rules(rules: Iterable[Any]) -> tuple[Rule[Any], ...]:
    validated = tuple(rules)
    for position, rule in enumerate(validated):
        if not isinstance(rule, Rule):
            msg = f"Rule at position {position} is {type(rule).__name__}, expected Rule"
            logger.warning(
                "rule.rejected",
                extra={"position": position, "kind": type(rule).__name__},
            )
            raise RuleError(msg)
    return validated


def check(rules: Sequence[Rule[T]], value: T) -> list[str]:
    """Return the messages of every rule in *rules* that *value* fails."""
    validated = _validate_rules(rules)
    failures = [rule.message for rule in validated if not rule(value)]
    logger.debug("check.completed", extra={"rules": len(validated), "failed": len(failures)})
    return failures


class Checker(Generic[T]):
    """An immutable, reusable, ordered collection of rules.

    Usage::

        check_command = Checker([
            make_rule("must be a map", is_map),
            make_key_presence_rule(["msg", "type"]),
        ])
        check_command({"msg": "blah"})
        # ['Must have values for keys: msg type']
    """

    __slots__ = ("_rules",)

    def __init__(self, rules: Iterable[Rule[T]] = ()) -> None:
        self._rules: tuple[Rule[T], ...] = _validate_rules(rules)
        logger.debug("checker.built", extra={"rules": len(self._rules)})

    @property
    def rules(self) -> tuple[Rule[T], ...]:
        return self._rules

    def __call__(self, value: T) -> list[str]:
        return check(self._rules, value)

    def validate(self, value: T) -> ValidationResult:
        """Run every rule and wrap the failures in a :class:`ValidationResult`."""
        return ValidationResult(messages=tuple(self(value)))

    def __len__(self) -> int:
        return len(self._rules)

    def __repr__(self) -> str:
        return f"Checker({[r.message for r in self._rules]!r})"


def checker(*rules: Rule[T]) -> Checker[T]:
    """Variadic shorthand for ``Checker(rules)``."""
    return Checker(rules)
