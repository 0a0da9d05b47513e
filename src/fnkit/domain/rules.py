"""Validation rules — a predicate paired with its failure message.

A :class:`Rule` is an explicit ``{message, test}`` record. Rules are
immutable and are meant to be built once at configuration time and
reused against many input values.

INVARIANT: A malformed rule never reaches a checker. Missing messages
and non-callable tests raise :class:`RuleError` at construction.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

T = TypeVar("T")

KEY_PRESENCE_PREFIX = "Must have values for keys:"


class RuleError(ValueError):
    """A rule or checker was configured incorrectly."""


@dataclass(frozen=True)
class Rule(Generic[T]):
    """A named predicate: ``test`` returns True when the value is acceptable.

    Attributes:
        message: Human-readable text reported when ``test`` fails.
        test: Predicate evaluated against the candidate value.
    """

    message: str
    test: Callable[[T], bool]

    def __post_init__(self) -> None:
        if not isinstance(self.message, str) or not self.message.strip():
            msg = f"Rule message must be a non-empty string, got {self.message!r}"
            raise RuleError(msg)
        if not callable(self.test):
            msg = f"Rule test must be callable, got {type(self.test).__name__}"
            raise RuleError(msg)

    def __call__(self, value: T) -> bool:
        return bool(self.test(value))


def make_rule(message: str, test: Callable[[T], bool]) -> Rule[T]:
    """Build a :class:`Rule` from a failure *message* and a predicate."""
    return Rule(message=message, test=test)


def is_map(value: Any) -> bool:
    """True when *value* is a populated keyed structure.

    An empty mapping carries no fields and is reported as not a map.
    """
    return isinstance(value, Mapping) and len(value) > 0


def _key_list(keys: Iterable[Any]) -> list[Any]:
    if isinstance(keys, (str, bytes)):
        msg = f"keys must be a sequence of key names, not a bare string: {keys!r}"
        raise RuleError(msg)
    return list(keys)


def has_keys(keys: Sequence[Any]) -> Callable[[Any], bool]:
    """Return a predicate checking that a mapping contains every key in *keys*.

    Only presence is checked; ``{"a": None}`` has key ``"a"``.
    Non-mapping values fail instead of raising.
    """
    required = _key_list(keys)

    def _has_keys(value: Any) -> bool:
        if not isinstance(value, Mapping):
            return False
        return all(k in value for k in required)

    return _has_keys


def make_key_presence_rule(keys: Sequence[Any]) -> Rule[Any]:
    """Build a rule requiring every key in *keys*, preserving caller order.

    Examples:
        >>> make_key_presence_rule(["msg", "type"]).message
        'Must have values for keys: msg type'
    """
    required = _key_list(keys)
    message = " ".join([KEY_PRESENCE_PREFIX, *(str(k) for k in required)])
    return Rule(message=message, test=has_keys(required))
