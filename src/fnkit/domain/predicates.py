"""Predicate building blocks — existence, truthiness, and predicate algebra.

``None`` is the only non-existent value. ``False`` is existent but not
truthy; every other value (including ``0``, ``""`` and ``[]``) is truthy.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

T = TypeVar("T")


def existy(x: Any) -> bool:
    """True unless *x* is ``None``."""
    return x is not None


def truthy(x: Any) -> bool:
    """True unless *x* is ``False`` or ``None``."""
    return x is not False and existy(x)


def do_when(cond: Any, action: Callable[[], T]) -> T | None:
    """Run *action* only when *cond* is truthy; otherwise return None."""
    if truthy(cond):
        return action()
    return None


def always(value: T) -> Callable[..., T]:
    """Return a function that ignores its arguments and returns *value*.

    The captured object is returned as-is, so ``always(x)() is always(x)()``
    holds for the same closure.
    """

    def _always(*_args: Any, **_kwargs: Any) -> T:
        return value

    return _always


def complement(pred: Callable[..., Any]) -> Callable[..., bool]:
    """Return the logical negation of *pred*."""

    def _complement(*args: Any, **kwargs: Any) -> bool:
        return not pred(*args, **kwargs)

    return _complement


def all_of(*thunks: Callable[[], Any]) -> bool:
    """True when every zero-argument predicate is truthy.

    Evaluated left to right, stopping at the first falsy result.
    """
    return all(thunk() for thunk in thunks)


def any_of(*thunks: Callable[[], Any]) -> bool:
    """True when at least one zero-argument predicate is truthy."""
    return any(thunk() for thunk in thunks)


def is_indexed(x: Any) -> bool:
    """True for positional sequences supported by :func:`~fnkit.domain.sequences.nth`."""
    return isinstance(x, (list, tuple, str))
