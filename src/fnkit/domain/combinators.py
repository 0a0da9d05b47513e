"""Higher-order combinators — functions that take or return functions."""

from __future__ import annotations

import functools
from collections.abc import Callable, Iterable, Mapping, Sequence
from typing import Any, TypeVar

from fnkit.domain.predicates import existy, truthy

T = TypeVar("T")
V = TypeVar("V")


def fnull(fun: Callable[..., T], *defaults: Any) -> Callable[..., T]:
    """Wrap *fun* so that ``None`` arguments are replaced positionally by *defaults*.

    Positions without a default are passed through unchanged.

    Examples:
        >>> safe_mult = fnull(lambda total, n: total * n, 1, 1)
        >>> functools.reduce(safe_mult, [1, 2, 3, None, 5])
        30
    """

    def _fnull(*args: Any) -> T:
        filled = [
            arg if existy(arg) else (defaults[i] if i < len(defaults) else None)
            for i, arg in enumerate(args)
        ]
        return fun(*filled)

    return _fnull


def defaults(d: Mapping[Any, Any]) -> Callable[[Any, Any], Any]:
    """Return ``lookup(obj, key)`` that falls back to ``d[key]`` for missing values.

    A ``None`` *obj* yields ``None``. Non-mapping objects always yield the default.
    """

    def _lookup(obj: Any, key: Any) -> Any:
        if not existy(obj):
            return None
        found = obj.get(key) if isinstance(obj, Mapping) else None
        return fnull(lambda v: v, d.get(key))(found)

    return _lookup


def plucker(field: Any) -> Callable[[Any], Any]:
    """Return a function reading *field* from a mapping or index *field* of a sequence.

    Missing keys and out-of-range indexes yield ``None``.
    """

    def _pluck(obj: Any) -> Any:
        if not existy(obj):
            return None
        if isinstance(obj, Mapping):
            return obj.get(field)
        if isinstance(obj, Sequence) and isinstance(field, int) and not isinstance(field, bool):
            return obj[field] if 0 <= field < len(obj) else None
        return None

    return _pluck


def invoker(name: str, method: Callable[..., T]) -> Callable[..., T | None]:
    """Return a function calling *method* on targets whose type binds *name* to it.

    Targets resolving *name* to anything else return ``None``.

    Raises:
        ValueError: If the target is ``None``.
    """

    def _invoke(target: Any, *args: Any) -> T | None:
        if not existy(target):
            msg = "Must provide a target"
            raise ValueError(msg)
        target_method = getattr(type(target), name, None)
        if target_method is not None and target_method is method:
            return method(target, *args)
        return None

    return _invoke


def finder(
    value_fun: Callable[[T], V],
    best_fun: Callable[[V, V], V],
    coll: Iterable[T],
) -> T:
    """Select the element whose projected value wins under *best_fun*.

    Examples:
        >>> finder(plucker("age"), max, [{"age": 30}, {"age": 41}])
        {'age': 41}
    """
    items = list(coll)
    if not items:
        msg = "finder() arg is an empty collection"
        raise ValueError(msg)

    def _pick(current_best: T, candidate: T) -> T:
        best_value = value_fun(current_best)
        return current_best if best_value == best_fun(best_value, value_fun(candidate)) else candidate

    return functools.reduce(_pick, items)


def best(fun: Callable[[T, T], Any], coll: Iterable[T]) -> T:
    """Reduce *coll*, keeping ``x`` whenever ``fun(x, y)`` is truthy."""
    items = list(coll)
    if not items:
        msg = "best() arg is an empty collection"
        raise ValueError(msg)
    return functools.reduce(lambda x, y: x if fun(x, y) else y, items)


def comparator(pred: Callable[[T, T], Any]) -> Callable[[T, T], int]:
    """Turn a "less than" style predicate into a ``-1/0/1`` comparison."""

    def _compare(x: T, y: T) -> int:
        if truthy(pred(x, y)):
            return -1
        if truthy(pred(y, x)):
            return 1
        return 0

    return _compare


def sort_with(pred: Callable[[T, T], Any], coll: Iterable[T]) -> list[T]:
    """Return a new list sorted by :func:`comparator` of *pred*.

    Examples:
        >>> sort_with(lambda x, y: x <= y, [2, 3, -1, -6, 0, -108, 42, 10])
        [-108, -6, -1, 0, 2, 3, 10, 42]
    """
    return sorted(coll, key=functools.cmp_to_key(comparator(pred)))


def splat(fun: Callable[..., T]) -> Callable[[Iterable[Any]], T]:
    """Adapt a positional-argument function to take one iterable."""

    def _splat(args: Iterable[Any]) -> T:
        return fun(*args)

    return _splat


def unsplat(fun: Callable[[list[Any]], T]) -> Callable[..., T]:
    """Adapt a single-list function to take positional arguments."""

    def _unsplat(*args: Any) -> T:
        return fun(list(args))

    return _unsplat
