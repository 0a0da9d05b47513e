"""Collection-centric helpers — concatenation, indexing, and generation.

All helpers return new lists and never mutate their inputs.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from typing import Any, TypeVar

from fnkit.domain.predicates import existy, is_indexed

T = TypeVar("T")
U = TypeVar("U")


def cat(*colls: Iterable[T] | None) -> list[T]:
    """Concatenate *colls* into a new list. A missing head yields ``[]``."""
    if not colls or not existy(colls[0]):
        return []
    result: list[T] = []
    for coll in colls:
        if coll is not None:
            result.extend(coll)
    return result


def construct(head: T, tail: Iterable[T]) -> list[T]:
    """Prepend *head* to *tail*."""
    return cat([head], list(tail))


def mapcat(fun: Callable[[T], Iterable[U]], coll: Iterable[T]) -> list[U]:
    """Map *fun* over *coll* and concatenate the resulting iterables."""
    return cat(*(fun(item) for item in coll))


def butlast(coll: Iterable[T]) -> list[T]:
    """All elements of *coll* except the last."""
    return list(coll)[:-1]


def interpose(sep: T, coll: Iterable[T]) -> list[T]:
    """Place *sep* between consecutive elements of *coll*.

    Examples:
        >>> interpose(",", ["a", "b", "c"])
        ['a', ',', 'b', ',', 'c']
    """
    return butlast(mapcat(lambda e: [e, sep], coll))


def nth(coll: Sequence[T], index: int) -> T:
    """Return element *index* of an indexed collection.

    Raises:
        TypeError: If *index* is not an int or *coll* is not indexed.
        IndexError: If *index* is negative or past the end.
    """
    if not isinstance(index, int) or isinstance(index, bool):
        msg = f"Expected an int as the index, got {type(index).__name__}"
        raise TypeError(msg)
    if not is_indexed(coll):
        msg = f"Not supported on non-indexed type: {type(coll).__name__}"
        raise TypeError(msg)
    if index < 0 or index > len(coll) - 1:
        msg = f"Index {index} is out of bounds for length {len(coll)}"
        raise IndexError(msg)
    return coll[index]


def second(coll: Sequence[T]) -> T:
    return nth(coll, 1)


def repeat(times: int, value: T) -> list[T]:
    return [value for _ in range(times)]


def repeatedly(times: int, fun: Callable[[int], T]) -> list[T]:
    """Call *fun* with each index in ``range(times)``, collecting the results."""
    return [fun(i) for i in range(times)]


def iterate_until(fun: Callable[[T], T], check: Callable[[T], Any], init: T) -> list[T]:
    """Apply *fun* repeatedly from *init*, collecting results while *check* holds.

    Examples:
        >>> iterate_until(lambda n: n * 2, lambda n: n <= 1024, 1)
        [2, 4, 8, 16, 32, 64, 128, 256, 512, 1024]
    """
    results: list[T] = []
    current = fun(init)
    while check(current):
        results.append(current)
        current = fun(current)
    return results


def average_damp(fun: Callable[[Any], float]) -> Callable[[Sequence[Any]], float]:
    """Return a function averaging *fun* over a sequence."""

    def _average(values: Sequence[Any]) -> float:
        return sum(fun(v) for v in values) / len(values)

    return _average
