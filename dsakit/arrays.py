"""Array helpers: rotation, gcd, binary conversion, selection and merge sort."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any


def left_rotate(values: Sequence[Any], d: int) -> list[Any]:
    """Return *values* rotated left by *d* positions."""
    items = list(values)
    if not items:
        raise ValueError("cannot rotate an empty sequence")
    k = d % len(items)
    return items[k:] + items[:k]


def gcd(a: int, b: int) -> int:
    """Greatest common divisor by the Euclidean algorithm."""
    while a:
        a, b = b % a, a
    return b


def to_binary(n: int) -> str:
    """Binary digits of a positive integer; an empty string for n <= 0."""
    digits = []
    while n > 0:
        n, rem = divmod(n, 2)
        digits.append(str(rem))
    return "".join(reversed(digits))


def three_largest(values: Iterable[Any]) -> tuple[Any, Any, Any]:
    """The three largest values in one pass, largest first.

    Slots that no value filled are None.
    """
    top: list[Any] = [None, None, None]
    for value in values:
        for position, current in enumerate(top):
            if current is None or value > current:
                top.insert(position, value)
                top.pop()
                break
    return top[0], top[1], top[2]


def _merge(left: list[Any], right: list[Any]) -> list[Any]:
    merged = []
    i = j = 0
    while i < len(left) and j < len(right):
        if right[j] < left[i]:
            merged.append(right[j])
            j += 1
        else:
            merged.append(left[i])
            i += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(values: Iterable[Any]) -> list[Any]:
    """Return a new list with *values* sorted by merge sort."""
    items = list(values)
    if len(items) <= 1:
        return items
    mid = len(items) // 2
    return _merge(merge_sort(items[:mid]), merge_sort(items[mid:]))


def kth_smallest(values: Iterable[Any], k: int) -> Any:
    """The k-th element (1-based) of *values* in sorted order."""
    ordered = merge_sort(values)
    if not 1 <= k <= len(ordered):
        raise IndexError(f"k must be between 1 and {len(ordered)}, got {k}")
    return ordered[k - 1]