"""Small contest puzzles: train distances, walking cost, revenue, car speeds, swap."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import pairwise


def nearest_train_distances(stations: Sequence[int], queries: Iterable[int]) -> list[int]:
    """Travel time to each queried station (1-based), or -1 if unreachable.

    Station 1 and any station holding a train (1 moving right, 2 moving
    left) take no time; other stations take the distance to the nearest
    train heading towards them.
    """
    unreachable = None
    best: list[int | None] = [
        0 if i == 0 or kind != 0 else unreachable for i, kind in enumerate(stations)
    ]

    def relax(i: int, dist: int) -> None:
        if best[i] is None or dist < best[i]:
            best[i] = dist

    right_train = None
    for i, kind in enumerate(stations):
        if kind == 1:
            right_train = i
        if right_train is not None and kind == 0:
            relax(i, i - right_train)

    left_train = None
    for i in reversed(range(len(stations))):
        if stations[i] == 2:
            left_train = i
        if left_train is not None and stations[i] == 0:
            relax(i, left_train - i)

    return [-1 if best[q - 1] is None else best[q - 1] for q in queries]


def walking_cost(distance: int, step: int, base: int, increment: int) -> int:
    """Total cost over *distance* days, where each block of *step* days
    costs *increment* more per day than the previous block, starting at *base*.
    """
    blocks, rem = divmod(distance, step)
    cost = step * blocks * base + increment * (blocks - 1) * blocks * step // 2
    if rem:
        cost += rem * (base + blocks * increment)
    return cost


def max_revenue(budgets: Iterable[int]) -> int:
    """Best revenue from one price, each buyer paying if the price fits their budget."""
    ordered = sorted(budgets)
    if not ordered:
        raise ValueError("no budgets given")
    n = len(ordered)
    return max(price * (n - i) for i, price in enumerate(ordered))


def cars_at_max_speed(speeds: Sequence[int]) -> int:
    """Number of cars on a one-lane road that move at their own top speed."""
    if not speeds:
        return 0
    count = 1
    slowest = speeds[0]
    for prev, cur in pairwise(speeds):
        slowest = min(slowest, prev)
        if cur <= prev and cur <= slowest:
            count += 1
    return count


def swap(x: int, y: int) -> tuple[int, int]:
    """Swap two integers using arithmetic alone."""
    x = x + y
    y = x - y
    x = x - y
    return x, y