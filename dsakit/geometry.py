"""Plane geometry: polygon area and circle-line intersection."""

from __future__ import annotations

import math
from collections.abc import Sequence

EPS = 1e-9

Point = tuple[float, float]


class NoIntersectionError(ValueError):
    """The line does not meet the circle."""


def shoelace_area(xs: Sequence[float], ys: Sequence[float]) -> float:
    """Signed area of a simple polygon by the shoelace formula.

    The result is negative for counter-clockwise vertex order and positive
    for clockwise order.
    """
    if len(xs) != len(ys):
        raise ValueError("xs and ys must have the same length")
    if not xs:
        return 0.0
    area = 0.0
    prev_x, prev_y = xs[-1], ys[-1]
    for x, y in zip(xs, ys):
        area += (prev_x + x) * (prev_y - y)
        prev_x, prev_y = x, y
    return area / 2.0


def circle_line_intersection(
    r: float, a: float, b: float, c: float
) -> tuple[Point, ...]:
    """Points where the circle of radius *r* at the origin meets ax + by + c = 0.

    Returns one point for a tangent line and two otherwise; raises
    NoIntersectionError when the line misses the circle.
    """
    norm = a * a + b * b
    if norm == 0:
        raise ValueError("a and b cannot both be zero")
    x0 = -a * c / norm
    y0 = -b * c / norm
    if c * c > r * r * norm + EPS:
        raise NoIntersectionError("No intersection")
    if math.fabs(c * c - r * r * norm) < EPS:
        return ((x0, y0),)
    d = r * r - c * c / norm
    m = math.sqrt(d / norm)
    return ((x0 + b * m, y0 - a * m), (x0 - b * m, y0 + a * m))