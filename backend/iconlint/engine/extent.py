"""Geometric extent — tight axis-aligned bounding box of a resolved path.

Straight segments only ever reach their endpoints, but a cubic can bulge
past both endpoints and control-point hull corners are too loose, so each
cubic contributes the points where its derivative vanishes on either axis.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from iconlint.engine.resolver import Point, ResolvedInstruction, resolve
from iconlint.engine.tokenizer import tokenize
from iconlint.utils.math_helpers import cubic_bezier_axis, round_to, unit_interval_roots

DEFAULT_PRECISION = 3


@dataclass(frozen=True)
class BoundingBox:
    min_x: float = 0.0
    min_y: float = 0.0
    max_x: float = 0.0
    max_y: float = 0.0

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y

    @property
    def center(self) -> Point:
        return ((self.min_x + self.max_x) / 2, (self.min_y + self.max_y) / 2)

    @property
    def is_degenerate(self) -> bool:
        return self.width == 0 and self.height == 0

    def as_tuple(self) -> tuple[float, float, float, float]:
        return (self.min_x, self.min_y, self.max_x, self.max_y)


def cubic_extrema(p0: Point, p1: Point, p2: Point, p3: Point) -> list[Point]:
    """Interior points of a cubic where dx/dt or dy/dt is zero."""
    ts: list[float] = []
    for axis in (0, 1):
        a0, a1, a2, a3 = p0[axis], p1[axis], p2[axis], p3[axis]
        # B'(t)/3 = a·t² + b·t + c
        a = -a0 + 3 * a1 - 3 * a2 + a3
        b = 2 * (a0 - 2 * a1 + a2)
        c = a1 - a0
        ts.extend(unit_interval_roots(a, b, c))
    if not ts:
        return []
    xs = cubic_bezier_axis(p0[0], p1[0], p2[0], p3[0], ts)
    ys = cubic_bezier_axis(p0[1], p1[1], p2[1], p3[1], ts)
    return [(float(x), float(y)) for x, y in zip(xs, ys)]


def _instruction_extent(r: ResolvedInstruction) -> list[Point]:
    if r.controls:
        cp1, cp2 = r.controls
        return [r.start, r.end, *cubic_extrema(r.start, cp1, cp2, r.end)]
    return [r.end]


def bounding_box(
    resolved: tuple[ResolvedInstruction, ...],
    precision: int = DEFAULT_PRECISION,
) -> BoundingBox:
    """Union of every instruction's extent, rounded to ``precision`` digits.

    An empty path yields the degenerate 0×0 box at the origin.
    """
    points = [p for r in resolved for p in _instruction_extent(r)]
    if not points:
        return BoundingBox()
    pts = np.array(points, dtype=np.float64)
    return BoundingBox(
        min_x=round_to(np.min(pts[:, 0]), precision),
        min_y=round_to(np.min(pts[:, 1]), precision),
        max_x=round_to(np.max(pts[:, 0]), precision),
        max_y=round_to(np.max(pts[:, 1]), precision),
    )


def path_bbox(d: str, precision: int = DEFAULT_PRECISION) -> BoundingBox:
    return bounding_box(resolve(tokenize(d)), precision)
