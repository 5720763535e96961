"""Math helpers — rounding, decimal counting, root finding. No engine imports."""

from __future__ import annotations

import math
from decimal import Decimal

import numpy as np

# Below this magnitude a polynomial coefficient is treated as zero.
_EPS = 1e-12


def round_to(value: float, digits: int) -> float:
    """Round to ``digits`` fractional digits, normalising -0.0 to 0.0."""
    rounded = round(float(value), digits)
    return rounded + 0.0


def format_number(value: float) -> str:
    """Shortest text form of a path operand: ``5`` not ``5.0``, ``0`` not ``-0.0``."""
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return repr(value)


def count_decimals(value: float) -> int:
    """Number of fractional digits in the shortest repr of ``value``.

    ``1.25`` → 2, ``3.0`` → 0, ``1e-7`` → 7.
    """
    if not value or not math.isfinite(value) or float(value).is_integer():
        return 0
    exponent = Decimal(repr(float(value))).normalize().as_tuple().exponent
    return max(0, -int(exponent))


def unit_interval_roots(a: float, b: float, c: float) -> list[float]:
    """Real roots of ``a·t² + b·t + c`` strictly inside (0, 1).

    Degrades to the linear case when ``a`` vanishes; a constant polynomial
    has no isolated roots.
    """
    if abs(a) < _EPS:
        if abs(b) < _EPS:
            return []
        candidates = [-c / b]
    else:
        disc = b * b - 4 * a * c
        if disc < 0:
            return []
        sq = math.sqrt(disc)
        candidates = [(-b + sq) / (2 * a), (-b - sq) / (2 * a)]
    return sorted({float(t) for t in candidates if 0.0 < t < 1.0})


def cubic_bezier_axis(p0: float, p1: float, p2: float, p3: float, ts: list[float]) -> np.ndarray:
    """Evaluate one coordinate of a cubic Bézier at each parameter in ``ts``."""
    t = np.asarray(ts, dtype=np.float64)
    mt = 1.0 - t
    return mt**3 * p0 + 3 * mt**2 * t * p1 + 3 * mt * t**2 * p2 + t**3 * p3
