"""Lint configuration — the numeric contract every icon is checked against."""

from __future__ import annotations

from dataclasses import dataclass

from iconlint.config import Settings


@dataclass(frozen=True)
class LintConfig:
    """Canvas and precision constants consumed by the geometry rules."""

    # Icons are drawn on a square canvas of this many units
    canvas_size: float = 24.0
    # Fractional digits kept when comparing box sizes and centers
    float_precision: int = 3
    # Max fractional digits allowed in path operands
    max_float_precision: int = 5
    # Allowed center deviation after rounding
    center_tolerance: float = 0.001

    @property
    def target_center(self) -> float:
        return self.canvas_size / 2

    @classmethod
    def from_settings(cls, settings: Settings) -> "LintConfig":
        return cls(
            canvas_size=settings.canvas_size,
            float_precision=settings.float_precision,
            max_float_precision=settings.max_float_precision,
            center_tolerance=settings.center_tolerance,
        )
