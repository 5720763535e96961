"""Geometry rules — size, centering, precision and ineffective segments.

All four read the analysis the linter attached to the context and can be
waived per path through the known-issues ledger.
"""

from __future__ import annotations

from iconlint.engine.config import LintConfig
from iconlint.engine.context import IconContext
from iconlint.engine.redundancy import find_redundant
from iconlint.engine.rules.base import Rule, RuleName
from iconlint.models.diagnostics import Diagnostic, DiagnosticKind
from iconlint.utils.math_helpers import count_decimals, format_number, round_to


class SizeRule(Rule):
    name = RuleName.ICON_SIZE
    description = "Path spans the canvas in exactly one dimension"
    ledgered = True
    needs_geometry = True

    def evaluate(self, ctx: IconContext, config: LintConfig) -> list[Diagnostic]:
        width = round_to(ctx.bbox.width, config.float_precision)
        height = round_to(ctx.bbox.height, config.float_precision)
        size = config.canvas_size
        observed = f"{format_number(width)} x {format_number(height)}"

        if width == 0 and height == 0:
            return [
                Diagnostic(
                    rule=self.name.value,
                    kind=DiagnosticKind.GEOMETRY_DEGENERATE,
                    message="Path bounds were reported as 0 x 0; check if the path is valid",
                    observed=observed,
                )
            ]

        # A full-canvas square would touch every edge; one free axis is required
        if (width == size) == (height == size):
            return [
                Diagnostic(
                    rule=self.name.value,
                    message=(
                        f"Size of <path> must be exactly {format_number(size)} in one dimension; "
                        f"the size is currently {observed}"
                    ),
                    observed=observed,
                    expected=format_number(size),
                )
            ]
        return []


class CenteredRule(Rule):
    name = RuleName.ICON_CENTERED
    description = "Path bounding box is centered on the canvas"
    ledgered = True
    needs_geometry = True

    def evaluate(self, ctx: IconContext, config: LintConfig) -> list[Diagnostic]:
        target = config.target_center
        cx, cy = ctx.bbox.center
        center_x = round_to(cx, config.float_precision)
        center_y = round_to(cy, config.float_precision)

        if abs(center_x - target) > config.center_tolerance or abs(center_y - target) > config.center_tolerance:
            expected = f"({format_number(target)}, {format_number(target)})"
            observed = f"({format_number(center_x)}, {format_number(center_y)})"
            return [
                Diagnostic(
                    rule=self.name.value,
                    message=f"<path> must be centered at {expected}; the center is currently {observed}",
                    observed=observed,
                    expected=expected,
                )
            ]
        return []


class PrecisionRule(Rule):
    name = RuleName.ICON_PRECISION
    description = "Path operands use limited decimal precision"
    ledgered = True
    needs_geometry = True

    def evaluate(self, ctx: IconContext, config: LintConfig) -> list[Diagnostic]:
        precision = max((count_decimals(v) for v in ctx.path.numbers), default=0)
        if precision > config.max_float_precision:
            return [
                Diagnostic(
                    rule=self.name.value,
                    message=(
                        f"Maximum precision should not be greater than {config.max_float_precision}; "
                        f"it is currently {precision}"
                    ),
                    observed=str(precision),
                    expected=str(config.max_float_precision),
                )
            ]
        return []


class IneffectiveSegmentsRule(Rule):
    name = RuleName.INEFFECTIVE_SEGMENTS
    description = "No instruction leaves the drawing unchanged"
    ledgered = True
    needs_geometry = True

    def evaluate(self, ctx: IconContext, config: LintConfig) -> list[Diagnostic]:
        return [
            Diagnostic(
                rule=self.name.value,
                message=seg.message,
                segment=seg.readable,
                suggestion=seg.suggestion,
            )
            for seg in find_redundant(ctx.path, ctx.resolved)
        ]
