"""Coordinate resolver — relative instructions → absolute coordinates.

Walks a Path tracking the current point and the start of the current
subpath. Each output item records where the pen was before the instruction
ran, where it ends up, and (for curves) the absolute control points.
"""

from __future__ import annotations

from dataclasses import dataclass

from iconlint.engine.tokenizer import Instruction, Path

Point = tuple[float, float]

ORIGIN: Point = (0.0, 0.0)


@dataclass(frozen=True)
class ResolvedInstruction:
    instruction: Instruction
    # Absolute operands, same arity as the source instruction
    absolute: tuple[float, ...]
    # Current point before the instruction executed
    start: Point
    # Current point after the instruction executed
    end: Point
    # (cp1, cp2) for cubic curves, empty otherwise
    controls: tuple[Point, ...] = ()

    @property
    def command(self) -> str:
        return self.instruction.command

    @property
    def absolute_command(self) -> str:
        return self.instruction.upper


def resolve(path: Path) -> tuple[ResolvedInstruction, ...]:
    current: Point = ORIGIN
    subpath_start: Point = ORIGIN
    # Second control point of the previous cubic, for S reflection
    last_cp2: Point | None = None
    resolved: list[ResolvedInstruction] = []

    for ins in path:
        cmd = ins.upper
        ops = ins.operands
        # A leading relative moveto is measured from the origin, which is
        # the same arithmetic as treating it as absolute.
        dx, dy = current if ins.is_relative else ORIGIN
        controls: tuple[Point, ...] = ()

        if cmd in ("M", "L"):
            absolute = (ops[0] + dx, ops[1] + dy)
            end = absolute
            if cmd == "M":
                subpath_start = end
        elif cmd == "H":
            absolute = (ops[0] + dx,)
            end = (absolute[0], current[1])
        elif cmd == "V":
            absolute = (ops[0] + dy,)
            end = (current[0], absolute[0])
        elif cmd == "C":
            absolute = tuple(v + (dx if i % 2 == 0 else dy) for i, v in enumerate(ops))
            controls = ((absolute[0], absolute[1]), (absolute[2], absolute[3]))
            end = (absolute[4], absolute[5])
        elif cmd == "S":
            absolute = tuple(v + (dx if i % 2 == 0 else dy) for i, v in enumerate(ops))
            if last_cp2 is not None:
                cp1 = (2 * current[0] - last_cp2[0], 2 * current[1] - last_cp2[1])
            else:
                cp1 = current
            controls = (cp1, (absolute[0], absolute[1]))
            end = (absolute[2], absolute[3])
        else:  # Z
            absolute = ()
            end = subpath_start

        resolved.append(
            ResolvedInstruction(
                instruction=ins,
                absolute=absolute,
                start=current,
                end=end,
                controls=controls,
            )
        )
        last_cp2 = controls[1] if controls else None
        current = end

    return tuple(resolved)


def absolute_path(resolved: tuple[ResolvedInstruction, ...]) -> Path:
    """The already-absolute Path equivalent to a resolved sequence."""
    return Path(tuple(Instruction(r.absolute_command, r.absolute) for r in resolved))
