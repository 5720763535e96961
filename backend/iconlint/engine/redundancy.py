"""Redundancy detector — instructions that draw nothing new.

Relative instructions are judged on their own deltas. Absolute H/V/M/L are
compared with the previous resolved coordinate, which needs a lookback when
the previous instruction only fixed one axis.
"""

from __future__ import annotations

from dataclasses import dataclass

from iconlint.engine.resolver import ResolvedInstruction
from iconlint.engine.tokenizer import Instruction, Path
from iconlint.utils.math_helpers import format_number


@dataclass(frozen=True)
class RedundantSegment:
    index: int
    instruction: Instruction
    # Human-readable rendition, e.g. "c0 0, 0 0, 5 5"
    readable: str
    # Replacement for a degenerate curve, e.g. "l5 5"
    suggestion: str | None = None

    @property
    def message(self) -> str:
        text = self.readable
        if self.suggestion:
            text += f' (should be "{self.suggestion}")'
        return f"Unexpected segment {text} in path."


def previous_coordinates(
    resolved: tuple[ResolvedInstruction, ...],
    index: int,
) -> tuple[float | None, float | None]:
    """Absolute (x, y) the pen sits at before instruction ``index``.

    Walks backwards over the absolute operands: H only pins x, V only pins
    y, Z jumps back to its subpath start, everything else pins both. Stops
    once both axes are known or the first instruction has been consumed.
    """
    x: float | None = None
    y: float | None = None
    idx = index
    # Instruction 0 is read too; the initial moveto fixes both axes
    while idx > 0 and (x is None or y is None):
        idx -= 1
        r = resolved[idx]
        cmd = r.absolute_command
        if cmd == "H":
            found_x, found_y = r.absolute[0], None
        elif cmd == "V":
            found_x, found_y = None, r.absolute[0]
        elif cmd == "Z":
            found_x, found_y = r.end
        else:
            found_x, found_y = r.absolute[-2], r.absolute[-1]
        if x is None:
            x = found_x
        if y is None:
            y = found_y
    return x, y


def _is_redundant(index: int, ins: Instruction, resolved: tuple[ResolvedInstruction, ...]) -> bool:
    cmd = ins.command
    ops = ins.operands

    if cmd in "hv":
        return ops[0] == 0
    if cmd in "ml":
        # A leading m is an absolute moveto in disguise
        if cmd == "m" and index == 0:
            return False
        return ops[0] == 0 and ops[1] == 0
    if cmd == "s":
        return ops[0] == 0 and ops[1] == 0
    if cmd == "c":
        first_zero = ops[0] == 0 and ops[1] == 0
        second_zero = ops[2] == 0 and ops[3] == 0
        end_zero = ops[4] == 0 and ops[5] == 0
        return first_zero and (second_zero or end_zero)

    if index == 0 or cmd not in ("H", "V", "M", "L"):
        return False

    prev_x, prev_y = previous_coordinates(resolved, index)
    if cmd == "H":
        return ops[0] == prev_x
    if cmd == "V":
        return ops[0] == prev_y
    return ops[0] == prev_x and ops[1] == prev_y


def _describe(ins: Instruction) -> tuple[str, str | None]:
    nums = [format_number(v) for v in ins.operands]
    pairs = [" ".join(nums[i : i + 2]) for i in range(0, len(nums), 2)]
    readable = ins.command + ", ".join(pairs)

    suggestion = None
    end_x, end_y = ins.operands[-2:] if ins.command in "cs" else (0.0, 0.0)
    if ins.command in "cs" and (end_x != 0 or end_y != 0):
        suggestion = f"l{format_number(end_x)} {format_number(end_y)}"
    return readable, suggestion


def find_redundant(path: Path, resolved: tuple[ResolvedInstruction, ...]) -> list[RedundantSegment]:
    found: list[RedundantSegment] = []
    for index, ins in enumerate(path):
        if not _is_redundant(index, ins, resolved):
            continue
        readable, suggestion = _describe(ins)
        found.append(RedundantSegment(index, ins, readable, suggestion))
    return found
