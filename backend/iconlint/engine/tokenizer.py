"""Path tokenizer — path-data string → immutable sequence of Instructions.

Pure and stateless: no geometry happens here. The accepted command set is
the one icons are allowed to use (move, line, horizontal, vertical, cubic,
shorthand cubic, close); every other command letter is rejected.
"""

from __future__ import annotations

import math
import re
from collections.abc import Iterator
from dataclasses import dataclass

from iconlint.utils.math_helpers import format_number

# Operand count per command letter (case-insensitive)
ARITY: dict[str, int] = {
    "M": 2,
    "L": 2,
    "H": 1,
    "V": 1,
    "C": 6,
    "S": 4,
    "Z": 0,
}

_NUMBER = r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?"
_TOKEN_RE = re.compile(
    rf"(?P<cmd>[A-Za-z])|(?P<num>{_NUMBER})|(?P<sep>[\s,]+)|(?P<bad>.)",
    re.DOTALL,
)

# Width of the excerpt quoted when a stray character is found
_EXCERPT = 12


class MalformedPathError(ValueError):
    """Raised when path data cannot be split into well-formed instructions."""

    def __init__(self, message: str, fragment: str) -> None:
        super().__init__(f"{message}: {fragment!r}")
        self.fragment = fragment


@dataclass(frozen=True)
class Instruction:
    command: str
    operands: tuple[float, ...] = ()

    @property
    def is_relative(self) -> bool:
        return self.command.islower()

    @property
    def upper(self) -> str:
        return self.command.upper()

    def __str__(self) -> str:
        return self.command + " ".join(format_number(v) for v in self.operands)


@dataclass(frozen=True)
class Path:
    """Ordered, immutable instruction sequence."""

    instructions: tuple[Instruction, ...] = ()

    def __iter__(self) -> Iterator[Instruction]:
        return iter(self.instructions)

    def __len__(self) -> int:
        return len(self.instructions)

    def __getitem__(self, index: int) -> Instruction:
        return self.instructions[index]

    def __str__(self) -> str:
        return " ".join(str(ins) for ins in self.instructions)

    @property
    def numbers(self) -> list[float]:
        return [v for ins in self.instructions for v in ins.operands]


def tokenize(d: str) -> Path:
    """Split ``d`` into Instructions, expanding implicit command repeats.

    Raises MalformedPathError on unknown characters, unsupported commands,
    numbers before the first command, or operand runs that do not fit the
    command's arity.
    """
    instructions: list[Instruction] = []
    command: str | None = None
    command_start = 0
    operands: list[float] = []

    for match in _TOKEN_RE.finditer(d):
        kind = match.lastgroup
        if kind == "sep":
            continue
        if kind == "bad":
            start = match.start()
            raise MalformedPathError("Unexpected character in path data", d[start : start + _EXCERPT])
        if kind == "num":
            if command is None:
                raise MalformedPathError("Path data must start with a command", d[: match.end()])
            value = float(match.group())
            if not math.isfinite(value):
                raise MalformedPathError("Number out of range", match.group())
            operands.append(value)
            continue

        # New command letter: flush the previous one
        if command is not None:
            instructions.extend(_expand(command, operands, d[command_start : match.start()].strip()))
        letter = match.group()
        if letter.upper() not in ARITY:
            raise MalformedPathError(f"Unsupported path command {letter!r}", d[match.start() : match.start() + _EXCERPT])
        command = letter
        command_start = match.start()
        operands = []

    if command is not None:
        instructions.extend(_expand(command, operands, d[command_start:].strip()))

    return Path(tuple(instructions))


def _expand(command: str, operands: list[float], fragment: str) -> list[Instruction]:
    arity = ARITY[command.upper()]
    if arity == 0:
        if operands:
            raise MalformedPathError(f"Command {command!r} takes no operands", fragment)
        return [Instruction(command)]

    if not operands or len(operands) % arity:
        raise MalformedPathError(
            f"Command {command!r} expects a multiple of {arity} operands, got {len(operands)}",
            fragment,
        )

    expanded: list[Instruction] = []
    for i in range(0, len(operands), arity):
        letter = command
        # Extra coordinate pairs after a moveto are implicit linetos
        if i and command in "Mm":
            letter = "L" if command == "M" else "l"
        expanded.append(Instruction(letter, tuple(operands[i : i + arity])))
    return expanded
