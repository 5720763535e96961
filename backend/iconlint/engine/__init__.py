"""iconlint path geometry engine."""

from iconlint.engine.tokenizer import Instruction, MalformedPathError, Path, tokenize
from iconlint.engine.resolver import ResolvedInstruction, resolve
from iconlint.engine.extent import BoundingBox, bounding_box, path_bbox
from iconlint.engine.redundancy import RedundantSegment, find_redundant
from iconlint.engine.ledger import Ledger, LedgerError, LedgerMode

__all__ = [
    "Instruction",
    "MalformedPathError",
    "Path",
    "tokenize",
    "ResolvedInstruction",
    "resolve",
    "BoundingBox",
    "bounding_box",
    "path_bbox",
    "RedundantSegment",
    "find_redundant",
    "Ledger",
    "LedgerError",
    "LedgerMode",
]
