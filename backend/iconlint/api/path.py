"""POST /api/path/analyze — raw geometry for one path string."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException

from iconlint.engine.extent import bounding_box
from iconlint.engine.redundancy import find_redundant
from iconlint.engine.resolver import resolve
from iconlint.engine.tokenizer import MalformedPathError, tokenize
from iconlint.models.requests import PathAnalyzeRequest
from iconlint.models.responses import InstructionOut, PathAnalyzeResponse, RedundantSegmentOut

router = APIRouter(prefix="/path")


@router.post("/analyze", response_model=PathAnalyzeResponse)
def analyze_path(req: PathAnalyzeRequest) -> PathAnalyzeResponse:
    try:
        path = tokenize(req.d)
    except MalformedPathError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e

    resolved = resolve(path)
    box = bounding_box(resolved)

    return PathAnalyzeResponse(
        instructions=[
            InstructionOut(
                command=r.command,
                operands=list(r.instruction.operands),
                absolute=list(r.absolute),
                start=r.start,
                end=r.end,
            )
            for r in resolved
        ],
        bbox=box.as_tuple(),
        width=round(box.width, 3),
        height=round(box.height, 3),
        center=box.center,
        redundant=[
            RedundantSegmentOut(index=seg.index, segment=seg.readable, suggestion=seg.suggestion)
            for seg in find_redundant(path, resolved)
        ],
    )
