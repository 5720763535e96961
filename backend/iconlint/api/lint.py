"""POST /api/lint — run every rule over one icon or a batch."""

from __future__ import annotations

import time

from fastapi import APIRouter, Depends

from iconlint.dependencies import get_linter
from iconlint.engine.linter import Linter
from iconlint.models.diagnostics import LintReport
from iconlint.models.requests import BatchLintRequest, LintRequest
from iconlint.models.responses import BatchLintResponse

router = APIRouter()


@router.post("/lint", response_model=LintReport)
def lint(req: LintRequest, linter: Linter = Depends(get_linter)) -> LintReport:
    return linter.lint_svg(req.svg, req.name)


@router.post("/lint/batch", response_model=BatchLintResponse)
def lint_batch(req: BatchLintRequest, linter: Linter = Depends(get_linter)) -> BatchLintResponse:
    start = time.perf_counter()
    reports = linter.lint_many((icon.name, icon.svg) for icon in req.icons)
    elapsed = (time.perf_counter() - start) * 1000
    return BatchLintResponse(
        reports=reports,
        failed=sum(1 for r in reports if not r.passed),
        processing_time_ms=round(elapsed, 1),
    )
