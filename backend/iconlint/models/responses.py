"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from iconlint.models.diagnostics import LintReport


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    rules_registered: int = 0


class BatchLintResponse(BaseModel):
    reports: list[LintReport] = Field(default_factory=list)
    failed: int = 0
    processing_time_ms: float = 0.0


class InstructionOut(BaseModel):
    command: str
    operands: list[float] = Field(default_factory=list)
    absolute: list[float] = Field(default_factory=list)
    start: tuple[float, float] = (0.0, 0.0)
    end: tuple[float, float] = (0.0, 0.0)


class RedundantSegmentOut(BaseModel):
    index: int
    segment: str
    suggestion: str | None = None


class PathAnalyzeResponse(BaseModel):
    instructions: list[InstructionOut] = Field(default_factory=list)
    # (min_x, min_y, max_x, max_y)
    bbox: tuple[float, float, float, float] = (0.0, 0.0, 0.0, 0.0)
    width: float = 0.0
    height: float = 0.0
    center: tuple[float, float] = (0.0, 0.0)
    redundant: list[RedundantSegmentOut] = Field(default_factory=list)
