"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class LintRequest(BaseModel):
    svg: str = Field(..., description="Raw SVG code")
    name: str = Field(default="", description="Label reported back with the diagnostics")


class BatchLintRequest(BaseModel):
    icons: list[LintRequest] = Field(..., description="Icons to lint")


class PathAnalyzeRequest(BaseModel):
    d: str = Field(..., description="Path data")
