"""Diagnostic data model — the structured output of the linter."""

from __future__ import annotations

import enum

from pydantic import BaseModel, Field, computed_field


class DiagnosticKind(str, enum.Enum):
    MALFORMED_PATH = "malformed-path"
    GEOMETRY_DEGENERATE = "geometry-degenerate"
    RULE_VIOLATION = "rule-violation"


class Diagnostic(BaseModel):
    rule: str
    message: str
    kind: DiagnosticKind = DiagnosticKind.RULE_VIOLATION
    # Offending instruction, redundancy findings only
    segment: str | None = None
    suggestion: str | None = None
    observed: str | None = None
    expected: str | None = None


class LintReport(BaseModel):
    icon: str
    source: str = ""
    diagnostics: list[Diagnostic] = Field(default_factory=list)

    @computed_field
    @property
    def passed(self) -> bool:
        return not self.diagnostics

    def rules_failed(self) -> list[str]:
        return sorted({d.rule for d in self.diagnostics})
