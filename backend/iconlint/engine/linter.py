"""Linter orchestrator — geometry analysis, then every rule, per icon."""

from __future__ import annotations

import logging
import time
from collections.abc import Iterable
from concurrent.futures import ThreadPoolExecutor

from iconlint.engine.config import LintConfig
from iconlint.engine.context import IconContext
from iconlint.engine.extent import bounding_box
from iconlint.engine.ledger import Ledger
from iconlint.engine.resolver import resolve
from iconlint.engine.rules import RULES, Rule
from iconlint.engine.tokenizer import MalformedPathError, tokenize
from iconlint.models.diagnostics import Diagnostic, DiagnosticKind, LintReport
from iconlint.svg.catalog import IconCatalog
from iconlint.svg.parser import parse_icon

logger = logging.getLogger(__name__)

# Diagnostic rule name for path data the tokenizer rejects
PATH_SYNTAX = "path-syntax"


class Linter:
    """Runs the rule set over icons. Safe to share across threads."""

    def __init__(
        self,
        config: LintConfig | None = None,
        ledger: Ledger | None = None,
        catalog: IconCatalog | None = None,
        rules: tuple[Rule, ...] = RULES,
        max_workers: int = 8,
    ) -> None:
        self.config = config or LintConfig()
        self.ledger = ledger or Ledger()
        self.catalog = catalog
        self.rules = rules
        self.max_workers = max_workers

    def analyze(self, ctx: IconContext) -> IconContext:
        """Attach instructions, resolved coordinates and bounding box."""
        ctx.catalog = self.catalog
        if ctx.path_data is None:
            return ctx
        try:
            ctx.path = tokenize(ctx.path_data)
        except MalformedPathError as e:
            ctx.path_error = str(e)
            return ctx
        ctx.resolved = resolve(ctx.path)
        ctx.bbox = bounding_box(ctx.resolved, self.config.float_precision)
        return ctx

    def lint(self, ctx: IconContext) -> LintReport:
        t0 = time.perf_counter()
        self.analyze(ctx)

        diagnostics: list[Diagnostic] = []
        if ctx.path_error is not None:
            diagnostics.append(
                Diagnostic(rule=PATH_SYNTAX, kind=DiagnosticKind.MALFORMED_PATH, message=ctx.path_error)
            )

        for rule in self.rules:
            try:
                diagnostics.extend(rule.check(ctx, self.config, self.ledger))
            except Exception as e:
                logger.warning("  %s FAILED on %s: %s", rule.name.value, ctx.icon_name, e)
                diagnostics.append(Diagnostic(rule=rule.name.value, message=f"Rule failed: {e}"))

        elapsed = (time.perf_counter() - t0) * 1000
        logger.debug("Linted %s in %.1fms (%d diagnostics)", ctx.icon_name, elapsed, len(diagnostics))
        return LintReport(icon=ctx.icon_name, source=ctx.source, diagnostics=diagnostics)

    def lint_svg(self, svg: str, source: str = "") -> LintReport:
        return self.lint(parse_icon(svg, source))

    def lint_many(self, icons: Iterable[tuple[str, str]]) -> list[LintReport]:
        """Lint ``(source, svg)`` pairs in parallel; reports keep input order."""
        items = list(icons)
        start = time.perf_counter()
        with ThreadPoolExecutor(max_workers=max(1, self.max_workers)) as pool:
            reports = list(pool.map(lambda item: self.lint_svg(item[1], item[0]), items))

        failed = sum(1 for r in reports if not r.passed)
        total = (time.perf_counter() - start) * 1000
        logger.info("Linted %d icons in %.0fms: %d with diagnostics", len(reports), total, failed)
        return reports
