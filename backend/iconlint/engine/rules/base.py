"""Rule base — every check is a Rule with a fixed name and an evaluate().

Usage:
    class SizeRule(Rule):
        name = RuleName.ICON_SIZE
        ledgered = True
        needs_geometry = True

        def evaluate(self, ctx, config):
            return [Diagnostic(...)] if bad else []

``check()`` wraps ``evaluate()`` with the known-issues ledger so individual
rules never touch it.
"""

from __future__ import annotations

import enum
import logging

from iconlint.engine.config import LintConfig
from iconlint.engine.context import IconContext
from iconlint.engine.ledger import Ledger
from iconlint.models.diagnostics import Diagnostic

logger = logging.getLogger(__name__)


class RuleName(str, enum.Enum):
    ELEMENTS = "elm"
    ATTRIBUTES = "attr"
    ICON_TITLE = "icon-title"
    ICON_SIZE = "icon-size"
    ICON_PRECISION = "icon-precision"
    INEFFECTIVE_SEGMENTS = "ineffective-segments"
    EXTRANEOUS = "extraneous"
    ICON_CENTERED = "icon-centered"


class Rule:
    name: RuleName
    description: str = ""
    # Failures can be accepted through the known-issues ledger
    ledgered: bool = False
    # Skipped when the icon has no analyzable path
    needs_geometry: bool = False

    def evaluate(self, ctx: IconContext, config: LintConfig) -> list[Diagnostic]:
        raise NotImplementedError

    def check(self, ctx: IconContext, config: LintConfig, ledger: Ledger) -> list[Diagnostic]:
        if self.needs_geometry and not ctx.has_geometry:
            return []

        use_ledger = self.ledgered and ctx.path_data is not None
        if use_ledger and ledger.is_ignored(self.name.value, ctx.path_data):
            logger.debug("%s: %s failure accepted by ledger", ctx.icon_name, self.name.value)
            return []

        diagnostics = self.evaluate(ctx, config)
        if diagnostics and use_ledger:
            ledger.record(self.name.value, ctx.path_data, ctx.icon_name)
        return diagnostics

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name.value}>"
