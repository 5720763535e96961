"""Title rule — "<NAME> icon", with NAME known to the catalog."""

from __future__ import annotations

import logging

from iconlint.engine.config import LintConfig
from iconlint.engine.context import IconContext
from iconlint.engine.rules.base import Rule, RuleName
from iconlint.models.diagnostics import Diagnostic
from iconlint.svg.titles import icon_name_from_title

logger = logging.getLogger(__name__)


class TitleRule(Rule):
    name = RuleName.ICON_TITLE
    description = 'Title follows "[ICON_NAME] icon" and names a catalog icon'

    def evaluate(self, ctx: IconContext, config: LintConfig) -> list[Diagnostic]:
        name = icon_name_from_title(ctx.title or "")
        if name is None:
            return [
                Diagnostic(
                    rule=self.name.value,
                    message='<title> should follow the format "[ICON_NAME] icon"',
                    observed=ctx.title,
                )
            ]

        if ctx.catalog is None:
            logger.debug("No catalog configured, skipping title lookup for %s", name)
            return []
        if name not in ctx.catalog:
            return [
                Diagnostic(
                    rule=self.name.value,
                    message=f'No icon with title "{name}" found in the icon catalog',
                    observed=name,
                )
            ]
        return []
