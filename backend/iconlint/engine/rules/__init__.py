"""The closed set of icon rules, in evaluation order."""

from iconlint.engine.rules.base import Rule, RuleName
from iconlint.engine.rules.geometry import CenteredRule, IneffectiveSegmentsRule, PrecisionRule, SizeRule
from iconlint.engine.rules.structure import AttributesRule, ElementsRule, ExtraneousRule
from iconlint.engine.rules.title import TitleRule

RULES: tuple[Rule, ...] = (
    ElementsRule(),
    AttributesRule(),
    TitleRule(),
    SizeRule(),
    PrecisionRule(),
    IneffectiveSegmentsRule(),
    ExtraneousRule(),
    CenteredRule(),
)


def get_rule(name: RuleName | str) -> Rule:
    name = RuleName(name)
    for rule in RULES:
        if rule.name is name:
            return rule
    raise KeyError(name)


__all__ = [
    "Rule",
    "RuleName",
    "RULES",
    "get_rule",
    "AttributesRule",
    "CenteredRule",
    "ElementsRule",
    "ExtraneousRule",
    "IneffectiveSegmentsRule",
    "PrecisionRule",
    "SizeRule",
    "TitleRule",
]
