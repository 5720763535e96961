"""Structural rules — which elements and attributes an icon may carry."""

from __future__ import annotations

import re

from iconlint.engine.config import LintConfig
from iconlint.engine.context import ElementInfo, IconContext
from iconlint.engine.rules.base import Rule, RuleName
from iconlint.models.diagnostics import Diagnostic
from iconlint.utils.math_helpers import format_number

SVG_NS = "http://www.w3.org/2000/svg"

# Each of these exactly once, nothing else
_REQUIRED_ELEMENTS = ("svg", "svg > title", "svg > path")

# No styling, transforms or entities can hide in the path data
_PATH_DATA_RE = re.compile(r"[,a-zA-Z0-9. -]+")

_STRICT_MARKUP_RE = re.compile(r'<svg( [^\s]*=".*"){3}><title>.*</title><path d=".*"/></svg>\r?\n?')


class ElementsRule(Rule):
    name = RuleName.ELEMENTS
    description = "Exactly one <svg>, one <title> and one <path>, nothing else"

    def evaluate(self, ctx: IconContext, config: LintConfig) -> list[Diagnostic]:
        if ctx.markup_error is not None:
            return [Diagnostic(rule=self.name.value, message=f"SVG markup is not well formed: {ctx.markup_error}")]

        diagnostics: list[Diagnostic] = []
        for selector in _REQUIRED_ELEMENTS:
            count = len(ctx.find(selector))
            if count != 1:
                diagnostics.append(
                    Diagnostic(
                        rule=self.name.value,
                        message=f"Expected exactly 1 <{selector}> element, found {count}",
                        observed=str(count),
                        expected="1",
                    )
                )
        for el in ctx.elements:
            if el.selector not in _REQUIRED_ELEMENTS:
                diagnostics.append(
                    Diagnostic(rule=self.name.value, message=f"Element <{el.selector}> is not allowed")
                )
        return diagnostics


class AttributesRule(Rule):
    name = RuleName.ATTRIBUTES
    description = "Whitelisted attributes on <svg>, <title> and <path>"

    def evaluate(self, ctx: IconContext, config: LintConfig) -> list[Diagnostic]:
        if ctx.markup_error is not None:
            return []

        size = format_number(config.canvas_size)
        svg_attrs: dict[str, str | re.Pattern[str]] = {
            "role": "img",
            "viewBox": f"0 0 {size} {size}",
            "xmlns": SVG_NS,
        }
        path_attrs: dict[str, str | re.Pattern[str]] = {"d": _PATH_DATA_RE}

        diagnostics: list[Diagnostic] = []
        for el in ctx.find("svg"):
            diagnostics.extend(self._whitelist(el, svg_attrs))
        for el in ctx.find("svg > title"):
            diagnostics.extend(self._whitelist(el, {}))
        for el in ctx.find("svg > path"):
            diagnostics.extend(self._whitelist(el, path_attrs))
        return diagnostics

    def _whitelist(self, el: ElementInfo, allowed: dict[str, str | re.Pattern[str]]) -> list[Diagnostic]:
        diagnostics: list[Diagnostic] = []
        for attr, expected in allowed.items():
            value = el.attributes.get(attr)
            if value is None:
                diagnostics.append(
                    Diagnostic(rule=self.name.value, message=f'Expected attribute "{attr}" on <{el.tag}>')
                )
            elif isinstance(expected, re.Pattern):
                if not expected.fullmatch(value):
                    diagnostics.append(
                        Diagnostic(
                            rule=self.name.value,
                            message=f'Attribute "{attr}" on <{el.tag}> does not match {expected.pattern}',
                            observed=value,
                        )
                    )
            elif value != expected:
                diagnostics.append(
                    Diagnostic(
                        rule=self.name.value,
                        message=f'Attribute "{attr}" on <{el.tag}> must be "{expected}", found "{value}"',
                        observed=value,
                        expected=expected,
                    )
                )
        for attr in el.attributes:
            if attr not in allowed:
                diagnostics.append(
                    Diagnostic(rule=self.name.value, message=f'Unexpected attribute "{attr}" on <{el.tag}>')
                )
        return diagnostics


class ExtraneousRule(Rule):
    name = RuleName.EXTRANEOUS
    description = "Markup is a single line with no stray characters"

    def evaluate(self, ctx: IconContext, config: LintConfig) -> list[Diagnostic]:
        if _STRICT_MARKUP_RE.fullmatch(ctx.svg_raw):
            return []
        return [
            Diagnostic(
                rule=self.name.value,
                message="Unexpected character(s), most likely extraneous whitespace, detected in SVG markup",
            )
        ]
