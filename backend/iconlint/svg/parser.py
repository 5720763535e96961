"""SVG icon parser — raw markup → IconContext.

Uses ElementTree for the element/attribute inventory. Namespace
declarations are kept as ``xmlns``/``xmlns:prefix`` attributes so the
attribute whitelist can see them.
"""

from __future__ import annotations

import io
import logging
import re
import xml.etree.ElementTree as ET

from iconlint.engine.context import ElementInfo, IconContext

logger = logging.getLogger(__name__)

# Fallbacks for markup ElementTree refuses to parse
_PATH_D_RE = re.compile(r'<path\s+d="([^"]*)')
_TITLE_RE = re.compile(r"<title[^>]*>(.*?)</title>", re.DOTALL)


def strip_ns(name: str) -> str:
    """Remove namespace from tag name."""
    return name.split("}")[-1] if "}" in name else name


def svg_to_path(svg: str) -> str | None:
    """Extract the first path's d attribute with a plain regex."""
    match = _PATH_D_RE.search(svg)
    return match.group(1) if match else None


def parse_icon(svg_text: str, source: str = "") -> IconContext:
    ctx = IconContext(svg_raw=svg_text, source=source)

    try:
        ctx.elements = _inventory(svg_text)
    except ET.ParseError as e:
        ctx.markup_error = str(e)
        logger.warning("Malformed SVG markup in %s: %s", source or "<input>", e)
        ctx.path_data = svg_to_path(svg_text)
        title_match = _TITLE_RE.search(svg_text)
        if title_match:
            ctx.title = title_match.group(1)
        return ctx

    titles = ctx.find("svg > title")
    if titles:
        ctx.title = titles[0].text
    paths = ctx.find("svg > path")
    if paths:
        ctx.path_data = paths[0].attributes.get("d")

    logger.debug("Parsed icon %s: %d elements", source or "<input>", len(ctx.elements))
    return ctx


def _inventory(svg_text: str) -> list[ElementInfo]:
    elements: list[ElementInfo] = []
    infos: dict[int, ElementInfo] = {}
    stack: list[str] = []
    pending_ns: dict[str, str] = {}

    events = ET.iterparse(io.StringIO(svg_text), events=("start-ns", "start", "end"))
    for event, item in events:
        if event == "start-ns":
            prefix, uri = item
            pending_ns["xmlns:" + prefix if prefix else "xmlns"] = uri
        elif event == "start":
            attributes = dict(pending_ns)
            attributes.update({strip_ns(k): v for k, v in item.attrib.items()})
            pending_ns = {}
            info = ElementInfo(
                tag=strip_ns(item.tag),
                parent=stack[-1] if stack else None,
                attributes=attributes,
            )
            infos[id(item)] = info
            elements.append(info)
            stack.append(info.tag)
        else:
            infos[id(item)].text = "".join(item.itertext())
            stack.pop()

    return elements
