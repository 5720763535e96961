"""Icon title helpers — HTML-friendly encoding, slugs, export names."""

from __future__ import annotations

import re
import unicodedata

_TITLE_RE = re.compile(r"(.+) icon", re.DOTALL)

_ENTITY_NUM_RE = re.compile(r"&#([0-9]+);")
_ENTITY_NAMED_RE = re.compile(r"&(quot|amp|lt|gt);")
_NAMED_ENTITIES = {"quot": '"', "amp": "&", "lt": "<", "gt": ">"}

# Letters NFD cannot decompose into an ASCII base
_SLUG_REPLACEMENTS = [
    ("+", "plus"),
    (".", "dot"),
    ("&", "and"),
    ("đ", "d"),
    ("ħ", "h"),
    ("ı", "i"),
    ("ĸ", "k"),
    ("ŀ", "l"),
    ("ł", "l"),
    ("ß", "ss"),
    ("ŧ", "t"),
]
_NON_SLUG_RE = re.compile(r"[^a-z0-9]")


def html_friendly_to_title(text: str) -> str:
    """Decode the entities a title may carry inside SVG markup."""
    text = _ENTITY_NUM_RE.sub(lambda m: chr(int(m.group(1))), text)
    return _ENTITY_NAMED_RE.sub(lambda m: _NAMED_ENTITIES[m.group(1)], text)


def title_to_html_friendly(title: str) -> str:
    """Escape a catalog title for embedding in SVG markup."""
    escaped = title.replace("&", "&amp;").replace('"', "&quot;").replace("<", "&lt;").replace(">", "&gt;")
    return "".join(ch if ord(ch) <= 127 else f"&#{ord(ch)};" for ch in escaped)


def title_to_slug(title: str) -> str:
    slug = title.lower()
    for old, new in _SLUG_REPLACEMENTS:
        slug = slug.replace(old, new)
    slug = unicodedata.normalize("NFD", slug)
    return _NON_SLUG_RE.sub("", slug)


def slug_to_variable_name(slug: str) -> str:
    return f"si{slug[:1].upper()}{slug[1:]}"


def icon_name_from_title(title_text: str) -> str | None:
    """``"Foo &amp; Bar icon"`` → ``"Foo & Bar"``; None if the suffix is missing."""
    match = _TITLE_RE.fullmatch(title_text)
    if match is None:
        return None
    return html_friendly_to_title(match.group(1))


def display_name(title_text: str) -> str:
    """Best-effort icon name, also for titles that break the format."""
    name = icon_name_from_title(title_text)
    return name if name is not None else html_friendly_to_title(title_text)
