"""IconContext — the per-icon state every rule reads from.

Markup facts come from the SVG parser; geometry (instructions, resolved
coordinates, bounding box) is filled in once by the linter before any rule
runs. Rules only read it.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from iconlint.engine.extent import BoundingBox
from iconlint.engine.resolver import ResolvedInstruction
from iconlint.engine.tokenizer import Path
from iconlint.svg.catalog import IconCatalog
from iconlint.svg.titles import display_name


@dataclass
class ElementInfo:
    """One element of the icon markup."""

    tag: str
    # Local tag name of the parent, None for the root
    parent: str | None = None
    attributes: dict[str, str] = field(default_factory=dict)
    text: str = ""

    @property
    def selector(self) -> str:
        return f"{self.parent} > {self.tag}" if self.parent else self.tag


@dataclass
class IconContext:
    # Raw SVG markup, byte-for-byte as submitted
    svg_raw: str = ""
    # Where the markup came from (file name, request label)
    source: str = ""
    # Parsed element inventory, document order
    elements: list[ElementInfo] = field(default_factory=list)
    # XML error message when the markup is not well formed
    markup_error: str | None = None
    # Decoded <title> text, None if there is no title
    title: str | None = None
    # The path's d attribute, None if there is no path
    path_data: str | None = None

    # --- Geometry (populated by the linter) ---
    path: Path | None = None
    resolved: tuple[ResolvedInstruction, ...] = ()
    bbox: BoundingBox | None = None
    # MalformedPathError message when the path could not be tokenized
    path_error: str | None = None

    catalog: IconCatalog | None = None

    @property
    def icon_name(self) -> str:
        if self.title:
            return display_name(self.title)
        return self.source

    @property
    def has_geometry(self) -> bool:
        return self.path is not None and self.bbox is not None

    def find(self, selector: str) -> list[ElementInfo]:
        return [el for el in self.elements if el.selector == selector]
