"""Icon metadata catalog — read-only title lookup.

The catalog file is owned elsewhere; iconlint only needs to know whether a
title exists and which slug it maps to.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path

from iconlint.svg.titles import title_to_slug

logger = logging.getLogger(__name__)


class CatalogError(RuntimeError):
    pass


@dataclass(frozen=True)
class IconCatalog:
    # title → slug
    titles: dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_icons(cls, icons: list[dict]) -> "IconCatalog":
        titles: dict[str, str] = {}
        for icon in icons:
            title = icon.get("title")
            if not isinstance(title, str):
                raise CatalogError(f"Catalog entry without a title: {icon!r}")
            titles[title] = icon.get("slug") or title_to_slug(title)
        return cls(titles)

    @classmethod
    def load(cls, path: Path | str) -> "IconCatalog":
        path = Path(path)
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            raise CatalogError(f"Cannot read catalog {path}: {e}") from e

        icons = data.get("icons") if isinstance(data, dict) else None
        if not isinstance(icons, list):
            raise CatalogError(f"Catalog {path} has no 'icons' list")
        catalog = cls.from_icons(icons)
        logger.debug("Loaded catalog %s (%d icons)", path, len(catalog))
        return catalog

    def __contains__(self, title: object) -> bool:
        return title in self.titles

    def __len__(self) -> int:
        return len(self.titles)

    def slug(self, title: str) -> str | None:
        return self.titles.get(title)
