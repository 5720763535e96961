"""Shared test fixtures."""

from __future__ import annotations

import pytest

from iconlint.engine.ledger import Ledger, LedgerMode
from iconlint.svg.catalog import IconCatalog


def make_svg(d: str, title: str = "Square icon") -> str:
    """Build icon markup in the one layout the extraneous rule accepts."""
    return (
        '<svg role="img" viewBox="0 0 24 24" xmlns="http://www.w3.org/2000/svg">'
        f'<title>{title}</title><path d="{d}"/></svg>\n'
    )


# 24 wide, 20 tall, centered on (12, 12)
SQUARE_PATH = "M0 2h24v20H0z"
SQUARE_SVG = make_svg(SQUARE_PATH)

# Same outline drawn with a redundant lineto and a zero-length vertical
REDUNDANT_PATH = "M0 2h24v0v20H0L0 22z"
REDUNDANT_SVG = make_svg(REDUNDANT_PATH, "Redundant icon")

# 24 x 24, touches every edge of the canvas
FULL_PATH = "M0 0h24v24H0z"
FULL_SVG = make_svg(FULL_PATH, "Full icon")

# Shifted one unit right
OFF_CENTER_PATH = "M1 2h24v20H1z"
OFF_CENTER_SVG = make_svg(OFF_CENTER_PATH, "Square icon")

# Quadratic curves are outside the accepted command set
QUADRATIC_SVG = make_svg("M0 0Q12 24 24 0z", "Square icon")

STYLED_SVG = (
    '<svg role="img" viewBox="0 0 24 24" xmlns="http://www.w3.org/2000/svg">'
    f'<title>Square icon</title><path d="{SQUARE_PATH}" fill="red"/></svg>\n'
)

GROUPED_SVG = (
    '<svg role="img" viewBox="0 0 24 24" xmlns="http://www.w3.org/2000/svg">'
    f'<title>Square icon</title><g><path d="{SQUARE_PATH}"/></g></svg>\n'
)

PRETTY_SVG = (
    '<svg role="img" viewBox="0 0 24 24" xmlns="http://www.w3.org/2000/svg">\n'
    "  <title>Square icon</title>\n"
    f'  <path d="{SQUARE_PATH}"/>\n'
    "</svg>\n"
)

BROKEN_SVG = (
    '<svg role="img" viewBox="0 0 24 24" xmlns="http://www.w3.org/2000/svg">'
    f'<title>Square icon</title><path d="{SQUARE_PATH}"></svg>\n'
)

CATALOG_ICONS = [
    {"title": "Square"},
    {"title": "Redundant"},
    {"title": "Full"},
    {"title": "Dot & Co", "slug": "dotco"},
    {"title": "Café"},
]


@pytest.fixture
def catalog() -> IconCatalog:
    return IconCatalog.from_icons(CATALOG_ICONS)


@pytest.fixture
def empty_ledger() -> Ledger:
    return Ledger(LedgerMode.LOADED)


@pytest.fixture
def square_svg() -> str:
    return SQUARE_SVG


@pytest.fixture
def redundant_svg() -> str:
    return REDUNDANT_SVG
