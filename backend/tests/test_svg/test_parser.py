"""Tests for the SVG icon parser."""

from iconlint.svg.parser import parse_icon, strip_ns, svg_to_path
from tests.conftest import BROKEN_SVG, GROUPED_SVG, SQUARE_PATH, SQUARE_SVG, make_svg


def test_parse_simple_icon():
    ctx = parse_icon(SQUARE_SVG, "square.svg")
    assert ctx.source == "square.svg"
    assert ctx.svg_raw == SQUARE_SVG
    assert ctx.markup_error is None
    assert ctx.title == "Square icon"
    assert ctx.path_data == SQUARE_PATH
    assert [el.selector for el in ctx.elements] == ["svg", "svg > title", "svg > path"]


def test_namespace_kept_as_attribute():
    ctx = parse_icon(SQUARE_SVG)
    [svg] = ctx.find("svg")
    assert svg.attributes == {
        "xmlns": "http://www.w3.org/2000/svg",
        "role": "img",
        "viewBox": "0 0 24 24",
    }


def test_entities_are_decoded_in_title():
    ctx = parse_icon(make_svg("M0 0", "Dot &amp; Co icon"))
    assert ctx.title == "Dot & Co icon"
    assert ctx.icon_name == "Dot & Co"


def test_nested_path_is_not_the_icon_path():
    ctx = parse_icon(GROUPED_SVG)
    assert ctx.path_data is None
    assert [el.selector for el in ctx.find("g > path")] == ["g > path"]


def test_missing_title():
    ctx = parse_icon('<svg xmlns="http://www.w3.org/2000/svg"><path d="M0 0"/></svg>', "bare.svg")
    assert ctx.title is None
    assert ctx.icon_name == "bare.svg"


def test_broken_markup_falls_back_to_regex():
    ctx = parse_icon(BROKEN_SVG)
    assert ctx.markup_error
    assert ctx.elements == []
    assert ctx.title == "Square icon"
    assert ctx.path_data == SQUARE_PATH


def test_svg_to_path():
    assert svg_to_path(SQUARE_SVG) == SQUARE_PATH
    assert svg_to_path("<svg></svg>") is None


def test_strip_ns():
    assert strip_ns("{http://www.w3.org/2000/svg}path") == "path"
    assert strip_ns("path") == "path"
