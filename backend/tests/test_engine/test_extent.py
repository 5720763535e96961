"""Tests for the geometric extent calculator."""

import pytest
from svgpathtools import parse_path

from iconlint.engine.extent import BoundingBox, bounding_box, cubic_extrema, path_bbox
from iconlint.engine.resolver import resolve
from iconlint.engine.tokenizer import tokenize


@pytest.mark.parametrize("d", [
    "M2 3L10 -4L-5 8",
    "M0 0L24 0L24 24L0 24",
    "M-3.5 7.25L1 1L9.75 -2",
    "M5 5H20V19L1 4",
])
def test_absolute_lines_match_literal_extremes(d):
    path = tokenize(d)
    xs, ys = [], []
    x = y = 0.0
    for ins in path:
        if ins.command == "H":
            x = ins.operands[0]
        elif ins.command == "V":
            y = ins.operands[0]
        else:
            x, y = ins.operands
        xs.append(x)
        ys.append(y)
    assert path_bbox(d) == BoundingBox(min(xs), min(ys), max(xs), max(ys))


def test_cubic_monotonic_curve():
    assert path_bbox("M0 0C12 0 12 24 24 24") == BoundingBox(0.0, 0.0, 24.0, 24.0)


def test_cubic_bulge_uses_curve_extremum_not_control_points():
    box = path_bbox("M0 0C0 10 10 10 10 0")
    assert box.max_y == pytest.approx(7.5)
    assert box.max_y < 10
    assert (box.min_x, box.min_y, box.max_x) == (0.0, 0.0, 10.0)


def test_cubic_overshoot_beyond_endpoints():
    # control points pull the curve left of both endpoints
    box = path_bbox("M10 0C-10 0 -10 20 10 20")
    assert box.min_x == pytest.approx(-5.0)
    assert box.max_x == 10.0


def test_cubic_extrema_none_for_straight_curve():
    assert cubic_extrema((0.0, 0.0), (1.0, 1.0), (2.0, 2.0), (3.0, 3.0)) == []


def test_shorthand_curve_extent():
    # the reflected control point dips below the axis
    box = path_bbox("M0 0C0 10 10 10 10 0S20 -10 20 0")
    assert box.min_y == pytest.approx(-7.5)
    assert box.max_y == pytest.approx(7.5)


@pytest.mark.parametrize("d", [
    "M0 0C0 10 10 10 10 0",
    "M10 0C-10 0 -10 20 10 20",
    "m2 2c5 -4 12 8 6 10s-8 3 -4 -6z",
    "M1 3h10c2 0 3 1 3 3v6c0 4-6 5-8 2S1 9 1 3z",
    "M12 .5c-6.63 0-12 5.37-12 12 0 5.3 3.44 9.8 8.2 11.39.6.11.82-.26.82-.58",
])
def test_matches_svgpathtools_bbox(d):
    xmin, xmax, ymin, ymax = parse_path(d).bbox()
    box = path_bbox(d)
    assert box.min_x == pytest.approx(xmin, abs=1e-3)
    assert box.max_x == pytest.approx(xmax, abs=1e-3)
    assert box.min_y == pytest.approx(ymin, abs=1e-3)
    assert box.max_y == pytest.approx(ymax, abs=1e-3)


def test_empty_path_is_degenerate():
    box = bounding_box(resolve(tokenize("")))
    assert box == BoundingBox()
    assert box.is_degenerate


def test_single_point_is_degenerate():
    assert path_bbox("M5 5").is_degenerate


def test_values_rounded_to_three_digits():
    box = path_bbox("M0 0L0.1234567 1.0009999")
    assert box.max_x == 0.123
    assert box.max_y == 1.001


def test_width_height_center():
    box = BoundingBox(0.0, 2.0, 24.0, 22.0)
    assert box.width == 24.0
    assert box.height == 20.0
    assert box.center == (12.0, 12.0)
    assert not box.is_degenerate
