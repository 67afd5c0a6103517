# -*- coding: utf-8 -*-
import math
import operator

import pytest

from mep_equalize.geometry import XYZ, Segment, perpendicular_of


def test_xyz_arithmetic():
    a = XYZ(1, 2, 3)
    b = XYZ(4, 5, 6)
    assert a + b == XYZ(5, 7, 9)
    assert b - a == XYZ(3, 3, 3)
    assert -a == XYZ(-1, -2, -3)
    assert a * 2 == XYZ(2, 4, 6)
    assert 2 * a == XYZ(2, 4, 6)
    assert b / 2 == XYZ(2, 2.5, 3)
    assert a.dot(b) == 32
    assert XYZ(1, 0, 0).cross(XYZ(0, 1, 0)) == XYZ(0, 0, 1)


def test_xyz_is_immutable_value():
    a = XYZ(1, 2, 3)
    with pytest.raises(AttributeError):
        a.x = 5
    assert a == XYZ(1.0, 2.0, 3.0)
    assert hash(a) == hash(XYZ(1, 2, 3))


def test_normalize():
    v = XYZ(3, 4, 0).normalize()
    assert tuple(v) == pytest.approx((0.6, 0.8, 0.0))
    assert v.length == pytest.approx(1.0)


def test_normalize_zero_length_raises():
    with pytest.raises(ValueError):
        XYZ.ZERO.normalize()


def test_almost_equal_uses_absolute_tolerance():
    assert XYZ(1, 1, 1).is_almost_equal_to(XYZ(1 + 1e-10, 1, 1 - 1e-10))
    assert not XYZ(1, 1, 1).is_almost_equal_to(XYZ(1.001, 1, 1))
    assert XYZ(1, 1, 1).is_almost_equal_to(XYZ(1.001, 1, 1), tolerance=0.01)


def test_segment_derived_attributes():
    seg = Segment((0, 0, 0), (10, 0, 0))
    assert seg.direction == XYZ(1, 0, 0)
    assert seg.midpoint == XYZ(5, 0, 0)
    assert seg.length == 10.0
    assert seg.reversed().direction == XYZ(-1, 0, 0)


def test_segment_rejects_zero_length():
    with pytest.raises(ValueError):
        Segment((1, 2, 3), (1, 2, 3))


def test_segment_translated_keeps_length_and_direction():
    seg = Segment((0, 0, 0), (3, 4, 0))
    moved = seg.translated(XYZ(1, -2, 0.5))
    assert moved.start == XYZ(1, -2, 0.5)
    assert moved.length == pytest.approx(seg.length)
    assert moved.direction.is_almost_equal_to(seg.direction)


def test_perpendicular_rotates_about_vertical():
    assert perpendicular_of(XYZ(1, 0, 0)) == XYZ(0, 1, 0)
    assert perpendicular_of(XYZ(0, 1, 0)) == XYZ(-1, 0, 0)


def test_perpendicular_keeps_z_component():
    # Fixed convention for sloped runs: not a true perpendicular
    d = XYZ(0.6, 0, 0.8)
    assert perpendicular_of(d) == XYZ(0, 0.6, 0.8)


def test_perpendicular_with_up_matches_convention_for_horizontal_runs():
    for angle in (0.0, 0.3, 1.2, 2.5, -2.0):
        d = XYZ(math.cos(angle), math.sin(angle), 0)
        assert perpendicular_of(d, XYZ.BASIS_Z).is_almost_equal_to(perpendicular_of(d))


def test_perpendicular_with_up_is_unit_and_orthogonal_for_sloped_runs():
    d = XYZ(1, 0, 1).normalize()
    p = perpendicular_of(d, XYZ.BASIS_Z)
    assert p.length == pytest.approx(1.0)
    assert p.dot(d) == pytest.approx(0.0, abs=1e-12)


def test_perpendicular_with_up_rejects_vertical_runs():
    with pytest.raises(ValueError):
        perpendicular_of(XYZ(0, 0, 1), XYZ.BASIS_Z)


def test_division_works_through_the_python2_operator():
    # IronPython 2.7 dispatches `/` to __div__
    div = getattr(operator, "div", XYZ.__div__)
    assert div(XYZ(2, 4, 6), 2.0) == XYZ(1, 2, 3)
    assert XYZ.__div__(XYZ(1, 0, 0), 4) == XYZ(0.25, 0, 0)


def test_midpoint_of_integer_coordinates_is_not_floored():
    seg = Segment((0, 0, 0), (3, 1, 0))
    assert seg.midpoint == XYZ(1.5, 0.5, 0)
