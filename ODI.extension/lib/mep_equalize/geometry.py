# -*- coding: utf-8 -*-
"""
Abstract geometry for linear MEP elements.
Does not import the Revit API: points and vectors are plain value objects,
converted from/to Revit XYZ by the button's revit_service.
"""
from __future__ import division

import math
from collections import namedtuple

# Absolute per-component tolerance (internal units, feet in Revit)
PARALLEL_TOLERANCE = 1e-9


class XYZ(namedtuple("XYZ", "x y z")):
    """Immutable 3D point / vector."""
    __slots__ = ()

    def __new__(cls, x=0.0, y=0.0, z=0.0):
        return super(XYZ, cls).__new__(cls, float(x), float(y), float(z))

    def __add__(self, other):
        return XYZ(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other):
        return XYZ(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self):
        return XYZ(-self.x, -self.y, -self.z)

    def __mul__(self, scalar):
        return XYZ(self.x * scalar, self.y * scalar, self.z * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar):
        return XYZ(self.x / scalar, self.y / scalar, self.z / scalar)

    __div__ = __truediv__  # IronPython 2.7

    @property
    def length(self):
        return math.sqrt(self.dot(self))

    def dot(self, other):
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other):
        return XYZ(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x
        )

    def normalize(self):
        length = self.length
        if length == 0.0:
            raise ValueError("Cannot normalize a zero-length vector.")
        return self / length

    def is_zero_length(self, tolerance=PARALLEL_TOLERANCE):
        return abs(self.x) <= tolerance and abs(self.y) <= tolerance and abs(self.z) <= tolerance

    def is_almost_equal_to(self, other, tolerance=PARALLEL_TOLERANCE):
        """Component-wise comparison with an absolute tolerance."""
        return (self - other).is_zero_length(tolerance)

    def distance_to(self, other):
        return (self - other).length

    def __repr__(self):
        return "XYZ({:.6f}, {:.6f}, {:.6f})".format(self.x, self.y, self.z)


XYZ.ZERO = XYZ(0.0, 0.0, 0.0)
XYZ.BASIS_Z = XYZ(0.0, 0.0, 1.0)


class Segment(object):
    """
    Location of a straight linear element: an ordered (start, end) pair.
    Zero-length segments are rejected on construction.
    """
    __slots__ = ("_start", "_end")

    def __init__(self, start, end, tolerance=PARALLEL_TOLERANCE):
        start = XYZ(*start)
        end = XYZ(*end)
        if start.is_almost_equal_to(end, tolerance):
            raise ValueError("Segment start and end coincide: {}".format(start))
        self._start = start
        self._end = end

    @property
    def start(self):
        return self._start

    @property
    def end(self):
        return self._end

    @property
    def vector(self):
        return self._end - self._start

    @property
    def direction(self):
        return self.vector.normalize()

    @property
    def midpoint(self):
        return (self._start + self._end) / 2.0

    @property
    def length(self):
        return self.vector.length

    def reversed(self):
        return Segment(self._end, self._start)

    def translated(self, vector):
        return Segment(self._start + vector, self._end + vector)

    def __eq__(self, other):
        if not isinstance(other, Segment):
            return NotImplemented
        return self._start == other._start and self._end == other._end

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __hash__(self):
        return hash((self._start, self._end))

    def __repr__(self):
        return "Segment({!r} -> {!r})".format(self._start, self._end)


def perpendicular_of(direction, up=None):
    """
    Offset direction for elements running along `direction`.

    Without `up`, rotates 90 degrees about the vertical axis keeping Z:
    (-d.y, d.x, d.z). This assumes the elements lie in a horizontal plane;
    for sloped directions the result is neither unit length nor perpendicular.

    With `up`, returns normalize(up x direction), which matches the rotation
    above for horizontal directions and up = (0, 0, 1).
    """
    if up is None:
        return XYZ(-direction.y, direction.x, direction.z)

    perp = XYZ(*up).cross(direction)
    if perp.is_zero_length():
        raise ValueError("Direction {} is parallel to the up vector {}.".format(direction, up))
    return perp.normalize()
