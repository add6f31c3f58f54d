"""Point-in-triangle test based on areas."""

from __future__ import annotations

import struct

from fixed8.point import Point

_EPSILON = struct.unpack("<f", struct.pack("<f", 0.00001))[0]


def _f32(value: float) -> float:
    return struct.unpack("<f", struct.pack("<f", value))[0]


def triangle_area(p1: Point, p2: Point, p3: Point) -> float:
    """Area of the triangle, in single-precision arithmetic."""
    x1, y1 = p1.x.to_float(), p1.y.to_float()
    x2, y2 = p2.x.to_float(), p2.y.to_float()
    x3, y3 = p3.x.to_float(), p3.y.to_float()
    term1 = _f32(x1 * _f32(y2 - y3))
    term2 = _f32(x2 * _f32(y3 - y1))
    term3 = _f32(x3 * _f32(y1 - y2))
    total = _f32(_f32(term1 + term2) + term3)
    return abs(_f32(total / 2.0))


def bsp(a: Point, b: Point, c: Point, point: Point) -> bool:
    """Whether ``point`` lies strictly inside the triangle ``abc``.

    Points on an edge or a vertex are outside.
    """
    area = triangle_area(a, b, c)
    t1 = triangle_area(point, b, c)
    t2 = triangle_area(a, point, c)
    t3 = triangle_area(a, b, point)
    if t1 == 0 or t2 == 0 or t3 == 0:
        return False
    return _f32(_f32(t1 + t2) + t3) <= _f32(area + _EPSILON)