import itertools

import pytest

from fixed8.bsp import bsp, triangle_area
from fixed8.point import Point

A = Point(0, 0)
B = Point(10, 0)
C = Point(0, 10)


@pytest.mark.parametrize(
    "x, y, expected",
    [
        (1, 1, True),
        (3, 2, True),
        (0, 0, False),
        (10, 0, False),
        (0, 10, False),
        (5, 0, False),
        (5, 5, False),
        (0, 5, False),
        (10, 10, False),
        (-1, -1, False),
        (6, 6, False),
    ],
)
def test_bsp_cases_from_demo(x, y, expected):
    assert bsp(A, B, C, Point(x, y)) is expected


def test_area_of_demo_triangle():
    assert triangle_area(A, B, C) == 50.0


def test_area_is_order_independent():
    areas = {triangle_area(*perm) for perm in itertools.permutations((A, B, C))}
    assert len(areas) == 1


def test_degenerate_triangle_has_no_area():
    assert triangle_area(Point(0, 0), Point(1, 1), Point(2, 2)) == 0.0


def test_area_is_never_negative():
    assert triangle_area(Point(0, 0), Point(0, 10), Point(10, 0)) >= 0.0


def test_bsp_is_vertex_order_independent():
    inside = Point(1, 1)
    for perm in itertools.permutations((A, B, C)):
        assert bsp(*perm, inside)


def test_vertices_are_outside():
    for vertex in (A, B, C):
        assert not bsp(A, B, C, vertex)


def test_fractional_point_inside():
    assert bsp(A, B, C, Point(0.5, 0.5))