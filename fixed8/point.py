"""Immutable points on a plane with fixed-point coordinates."""

from __future__ import annotations

from typing import Iterator, Union

from fixed8.fixed import Fixed

_Coordinate = Union[int, float, Fixed]


def _coordinate(value: _Coordinate) -> Fixed:
    if isinstance(value, Fixed):
        return Fixed(value)
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return Fixed(float(value))
    raise TypeError(
        f"a coordinate must be an int, float or Fixed, not {type(value).__name__}"
    )


class Point:
    """A point whose coordinates are fixed-point numbers and never change.

    Plain numbers are taken as single-precision floats before they are
    converted, so integers and floats give the same coordinate.
    """

    __slots__ = ("_x", "_y")

    def __init__(self, x: _Coordinate = 0, y: _Coordinate = 0) -> None:
        object.__setattr__(self, "_x", _coordinate(x))
        object.__setattr__(self, "_y", _coordinate(y))

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    @property
    def x(self) -> Fixed:
        """A copy of the horizontal coordinate."""
        return Fixed(self._x)

    @property
    def y(self) -> Fixed:
        """A copy of the vertical coordinate."""
        return Fixed(self._y)

    def __iter__(self) -> Iterator[Fixed]:
        yield self.x
        yield self.y

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return self._x == other._x and self._y == other._y

    def __hash__(self) -> int:
        return hash((self._x.raw, self._y.raw))

    def __str__(self) -> str:
        return f"({self._x}, {self._y})"

    def __repr__(self) -> str:
        return f"Point({self._x.to_float()!r}, {self._y.to_float()!r})"