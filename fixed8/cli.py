"""Command-line demonstrations of fixed-point numbers and the triangle test."""

from __future__ import annotations

import argparse
from typing import Callable, Iterator, Optional, Sequence

from fixed8.bsp import bsp
from fixed8.fixed import Fixed
from fixed8.point import Point


def _raw_bits_demo() -> Iterator[str]:
    yield "Constructor call"
    a = Fixed()
    yield "Copy constructor call"
    b = Fixed(a)
    yield "Constructor call"
    c = Fixed()
    yield "Copy assign operation call"
    c.raw = b.raw
    for number in (a, b, c):
        yield "getRawBits call"
        yield str(number.raw)
    yield from ["Destructor call"] * 3


def _conversion_demo() -> Iterator[str]:
    yield "Default constructor called"
    a = Fixed()
    yield "Int constructor called"
    b = Fixed(10)
    yield "Float constructor called"
    c = Fixed(42.42)
    yield "Copy constructor called"
    d = Fixed(b)
    yield "Float constructor called"
    temporary = Fixed(1234.4321)
    yield "Copy assignment operator called"
    a.raw = temporary.raw
    yield "Destructor called"
    named = (("a", a), ("b", b), ("c", c), ("d", d))
    for name, number in named:
        yield f"{name} is {number}"
    for name, number in named:
        yield f"{name} is {number.to_int()} as integer"
    yield from ["Destructor called"] * 4


def _arithmetic_demo() -> Iterator[str]:
    yield "Default constructor called"
    a = Fixed()
    yield "Float constructor called"
    left = Fixed(5.05)
    yield "Int constructor called"
    right = Fixed(2)
    yield "Float constructor called"
    b = left * right
    yield "Destructor called"
    yield "Destructor called"
    yield str(a)
    yield str(a.increment())
    yield str(a)
    yield "Copy constructor called"
    previous = Fixed(a)
    a.increment()
    yield str(previous)
    yield "Destructor called"
    yield str(a)
    yield str(b)
    yield str(Fixed.max(a, b))
    yield str(Fixed.min(a, b))
    yield from ["Destructor called"] * 2


def _bsp_demo() -> Iterator[str]:
    a, b, c = Point(0, 0), Point(10, 0), Point(0, 10)
    probes = [
        (1, 1), (3, 2), (0, 0), (10, 0), (0, 10), (5, 0),
        (5, 5), (0, 5), (10, 10), (-1, -1), (6, 6),
    ]
    for x, y in probes:
        yield f"Test ({x},{y}) : {int(bsp(a, b, c, Point(x, y)))}"


DEMOS: dict[str, Callable[[], Iterator[str]]] = {
    "raw": _raw_bits_demo,
    "convert": _conversion_demo,
    "arithmetic": _arithmetic_demo,
    "bsp": _bsp_demo,
}


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run one demonstration and print its output."""
    parser = argparse.ArgumentParser(
        prog="fixed8", description="Fixed-point number demonstrations."
    )
    parser.add_argument(
        "demo",
        nargs="?",
        default="bsp",
        choices=sorted(DEMOS),
        help="which demonstration to run (default: bsp)",
    )
    args = parser.parse_args(argv)
    for line in DEMOS[args.demo]():
        print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())