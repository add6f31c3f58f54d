# fixed8

Fixed-point numbers that store their value as a signed 32-bit integer with
8 fractional bits (a resolution of 1/256), together with an immutable 2-D
`Point` type and a `bsp` function that tells whether a point lies strictly
inside a triangle.

## Installation

```
pip install .
```

## Fixed-point numbers

```python
from fixed8.fixed import Fixed

a = Fixed(10)          # from an int: stored as 10 << 8
b = Fixed(42.42)       # from a float: taken as single precision, rounded to the nearest 1/256
print(b)               # 42.4219
print(b.to_int())      # 42
print(b.to_float())    # 42.421875
print(b.raw)           # 10860

raw = Fixed.from_raw(256)   # build directly from the stored integer
print(raw)                  # 1

c = Fixed(5.05) * Fixed(2)  # +, -, *, / go through single-precision floats and round back
print(c)                    # 10.1016

x = Fixed(0)
x.increment()               # adds the smallest step, 1/256, in place
print(x)                    # 0.00390625

print(Fixed.max(x, c))      # 10.1016
print(Fixed.min(x, c))      # 0.00390625
```

- Float rounding sends halves away from zero; NaN and infinity raise
  `ValueError`.
- Raw values wrap into the signed 32-bit range.
- `to_int()` truncates toward zero.
- Dividing by a zero `Fixed` raises `ZeroDivisionError`.
- Comparisons (`<`, `<=`, `>`, `>=`, `==`, `!=`) compare the stored integers.
- `Fixed.min` and `Fixed.max` return the second argument when both are equal.
- `Fixed` objects can change through `increment()`, `decrement()` and the
  `raw` setter, so they are not hashable.

## Points and the triangle test

```python
from fixed8.point import Point
from fixed8.bsp import bsp, triangle_area

a, b, c = Point(0, 0), Point(10, 0), Point(0, 10)

bsp(a, b, c, Point(1, 1))    # True  - strictly inside
bsp(a, b, c, Point(5, 0))    # False - on an edge
bsp(a, b, c, Point(0, 0))    # False - on a vertex
bsp(a, b, c, Point(10, 10))  # False - outside

triangle_area(a, b, c)       # 50.0
```

A `Point` takes ints, floats or `Fixed` values; its `x` and `y` properties
return copies, and the point itself cannot be changed. Points on an edge or
a vertex count as outside the triangle.

## Command line

```
fixed8 [raw | convert | arithmetic | bsp]
```

prints one demonstration; with no argument it runs `bsp`.

- `raw` — copying numbers and reading their raw values
- `convert` — conversions between floats, integers and fixed point
- `arithmetic` — multiplication, increments, and min/max
- `bsp` — a series of point-in-triangle tests against the triangle
  (0,0), (10,0), (0,10), printing `1` for inside and `0` otherwise