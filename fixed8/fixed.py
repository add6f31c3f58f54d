"""Signed fixed-point numbers with eight fractional bits."""

from __future__ import annotations

import math
import struct
from typing import Union

FRACTIONAL_BITS = 8
_SCALE = 1 << FRACTIONAL_BITS
_INT32_MASK = 0xFFFFFFFF
_INT32_SIGN = 0x80000000


def _to_float32(value: float) -> float:
    """Round a Python float to the nearest single-precision value."""
    return struct.unpack("<f", struct.pack("<f", value))[0]


def _wrap_int32(value: int) -> int:
    """Wrap an integer into the signed 32-bit range."""
    value &= _INT32_MASK
    return value - (1 << 32) if value & _INT32_SIGN else value


def _round_half_away(value: float) -> int:
    """Round to the nearest integer, halves away from zero."""
    if math.isnan(value) or math.isinf(value):
        raise ValueError(f"cannot represent {value!r} as a fixed-point number")
    whole = math.trunc(value)
    if abs(value - whole) >= 0.5:
        whole += 1 if value > 0 else -1
    return whole


class Fixed:
    """A 32-bit fixed-point number whose low eight bits hold the fraction.

    Integers are shifted into place, floats are scaled and rounded with
    halves going away from zero. Arithmetic goes through single-precision
    floats and rounds the result back to fixed point.
    """

    __slots__ = ("_raw",)

    def __init__(self, value: Union[int, float, "Fixed"] = 0) -> None:
        if isinstance(value, Fixed):
            raw = value._raw
        elif isinstance(value, int):
            raw = value << FRACTIONAL_BITS
        elif isinstance(value, float):
            raw = _round_half_away(_to_float32(value) * _SCALE)
        else:
            raise TypeError(
                f"Fixed expects an int, float or Fixed, not {type(value).__name__}"
            )
        self._raw = _wrap_int32(raw)

    @classmethod
    def from_raw(cls, raw: int) -> "Fixed":
        """Build a number directly from its raw bit pattern."""
        if not isinstance(raw, int):
            raise TypeError(f"raw bits must be an int, not {type(raw).__name__}")
        number = cls()
        number._raw = _wrap_int32(raw)
        return number

    @property
    def raw(self) -> int:
        """The underlying signed 32-bit representation."""
        return self._raw

    @raw.setter
    def raw(self, value: int) -> None:
        if not isinstance(value, int):
            raise TypeError(f"raw bits must be an int, not {type(value).__name__}")
        self._raw = _wrap_int32(value)

    def to_float(self) -> float:
        """The value as a single-precision float."""
        return _to_float32(self._raw / _SCALE)

    def to_int(self) -> int:
        """The integer part, truncated toward zero."""
        return int(self._raw / _SCALE) if self._raw < 0 else self._raw // _SCALE

    def increment(self) -> "Fixed":
        """Add the smallest representable step in place and return self."""
        self._raw = _wrap_int32(self._raw + 1)
        return self

    def decrement(self) -> "Fixed":
        """Subtract the smallest representable step in place and return self."""
        self._raw = _wrap_int32(self._raw - 1)
        return self

    @staticmethod
    def min(a: "Fixed", b: "Fixed") -> "Fixed":
        """Return the smaller of two numbers; ``b`` when they are equal."""
        return a if a < b else b

    @staticmethod
    def max(a: "Fixed", b: "Fixed") -> "Fixed":
        """Return the larger of two numbers; ``b`` when they are equal."""
        return a if a > b else b

    def _combine(self, other: object, op) -> "Fixed":
        if not isinstance(other, Fixed):
            return NotImplemented
        return Fixed(_to_float32(op(self.to_float(), other.to_float())))

    def __add__(self, other: object) -> "Fixed":
        return self._combine(other, lambda x, y: x + y)

    def __sub__(self, other: object) -> "Fixed":
        return self._combine(other, lambda x, y: x - y)

    def __mul__(self, other: object) -> "Fixed":
        return self._combine(other, lambda x, y: x * y)

    def __truediv__(self, other: object) -> "Fixed":
        if isinstance(other, Fixed) and other._raw == 0:
            raise ZeroDivisionError("fixed-point division by zero")
        return self._combine(other, lambda x, y: x / y)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Fixed):
            return NotImplemented
        return self._raw == other._raw

    def __lt__(self, other: "Fixed") -> bool:
        if not isinstance(other, Fixed):
            return NotImplemented
        return self._raw < other._raw

    def __le__(self, other: "Fixed") -> bool:
        if not isinstance(other, Fixed):
            return NotImplemented
        return self._raw <= other._raw

    def __gt__(self, other: "Fixed") -> bool:
        if not isinstance(other, Fixed):
            return NotImplemented
        return self._raw > other._raw

    def __ge__(self, other: "Fixed") -> bool:
        if not isinstance(other, Fixed):
            return NotImplemented
        return self._raw >= other._raw

    __hash__ = None  # mutable through increment/decrement

    def __float__(self) -> float:
        return self.to_float()

    def __int__(self) -> int:
        return self.to_int()

    def __copy__(self) -> "Fixed":
        return Fixed.from_raw(self._raw)

    def __str__(self) -> str:
        return format(self.to_float(), "g")

    def __repr__(self) -> str:
        return f"Fixed.from_raw({self._raw})"