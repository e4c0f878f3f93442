"""Random numbers drawn from a 32-bit entropy source.

Every value is derived from ``source``, a callable returning a uniformly
distributed unsigned 32-bit integer. Integer ranges in :meth:`Random.between`
use rejection sampling and carry no modulo bias. :meth:`Random.within_range`
and the helpers built on it reduce a single 32-bit draw modulo the span.
"""

from __future__ import annotations

import secrets
import struct
from collections.abc import MutableSequence, Sequence
from typing import Callable, Optional, TypeVar, Union

T = TypeVar("T")

U32_MAX = 0xFFFF_FFFF
U64_MAX = 0xFFFF_FFFF_FFFF_FFFF
USIZE_MAX = U64_MAX
I64_MIN = -(1 << 63)
I64_MAX = (1 << 63) - 1


def _signed(value: int, bits: int) -> int:
    value &= (1 << bits) - 1
    if value >= 1 << (bits - 1):
        value -= 1 << bits
    return value


def _to_f32(value: float) -> float:
    return struct.unpack("<f", struct.pack("<f", value))[0]


def _system_u32() -> int:
    return secrets.randbits(32)


class Random:
    """Random number helpers over a 32-bit entropy source."""

    def __init__(self, source: Optional[Callable[[], int]] = None) -> None:
        self._source = source if source is not None else _system_u32

    def u32(self) -> int:
        """Return a full-range unsigned 32-bit integer."""
        return self._source() & U32_MAX

    def u64(self) -> int:
        """Return a full-range unsigned 64-bit integer from two 32-bit draws (low word first)."""
        lower = self.u32()
        upper = self.u32()
        return (upper << 32) | lower

    def u8(self) -> int:
        """Return the low 8 bits of a 32-bit draw."""
        return self.u32() & 0xFF

    def u16(self) -> int:
        """Return the low 16 bits of a 32-bit draw."""
        return self.u32() & 0xFFFF

    def i8(self) -> int:
        """Return a signed 8-bit integer from a 32-bit draw."""
        return _signed(self.u32(), 8)

    def i16(self) -> int:
        """Return a signed 16-bit integer from a 32-bit draw."""
        return _signed(self.u32(), 16)

    def i32(self) -> int:
        """Return a full-range signed 32-bit integer."""
        return _signed(self.u32(), 32)

    def i64(self) -> int:
        """Return a full-range signed 64-bit integer."""
        return _signed(self.u64(), 64)

    def f32(self) -> float:
        """Return a single-precision value in [0.0, 1.0], both ends included."""
        numerator = _to_f32(float(self.u64()))
        denominator = _to_f32(float(U64_MAX))
        return _to_f32(numerator / denominator)

    def f64(self) -> float:
        """Return a double-precision value in [0.0, 1.0], both ends included."""
        return float(self.u64()) / float(U64_MAX)

    def within_range(self, start: int = 0, stop: Optional[int] = None) -> int:
        """Return an integer in the half-open range [start, stop).

        ``stop`` of None means unbounded (the largest machine word). An empty
        or inverted range yields ``start``.
        """
        if stop is None:
            stop = USIZE_MAX
        span = max(stop - start, 0)
        if span == 0:
            return start
        return start + self.u32() % span

    def between(self, lower: Union[int, float], upper: Union[int, float]) -> Union[int, float]:
        """Return a value ``x`` with ``lower <= x <= upper``.

        Integers are drawn without bias by rejection sampling and must lie in
        the 64-bit signed or unsigned domain; floats are interpolated with
        :meth:`f64`.
        """
        if isinstance(lower, bool) or isinstance(upper, bool):
            raise TypeError("between() does not accept booleans")
        if isinstance(lower, float) or isinstance(upper, float):
            lf, uf = float(lower), float(upper)
            r = self.f64()
            return lf + r * (uf - lf)
        if not (isinstance(lower, int) and isinstance(upper, int)):
            raise TypeError(
                f"between() needs numbers, got {type(lower).__name__} and {type(upper).__name__}"
            )
        return self._between_ints(lower, upper)

    def _between_ints(self, lower: int, upper: int) -> int:
        if lower < I64_MIN or lower > U64_MAX:
            raise ValueError(f"between: invalid lower bound {lower}")
        if upper < I64_MIN or upper > U64_MAX:
            raise ValueError(f"between: invalid upper bound {upper}")
        if lower > upper:
            raise ValueError("between: lower > upper")
        if lower == upper:
            return lower
        if lower == I64_MIN and upper == I64_MAX:
            return self.i64()
        if lower == 0 and upper == U64_MAX:
            return self.u64()
        span = upper - lower + 1
        if span > U64_MAX:
            raise ValueError(f"between: range {lower}..={upper} is too wide")
        threshold = U64_MAX - (U64_MAX % span)
        while True:
            r = self.u64()
            if r < threshold:
                return lower + r % span

    def bool(self) -> bool:
        """Return True or False with equal probability."""
        return (self.u32() & 1) == 1

    def shuffle(self, items: MutableSequence[T]) -> None:
        """Shuffle ``items`` in place, swapping each position from the end with a random one."""
        length = len(items)
        for i in reversed(range(1, length)):
            j = self.within_range(0, length)
            items[i], items[j] = items[j], items[i]

    def pick(self, items: Sequence[T]) -> Optional[T]:
        """Return a random element of ``items``, or None if it is empty."""
        if not items:
            return None
        return items[self.within_range(0, len(items))]