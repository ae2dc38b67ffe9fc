"""Deterministic random sources for tests."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

_U64_MASK = (1 << 64) - 1
_U32_MASK = (1 << 32) - 1
_BIT_31 = 1 << 31


class AlwaysTrueRng:
    """A stepping generator whose every value has bit 31 set.

    Booleans drawn from it are therefore always ``True``.
    """

    def __init__(self, initial: int = _BIT_31, increment: int = _BIT_31 + 1) -> None:
        self._value = initial & _U64_MASK
        self._increment = increment & _U64_MASK

    def _step(self) -> int:
        current = self._value
        self._value = (current + self._increment) & _U64_MASK
        return current

    def next_u64(self) -> int:
        """Return the next 64-bit value, skipping ahead so bit 31 is set."""
        value = self._step()
        if not value & _BIT_31:
            self._value = value | _BIT_31
            value = self._step()
        return value

    def next_u32(self) -> int:
        """Return the low 32 bits of the next 64-bit value."""
        return self.next_u64() & _U32_MASK

    def fill_bytes(self, size: int) -> bytes:
        """Return ``size`` bytes taken little-endian from successive values."""
        if size < 0:
            raise ValueError("size must not be negative")
        out = bytearray()
        while len(out) < size:
            left = size - len(out)
            if left > 4:
                chunk = self.next_u64().to_bytes(8, "little")
            else:
                chunk = self.next_u32().to_bytes(4, "little")
            out += chunk[:left]
        return bytes(out)

    def next_bool(self) -> bool:
        """Draw a boolean; always ``True`` for this generator."""
        return random_bool(self)

    def bools(self) -> Iterator[bool]:
        """Yield booleans without end."""
        while True:
            yield self.next_bool()

    def u64s(self) -> Iterator[int]:
        """Yield 64-bit values without end."""
        while True:
            yield self.next_u64()


def random_bool(rng: Any) -> bool:
    """Draw a boolean from bit 31 of a 32-bit draw.

    ``rng`` is either an object with ``next_u32`` or a :class:`random.Random`.
    """
    if hasattr(rng, "next_u32"):
        draw = rng.next_u32() & _U32_MASK
    else:
        draw = rng.getrandbits(32)
    return bool(draw & _BIT_31)