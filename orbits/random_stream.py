"""
Deterministic random stream seeded by an arbitrary string.

The sequence must be identical on every implementation for a given seed, so all the
arithmetic below emulates 32-bit signed integers explicitly.
"""

import math
from decimal import ROUND_HALF_UP, Decimal
from typing import Sequence, TypeVar

from orbits.constants import STREAM_INCREMENT, UINT32_MAX

T = TypeVar("T")


def _to_int32(value: int) -> int:
    value &= UINT32_MAX
    return value - (1 << 32) if value & 0x80000000 else value


def _utf16_code_units(text: str) -> list[int]:
    data = text.encode("utf-16-le", "surrogatepass")
    return [int.from_bytes(data[i : i + 2], "little") for i in range(0, len(data), 2)]


def fold_seed(seed: str) -> int:
    """Folds the UTF-16 code units of the seed into the initial 32-bit state."""
    state = 0
    for code in _utf16_code_units(seed):
        state = _to_int32(state * 31 + code)
    return state


def advance(state: int) -> tuple[int, float]:
    """
    Applies one step to the given state.

    Returns:
        The new state and the value in [0, 1] derived from it.
    """
    state = _to_int32(state ^ (state << 13))
    state = _to_int32(state * 5 + STREAM_INCREMENT)
    return state, (state & UINT32_MAX) / UINT32_MAX


def round_half_up(value: float, digits: int) -> float:
    """Rounds the exact binary value of a float, ties away from zero (JavaScript toFixed)."""
    quantum = Decimal(1).scaleb(-digits)
    return float(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))


class SeededRandomStream:
    def __init__(self, state: int = 0):
        self._state = _to_int32(state)

    @classmethod
    def from_seed(cls, seed: str) -> "SeededRandomStream":
        return cls(fold_seed(seed))

    @property
    def state(self) -> int:
        return self._state

    def next(self) -> float:
        self._state, value = advance(self._state)
        return value

    def uniform(self, low: float, high: float, digits: int) -> float:
        return round_half_up(low + self.next() * (high - low), digits)

    def integer(self, low: int, high: int) -> int:
        """Integer in [low, high). A draw of exactly 1.0 is clamped to high - 1."""
        return min(low + math.floor(self.next() * (high - low)), high - 1)

    def index(self, size: int) -> int:
        return self.integer(0, size)

    def choice(self, items: Sequence[T]) -> T:
        return items[self.index(len(items))]

    def take(self, n: int) -> list[float]:
        return [self.next() for _ in range(n)]


def create_stream(seed: str) -> SeededRandomStream:
    return SeededRandomStream.from_seed(seed)
