"""Seeded pseudo-random stream used to place identicon shapes.

Park-Miller "minimal standard" generator: multiplier 16807, modulus
2^31 - 1. Fast and reproducible, not suitable for anything secret.
"""
import struct

MODULUS = 2147483647
MULTIPLIER = 16807

# largest float32 below 1.0
_FLOAT32_BELOW_ONE = 1.0 - 2.0 ** -24


def _float32(value: float) -> float:
    return struct.unpack("f", struct.pack("f", value))[0]


class SeededGenerator:
    def __init__(self, seed: int):
        if isinstance(seed, bool) or not isinstance(seed, int):
            raise TypeError(f"seed must be an int, got {type(seed).__name__}")
        if seed < 0:
            raise ValueError(f"seed must be non-negative, got {seed}")
        self._initial = seed % MODULUS
        self._current = self._initial

    @property
    def seed(self) -> int:
        return self._initial

    def next(self) -> int:
        """Advance the stream and return the new state in [1, MODULUS - 1]."""
        self._current = (self._current * MULTIPLIER) % MODULUS
        return self._current

    def next_float(self) -> float:
        """Return a single-precision value in [0, 1).

        Both operands are narrowed to float32 before dividing, so the modulus
        becomes 2^31 and draws line up with other float32 implementations.
        States within 64 of the modulus round up to 1.0 and are clamped just
        below it. A seed that reduces to 0 is a fixed point of the recurrence;
        it yields 0.0 forever instead of going negative.
        """
        numerator = _float32(max(self.next() - 1, 0))
        value = _float32(numerator / _float32(MODULUS))
        return min(value, _FLOAT32_BELOW_ONE)

    def reset(self):
        self._current = self._initial
