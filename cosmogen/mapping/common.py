"""Small value types shared by the subsystem mappers."""

from __future__ import annotations

from typing import NamedTuple

from cosmogen.domain.prng import Generator


class Span(NamedTuple):
    """Closed float interval ``[lo, hi]`` sampled uniformly."""

    lo: float
    hi: float

    def sample(self, rng: Generator) -> float:
        return rng.uniform(self.lo, self.hi)

    def at(self, t: float) -> float:
        return lerp(self.lo, self.hi, t)

    def scaled(self, factor: float) -> Span:
        return Span(self.lo * factor, self.hi * factor)


class CountRange(NamedTuple):
    """Closed integer interval ``[lo, hi]``."""

    lo: int
    hi: int

    def sample(self, rng: Generator) -> int:
        return rng.integer(self.lo, self.hi)


def clamp(value: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, value))


def lerp(a: float, b: float, t: float) -> float:
    return a + (b - a) * t
