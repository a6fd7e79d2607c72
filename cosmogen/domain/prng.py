"""Deterministic seedable PRNG (xoshiro128**) with labelled forking.

Every random decision in the generator flows through ``Generator``. A
generator is seeded once from the caller's seed and never drawn from
directly by the pipeline; instead each subsystem takes its own stream via
``fork(label)``. Forking reads the parent's state without advancing it, so
the stream a label yields depends only on the parent state and the label.

Two equivalent surfaces are provided:

- pure functions over an immutable ``GeneratorState``
  (``seed_state``, ``draw_u32``, ``fork_state``), and
- the ``Generator`` object, which holds a mutable copy of that state and
  layers the derived distributions on top.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass
from typing import TypeVar

from cosmogen.config.constants import MAX_REPEAT_COUNT, POISSON_NORMAL_THRESHOLD

T = TypeVar("T")

MASK32 = 0xFFFFFFFF
FNV_OFFSET_BASIS = 2166136261
FNV_PRIME = 16777619
GOLDEN_GAMMA = 0x9E3779B9
TWO_POW_32 = 1 << 32
TWO_POW_53 = float(1 << 53)
MIN_UNIFORM = 1.0 / TWO_POW_53
"""Smallest positive value substituted for a zero uniform before ``log``."""


def _imul(a: int, b: int) -> int:
    return (a * b) & MASK32


def _rotl(x: int, k: int) -> int:
    return ((x << k) | (x >> (32 - k))) & MASK32


def hash_label(text: str) -> int:
    """32-bit FNV-1a over the UTF-16 code units of ``text``."""
    h = FNV_OFFSET_BASIS
    data = text.encode("utf-16-le")
    for i in range(0, len(data), 2):
        h = _imul(h ^ (data[i] | (data[i + 1] << 8)), FNV_PRIME)
    return h


def seed_word(seed: int | float | str) -> int:
    """Reduce a text or numeric seed to one unsigned 32-bit word."""
    if isinstance(seed, str):
        return hash_label(seed)
    if isinstance(seed, bool):
        raise TypeError("seed must be a string or a number, not bool")
    if isinstance(seed, float):
        if not math.isfinite(seed):
            return 0
        return math.trunc(seed) & MASK32
    return int(seed) & MASK32


# ---------------------------------------------------------------------------
# Pure-functional core
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class GeneratorState:
    """Four unsigned 32-bit words; never all zero."""

    s0: int
    s1: int
    s2: int
    s3: int

    @classmethod
    def from_words(cls, s0: int, s1: int, s2: int, s3: int) -> GeneratorState:
        s0, s1, s2, s3 = s0 & MASK32, s1 & MASK32, s2 & MASK32, s3 & MASK32
        if (s0 | s1 | s2 | s3) == 0:
            s0 = 1
        return cls(s0, s1, s2, s3)

    def words(self) -> tuple[int, int, int, int]:
        return (self.s0, self.s1, self.s2, self.s3)


def _step(s0: int, s1: int, s2: int, s3: int) -> tuple[int, int, int, int, int]:
    """One xoshiro128** step: returns (output, s0', s1', s2', s3')."""
    result = _imul(_rotl(_imul(s1, 5), 7), 9)
    t = (s1 << 9) & MASK32
    s2 ^= s0
    s3 ^= s1
    s1 ^= s2
    s0 ^= s3
    s2 ^= t
    s3 = _rotl(s3, 11)
    return result, s0, s1, s2, s3


def seed_state(seed: int | float | str) -> GeneratorState:
    """Initial state from a seed via four SplitMix32 outputs."""
    state = seed_word(seed)
    words: list[int] = []
    for _ in range(4):
        state = (state + GOLDEN_GAMMA) & MASK32
        z = state
        z = _imul(z ^ (z >> 16), 0x85EBCA6B)
        z = _imul(z ^ (z >> 13), 0xC2B2AE35)
        words.append(z ^ (z >> 16))
    return GeneratorState.from_words(*words)


def draw_u32(state: GeneratorState) -> tuple[int, GeneratorState]:
    """Next 32-bit output and the successor state."""
    result, s0, s1, s2, s3 = _step(*state.words())
    return result, GeneratorState.from_words(s0, s1, s2, s3)


def fork_state(state: GeneratorState, label: str) -> GeneratorState:
    """Child state derived from ``state`` and ``label``; ``state`` is unchanged."""
    h = hash_label(label)
    words = state.words()
    drawn: list[int] = []
    for _ in range(4):
        out, *rest = _step(*words)
        words = (rest[0], rest[1], rest[2], rest[3])
        drawn.append(out)
    return GeneratorState.from_words(
        drawn[0] ^ h,
        drawn[1] ^ _rotl(h, 8),
        drawn[2] ^ _rotl(h, 16),
        drawn[3] ^ _rotl(h, 24),
    )


# ---------------------------------------------------------------------------
# Generator object
# ---------------------------------------------------------------------------


class Generator:
    """Mutable xoshiro128** stream with derived distributions.

    Degenerate parameters never raise: they clamp to a safe boundary value
    (see the individual methods). Only ``choice`` and ``weighted`` reject
    input, because there is nothing sensible to return.
    """

    __slots__ = ("_s0", "_s1", "_s2", "_s3")

    def __init__(self, state: GeneratorState) -> None:
        self._s0, self._s1, self._s2, self._s3 = state.words()

    @classmethod
    def from_seed(cls, seed: int | float | str) -> Generator:
        return cls(seed_state(seed))

    @property
    def state(self) -> GeneratorState:
        """Snapshot of the current state."""
        return GeneratorState(self._s0, self._s1, self._s2, self._s3)

    def fork(self, label: str) -> Generator:
        """Independent child stream; does not advance this generator."""
        return Generator(fork_state(self.state, label))

    # -- raw draws ----------------------------------------------------------

    def next_u32(self) -> int:
        result, self._s0, self._s1, self._s2, self._s3 = _step(
            self._s0, self._s1, self._s2, self._s3
        )
        return result

    def float01(self) -> float:
        """Uniform float in [0, 1) with 53 bits of resolution."""
        a = self.next_u32() >> 5
        b = self.next_u32() >> 6
        return (a * 67108864.0 + b) / TWO_POW_53

    def integer(self, lo: float, hi: float) -> int:
        """Uniform integer in [lo, hi], both ends inclusive and floored."""
        lo_i = math.floor(lo)
        hi_i = math.floor(hi)
        if lo_i > hi_i:
            lo_i, hi_i = hi_i, lo_i
        span = hi_i - lo_i + 1
        if span > TWO_POW_32:
            return lo_i + math.floor(self.float01() * span)
        limit = (TWO_POW_32 // span) * span
        value = self.next_u32()
        while value >= limit:
            value = self.next_u32()
        return lo_i + value % span

    def chance(self, p: float = 0.5) -> bool:
        return self.float01() < p

    def choice(self, items: Sequence[T]) -> T:
        if not items:
            raise ValueError("cannot choose from an empty sequence")
        return items[self.integer(0, len(items) - 1)]

    def uniform(self, lo: float, hi: float) -> float:
        return lo + self.float01() * (hi - lo)

    # -- derived distributions ---------------------------------------------

    def weighted(self, items: Sequence[T], weights: Sequence[float]) -> T:
        """Pick one item with probability proportional to its weight.

        A non-positive total yields the first item.
        """
        if not items:
            raise ValueError("cannot choose from an empty sequence")
        if len(items) != len(weights):
            raise ValueError("items and weights must have the same length")
        remaining = self.float01() * sum(weights)
        for item, weight in zip(items, weights, strict=True):
            remaining -= weight
            if remaining <= 0:
                return item
        return items[-1]

    def geometric(self, p: float) -> int:
        """Failures before the first success with success probability ``p``.

        Returns 0 when ``p`` is outside (0, 1) or not finite.
        """
        if not math.isfinite(p) or p <= 0.0 or p >= 1.0:
            return 0
        u = self.float01() or MIN_UNIFORM
        return min(math.floor(math.log(u) / math.log(1.0 - p)), MAX_REPEAT_COUNT)

    def poisson(self, lam: float) -> int:
        """Poisson count; 0 (without drawing) for non-positive or non-finite means."""
        if not math.isfinite(lam) or lam <= 0.0:
            return 0
        if lam >= POISSON_NORMAL_THRESHOLD:
            approx = round(self.normal(lam, math.sqrt(lam)))
            return min(max(approx, 0), MAX_REPEAT_COUNT)
        threshold = math.exp(-lam)
        count = 0
        product = self.float01()
        while product > threshold and count < MAX_REPEAT_COUNT:
            count += 1
            product *= self.float01()
        return count

    def normal(self, mu: float = 0.0, sigma: float = 1.0) -> float:
        """Box-Muller draw; always consumes exactly two uniforms."""
        u1 = self.float01() or MIN_UNIFORM
        u2 = self.float01()
        z = math.sqrt(-2.0 * math.log(u1)) * math.cos(2.0 * math.pi * u2)
        return mu + sigma * z

    def log_normal(self, mu: float = 0.0, sigma: float = 1.0) -> float:
        return math.exp(self.normal(mu, sigma))
