"""Lehmer pseudo-random generator used by every generation strategy.

The recurrence and the polar Box-Muller sampler follow Taillard's benchmark
paper and Numerical Recipes, so a given seed reproduces the same instance
bit for bit.  State lives in a ``LehmerRNG`` object instead of a module
global, which lets independent generation runs coexist.
"""

from __future__ import annotations

import math

from .errors import InvalidSeed

MODULUS = 2147483647
MULTIPLIER = 16807
QUOTIENT = 127773  # MODULUS // MULTIPLIER
REMAINDER = 2836  # MODULUS % MULTIPLIER


def round_half_away(value: float) -> int:
    """Round to the nearest integer, ties away from zero (2.5 -> 3, -2.5 -> -3)."""
    if value < 0:
        return -math.floor(-value + 0.5)
    return math.floor(value + 0.5)


class LehmerRNG:
    """Minimal standard generator with a cached spare normal deviate."""

    def __init__(self, seed: int) -> None:
        self.seed = 0
        self._spare: float | None = None
        self.set_seed(seed)

    def set_seed(self, seed: int) -> None:
        if not isinstance(seed, int) or isinstance(seed, bool):
            raise InvalidSeed(f"Seed must be an integer, got {seed!r}")
        if seed <= 0 or seed >= MODULUS:
            raise InvalidSeed(f"Seed must lie in [1, {MODULUS - 1}], got {seed}")
        self.seed = seed
        self._spare = None

    def uniform01(self) -> float:
        """Return a value in [0.0, 1.0) and advance the state."""
        k = self.seed // QUOTIENT
        self.seed = MULTIPLIER * (self.seed % QUOTIENT) - k * REMAINDER
        if self.seed < 0:
            self.seed += MODULUS
        return self.seed / MODULUS

    def uniform_int(self, low: int, high: int) -> int:
        """Return an integer in [low, high] from a single uniform draw."""
        if low > high:
            raise ValueError(f"uniform_int requires low <= high, got {low} > {high}")
        u = self.uniform01()
        return low + math.floor(u * float(high - low + 1))

    def normal(self, mean: float, std_dev: float) -> float:
        """Polar Box-Muller sample; consecutive calls share one accepted pair.

        The first call of a pair returns the deviate built from ``v2`` and
        caches the one built from ``v1``; the second call scales the cached
        deviate with its own ``mean`` and ``std_dev``.
        """
        if self._spare is not None:
            spare, self._spare = self._spare, None
            return spare * std_dev + mean
        while True:
            v1 = 2.0 * self.uniform01() - 1.0
            v2 = 2.0 * self.uniform01() - 1.0
            r = v1 * v1 + v2 * v2
            if 0.0 < r < 1.0:
                break
        fac = math.sqrt(-2.0 * math.log(r) / r)
        self._spare = v1 * fac
        return (v2 * fac) * std_dev + mean
