"""Duration generation strategies.

Every strategy is a small frozen dataclass carrying its own parameters and
exposing ``validate`` and ``generate``.  ``generate`` returns the raw
machine x job matrix; clamping into the configured interval is done by
:mod:`fspgen.correction`.  The order of random draws is fixed per strategy
(machines outer, jobs inner) because instances must be reproducible from a
seed.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, fields
from typing import ClassVar

from .errors import InvalidConfig, UnknownStrategy
from .models import GenerationConfig, Matrix
from .rng import LehmerRNG, round_half_away


@dataclass(frozen=True)
class Window:
    """Latent sampling window centred on ``mean``."""

    mean: int
    half_width: int

    @property
    def lower(self) -> int:
        return self.mean - self.half_width

    @property
    def upper(self) -> int:
        return self.mean + self.half_width


class DurationGenerator:
    """Common interface of the generation strategies."""

    name: ClassVar[str] = ""

    def validate(self, config: GenerationConfig) -> None:
        """Raise ``InvalidConfig`` if the strategy parameters are malformed."""

    def generate(self, config: GenerationConfig, rng: LehmerRNG) -> Matrix:
        raise NotImplementedError


@dataclass(frozen=True)
class TaillardGenerator(DurationGenerator):
    """Independent uniform durations, as in Taillard's benchmarks."""

    name: ClassVar[str] = "taillard"

    def generate(self, config: GenerationConfig, rng: LehmerRNG) -> Matrix:
        return [
            [rng.uniform_int(config.duration_lb, config.duration_ub) for _ in range(config.num_jobs)]
            for _ in range(config.num_machines)
        ]


@dataclass(frozen=True)
class GaussianGenerator(DurationGenerator):
    """Normal durations whose +-3 sigma range covers the duration interval."""

    name: ClassVar[str] = "gaussian"

    @staticmethod
    def parameters(config: GenerationConfig) -> tuple[int, int]:
        """Return ``(mean, sigma)`` derived from the duration interval."""
        width = config.interval_width
        return width // 2 + config.duration_lb, width // 6

    def generate(self, config: GenerationConfig, rng: LehmerRNG) -> Matrix:
        mean, sigma = self.parameters(config)
        return [
            [round_half_away(rng.normal(mean, sigma)) for _ in range(config.num_jobs)]
            for _ in range(config.num_machines)
        ]


@dataclass(frozen=True)
class CorrelatedGenerator(DurationGenerator):
    """Shared parameters and window sampling of the correlated strategies.

    Fields:
        dist_half_width_lb: Smallest half-width of a latent window.
        dist_half_width_ub: Largest half-width of a latent window.
        alpha: Fraction of the duration interval over which window means
            may spread (0 puts every mean on the same point).
    """

    dist_half_width_lb: int = 1
    dist_half_width_ub: int = 5
    alpha: float = 0.5

    def validate(self, config: GenerationConfig) -> None:
        lb, ub = self.dist_half_width_lb, self.dist_half_width_ub
        if lb > ub or lb <= 0 or ub <= 0:
            raise InvalidConfig(
                f"Illegal bounds on the distribution half-widths: lower={lb} upper={ub}"
            )
        if not math.isfinite(self.alpha) or self.alpha < 0.0:
            raise InvalidConfig(f"An illegal value of alpha was specified: {self.alpha}")
        if self.effective_width(config) > config.interval_width:
            raise InvalidConfig(
                f"alpha={self.alpha} spreads window means beyond the duration interval "
                f"[{config.duration_lb}, {config.duration_ub}]"
            )

    def effective_width(self, config: GenerationConfig) -> int:
        return round_half_away(self.alpha * float(config.interval_width))

    def _sample_windows(self, config: GenerationConfig, rng: LehmerRNG, count: int) -> list[Window]:
        width = self.effective_width(config)
        start = rng.uniform_int(config.duration_lb, config.duration_ub - width)
        means = [rng.uniform_int(start, start + width) for _ in range(count)]
        half_widths = [
            rng.uniform_int(self.dist_half_width_lb, self.dist_half_width_ub) for _ in range(count)
        ]
        return [Window(m, hw) for m, hw in zip(means, half_widths)]


@dataclass(frozen=True)
class JobCorrelatedGenerator(CorrelatedGenerator):
    """Each job draws all of its machine durations from one window."""

    name: ClassVar[str] = "job-correlated"

    def sample_windows(self, config: GenerationConfig, rng: LehmerRNG) -> list[Window]:
        return self._sample_windows(config, rng, config.num_jobs)

    def generate(self, config: GenerationConfig, rng: LehmerRNG) -> Matrix:
        windows = self.sample_windows(config, rng)
        return [
            [rng.uniform_int(w.lower, w.upper) for w in windows]
            for _ in range(config.num_machines)
        ]


@dataclass(frozen=True)
class MachineCorrelatedGenerator(CorrelatedGenerator):
    """Each machine draws all of its job durations from one window."""

    name: ClassVar[str] = "machine-correlated"

    def sample_windows(self, config: GenerationConfig, rng: LehmerRNG) -> list[Window]:
        return self._sample_windows(config, rng, config.num_machines)

    def generate(self, config: GenerationConfig, rng: LehmerRNG) -> Matrix:
        windows = self.sample_windows(config, rng)
        return [
            [rng.uniform_int(w.lower, w.upper) for _ in range(config.num_jobs)]
            for w in windows
        ]


@dataclass(frozen=True)
class MixedCorrelatedGenerator(CorrelatedGenerator):
    """Machine windows plus a job rank shared by every machine.

    A job's rank in [0, 1) places it at the same relative position inside
    every machine's window (0 = window lower end).  ``duration_noise`` adds
    an independent integer perturbation in [-noise, noise] per operation.
    """

    name: ClassVar[str] = "mixed-correlated"

    duration_noise: int = 0

    def validate(self, config: GenerationConfig) -> None:
        super().validate(config)
        if self.duration_noise < 0:
            raise InvalidConfig(
                f"An illegal duration noise value was specified: {self.duration_noise}"
            )

    def sample_windows(self, config: GenerationConfig, rng: LehmerRNG) -> list[Window]:
        return self._sample_windows(config, rng, config.num_machines)

    def generate(self, config: GenerationConfig, rng: LehmerRNG) -> Matrix:
        windows = self.sample_windows(config, rng)
        ranks = [rng.uniform01() for _ in range(config.num_jobs)]
        matrix: Matrix = []
        for w in windows:
            row = []
            for rank in ranks:
                base = round_half_away(rank * float(w.upper - w.lower)) + w.lower
                # drawn even when the noise is zero
                row.append(base + rng.uniform_int(-self.duration_noise, self.duration_noise))
            matrix.append(row)
        return matrix


STRATEGIES: dict[str, type[DurationGenerator]] = {
    cls.name: cls
    for cls in (
        TaillardGenerator,
        GaussianGenerator,
        JobCorrelatedGenerator,
        MachineCorrelatedGenerator,
        MixedCorrelatedGenerator,
    )
}


def generator_for(strategy: str, **params) -> DurationGenerator:
    """Instantiate the strategy registered under ``strategy``.

    Args:
        strategy: One of the keys of ``STRATEGIES``.
        **params: Strategy parameters; names the strategy does not take are
            ignored so that one option dictionary can serve every strategy.

    Raises:
        UnknownStrategy: If the key is not registered.
    """
    try:
        cls = STRATEGIES[strategy]
    except KeyError:
        raise UnknownStrategy(f"An unknown problem type was specified: {strategy}") from None
    accepted = {f.name for f in fields(cls)}
    return cls(**{k: v for k, v in params.items() if k in accepted})
