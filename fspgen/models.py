"""Core data structures for generated flow shop instances.

This module defines:
    Instance         -- immutable machine x job duration matrix.
    GenerationConfig -- dimensions, duration interval and selected generator.
    LowerBoundReport -- analytic bounds computed from a finished instance.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from .errors import DimensionOutOfRange, InvalidConfig

if TYPE_CHECKING:  # pragma: no cover
    from .generators import DurationGenerator

MAX_JOBS = 500
MAX_MACHINES = 100
DEFAULT_DURATION_LB = 1
DEFAULT_DURATION_UB = 99

Matrix = list[list[int]]


@dataclass(frozen=True)
class Instance:
    """Immutable permutation flow shop instance.

    Attributes:
        durations: Nested tuple: durations[m][j] -> processing time of job j
            on machine m.
    """

    durations: tuple[tuple[int, ...], ...]

    @classmethod
    def from_matrix(cls, matrix: Matrix) -> "Instance":
        return cls(tuple(tuple(row) for row in matrix))

    @property
    def num_machines(self) -> int:
        return len(self.durations)

    @property
    def num_jobs(self) -> int:
        return len(self.durations[0]) if self.durations else 0

    def job_durations(self, job: int) -> list[int]:
        return [row[job] for row in self.durations]

    def job_total(self, job: int) -> int:
        return sum(row[job] for row in self.durations)

    def to_lists(self) -> Matrix:
        return [list(row) for row in self.durations]


@dataclass(frozen=True)
class GenerationConfig:
    """Everything a generation run needs apart from the seed.

    Fields:
        num_jobs: Number of jobs (columns), 1..MAX_JOBS.
        num_machines: Number of machines (rows), 1..MAX_MACHINES.
        generator: Selected strategy together with its own parameters.
        duration_lb: Smallest allowed duration after correction.
        duration_ub: Largest allowed duration after correction.
    """

    num_jobs: int
    num_machines: int
    generator: "DurationGenerator"
    duration_lb: int = DEFAULT_DURATION_LB
    duration_ub: int = DEFAULT_DURATION_UB

    @property
    def interval_width(self) -> int:
        return self.duration_ub - self.duration_lb


@dataclass(frozen=True)
class LowerBoundReport:
    """Taillard and proportionate bounds plus a trivial upper bound.

    Fields:
        taillard: Machine-based bound from Taillard (1993).
        proportionate: Job-based bound from the proportionate relaxation.
        identity_makespan: Makespan of the sequence 0, 1, ..., n-1.
    """

    taillard: int
    proportionate: int
    identity_makespan: int

    @property
    def lower_bound(self) -> int:
        return max(self.taillard, self.proportionate)


def validate_dimensions(num_jobs: int, num_machines: int) -> None:
    if num_jobs <= 0:
        raise DimensionOutOfRange(f"Illegal number of jobs specified: {num_jobs}")
    if num_machines <= 0:
        raise DimensionOutOfRange(f"Illegal number of machines specified: {num_machines}")
    if num_jobs > MAX_JOBS:
        raise DimensionOutOfRange(f"Too many jobs specified, maximum is {MAX_JOBS}: {num_jobs}")
    if num_machines > MAX_MACHINES:
        raise DimensionOutOfRange(
            f"Too many machines specified, maximum is {MAX_MACHINES}: {num_machines}"
        )


def validate_config(config: GenerationConfig) -> None:
    """Check dimensions, the duration interval and the generator parameters.

    Raises:
        DimensionOutOfRange: If jobs or machines are out of range.
        InvalidConfig: If the duration bounds or generator parameters are
            malformed.
    """
    validate_dimensions(config.num_jobs, config.num_machines)
    if config.duration_lb <= 0:
        raise InvalidConfig(f"Duration lower bound must be positive: {config.duration_lb}")
    if config.duration_lb > config.duration_ub:
        raise InvalidConfig(
            "Illegal bounds on the operation durations: "
            f"lower={config.duration_lb} upper={config.duration_ub}"
        )
    config.generator.validate(config)
