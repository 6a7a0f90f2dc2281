"""Permutation flow shop benchmark generator.

Exports the data structures, the generation pipeline and the bound
estimators.
"""

from fspgen.bounds import (  # noqa: F401
    compute_lower_bounds,
    proportionate_lower_bound,
    taillard_lower_bound,
)
from fspgen.errors import (  # noqa: F401
    DimensionOutOfRange,
    FlowShopGenError,
    InvalidConfig,
    InvalidSeed,
    UnknownStrategy,
)
from fspgen.generators import STRATEGIES, generator_for  # noqa: F401
from fspgen.models import GenerationConfig, Instance, LowerBoundReport  # noqa: F401
from fspgen.pipeline import generate_instance, run  # noqa: F401
from fspgen.rng import LehmerRNG  # noqa: F401

__all__ = [
    "DimensionOutOfRange",
    "FlowShopGenError",
    "GenerationConfig",
    "Instance",
    "InvalidConfig",
    "InvalidSeed",
    "LehmerRNG",
    "LowerBoundReport",
    "STRATEGIES",
    "UnknownStrategy",
    "compute_lower_bounds",
    "generate_instance",
    "generator_for",
    "proportionate_lower_bound",
    "run",
    "taillard_lower_bound",
]
