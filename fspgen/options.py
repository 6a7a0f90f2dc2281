"""``-key=value`` option store and conversion into a ``GenerationConfig``."""

from __future__ import annotations

import logging
import time
from typing import Any, Iterable, Mapping

from .errors import InvalidConfig, InvalidSeed
from .generators import generator_for
from .models import DEFAULT_DURATION_LB, DEFAULT_DURATION_UB, GenerationConfig

logger = logging.getLogger("fspgen.options")

# option key -> generator keyword argument
INT_OPTIONS = {
    "distHalfWidthLB": "dist_half_width_lb",
    "distHalfWidthUB": "dist_half_width_ub",
    "durationNoise": "duration_noise",
}
FLOAT_OPTIONS = {"alpha": "alpha"}


def store_optional_parameters(tokens: Iterable[str]) -> dict[str, str]:
    """Collect ``-key=value`` tokens into a dictionary.

    A single leading dash is optional.  Tokens without ``=`` are reported and
    skipped; later occurrences of a key override earlier ones.
    """
    options: dict[str, str] = {}
    for token in tokens:
        key, sep, value = token.partition("=")
        if not sep:
            logger.warning("Invalid option: %s (ignored)", token)
            continue
        if key.startswith("-"):
            key = key[1:]
        options[key] = value
    return options


def option_as_int(options: Mapping[str, Any], key: str, default: int) -> int:
    if key not in options:
        return default
    value = options[key]
    if isinstance(value, bool):
        raise InvalidConfig(f"Option {key} expects an integer, got {value!r}")
    if isinstance(value, int):
        return value
    try:
        return int(str(value).strip())
    except ValueError:
        raise InvalidConfig(f"Option {key} expects an integer, got {value!r}") from None


def option_as_float(options: Mapping[str, Any], key: str, default: float) -> float:
    if key not in options:
        return default
    value = options[key]
    if isinstance(value, bool):
        raise InvalidConfig(f"Option {key} expects a number, got {value!r}")
    try:
        return float(value)
    except (TypeError, ValueError):
        raise InvalidConfig(f"Option {key} expects a number, got {value!r}") from None


def config_from_options(
    strategy: str,
    num_jobs: int,
    num_machines: int,
    options: Mapping[str, Any] | None = None,
) -> GenerationConfig:
    """Build a config from a strategy key, dimensions and an option dict.

    Missing keys fall back to the defaults (durations 1..99, half-widths
    1..5, alpha 0.5, no noise).  Keys the chosen strategy does not use are
    ignored.

    Raises:
        UnknownStrategy: If ``strategy`` is not registered.
        InvalidConfig: If an option value cannot be converted.
    """
    options = options or {}
    params: dict[str, Any] = {}
    for key, name in INT_OPTIONS.items():
        if key in options:
            params[name] = option_as_int(options, key, 0)
    for key, name in FLOAT_OPTIONS.items():
        if key in options:
            params[name] = option_as_float(options, key, 0.0)
    return GenerationConfig(
        num_jobs=num_jobs,
        num_machines=num_machines,
        generator=generator_for(strategy, **params),
        duration_lb=option_as_int(options, "durationLB", DEFAULT_DURATION_LB),
        duration_ub=option_as_int(options, "durationUB", DEFAULT_DURATION_UB),
    )


def resolve_seed(seed: int) -> int:
    """Map the command-line seed onto a generator seed; 0 means "use the clock"."""
    if seed < 0:
        raise InvalidSeed(f"Illegal (negative) random seed specified: {seed}")
    if seed == 0:
        seed = int(time.time())
        logger.info("Seeding from the clock: %d", seed)
    return seed
