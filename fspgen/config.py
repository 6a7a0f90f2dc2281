"""YAML configuration file support and logging setup."""

from __future__ import annotations

import logging
from typing import Any, Mapping

import yaml

from .errors import InvalidConfig
from .models import GenerationConfig
from .options import config_from_options, option_as_int

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def load_config(config_file: str) -> dict:
    """Load configuration from YAML file."""
    with open(config_file, "r", encoding="utf-8") as file:
        config = yaml.safe_load(file)
    if config is None:
        return {}
    if not isinstance(config, dict):
        raise InvalidConfig(f"Top level of {config_file} must be a mapping")
    return config


def config_from_mapping(section: Mapping[str, Any]) -> tuple[GenerationConfig, int]:
    """Turn the ``generator`` section of a config file into ``(config, seed)``.

    Expected keys: ``strategy``, ``jobs``, ``machines``, optional ``seed``
    (default 0, i.e. clock) and optional ``options`` using the same names as
    the command line (``durationLB``, ``alpha`` ...).
    """
    missing = [key for key in ("strategy", "jobs", "machines") if section.get(key) is None]
    if missing:
        raise InvalidConfig(f"generator section is missing: {', '.join(missing)}")
    options = section.get("options") or {}
    if not isinstance(options, dict):
        raise InvalidConfig("generator.options must be a mapping")
    jobs = option_as_int(section, "jobs", 0)
    machines = option_as_int(section, "machines", 0)
    seed = 0 if section.get("seed") is None else option_as_int(section, "seed", 0)
    config = config_from_options(str(section["strategy"]), jobs, machines, options)
    return config, seed


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format=LOG_FORMAT,
    )
