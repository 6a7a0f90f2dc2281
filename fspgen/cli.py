"""Command line entry point.

Usage::

    fspgen STRATEGY JOBS MACHINES SEED [-key=value ...] [--output FILE]
           [--json FILE] [--plot FILE] [--log-level LEVEL]
    fspgen --config generator.yaml
    fspgen --bounds ta20_5.txt [--instance-number N]

A seed of 0 seeds the generator from the clock.  Optional ``-key=value``
parameters: durationLB, durationUB, distHalfWidthLB, distHalfWidthUB,
alpha, durationNoise.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import Sequence

import yaml

from .bounds import compute_lower_bounds
from .config import config_from_mapping, configure_logging, load_config
from .errors import FlowShopGenError, InvalidConfig
from .generators import STRATEGIES
from .options import config_from_options, resolve_seed, store_optional_parameters
from .parser import parse_taillard_file
from .pipeline import run
from .visualization import save_duration_heatmap
from .writer import format_lower_bounds, instance_to_dict, render_report, save_json

logger = logging.getLogger("fspgen")


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fspgen",
        description="Permutation flow shop instance generator with lower bounds",
        epilog="Strategies: " + ", ".join(STRATEGIES),
    )
    parser.add_argument("strategy", nargs="?", help="generation strategy")
    parser.add_argument("jobs", nargs="?", type=int, help="number of jobs")
    parser.add_argument("machines", nargs="?", type=int, help="number of machines")
    parser.add_argument("seed", nargs="?", type=int, help="random seed (0 = clock)")
    parser.add_argument("--config", help="YAML file with a 'generator' section")
    parser.add_argument("--bounds", metavar="FILE", help="compute bounds of a Taillard file")
    parser.add_argument("--instance-number", type=int, default=0)
    parser.add_argument("--output", help="write the text report here instead of stdout")
    parser.add_argument("--json", dest="json_path", help="also save the instance as JSON")
    parser.add_argument("--plot", help="also save a duration heat-map (PNG)")
    parser.add_argument("--log-level", default=None)
    return parser


def _emit(text: str, output: str | None) -> None:
    if output:
        directory = os.path.dirname(output)
        if directory:
            os.makedirs(directory, exist_ok=True)
        with open(output, "w", encoding="utf-8") as f:
            f.write(text)
        logger.info("Saved report to %s", output)
    else:
        sys.stdout.write(text)


def run_bounds(path: str, instance_number: int, output: str | None) -> None:
    data = parse_taillard_file(path, instance_number)
    report = compute_lower_bounds(data["instance"])
    logger.info(
        "Instance %s #%d jobs=%d machines=%d",
        path,
        instance_number,
        data["info"]["jobs"],
        data["info"]["machines"],
    )
    _emit(format_lower_bounds(report), output)


def run_generate(args: argparse.Namespace, extras: list[str], file_cfg: dict) -> None:
    if args.config:
        section = file_cfg.get("generator")
        if not isinstance(section, dict):
            raise InvalidConfig(f"{args.config} has no 'generator' section")
        config, seed = config_from_mapping(section)
        strategy = str(section["strategy"])
    else:
        strategy = args.strategy
        options = store_optional_parameters(extras)
        config = config_from_options(strategy, args.jobs, args.machines, options)
        seed = args.seed

    output_cfg = file_cfg.get("output") or {}
    output = args.output or output_cfg.get("file")
    json_path = args.json_path or output_cfg.get("json")
    plot_path = args.plot or output_cfg.get("plot")

    seed = resolve_seed(seed)
    instance, report = run(config, seed)
    logger.info(
        "Generated %s instance jobs=%d machines=%d lower_bound=%d",
        strategy,
        instance.num_jobs,
        instance.num_machines,
        report.lower_bound,
    )
    _emit(render_report(instance, report, seed), output)
    if json_path:
        save_json(instance_to_dict(instance, report, seed, strategy), json_path)
        logger.info("Saved instance JSON to %s", json_path)
    if plot_path:
        save_duration_heatmap(instance, plot_path, title=f"{strategy} seed={seed}")
        logger.info("Saved duration heat-map to %s", plot_path)


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_arg_parser()
    args, extras = parser.parse_known_args(argv)

    if not args.config and not args.bounds and args.seed is None:
        parser.error("STRATEGY JOBS MACHINES SEED are required unless --config or --bounds is given")

    file_cfg: dict = {}
    if args.config:
        try:
            file_cfg = load_config(args.config)
        except (OSError, yaml.YAMLError, InvalidConfig) as e:
            configure_logging(args.log_level or "INFO")
            logger.error("Cannot read config %s: %s", args.config, e)
            return 1
    configure_logging(args.log_level or file_cfg.get("log_level") or "INFO")

    try:
        if args.bounds:
            run_bounds(args.bounds, args.instance_number, args.output)
        else:
            run_generate(args, extras, file_cfg)
    except FlowShopGenError as e:
        logger.error("%s", e)
        logger.error("Failed to generate problem instance")
        return 1
    except (OSError, ValueError, IndexError) as e:
        logger.error("%s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
