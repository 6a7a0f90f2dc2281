"""Plain-text and JSON rendering of an instance and its bound report.

The text layout matches the classic generator output: a ``jobs machines``
header, then one line per job listing ``machine duration`` pairs, then the
bound lines and the seed.
"""

from __future__ import annotations

import json
import os

from .models import Instance, LowerBoundReport


def format_problem(instance: Instance) -> str:
    lines = ["", f"{instance.num_jobs:3d} {instance.num_machines:3d}", ""]
    for j in range(instance.num_jobs):
        lines.append(
            "".join(f"{i:3d} {d:3d} " for i, d in enumerate(instance.job_durations(j)))
        )
    lines.append("")
    return "\n".join(lines) + "\n"


def format_lower_bounds(report: LowerBoundReport) -> str:
    return (
        f"Taillard LB      : {report.taillard}\n"
        f"Proportionate LB : {report.proportionate}\n"
        f"Lower bound: {report.lower_bound}\n"
    )


def render_report(instance: Instance, report: LowerBoundReport, seed: int) -> str:
    return (
        format_problem(instance)
        + format_lower_bounds(report)
        + f"\nRandom seed: {seed}\n"
    )


def instance_to_dict(
    instance: Instance,
    report: LowerBoundReport,
    seed: int,
    strategy: str,
) -> dict:
    return {
        "info": {
            "jobs": instance.num_jobs,
            "machines": instance.num_machines,
            "seed": seed,
            "generator": strategy,
        },
        "processing_times": instance.to_lists(),
        "bounds": {
            "taillard": report.taillard,
            "proportionate": report.proportionate,
            "lower_bound": report.lower_bound,
            "identity_makespan": report.identity_makespan,
        },
    }


def save_json(data: dict, filepath: str) -> str:
    directory = os.path.dirname(filepath)
    if directory:
        os.makedirs(directory, exist_ok=True)
    with open(filepath, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2)
    return filepath
