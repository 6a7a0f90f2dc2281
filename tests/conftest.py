"""Pytest configuration and shared fixtures.

Ensures the project root is on sys.path so 'import fspgen' works from a
plain checkout.
"""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

_root = Path(__file__).resolve().parents[1]
if str(_root) not in sys.path:
    sys.path.insert(0, str(_root))

from fspgen.generators import generator_for  # noqa: E402
from fspgen.models import GenerationConfig  # noqa: E402

ALL_STRATEGIES = (
    "taillard",
    "gaussian",
    "job-correlated",
    "machine-correlated",
    "mixed-correlated",
)

TA_BLOCK = """number of jobs, number of machines, initial seed, upper bound and lower bound :
           4           2   873654221          30          25
processing times :
  5  1  9  3
  4  6  2  8
"""


def make_config(
    strategy: str,
    jobs: int = 20,
    machines: int = 5,
    lb: int = 1,
    ub: int = 99,
    **params,
) -> GenerationConfig:
    return GenerationConfig(
        num_jobs=jobs,
        num_machines=machines,
        generator=generator_for(strategy, **params),
        duration_lb=lb,
        duration_ub=ub,
    )


@pytest.fixture
def taillard_file(tmp_path: Path) -> Path:
    path = tmp_path / "ta_small.txt"
    path.write_text(TA_BLOCK + "\n" + TA_BLOCK.replace("873654221", "1"), encoding="utf-8")
    return path
