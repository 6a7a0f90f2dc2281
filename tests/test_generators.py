from __future__ import annotations

import pytest

from conftest import ALL_STRATEGIES, make_config
from fspgen.errors import InvalidConfig, UnknownStrategy
from fspgen.generators import (
    STRATEGIES,
    GaussianGenerator,
    JobCorrelatedGenerator,
    MachineCorrelatedGenerator,
    MixedCorrelatedGenerator,
    TaillardGenerator,
    generator_for,
)
from fspgen.models import validate_config
from fspgen.pipeline import generate_instance
from fspgen.rng import LehmerRNG


def test_registry_keys() -> None:
    assert tuple(STRATEGIES) == ALL_STRATEGIES


def test_generator_for_ignores_foreign_parameters() -> None:
    gen = generator_for("taillard", alpha=0.3, duration_noise=4)
    assert gen == TaillardGenerator()
    gen = generator_for("job-correlated", alpha=0.3, duration_noise=4)
    assert gen == JobCorrelatedGenerator(alpha=0.3)


def test_generator_for_unknown_key() -> None:
    with pytest.raises(UnknownStrategy):
        generator_for("random-walk")


@pytest.mark.parametrize("strategy", ALL_STRATEGIES)
@pytest.mark.parametrize("seed", [1, 7, 2024, 873654221])
def test_corrected_durations_stay_in_interval(strategy: str, seed: int) -> None:
    config = make_config(strategy, jobs=30, machines=8)
    instance = generate_instance(config, seed)
    assert instance.num_jobs == 30
    assert instance.num_machines == 8
    for row in instance.durations:
        assert all(1 <= d <= 99 for d in row)


@pytest.mark.parametrize("strategy", ALL_STRATEGIES)
def test_narrow_interval_with_wide_windows(strategy: str) -> None:
    config = make_config(
        strategy,
        jobs=25,
        machines=6,
        lb=10,
        ub=20,
        alpha=1.0,
        dist_half_width_lb=5,
        dist_half_width_ub=9,
    )
    instance = generate_instance(config, 4242)
    assert all(10 <= d <= 20 for row in instance.durations for d in row)


def test_taillard_known_values() -> None:
    # seed 1: warm-up draw 16807, then 282475249, 1622650073, 984943658
    instance = generate_instance(make_config("taillard", jobs=3, machines=1), 1)
    assert instance.durations == ((14, 75, 46),)


def test_taillard_fills_machines_first() -> None:
    config = make_config("taillard", jobs=4, machines=3)
    rng, ref = LehmerRNG(11), LehmerRNG(11)
    matrix = TaillardGenerator().generate(config, rng)
    flat = [ref.uniform_int(1, 99) for _ in range(12)]
    assert matrix == [flat[0:4], flat[4:8], flat[8:12]]


def test_gaussian_parameters_cover_interval() -> None:
    assert GaussianGenerator.parameters(make_config("gaussian")) == (50, 16)
    assert GaussianGenerator.parameters(make_config("gaussian", lb=10, ub=20)) == (15, 1)


def test_gaussian_centred_on_interval_midpoint() -> None:
    instance = generate_instance(make_config("gaussian", jobs=100, machines=50), 5)
    cells = [d for row in instance.durations for d in row]
    assert abs(sum(cells) / len(cells) - 50) < 2


def test_job_correlated_durations_within_job_window() -> None:
    config = make_config("job-correlated", jobs=40, machines=10, alpha=0.7)
    gen = config.generator
    windows = gen.sample_windows(config, LehmerRNG(321))
    raw = gen.generate(config, LehmerRNG(321))
    assert len(windows) == 40
    for j, w in enumerate(windows):
        assert 1 <= w.half_width <= 5
        for i in range(10):
            assert w.lower <= raw[i][j] <= w.upper


def test_machine_correlated_durations_within_machine_window() -> None:
    config = make_config("machine-correlated", jobs=40, machines=10, alpha=0.7)
    gen = config.generator
    windows = gen.sample_windows(config, LehmerRNG(321))
    raw = gen.generate(config, LehmerRNG(321))
    assert len(windows) == 10
    for i, w in enumerate(windows):
        assert all(w.lower <= d <= w.upper for d in raw[i])


def test_window_means_spread_over_effective_width() -> None:
    config = make_config("job-correlated", jobs=50, machines=2, alpha=0.5)
    gen = config.generator
    assert gen.effective_width(config) == 49
    means = [w.mean for w in gen.sample_windows(config, LehmerRNG(8))]
    assert max(means) - min(means) <= 49


def test_zero_alpha_puts_all_means_on_one_point() -> None:
    config = make_config("machine-correlated", jobs=5, machines=12, alpha=0.0)
    windows = config.generator.sample_windows(config, LehmerRNG(17))
    assert len({w.mean for w in windows}) == 1


def test_mixed_correlated_keeps_job_order_across_machines() -> None:
    config = make_config("mixed-correlated", jobs=30, machines=6)
    raw = MixedCorrelatedGenerator().generate(config, LehmerRNG(99))
    for a in range(30):
        for b in range(30):
            if raw[0][a] < raw[0][b]:
                assert all(raw[i][a] <= raw[i][b] for i in range(6))


def test_mixed_correlated_draws_noise_even_when_zero() -> None:
    jobs, machines = 7, 3
    config = make_config("mixed-correlated", jobs=jobs, machines=machines)
    rng = LehmerRNG(5)
    config.generator.generate(config, rng)

    ref = LehmerRNG(5)
    for _ in range(1 + 2 * machines + jobs + machines * jobs):
        ref.uniform01()
    assert rng.seed == ref.seed


def test_mixed_correlated_noise_bounded() -> None:
    quiet = make_config("mixed-correlated", jobs=20, machines=4)
    noisy = make_config("mixed-correlated", jobs=20, machines=4, duration_noise=3)
    base = quiet.generator.generate(quiet, LehmerRNG(77))
    # identical latent draws, only the per-cell noise differs
    windows = noisy.generator.sample_windows(noisy, LehmerRNG(77))
    raw = noisy.generator.generate(noisy, LehmerRNG(77))
    for i, w in enumerate(windows):
        for j in range(20):
            assert w.lower - 3 <= raw[i][j] <= w.upper + 3
            assert w.lower <= base[i][j] <= w.upper
            assert abs(raw[i][j] - base[i][j]) <= 3


@pytest.mark.parametrize(
    "params",
    [
        {"dist_half_width_lb": 6, "dist_half_width_ub": 5},
        {"dist_half_width_lb": 0, "dist_half_width_ub": 5},
        {"dist_half_width_lb": -2, "dist_half_width_ub": -1},
        {"alpha": -0.1},
        {"alpha": float("nan")},
        {"alpha": 1.5},
    ],
)
@pytest.mark.parametrize(
    "strategy", ["job-correlated", "machine-correlated", "mixed-correlated"]
)
def test_invalid_correlation_parameters(strategy: str, params: dict) -> None:
    with pytest.raises(InvalidConfig):
        validate_config(make_config(strategy, **params))


def test_negative_noise_rejected() -> None:
    with pytest.raises(InvalidConfig):
        validate_config(make_config("mixed-correlated", duration_noise=-1))


def test_alpha_one_is_accepted() -> None:
    validate_config(make_config("job-correlated", alpha=1.0))
    assert MachineCorrelatedGenerator(alpha=1.0).effective_width(make_config("taillard")) == 98
