"""Analytic lower bounds on the optimal permutation flow shop makespan.

Both estimators read a machine x job matrix (``durations[i][j]``) and
assume at least one machine and one job.
"""

from __future__ import annotations

from typing import Sequence

from .models import Instance, LowerBoundReport

Durations = Sequence[Sequence[int]]


def job_totals(durations: Durations) -> list[int]:
    n = len(durations[0])
    return [sum(row[j] for row in durations) for j in range(n)]


def taillard_lower_bound(durations: Durations) -> int:
    """Machine-based bound from Taillard (1993), "Benchmarks for basic
    scheduling problems".

    For machine ``i``: B = least head (work on machines before ``i``) over
    all jobs, A = least tail (work on machines after ``i``), T = total work
    on ``i``.  The bound is the larger of ``max_i(A + B + T)`` and the
    longest job.
    """
    m = len(durations)
    n = len(durations[0])

    best_machine = 0
    for i in range(m):
        b = min(sum(durations[k][j] for k in range(i)) for j in range(n))
        a = min(sum(durations[k][j] for k in range(i + 1, m)) for j in range(n))
        t = sum(durations[i])
        best_machine = max(best_machine, a + b + t)

    return max(best_machine, max(job_totals(durations)))


def proportionate_lower_bound(durations: Durations) -> int:
    """Job-based bound from the reduction to a proportionate flow shop.

    Every job but the longest one (``omega``) contributes at least its
    shorter operation on the first or last machine; ``omega`` contributes
    its full processing time.
    """
    first, last = durations[0], durations[-1]
    min_ops = [min(a, b) for a, b in zip(first, last)]
    totals = job_totals(durations)
    # first job wins ties
    omega = max(range(len(totals)), key=totals.__getitem__)
    return sum(min_ops) - min_ops[omega] + totals[omega]


def sequence_makespan(durations: Durations, sequence: Sequence[int]) -> int:
    """Completion time of the last job on the last machine for ``sequence``."""
    m = len(durations)
    n = len(sequence)

    # C[i][j]: completion of the j-th sequenced job on machine i
    C = [[0] * n for _ in range(m)]
    for i in range(m):
        for j in range(n):
            ready_machine = C[i][j - 1] if j > 0 else 0
            ready_job = C[i - 1][j] if i > 0 else 0
            C[i][j] = max(ready_machine, ready_job) + durations[i][sequence[j]]
    return C[m - 1][n - 1]


def compute_lower_bounds(instance: Instance) -> LowerBoundReport:
    durations = instance.durations
    return LowerBoundReport(
        taillard=taillard_lower_bound(durations),
        proportionate=proportionate_lower_bound(durations),
        identity_makespan=sequence_makespan(durations, range(instance.num_jobs)),
    )
