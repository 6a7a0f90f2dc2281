from __future__ import annotations

from .models import Instance


def parse_taillard_file(file_path: str, instance_number: int = 0) -> dict:
    """Read one instance from a file in Taillard's benchmark layout.

    Each instance starts with a ``number of jobs ...`` line followed by the
    header values ``jobs machines seed upper_bound lower_bound``, a
    ``processing times :`` line and one row of job durations per machine.

    Returns:
        ``{"info": {...header values...}, "instance": Instance}``.

    Raises:
        ValueError: On a malformed instance block.
        IndexError: If ``instance_number`` does not exist in the file.
    """
    instances = []
    with open(file_path, "r", encoding="utf-8") as f:
        lines = iter([line.strip() for line in f if line.strip()])

    for line in lines:
        if not line.startswith("number of jobs"):
            continue
        try:
            header = next(lines).split()
            jobs, machines, seed, upper_bound, lower_bound = map(int, header)
            next(lines)  # skip "processing times :"
            rows = [list(map(int, next(lines).split())) for _ in range(machines)]
        except StopIteration:
            raise ValueError(f"Truncated instance block in {file_path}") from None
        if jobs <= 0 or machines <= 0:
            raise ValueError(f"Non-positive dimensions {jobs}x{machines} in {file_path}")
        if any(len(row) != jobs for row in rows):
            raise ValueError(f"Expected {jobs} durations per machine row in {file_path}")
        if any(d <= 0 for row in rows for d in row):
            raise ValueError(f"Non-positive processing time in {file_path}")

        instances.append(
            {
                "info": {
                    "jobs": jobs,
                    "machines": machines,
                    "seed": seed,
                    "upper_bound": upper_bound,
                    "lower_bound": lower_bound,
                },
                "instance": Instance.from_matrix(rows),
            }
        )

    if instance_number < 0 or instance_number >= len(instances):
        raise IndexError(f"instance_number {instance_number} out of range")

    return instances[instance_number]
