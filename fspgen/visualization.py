import os

import matplotlib

matplotlib.use("Agg")  # Must be set before importing pyplot
import matplotlib.pyplot as plt  # noqa: E402

from .models import Instance  # noqa: E402


def save_duration_heatmap(instance: Instance, filepath: str, title: str | None = None) -> str:
    """Render the machine x job duration matrix as a heat-map and save it.

    Correlated instances show up as vertical (job) or horizontal (machine)
    stripes, which makes the generator choice visible at a glance.
    """
    m, n = instance.num_machines, instance.num_jobs
    fig, ax = plt.subplots(
        figsize=(min(6 + n * 0.1, 18), min(2 + m * 0.3, 12)),
        constrained_layout=True,
    )
    image = ax.imshow(instance.to_lists(), aspect="auto", cmap="viridis", interpolation="nearest")
    fig.colorbar(image, ax=ax, label="Duration")
    ax.set_xlabel("Job", fontsize=12)
    ax.set_ylabel("Machine", fontsize=12)
    ax.set_title(title or f"Durations ({n} jobs x {m} machines)", fontsize=14, fontweight="bold")
    if m <= 30:
        ax.set_yticks(range(m))
        ax.set_yticklabels([f"M{i}" for i in range(m)])

    directory = os.path.dirname(filepath)
    if directory:
        os.makedirs(directory, exist_ok=True)
    fig.savefig(filepath, dpi=150)
    plt.close(fig)
    return filepath
