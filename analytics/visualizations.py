from __future__ import annotations

from typing import Optional, Sequence

from models.round import Round
from models.stats import HbhStats

_BUCKET_LABELS = {
    "ace": "Ace",
    "albatross": "Albatross",
    "eagle": "Eagle",
    "birdie": "Birdie",
    "par": "Par",
    "bogey": "Bogey",
    "double_bogey_plus": "Double+",
}


def _load_plt():
    try:
        import matplotlib.pyplot as plt  # type: ignore
    except ImportError as exc:
        raise RuntimeError(
            "matplotlib is required for visualizations. Install it with: pip install matplotlib"
        ) from exc
    return plt


def save_figure(fig, path, dpi: int = 150) -> None:
    """Write a chart to disk and release it."""
    plt = _load_plt()
    fig.savefig(path, dpi=dpi)
    plt.close(fig)


def _default_labels(rounds: Sequence[Round]) -> list[str]:
    labels: list[str] = []
    for index, round_obj in enumerate(rounds, start=1):
        if round_obj.date:
            labels.append(round_obj.date.isoformat())
        else:
            labels.append(f"R{index}")
    return labels


def _apply_sparse_xticks(ax, labels: Sequence[str], max_labels: int = 12) -> None:
    """
    Keep x-axis readable when there are many rounds.

    Shows at most `max_labels` ticks while preserving order.
    """
    count = len(labels)
    if count <= max_labels:
        ax.set_xticks(range(count))
        ax.set_xticklabels(labels, rotation=45, ha="right")
        return

    step = max(1, count // max_labels)
    tick_positions = list(range(0, count, step))
    if tick_positions[-1] != count - 1:
        tick_positions.append(count - 1)

    tick_labels = [labels[i] for i in tick_positions]
    ax.set_xticks(tick_positions)
    ax.set_xticklabels(tick_labels, rotation=45, ha="right")


def plot_score_trend(rounds: Sequence[Round], labels: Optional[Sequence[str]] = None):
    """
    Line chart: score per round over a normalized series.

    Rounds doubled from 9 holes are drawn as hollow markers so the
    approximation stays visible.
    """
    plt = _load_plt()
    scored = [r for r in rounds if r.score is not None]
    x_labels = list(labels) if labels is not None else _default_labels(scored)
    x = list(range(len(scored)))
    values = [r.score for r in scored]

    fig, ax = plt.subplots(figsize=(10, 5))
    ax.plot(x, values, marker="o", label="Score")
    scaled = [i for i, r in enumerate(scored) if r.scaled_from_nine]
    if scaled:
        ax.scatter(
            scaled,
            [values[i] for i in scaled],
            facecolors="white",
            edgecolors="black",
            zorder=3,
            label="Scaled from 9 holes",
        )
        ax.legend(loc="upper right")
    ax.set_title("Score Trend")
    ax.set_xlabel("Round")
    ax.set_ylabel("Total Score")
    _apply_sparse_xticks(ax, x_labels)
    ax.grid(axis="y", alpha=0.2)
    fig.tight_layout()
    return fig, ax


def plot_score_type_distribution(stats: HbhStats):
    """Bar chart: number of holes in each scoring bucket."""
    plt = _load_plt()
    counts = stats.bucket_counts()
    names = [_BUCKET_LABELS[key] for key in counts]

    fig, ax = plt.subplots(figsize=(9, 5))
    ax.bar(names, list(counts.values()))
    ax.set_title(f"Score Types ({stats.hbh_rounds_count} hole-by-hole rounds)")
    ax.set_xlabel("Score Type")
    ax.set_ylabel("Holes")
    ax.grid(axis="y", alpha=0.2)
    fig.tight_layout()
    return fig, ax


def plot_scoring_by_par(stats: HbhStats):
    """Bar chart: average to-par grouped by par 3 / par 4 / par 5."""
    plt = _load_plt()
    rows = [
        (par, average)
        for par, average in ((3, stats.par3_avg), (4, stats.par4_avg), (5, stats.par5_avg))
        if average is not None
    ]
    pars = [f"Par {par}" for par, _ in rows]
    avg_to_par = [average - par for par, average in rows]

    fig, ax = plt.subplots(figsize=(8, 5))
    ax.bar(pars, avg_to_par)
    ax.set_title("Average Score To Par By Hole Par")
    ax.set_xlabel("Hole Type")
    ax.set_ylabel("Average To Par")
    ax.axhline(0, color="black", linewidth=1, alpha=0.6)
    ax.grid(axis="y", alpha=0.2)
    fig.tight_layout()
    return fig, ax
