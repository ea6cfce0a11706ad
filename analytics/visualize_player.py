from __future__ import annotations

import argparse
from pathlib import Path

from models.stats import DashboardStats

from .converters import load_hole_scores_file, load_rounds_file
from .dashboard import aggregate
from .visualizations import (
    plot_score_trend,
    plot_score_type_distribution,
    plot_scoring_by_par,
    save_figure,
)


def _parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Print dashboard stats and generate charts for a player from JSON exports."
    )
    parser.add_argument("--rounds", required=True, help="JSON list of rounds")
    parser.add_argument("--holes", default=None, help="Optional JSON list of hole rows")
    parser.add_argument(
        "--mode",
        required=True,
        choices=["9", "18", "combined"],
        help="Viewing mode: 9-hole only, 18-hole only, or combined",
    )
    parser.add_argument(
        "--outdir",
        default="analytics/output",
        help="Directory where chart PNGs are written",
    )
    parser.add_argument("--no-charts", action="store_true", help="Only print the summary")
    return parser.parse_args()


def _fmt(value, suffix: str = "") -> str:
    if value is None:
        return "-"
    if isinstance(value, float):
        return f"{value:.1f}{suffix}"
    return f"{value}{suffix}"


def print_summary(stats: DashboardStats) -> None:
    print(f"Mode: {stats.mode.value}")
    print(f"Rounds: {stats.total_rounds}")
    print(f"Best / worst / average: {_fmt(stats.best_score)} / {_fmt(stats.worst_score)} / {_fmt(stats.average_score)}")
    print(f"Handicap: {_fmt(stats.handicap)}")
    if stats.handicap_message:
        print(f"  {stats.handicap_message}")
    print(f"FIR: {_fmt(stats.fir_avg, '%')}  GIR: {_fmt(stats.gir_avg, '%')}")
    print(f"Putts: {_fmt(stats.avg_putts)}  Penalties: {_fmt(stats.avg_penalties)}")

    scaled = sum(1 for r in stats.all_rounds if r.scaled_from_nine)
    if scaled:
        print(f"Note: {scaled} round(s) are 9-hole scores doubled to 18-hole equivalents")

    hbh = stats.hbh_stats
    if hbh.hbh_rounds_count:
        print(f"Hole-by-hole rounds: {hbh.hbh_rounds_count} ({hbh.holes_counted} holes)")
        print(f"  Par 3 / 4 / 5 avg: {_fmt(hbh.par3_avg)} / {_fmt(hbh.par4_avg)} / {_fmt(hbh.par5_avg)}")
        print("  " + ", ".join(f"{name}: {count}" for name, count in hbh.bucket_counts().items()))


def write_charts(stats: DashboardStats, outdir: Path) -> None:
    outdir.mkdir(parents=True, exist_ok=True)

    if any(r.score is not None for r in stats.all_rounds):
        fig, _ = plot_score_trend(stats.all_rounds)
        save_figure(fig, outdir / "score_trend.png")
    else:
        print("Skipping score trend chart: no scored rounds.")

    if stats.hbh_stats.holes_counted:
        fig, _ = plot_score_type_distribution(stats.hbh_stats)
        save_figure(fig, outdir / "score_type_distribution.png")
        fig, _ = plot_scoring_by_par(stats.hbh_stats)
        save_figure(fig, outdir / "scoring_by_par.png")
    else:
        print("Skipping hole-by-hole charts: no hole rows.")

    print(f"Saved charts to: {outdir.resolve()}")


def main() -> None:
    args = _parse_args()
    rounds = load_rounds_file(args.rounds)
    holes = load_hole_scores_file(args.holes) if args.holes else []

    stats = aggregate(rounds, holes, args.mode)
    print_summary(stats)
    if not args.no_charts:
        write_charts(stats, Path(args.outdir))


if __name__ == "__main__":
    main()
