from .config import HandicapConfig
from .dashboard import aggregate
from .exceptions import InvalidModeError, MalformedRoundError, StatsError
from .handicap import calculate_handicap
from .hole_by_hole import compile_hbh_stats
from .leaderboard import leaderboard_entry, rank_leaderboard
from .normalize import normalize, parse_mode, sort_chronologically
from .stats import (
    fairway_percentage,
    green_percentage,
    opportunity_totals,
    round_totals_from_holes,
)

__all__ = [
    "HandicapConfig",
    "InvalidModeError",
    "MalformedRoundError",
    "StatsError",
    "aggregate",
    "calculate_handicap",
    "compile_hbh_stats",
    "fairway_percentage",
    "green_percentage",
    "leaderboard_entry",
    "normalize",
    "opportunity_totals",
    "parse_mode",
    "rank_leaderboard",
    "round_totals_from_holes",
    "sort_chronologically",
]
