from .base import BaseGolfModel
from .hole_score import HoleScore, SCORE_TYPE_ORDER, classify_hole
from .mode import StatsMode
from .round import Round
from .stats import DashboardStats, HandicapResult, HbhStats, LeaderboardEntry, RoundTotals

__all__ = [
    "BaseGolfModel",
    "DashboardStats",
    "HandicapResult",
    "HbhStats",
    "HoleScore",
    "LeaderboardEntry",
    "Round",
    "RoundTotals",
    "SCORE_TYPE_ORDER",
    "StatsMode",
    "classify_hole",
]
