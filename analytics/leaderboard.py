"""Per-user leaderboard summaries on a combined basis."""

from __future__ import annotations

from typing import Iterable, List, Optional, Union

from models.mode import StatsMode
from models.round import Round
from models.stats import LeaderboardEntry

from .config import HandicapConfig
from .handicap import calculate_handicap
from .normalize import coerce_rounds, normalize
from .stats import score_summary

# Stand-in for a missing value when ranking, so those users sort last
_MISSING = 999


def leaderboard_entry(
    user_id: str,
    rounds: Iterable[Union[Round, dict]],
    config: Optional[HandicapConfig] = None,
) -> LeaderboardEntry:
    """Summarize one user's scored rounds, with 9-hole rounds doubled."""
    scored = [r for r in coerce_rounds(rounds) if r.score is not None]
    combined = normalize(scored, StatsMode.COMBINED)
    summary = score_summary(combined)
    return LeaderboardEntry(
        user_id=user_id,
        total_rounds=len(combined),
        average_score=summary["average_score"],
        best_score=summary["best_score"],
        handicap=calculate_handicap(combined, config).handicap,
    )


def _ranking_key(entry: LeaderboardEntry):
    return (
        entry.handicap if entry.handicap is not None else _MISSING,
        entry.average_score if entry.average_score is not None else _MISSING,
        -entry.total_rounds,
        entry.best_score if entry.best_score is not None else _MISSING,
        entry.user_id,
    )


def rank_leaderboard(entries: Iterable[LeaderboardEntry]) -> List[LeaderboardEntry]:
    """
    Order users by handicap, then average score, then most rounds, then best score.

    Users without any rounds are left off.
    """
    return sorted((e for e in entries if e.total_rounds > 0), key=_ranking_key)
