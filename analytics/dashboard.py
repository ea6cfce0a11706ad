"""Dashboard statistics for one user under one viewing mode."""

from __future__ import annotations

import logging
from typing import Iterable, Optional, Union

from models.hole_score import HoleScore
from models.mode import StatsMode
from models.round import Round
from models.stats import DashboardStats

from .config import HandicapConfig
from .handicap import calculate_handicap
from .hole_by_hole import compile_hbh_stats
from .normalize import coerce_hole_scores, coerce_rounds, normalize, parse_mode, sort_chronologically
from .stats import average_penalties, average_putts, fairway_percentage, green_percentage, score_summary

logger = logging.getLogger(__name__)


def aggregate(
    raw_rounds: Iterable[Union[Round, dict]],
    hole_rows: Iterable[Union[HoleScore, dict]],
    mode: Union[StatsMode, str],
    config: Optional[HandicapConfig] = None,
) -> DashboardStats:
    """
    Build the dashboard payload.

    Scores, ratios and the HBH breakdown follow the selected mode. The
    handicap is always computed on the combined series.
    """
    mode = parse_mode(mode)
    rounds = coerce_rounds(raw_rounds)
    holes = coerce_hole_scores(hole_rows)

    normalized = sort_chronologically(normalize(rounds, mode))
    handicap = calculate_handicap(normalize(rounds, StatsMode.COMBINED), config)

    logger.debug("Aggregating %d rounds (mode %s)", len(normalized), mode.value)
    return DashboardStats(
        mode=mode,
        total_rounds=len(normalized),
        **score_summary(normalized),
        handicap=handicap.handicap,
        handicap_message=handicap.message,
        fir_avg=fairway_percentage(normalized),
        gir_avg=green_percentage(normalized),
        avg_putts=average_putts(normalized),
        avg_penalties=average_penalties(normalized),
        all_rounds=normalized,
        hbh_stats=compile_hbh_stats(normalized, holes),
    )
