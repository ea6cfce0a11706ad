"""Scoring buckets and per-par averages over hole-by-hole rounds."""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from functools import reduce
from typing import Dict, Iterable, Optional, Tuple

from models.hole_score import SCORE_TYPE_ORDER, SCORING_PARS, HoleScore, classify_hole
from models.round import Round
from models.stats import HbhStats

logger = logging.getLogger(__name__)

_BUCKET_FIELDS = {
    "ace": "aces",
    "albatross": "albatrosses",
    "eagle": "eagles",
    "birdie": "birdies",
    "par": "pars",
    "bogey": "bogeys",
    "double_bogey_plus": "double_bogeys_plus",
}


@dataclass(frozen=True)
class HbhTally:
    """Immutable running totals; one fold step per hole row."""
    par_totals: Tuple[Tuple[int, int], ...] = ((0, 0),) * len(SCORING_PARS)
    buckets: Tuple[int, ...] = (0,) * len(SCORE_TYPE_ORDER)
    holes_counted: int = 0

    def add(self, row: HoleScore) -> "HbhTally":
        if row.score is None or row.par is None:
            return self
        bucket = classify_hole(row.score, row.par)
        if bucket is None:
            return self

        slot = SCORING_PARS.index(row.par)
        total, count = self.par_totals[slot]
        par_totals = self.par_totals[:slot] + ((total + row.score, count + 1),) + self.par_totals[slot + 1:]

        position = SCORE_TYPE_ORDER.index(bucket)
        buckets = self.buckets[:position] + (self.buckets[position] + 1,) + self.buckets[position + 1:]

        return replace(
            self,
            par_totals=par_totals,
            buckets=buckets,
            holes_counted=self.holes_counted + 1,
        )

    def average_for(self, par: int) -> Optional[float]:
        total, count = self.par_totals[SCORING_PARS.index(par)]
        return total / count if count else None


def _fold(tally: HbhTally, row: HoleScore) -> HbhTally:
    return tally.add(row)


def compile_hbh_stats(normalized_rounds: Iterable[Round], hole_rows: Iterable[HoleScore]) -> HbhStats:
    """
    Compile scoring buckets and per-par averages.

    Only rounds flagged hole_by_hole that have at least one matching hole
    row count toward hbh_rounds_count. Rows for other rounds are ignored.
    """
    hbh_ids = {r.id for r in normalized_rounds if r.hole_by_hole and r.id is not None}
    matching = [row for row in hole_rows if row.round_id in hbh_ids]

    tally = reduce(_fold, matching, HbhTally())
    rounds_with_rows = {row.round_id for row in matching}

    counts: Dict[str, int] = {
        _BUCKET_FIELDS[name]: value for name, value in zip(SCORE_TYPE_ORDER, tally.buckets)
    }
    logger.debug(
        "Compiled %d holes across %d hole-by-hole rounds", tally.holes_counted, len(rounds_with_rows)
    )
    return HbhStats(
        hbh_rounds_count=len(rounds_with_rows),
        holes_counted=tally.holes_counted,
        par3_avg=tally.average_for(3),
        par4_avg=tally.average_for(4),
        par5_avg=tally.average_for(5),
        **counts,
    )
