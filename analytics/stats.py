from __future__ import annotations

from typing import Callable, Iterable, List, Optional, Sequence

from models.hole_score import HoleScore
from models.round import Round
from models.stats import RoundTotals


def _mean(values: Sequence[float]) -> Optional[float]:
    return sum(values) / len(values) if values else None


def score_summary(rounds: Iterable[Round]) -> dict:
    """Best, worst and average score over rounds that have a score."""
    scores = [r.score for r in rounds if r.score is not None]
    return {
        "best_score": min(scores) if scores else None,
        "worst_score": max(scores) if scores else None,
        "average_score": _mean(scores),
    }


def _ratio_of_sums(
    rounds: Iterable[Round],
    has_pair: Callable[[Round], bool],
    hit: Callable[[Round], int],
    total: Callable[[Round], int],
) -> Optional[float]:
    paired = [r for r in rounds if has_pair(r)]
    hits = sum(hit(r) for r in paired)
    opportunities = sum(total(r) for r in paired)
    if not opportunities:
        return None
    return hits / opportunities * 100


def fairway_percentage(rounds: Iterable[Round]) -> Optional[float]:
    """
    Fairways hit as a percentage of all fairway opportunities.

    Sum of hits over sum of totals, so a round with two fairways does not
    weigh as much as a round with fourteen.
    """
    return _ratio_of_sums(rounds, Round.has_fairway_stats, lambda r: r.fir_hit, lambda r: r.fir_total)


def green_percentage(rounds: Iterable[Round]) -> Optional[float]:
    """Greens hit as a percentage of all green opportunities (ratio of sums)."""
    return _ratio_of_sums(rounds, Round.has_green_stats, lambda r: r.gir_hit, lambda r: r.gir_total)


def average_putts(rounds: Iterable[Round]) -> Optional[float]:
    return _mean([r.putts for r in rounds if r.putts is not None])


def average_penalties(rounds: Iterable[Round]) -> Optional[float]:
    return _mean([r.penalties for r in rounds if r.penalties is not None])


def _sum_present(values: List[Optional[int]]) -> Optional[int]:
    present = [v for v in values if v is not None]
    return sum(present) if present else None


def round_totals_from_holes(hole_rows: Iterable[HoleScore]) -> RoundTotals:
    """
    Recompute a hole-by-hole round's totals from its rows.

    Unscored holes add nothing to the score. The other totals are None
    when no row records them.
    """
    rows = list(hole_rows)
    return RoundTotals(
        score=sum(row.score or 0 for row in rows),
        fir_hit=_sum_present([None if row.fir_hit is None else int(row.fir_hit) for row in rows]),
        gir_hit=_sum_present([None if row.gir_hit is None else int(row.gir_hit) for row in rows]),
        putts=_sum_present([row.putts for row in rows]),
        penalties=_sum_present([row.penalties for row in rows]),
    )


def opportunity_totals(hole_pars: Iterable[int]) -> dict:
    """
    FIR and GIR opportunity counts for a tee's holes.

    Assumes one fairway per non-par-3 hole and one green per hole. This is a
    simplification; pass recorded totals instead when they are known.
    """
    pars = list(hole_pars)
    return {
        "fir_total": sum(1 for par in pars if par != 3),
        "gir_total": len(pars),
    }
