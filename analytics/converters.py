"""Conversion from joined round/tee rows and JSON exports to domain models.

Callers fetch rounds joined with their tee (par, ratings, hole count) and
the tee's hole pars; this module maps those rows onto Round and HoleScore
without doing any querying itself.
"""

import json
from pathlib import Path
from typing import Iterable, List, Optional, Union

from models import HoleScore, Round

from .normalize import coerce_hole_scores, coerce_rounds
from .stats import opportunity_totals


def round_from_row(row, tee_hole_pars: Optional[Iterable[int]] = None) -> Round:
    """
    rounds row joined with its tee -> Round model.

    Advanced stats are dropped when the round was not recorded with them.
    FIR/GIR totals fall back to the tee's hole pars when the row has none.
    """
    pars = list(tee_hole_pars) if tee_hole_pars is not None else []
    advanced = bool(row.get("advanced_stats"))

    fir_total = row.get("fir_total")
    gir_total = row.get("gir_total")
    if pars and fir_total is None and gir_total is None:
        totals = opportunity_totals(pars)
        fir_total, gir_total = totals["fir_total"], totals["gir_total"]

    # A hit count without its opportunity count cannot feed a ratio
    fir_hit = row.get("fir_hit") if advanced and fir_total is not None else None
    gir_hit = row.get("gir_hit") if advanced and gir_total is not None else None

    return Round(
        id=str(row["id"]) if row.get("id") is not None else None,
        date=row.get("date"),
        holes=row.get("number_of_holes") or len(pars) or 18,
        score=row.get("score"),
        par=row.get("tee_par"),
        rating=float(row["course_rating"]) if row.get("course_rating") is not None else None,
        slope=float(row["slope_rating"]) if row.get("slope_rating") is not None else None,
        fir_hit=fir_hit,
        fir_total=fir_total if fir_hit is not None else None,
        gir_hit=gir_hit,
        gir_total=gir_total if gir_hit is not None else None,
        putts=row.get("putts") if advanced else None,
        penalties=row.get("penalties") if advanced else None,
        hole_by_hole=bool(row.get("hole_by_hole")),
        advanced_stats=advanced,
    )


def hole_score_from_row(row) -> HoleScore:
    """round_holes row joined with its hole's par -> HoleScore model."""
    return HoleScore(
        round_id=str(row["round_id"]) if row.get("round_id") is not None else None,
        hole_number=row.get("hole_number"),
        score=row.get("score"),
        par=row.get("par"),
        fir_hit=row.get("fir_hit"),
        gir_hit=row.get("gir_hit"),
        putts=row.get("putts"),
        penalties=row.get("penalties"),
    )


def _read_json_list(path: Union[str, Path]) -> list:
    with open(path) as f:
        data = json.load(f)
    if not isinstance(data, list):
        raise ValueError(f"{path}: expected a JSON list")
    return data


def load_rounds_file(path: Union[str, Path]) -> List[Round]:
    """Read a JSON list of rounds exported by the client."""
    return coerce_rounds(_read_json_list(path))


def load_hole_scores_file(path: Union[str, Path]) -> List[HoleScore]:
    """Read a JSON list of hole rows."""
    return coerce_hole_scores(_read_json_list(path))
