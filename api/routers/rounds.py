"""Round normalization endpoints."""

import logging
from fastapi import APIRouter, HTTPException, Query
from typing import List

from analytics.exceptions import StatsError
from analytics.normalize import coerce_hole_scores, coerce_rounds, normalize, sort_chronologically
from analytics.stats import round_totals_from_holes
from api.schemas import HoleScoresRequest, RoundsRequest
from models import Round, RoundTotals, StatsMode

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/normalize", response_model=List[Round])
async def normalize_rounds(req: RoundsRequest, mode: StatsMode = Query(...)):
    """Return the rounds as a comparable series for the mode, oldest first."""
    try:
        return sort_chronologically(normalize(coerce_rounds(req.rounds), mode))
    except StatsError as e:
        logger.warning("Rejected rounds: %s", e)
        raise HTTPException(422, str(e))


@router.post("/totals", response_model=RoundTotals)
async def recalculate_totals(req: HoleScoresRequest):
    """Recompute a hole-by-hole round's totals from its hole rows."""
    try:
        return round_totals_from_holes(coerce_hole_scores(req.hole_scores))
    except StatsError as e:
        logger.warning("Rejected hole rows: %s", e)
        raise HTTPException(422, str(e))
