"""Stats/dashboard API endpoints."""

import logging
from fastapi import APIRouter, Depends, HTTPException, Query
from typing import List

from analytics.config import HandicapConfig
from analytics.dashboard import aggregate
from analytics.exceptions import StatsError
from analytics.handicap import calculate_handicap
from analytics.leaderboard import leaderboard_entry, rank_leaderboard
from analytics.normalize import coerce_rounds, normalize
from api.dependencies import get_handicap_config
from api.schemas import DashboardRequest, LeaderboardRequest, RoundsRequest
from models import DashboardStats, HandicapResult, LeaderboardEntry, StatsMode

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/dashboard", response_model=DashboardStats)
async def get_dashboard(
    req: DashboardRequest,
    mode: StatsMode = Query(...),
    config: HandicapConfig = Depends(get_handicap_config),
):
    try:
        return aggregate(req.rounds, req.hole_scores, mode, config)
    except StatsError as e:
        logger.warning("Rejected dashboard input: %s", e)
        raise HTTPException(422, str(e))


@router.post("/handicap", response_model=HandicapResult)
async def get_handicap(
    req: RoundsRequest,
    config: HandicapConfig = Depends(get_handicap_config),
):
    try:
        combined = normalize(coerce_rounds(req.rounds), StatsMode.COMBINED)
        return calculate_handicap(combined, config)
    except StatsError as e:
        logger.warning("Rejected handicap input: %s", e)
        raise HTTPException(422, str(e))


@router.post("/leaderboard", response_model=List[LeaderboardEntry])
async def get_leaderboard(
    req: LeaderboardRequest,
    config: HandicapConfig = Depends(get_handicap_config),
):
    try:
        entries = [leaderboard_entry(p.user_id, p.rounds, config) for p in req.players]
    except StatsError as e:
        logger.warning("Rejected leaderboard input: %s", e)
        raise HTTPException(422, str(e))
    return rank_leaderboard(entries)
