"""API-specific request models. Callers post the data; nothing is stored."""

from pydantic import BaseModel, Field
from typing import Any, Dict, List


class RoundsRequest(BaseModel):
    """Raw round payloads, validated by the engine so errors map to 422."""
    rounds: List[Dict[str, Any]] = Field(default_factory=list)


class DashboardRequest(BaseModel):
    rounds: List[Dict[str, Any]] = Field(default_factory=list)
    hole_scores: List[Dict[str, Any]] = Field(default_factory=list)


class HoleScoresRequest(BaseModel):
    hole_scores: List[Dict[str, Any]] = Field(default_factory=list)


class PlayerRounds(BaseModel):
    user_id: str
    rounds: List[Dict[str, Any]] = Field(default_factory=list)


class LeaderboardRequest(BaseModel):
    players: List[PlayerRounds] = Field(default_factory=list)
