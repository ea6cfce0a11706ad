"""Result models produced by the statistics engine."""

from pydantic import BaseModel, Field
from typing import Dict, List, Optional

from .hole_score import SCORE_TYPE_ORDER
from .mode import StatsMode
from .round import Round


class HandicapResult(BaseModel):
    """Handicap index, or None with an explanation when history is too short."""
    handicap: Optional[float] = None
    message: Optional[str] = None
    rounds_considered: int = 0
    differentials_used: List[float] = Field(default_factory=list)


class HbhStats(BaseModel):
    """Scoring breakdown over hole-by-hole rounds."""
    hbh_rounds_count: int = 0
    holes_counted: int = 0
    par3_avg: Optional[float] = None
    par4_avg: Optional[float] = None
    par5_avg: Optional[float] = None
    aces: int = 0
    albatrosses: int = 0
    eagles: int = 0
    birdies: int = 0
    pars: int = 0
    bogeys: int = 0
    double_bogeys_plus: int = 0

    def bucket_counts(self) -> Dict[str, int]:
        """Counts keyed by score type, in display order."""
        values = (
            self.aces,
            self.albatrosses,
            self.eagles,
            self.birdies,
            self.pars,
            self.bogeys,
            self.double_bogeys_plus,
        )
        return dict(zip(SCORE_TYPE_ORDER, values))


class DashboardStats(BaseModel):
    """Aggregated stats for the dashboard page."""
    mode: StatsMode
    total_rounds: int
    best_score: Optional[int] = None
    worst_score: Optional[int] = None
    average_score: Optional[float] = None
    handicap: Optional[float] = None
    handicap_message: Optional[str] = None
    fir_avg: Optional[float] = None
    gir_avg: Optional[float] = None
    avg_putts: Optional[float] = None
    avg_penalties: Optional[float] = None
    all_rounds: List[Round] = Field(default_factory=list)
    hbh_stats: HbhStats = Field(default_factory=HbhStats)


class RoundTotals(BaseModel):
    """Round-level totals recomputed from hole rows."""
    score: int = 0
    fir_hit: Optional[int] = None
    gir_hit: Optional[int] = None
    putts: Optional[int] = None
    penalties: Optional[int] = None


class LeaderboardEntry(BaseModel):
    """Per-user summary on a combined (18-hole equivalent) basis."""
    user_id: str
    total_rounds: int = 0
    average_score: Optional[float] = None
    best_score: Optional[int] = None
    handicap: Optional[float] = None
