from pydantic import Field
from typing import Optional

from .base import BaseGolfModel

SCORING_PARS = (3, 4, 5)

SCORE_TYPE_ORDER = (
    "ace",
    "albatross",
    "eagle",
    "birdie",
    "par",
    "bogey",
    "double_bogey_plus",
)

_SCORE_NAMES = {-2: "eagle", -1: "birdie", 0: "par", 1: "bogey"}


def classify_hole(score: int, par: int) -> Optional[str]:
    """
    Scoring bucket for one hole.

    A hole-in-one is always an ace, even on a par 5. Pars outside 3-5
    have no bucket.
    """
    if par not in SCORING_PARS:
        return None
    if score == 1:
        return "ace"
    relative = score - par
    if relative <= -3:
        return "albatross"
    if relative >= 2:
        return "double_bogey_plus"
    return _SCORE_NAMES[relative]


class HoleScore(BaseGolfModel):
    """A player's result on a single hole of a hole-by-hole round."""
    round_id: Optional[str] = None
    hole_number: Optional[int] = Field(None, ge=1, le=18)
    score: Optional[int] = Field(None, ge=1)
    par: Optional[int] = Field(None, ge=1)
    fir_hit: Optional[bool] = None
    gir_hit: Optional[bool] = None
    putts: Optional[int] = Field(None, ge=0)
    penalties: Optional[int] = Field(None, ge=0)

    def to_par(self) -> Optional[int]:
        """Calculate score relative to par (+2, -1, etc.)."""
        if self.score is None or self.par is None:
            return None
        return self.score - self.par

    def is_valid(self) -> bool:
        """Check that both score and par are present."""
        return self.score is not None and self.par is not None

    def get_score_type(self) -> Optional[str]:
        """Get the name for this score (ace, birdie, par, bogey, etc.)."""
        if not self.is_valid():
            return None
        return classify_hole(self.score, self.par)
