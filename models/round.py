import datetime
from pydantic import Field, model_validator
from typing import Any, Literal, Optional

from .base import BaseGolfModel

# Fields that scale with the number of holes played. Slope is a ratio and is left alone.
DOUBLABLE_FIELDS = (
    "score",
    "fir_hit",
    "fir_total",
    "gir_hit",
    "gir_total",
    "putts",
    "penalties",
    "par",
    "rating",
)

ADVANCED_STAT_FIELDS = ("fir_hit", "fir_total", "gir_hit", "gir_total", "putts", "penalties")

NEUTRAL_RATING = 72.0
NEUTRAL_SLOPE = 113.0


class Round(BaseGolfModel):
    """A recorded round, already joined with its course and tee metadata."""
    id: Optional[str] = None
    date: Optional[datetime.date] = None
    holes: Literal[9, 18] = 18
    score: Optional[int] = Field(None, ge=1)

    # Tee difficulty; None when the tee carries no value
    par: Optional[int] = Field(None, ge=1)
    rating: Optional[float] = Field(None, gt=0)
    slope: Optional[float] = Field(None, gt=0)

    fir_hit: Optional[int] = Field(None, ge=0)
    fir_total: Optional[int] = Field(None, ge=0)
    gir_hit: Optional[int] = Field(None, ge=0)
    gir_total: Optional[int] = Field(None, ge=0)
    putts: Optional[int] = Field(None, ge=0)
    penalties: Optional[int] = Field(None, ge=0)

    hole_by_hole: bool = False
    advanced_stats: bool = False
    scaled_from_nine: bool = False

    @model_validator(mode='before')
    @classmethod
    def default_advanced_stats(cls, data: Any) -> Any:
        if isinstance(data, dict) and data.get("advanced_stats") is None:
            recorded = any(data.get(name) is not None for name in ADVANCED_STAT_FIELDS)
            data = {**data, "advanced_stats": recorded}
        return data

    @model_validator(mode='after')
    def validate_stat_pairs(self):
        for hit_name, total_name in (("fir_hit", "fir_total"), ("gir_hit", "gir_total")):
            hit = getattr(self, hit_name)
            total = getattr(self, total_name)
            if (hit is None) != (total is None):
                raise ValueError(f"{hit_name} and {total_name} must both be set or both be empty")
            if hit is not None and hit > total:
                raise ValueError(f"{hit_name} ({hit}) cannot exceed {total_name} ({total})")
        return self

    @property
    def effective_rating(self) -> float:
        return self.rating if self.rating is not None else NEUTRAL_RATING

    @property
    def effective_slope(self) -> float:
        return self.slope if self.slope is not None else NEUTRAL_SLOPE

    def score_differential(self) -> Optional[float]:
        """Difficulty-adjusted score: (score - rating) * 113 / slope."""
        if self.score is None:
            return None
        return (self.score - self.effective_rating) * NEUTRAL_SLOPE / self.effective_slope

    def to_par(self) -> Optional[int]:
        """Total score relative to the tee's par."""
        if self.score is None or self.par is None:
            return None
        return self.score - self.par

    def has_fairway_stats(self) -> bool:
        return self.fir_hit is not None and self.fir_total is not None

    def has_green_stats(self) -> bool:
        return self.gir_hit is not None and self.gir_total is not None
