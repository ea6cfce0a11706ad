"""Handicap selection settings.

The defaults reproduce the simplified best-of-N table the dashboard has
always used. They are an approximation, not a certified handicap system,
so every number here can be overridden.
"""

import os
from pydantic import BaseModel, ConfigDict, Field, model_validator
from typing import Dict, Mapping, Optional


class TableEntry(BaseModel):
    """How many of the lowest differentials to average, and the adjustment to add."""
    model_config = ConfigDict(frozen=True)

    count: int = Field(ge=1)
    adjustment: float = 0.0


DEFAULT_TABLE: Dict[int, TableEntry] = {
    3: TableEntry(count=1, adjustment=-2.0),
    4: TableEntry(count=1, adjustment=-1.0),
    5: TableEntry(count=1),
    6: TableEntry(count=2, adjustment=-1.0),
    7: TableEntry(count=2),
    8: TableEntry(count=2),
    9: TableEntry(count=3),
    10: TableEntry(count=3),
    11: TableEntry(count=3),
    12: TableEntry(count=4),
    13: TableEntry(count=4),
    14: TableEntry(count=4),
    15: TableEntry(count=5),
    16: TableEntry(count=5),
    17: TableEntry(count=6),
    18: TableEntry(count=6),
    19: TableEntry(count=7),
}


class HandicapConfig(BaseModel):
    """Window, selection table and limits for the handicap index."""
    model_config = ConfigDict(frozen=True)

    min_rounds: int = Field(3, ge=1)
    window: int = Field(20, ge=1)
    best_of: int = Field(8, ge=1)
    max_index: float = 54.0
    table: Dict[int, TableEntry] = Field(default_factory=lambda: dict(DEFAULT_TABLE))

    @model_validator(mode='after')
    def validate_table_coverage(self):
        if self.min_rounds > self.window:
            raise ValueError(f"min_rounds ({self.min_rounds}) cannot exceed window ({self.window})")
        if self.best_of > self.window:
            raise ValueError(f"best_of ({self.best_of}) cannot exceed window ({self.window})")
        # Entries must run without gaps from min_rounds; longer histories use best_of
        for played in range(self.min_rounds, min(self._table_end(), self.window - 1) + 1):
            entry = self.table.get(played)
            if entry is None:
                raise ValueError(f"Handicap table has no entry for {played} rounds")
            if entry.count > played:
                raise ValueError(f"Table entry for {played} rounds uses {entry.count} differentials")
        return self

    def _table_end(self) -> int:
        return max((n for n in self.table if n >= self.min_rounds), default=self.min_rounds - 1)

    def selection_for(self, played: int) -> TableEntry:
        """
        Selection rule for a history of `played` rounds (at least min_rounds).

        Below the window the table applies; past its last entry, and once the
        window is full, the lowest `best_of` differentials are averaged.
        """
        if played < self.window and played <= self._table_end():
            return self.table[played]
        return TableEntry(count=min(self.best_of, played))

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "HandicapConfig":
        """Build a config, overriding defaults from HANDICAP_* variables."""
        environ = os.environ if environ is None else environ
        overrides = {}
        for field_name, var in (
            ("min_rounds", "HANDICAP_MIN_ROUNDS"),
            ("window", "HANDICAP_WINDOW"),
            ("best_of", "HANDICAP_BEST_OF"),
            ("max_index", "HANDICAP_MAX_INDEX"),
        ):
            value = environ.get(var)
            if value:
                overrides[field_name] = value
        return cls(**overrides)
