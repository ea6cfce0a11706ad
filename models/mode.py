from enum import Enum


class StatsMode(str, Enum):
    """Viewing mode used to reconcile 9-hole and 18-hole rounds."""
    NINE = "9"
    EIGHTEEN = "18"
    COMBINED = "combined"
