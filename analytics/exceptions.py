class StatsError(Exception):
    """Base for all statistics engine errors."""


class InvalidModeError(StatsError, ValueError):
    """Viewing mode is not one of '9', '18' or 'combined'."""


class MalformedRoundError(StatsError, ValueError):
    """Round or hole row violates the engine's input contract."""
