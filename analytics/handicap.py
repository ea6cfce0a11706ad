"""Handicap index over a combined-mode round history."""

from __future__ import annotations

import logging
import math
from typing import Iterable, List, Optional

from models.round import Round
from models.stats import HandicapResult

from .config import HandicapConfig
from .exceptions import MalformedRoundError
from .normalize import chronological_key

logger = logging.getLogger(__name__)


def _round_half_up(value: float, places: int = 1) -> float:
    factor = 10 ** places
    return math.floor(value * factor + 0.5) / factor


def not_enough_rounds_message(played: int, config: HandicapConfig) -> str:
    remaining = config.min_rounds - played
    plural = "round" if remaining == 1 else "rounds"
    return (
        f"Handicap is not calculated until at least {config.min_rounds} rounds are played. "
        f"Play {remaining} more {plural} to get a handicap."
    )


def _recency_key(round_obj: Round):
    # Rounds left tied here have equal differentials, so either one gives the same index
    return chronological_key(round_obj) + (round_obj.score_differential(),)


def most_recent(rounds: Iterable[Round], limit: int) -> List[Round]:
    """The `limit` most recent scored rounds by date, ties broken by id then differential."""
    return sorted(rounds, key=_recency_key, reverse=True)[:limit]


def calculate_handicap(
    combined_rounds: Iterable[Round],
    config: Optional[HandicapConfig] = None,
) -> HandicapResult:
    """
    Average the lowest differentials among the most recent rounds.

    Expects rounds already normalized to combined mode. Rounds without a
    score are ignored. A short history yields handicap=None plus a message.
    """
    config = config or HandicapConfig()
    scored: List[Round] = []
    for round_obj in combined_rounds:
        if round_obj.holes != 18:
            raise MalformedRoundError(
                f"Round {round_obj.id!r} has {round_obj.holes} holes; normalize to combined mode first"
            )
        if round_obj.score is not None:
            scored.append(round_obj)

    if len(scored) < config.min_rounds:
        return HandicapResult(
            handicap=None,
            message=not_enough_rounds_message(len(scored), config),
            rounds_considered=len(scored),
        )

    recent = most_recent(scored, config.window)
    selection = config.selection_for(len(recent))
    differentials = sorted(r.score_differential() for r in recent)
    lowest = differentials[: selection.count]

    index = sum(lowest) / len(lowest) + selection.adjustment
    handicap = min(_round_half_up(index), config.max_index)

    logger.debug(
        "Handicap %.1f from lowest %d of %d differentials (adjustment %.1f)",
        handicap, len(lowest), len(recent), selection.adjustment,
    )
    return HandicapResult(
        handicap=handicap,
        message=None,
        rounds_considered=len(recent),
        differentials_used=lowest,
    )
