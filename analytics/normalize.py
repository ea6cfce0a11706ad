"""Reconcile 9-hole and 18-hole rounds under a viewing mode."""

from __future__ import annotations

import datetime
import logging
from typing import Any, Dict, Iterable, List, Union

from pydantic import ValidationError

from models.hole_score import HoleScore
from models.mode import StatsMode
from models.round import DOUBLABLE_FIELDS, Round

from .exceptions import InvalidModeError, MalformedRoundError

logger = logging.getLogger(__name__)


def parse_mode(mode: Union[StatsMode, str]) -> StatsMode:
    """Resolve a mode selector, rejecting anything unrecognized."""
    if isinstance(mode, StatsMode):
        return mode
    try:
        return StatsMode(mode)
    except ValueError:
        raise InvalidModeError(
            f"Unknown stats mode {mode!r}; expected one of '9', '18', 'combined'"
        ) from None


def coerce_rounds(rounds: Iterable[Union[Round, dict]]) -> List[Round]:
    """Validate raw round payloads into Round models."""
    result: List[Round] = []
    for index, item in enumerate(rounds):
        if isinstance(item, Round):
            result.append(item)
            continue
        try:
            result.append(Round.model_validate(item))
        except ValidationError as exc:
            raise MalformedRoundError(
                f"Round #{index} is malformed: {exc.errors()[0]['msg']}"
            ) from exc
    return result


def coerce_hole_scores(hole_rows: Iterable[Union[HoleScore, dict]]) -> List[HoleScore]:
    """Validate raw hole row payloads into HoleScore models."""
    result: List[HoleScore] = []
    for index, item in enumerate(hole_rows):
        if isinstance(item, HoleScore):
            result.append(item)
            continue
        try:
            result.append(HoleScore.model_validate(item))
        except ValidationError as exc:
            raise MalformedRoundError(
                f"Hole row #{index} is malformed: {exc.errors()[0]['msg']}"
            ) from exc
    return result


def scale_nine_hole_round(round_obj: Round) -> Round:
    """Copy a 9-hole round as its 18-hole equivalent, doubling recorded values only."""
    update: Dict[str, Any] = {"holes": 18, "scaled_from_nine": True}
    for name in DOUBLABLE_FIELDS:
        value = getattr(round_obj, name)
        if value is not None:
            update[name] = value * 2
    return round_obj.model_copy(update=update)


def normalize(rounds: Iterable[Round], mode: Union[StatsMode, str]) -> List[Round]:
    """
    Rewrite rounds into a comparable series for the given mode.

    - "9" / "18": only rounds with that many holes, returned untouched.
    - "combined": every round; 9-hole rounds become doubled 18-hole copies.

    Inputs are never mutated. Output order follows input order.
    """
    mode = parse_mode(mode)
    rounds = list(rounds)

    if mode is StatsMode.NINE:
        result = [r for r in rounds if r.holes == 9]
    elif mode is StatsMode.EIGHTEEN:
        result = [r for r in rounds if r.holes == 18]
    else:
        result = [scale_nine_hole_round(r) if r.holes == 9 else r for r in rounds]

    logger.debug("Normalized %d of %d rounds under mode %s", len(result), len(rounds), mode.value)
    return result


def chronological_key(round_obj: Round):
    return (round_obj.date or datetime.date.min, round_obj.id or "")


def sort_chronologically(rounds: Iterable[Round]) -> List[Round]:
    """Oldest first; undated rounds lead, ties broken by id."""
    return sorted(rounds, key=chronological_key)
