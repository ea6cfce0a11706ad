import random
from datetime import date, timedelta

import pytest
from pydantic import ValidationError

from analytics.config import HandicapConfig, TableEntry
from analytics.exceptions import MalformedRoundError
from analytics.handicap import calculate_handicap
from models import Round

START = date(2025, 1, 1)


def _rounds(scores, **kwargs):
    """One 18-hole round per score, a day apart, neutral tee unless overridden."""
    return [
        Round(id=f"r{i:02d}", date=START + timedelta(days=i), holes=18, score=s, **kwargs)
        for i, s in enumerate(scores)
    ]


def test_too_few_rounds_gives_message_not_error():
    result = calculate_handicap(_rounds([85, 90]))

    assert result.handicap is None
    assert "at least 3 rounds" in result.message
    assert "1 more round" in result.message
    assert result.rounds_considered == 2

    empty = calculate_handicap([])
    assert empty.handicap is None
    assert "3 more rounds" in empty.message


def test_unscored_rounds_do_not_count():
    rounds = _rounds([85, 90]) + [Round(id="pending", date=START, holes=18, score=None)]
    assert calculate_handicap(rounds).handicap is None


def test_three_rounds_uses_lowest_minus_two():
    result = calculate_handicap(_rounds([90, 85, 80]))
    assert result.handicap == pytest.approx(6.0)
    assert result.message is None
    assert result.differentials_used == [pytest.approx(8.0)]


def test_six_rounds_uses_lowest_two_minus_one():
    result = calculate_handicap(_rounds([85, 84, 83, 82, 81, 80]))
    assert result.handicap == pytest.approx(7.5)


def test_nineteen_rounds_uses_lowest_seven():
    result = calculate_handicap(_rounds(range(81, 100)))
    # differentials 9..27, lowest seven average 12
    assert result.handicap == pytest.approx(12.0)
    assert len(result.differentials_used) == 7


def test_twenty_rounds_uses_best_eight():
    result = calculate_handicap(_rounds(range(80, 100)))
    assert result.handicap == pytest.approx(11.5)
    assert len(result.differentials_used) == 8


def test_only_most_recent_twenty_rounds_count():
    # five old low rounds fall outside the window
    result = calculate_handicap(_rounds([70] * 5 + list(range(80, 100))))
    assert result.handicap == pytest.approx(11.5)
    assert result.rounds_considered == 20


def test_slope_and_rating_adjust_differential():
    result = calculate_handicap(_rounds([90, 90, 90], rating=70.0, slope=130))
    # (90 - 70) * 113 / 130 = 17.38, minus 2
    assert result.handicap == pytest.approx(15.4)


def test_plus_handicap_keeps_sign():
    result = calculate_handicap(_rounds([66, 66, 66]))
    assert result.handicap == pytest.approx(-8.0)


def test_handicap_is_capped():
    result = calculate_handicap(_rounds([200, 200, 200]))
    assert result.handicap == pytest.approx(54.0)


def test_same_input_set_in_any_order_gives_same_result():
    scores = [random.Random(7).randint(70, 100) for _ in range(30)]
    rounds = [
        Round(id=f"r{i:02d}", date=START + timedelta(days=i // 3), holes=18, score=s)
        for i, s in enumerate(scores)
    ]
    shuffled = list(rounds)
    random.Random(11).shuffle(shuffled)

    assert calculate_handicap(rounds) == calculate_handicap(shuffled)
    assert calculate_handicap(rounds) == calculate_handicap(list(reversed(rounds)))


def test_nine_hole_round_must_be_normalized_first():
    with pytest.raises(MalformedRoundError):
        calculate_handicap([Round(id="n", holes=9, score=42)])


# ================================================================
# HandicapConfig
# ================================================================

def test_custom_config():
    table = {n: TableEntry(count=1) for n in range(2, 5)}
    config = HandicapConfig(min_rounds=2, window=5, best_of=2, max_index=36.0, table=table)

    assert calculate_handicap(_rounds([90, 80]), config).handicap == pytest.approx(8.0)
    # five rounds fill the window: lowest two of 8, 10, 12, 14, 16
    assert calculate_handicap(_rounds([80, 82, 84, 86, 88]), config).handicap == pytest.approx(9.0)
    assert calculate_handicap(_rounds([150, 150]), config).handicap == pytest.approx(36.0)


def test_config_table_must_cover_history():
    with pytest.raises(ValidationError):
        HandicapConfig(table={3: TableEntry(count=1), 5: TableEntry(count=1)})   # 4 missing

    with pytest.raises(ValidationError):
        HandicapConfig(table={n: TableEntry(count=n + 1) for n in range(3, 20)})


def test_config_from_env():
    config = HandicapConfig.from_env({"HANDICAP_MAX_INDEX": "36", "HANDICAP_BEST_OF": "6"})
    assert config.max_index == 36.0
    assert config.best_of == 6
    assert config.window == 20

    assert HandicapConfig.from_env({}) == HandicapConfig()


def test_wider_window_uses_best_of_past_the_table():
    rounds = _rounds(range(80, 102))   # differentials 8..29

    # default window: most recent 20 are 82..101, lowest eight 10..17
    assert calculate_handicap(rounds).handicap == pytest.approx(13.5)

    wide = HandicapConfig(window=25)
    result = calculate_handicap(rounds, wide)
    assert result.rounds_considered == 22
    assert result.handicap == pytest.approx(11.5)


def test_config_from_env_accepts_wider_window():
    config = HandicapConfig.from_env({"HANDICAP_WINDOW": "30"})
    assert config.window == 30
    assert config.selection_for(19) == TableEntry(count=7)
    assert config.selection_for(24) == TableEntry(count=8)


def test_rounds_without_ids_on_one_date_give_same_result_in_any_order():
    rounds = [Round(date=date(2026, 1, 1), holes=18, score=s) for s in range(70, 91)]
    shuffled = list(rounds)
    random.Random(3).shuffle(shuffled)

    forward = calculate_handicap(rounds)
    assert forward == calculate_handicap(list(reversed(rounds)))
    assert forward == calculate_handicap(shuffled)
    assert forward.rounds_considered == 20
