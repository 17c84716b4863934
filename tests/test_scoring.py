from datetime import datetime, timedelta, timezone

import pytest

from models import MultiSelect, Question, SingleSelect
from scoring import (
    count_correct,
    elapsed_seconds,
    format_elapsed,
    is_answer_correct,
    score,
    score_percent,
)


def single(correct: int, options: int = 4) -> Question:
    return Question(
        text="single",
        options=tuple(f"option {i}" for i in range(options)),
        answer_key=SingleSelect(correct),
    )


def multi(*correct: int, options: int = 4) -> Question:
    return Question(
        text="multi",
        options=tuple(f"option {i}" for i in range(options)),
        answer_key=MultiSelect(frozenset(correct)),
    )


def test_single_select_all_correct_scores_full_marks() -> None:
    questions = [single(1), single(0)]
    result = score(questions, [1, 0])
    assert result.percent == 100
    assert result.fraction == "2/2"


def test_single_select_half_correct() -> None:
    questions = [single(1), single(0)]
    assert score_percent(questions, [1, 1]) == 50
    assert score(questions, [1, 1]).fraction == "1/2"


def test_single_select_unanswered_is_never_correct() -> None:
    assert not is_answer_correct(single(0), None)
    assert not is_answer_correct(single(0), (0,))


def test_multi_select_exact_set_is_correct() -> None:
    question = multi(0, 2)
    assert is_answer_correct(question, (0, 2))
    assert is_answer_correct(question, (2, 0))


def test_multi_select_extra_selection_is_incorrect() -> None:
    assert not is_answer_correct(multi(0, 2), (0, 1, 2))


def test_multi_select_missing_selection_is_incorrect() -> None:
    assert not is_answer_correct(multi(0, 2), (0,))


def test_multi_select_disjoint_set_is_incorrect() -> None:
    assert not is_answer_correct(multi(0, 2), (1, 3))


def test_multi_select_same_size_wrong_members_is_incorrect() -> None:
    assert not is_answer_correct(multi(0, 2), (0, 3))


def test_multi_select_unanswered_is_incorrect() -> None:
    assert not is_answer_correct(multi(0, 2), None)
    assert not is_answer_correct(multi(0, 2), ())


def test_multi_select_empty_key_matches_empty_answer() -> None:
    assert is_answer_correct(multi(), None)


def test_all_unanswered_scores_zero() -> None:
    questions = [single(0), multi(1, 2), single(3)]
    result = score(questions, [])
    assert result.percent == 0
    assert result.correct == 0
    assert result.total == 3


def test_missing_trailing_answers_count_as_unanswered() -> None:
    questions = [single(0), single(1), single(2)]
    assert count_correct(questions, [0]) == 1


def test_percent_rounds_half_up() -> None:
    eight = [single(0)] * 8
    assert score_percent(eight, [0] + [1] * 7) == 13
    three = [single(0)] * 3
    assert score_percent(three, [0, 0, 1]) == 67
    assert score_percent(three, [0, 1, 1]) == 33


@pytest.mark.parametrize("answered", range(0, 8))
def test_percent_stays_in_range(answered: int) -> None:
    questions = [single(0)] * 7
    answers = [0] * answered + [None] * (7 - answered)
    percent = score_percent(questions, answers)
    assert isinstance(percent, int)
    assert 0 <= percent <= 100


def test_score_rejects_empty_question_list() -> None:
    with pytest.raises(ValueError):
        score([], [])


def test_format_elapsed_pads_seconds() -> None:
    start = datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc)
    assert format_elapsed(start, start + timedelta(seconds=125)) == "2:05"
    assert format_elapsed(start, start + timedelta(minutes=12)) == "12:00"


def test_format_elapsed_floors_fractional_seconds() -> None:
    start = datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc)
    end = start + timedelta(seconds=59, milliseconds=900)
    assert elapsed_seconds(start, end) == 59
    assert format_elapsed(start, end) == "0:59"


def test_format_elapsed_without_timestamps() -> None:
    start = datetime(2024, 1, 1, tzinfo=timezone.utc)
    assert format_elapsed(None, None) == "0:00"
    assert format_elapsed(start, None) == "0:00"
    assert format_elapsed(None, start) == "0:00"
