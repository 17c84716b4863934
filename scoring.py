from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from datetime import datetime
from typing import Sequence

from models import MultiSelect, Question, RecordedAnswer

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScoreResult:
    correct: int
    total: int
    percent: int

    @property
    def fraction(self) -> str:
        return f"{self.correct}/{self.total}"


def is_answer_correct(question: Question, answer: RecordedAnswer) -> bool:
    key = question.answer_key
    if isinstance(key, MultiSelect):
        if answer is None:
            selected: set[int] = set()
        elif isinstance(answer, int):
            selected = {answer}
        else:
            selected = set(answer)
        # same size plus every key index present means the sets are equal
        if len(selected) != len(key.correct_indices):
            return False
        return all(index in selected for index in key.correct_indices)
    if isinstance(answer, bool) or not isinstance(answer, int):
        return False
    return answer == key.correct_index


def count_correct(
    questions: Sequence[Question], answers: Sequence[RecordedAnswer]
) -> int:
    correct = 0
    for index, question in enumerate(questions):
        answer = answers[index] if index < len(answers) else None
        result = is_answer_correct(question, answer)
        logger.debug(
            "Question %s: answer=%r key=%r multi=%s correct=%s",
            index + 1,
            answer,
            question.answer_key,
            question.is_multi_select,
            result,
        )
        if result:
            correct += 1
    return correct


def _round_percent(correct: int, total: int) -> int:
    # half-up rounding of correct / total * 100
    return (correct * 200 + total) // (2 * total)


def score_percent(
    questions: Sequence[Question], answers: Sequence[RecordedAnswer]
) -> int:
    return score(questions, answers).percent


def score(questions: Sequence[Question], answers: Sequence[RecordedAnswer]) -> ScoreResult:
    """
    Score a finished attempt.

    Raises:
        ValueError: if there are no questions to score
    """
    total = len(questions)
    if total == 0:
        raise ValueError("Cannot score an empty question sequence")
    correct = count_correct(questions, answers)
    return ScoreResult(correct=correct, total=total, percent=_round_percent(correct, total))


def elapsed_seconds(start: datetime | None, end: datetime | None) -> int:
    if start is None or end is None:
        return 0
    seconds = math.floor((end - start).total_seconds())
    return max(0, seconds)


def format_elapsed(start: datetime | None, end: datetime | None) -> str:
    """Format the time between start and end as minutes:seconds."""
    seconds = elapsed_seconds(start, end)
    minutes, seconds = divmod(seconds, 60)
    return f"{minutes}:{seconds:02d}"
