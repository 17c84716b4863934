from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple, Union


class ContentKind(str, Enum):
    TOPIC = "topic"
    PRACTICE_TEST = "practice-test"


@dataclass(frozen=True)
class Topic:
    id: str
    title: str

    @property
    def file_name(self) -> str:
        return f"{self.id}.json"


@dataclass(frozen=True)
class SingleSelect:
    correct_index: int

    def contains(self, option_index: int) -> bool:
        return option_index == self.correct_index


@dataclass(frozen=True)
class MultiSelect:
    correct_indices: frozenset[int]

    def contains(self, option_index: int) -> bool:
        return option_index in self.correct_indices


AnswerKey = Union[SingleSelect, MultiSelect]

# int for single-select, sorted tuple for multi-select, None when unanswered
RecordedAnswer = Union[int, Tuple[int, ...], None]


@dataclass(frozen=True)
class Question:
    text: str
    options: tuple[str, ...]
    answer_key: AnswerKey
    explanation: str = ""

    @property
    def is_multi_select(self) -> bool:
        return isinstance(self.answer_key, MultiSelect)


@dataclass(frozen=True)
class TopicData:
    id: str
    title: str
    questions: tuple[Question, ...]

    @property
    def question_count(self) -> int:
        return len(self.questions)

    @property
    def multi_select_count(self) -> int:
        return sum(1 for question in self.questions if question.is_multi_select)
