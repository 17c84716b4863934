"""Quiz session state machine."""
from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from datetime import datetime, timezone
from enum import Enum
from typing import Callable, Union

from availability import Availability
from catalog import find_entry
from content import ContentSource, load_topic
from errors import ContentUnavailableError, InvalidTransitionError, QuizLoadError
from models import ContentKind, Question, RecordedAnswer, TopicData
from scoring import ScoreResult, format_elapsed, score

logger = logging.getLogger(__name__)


class View(str, Enum):
    HOME = "home"
    TOPICS = "topics"
    PRACTICE_TESTS = "practice-tests"
    QUIZ = "quiz"


@dataclass(frozen=True)
class SingleSelection:
    """Pending choice for a single-select question; at most one index."""

    index: int | None = None

    def choose(self, option_index: int) -> "SingleSelection":
        return SingleSelection(option_index)

    def contains(self, option_index: int) -> bool:
        return self.index == option_index

    @property
    def ready(self) -> bool:
        return self.index is not None

    def committed(self) -> RecordedAnswer:
        return self.index


@dataclass(frozen=True)
class MultiSelection:
    """Pending choices for a multi-select question; choosing toggles."""

    indices: frozenset[int] = frozenset()

    def choose(self, option_index: int) -> "MultiSelection":
        if option_index in self.indices:
            return MultiSelection(self.indices - {option_index})
        return MultiSelection(self.indices | {option_index})

    def contains(self, option_index: int) -> bool:
        return option_index in self.indices

    @property
    def ready(self) -> bool:
        return bool(self.indices)

    def committed(self) -> RecordedAnswer:
        return tuple(sorted(self.indices))


Selection = Union[SingleSelection, MultiSelection]


def new_selection(question: Question) -> Selection:
    if question.is_multi_select:
        return MultiSelection()
    return SingleSelection()


@dataclass(frozen=True)
class Browsing:
    view: View = View.HOME


@dataclass(frozen=True)
class Loading:
    content_id: str
    return_view: View


@dataclass(frozen=True)
class InProgress:
    topic: TopicData
    index: int
    answers: tuple[RecordedAnswer, ...]
    selection: Selection
    started_at: datetime

    @property
    def question(self) -> Question:
        return self.topic.questions[self.index]

    @property
    def is_last_question(self) -> bool:
        return self.index + 1 >= self.topic.question_count


@dataclass(frozen=True)
class Completed:
    topic: TopicData
    answers: tuple[RecordedAnswer, ...]
    started_at: datetime
    finished_at: datetime

    @property
    def result(self) -> ScoreResult:
        return score(self.topic.questions, self.answers)

    @property
    def time_taken(self) -> str:
        return format_elapsed(self.started_at, self.finished_at)


SessionState = Union[Browsing, Loading, InProgress, Completed]


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class QuizController:
    """
    Holds the current view and quiz attempt and applies user actions to them.

    Every operation either moves to a new state or raises without touching
    the current one.
    """

    def __init__(
        self,
        source: ContentSource,
        availability: Availability | None = None,
        clock: Callable[[], datetime] = _utc_now,
    ):
        self.source = source
        self.availability = availability or Availability.empty()
        self.clock = clock
        self.state: SessionState = Browsing(View.HOME)

    # Views

    @property
    def view(self) -> View | None:
        """Current view, or None while content is loading."""
        if isinstance(self.state, Browsing):
            return self.state.view
        if isinstance(self.state, Loading):
            return None
        return View.QUIZ

    @property
    def loading(self) -> bool:
        return isinstance(self.state, Loading)

    @property
    def results_shown(self) -> bool:
        return isinstance(self.state, Completed)

    def set_availability(self, availability: Availability) -> None:
        self.availability = availability

    def _require(self, *kinds: type) -> None:
        if not isinstance(self.state, kinds):
            names = ", ".join(kind.__name__ for kind in kinds)
            raise InvalidTransitionError(
                f"Expected session state {names}, got {type(self.state).__name__}"
            )

    def show_topics(self) -> None:
        self._require(Browsing)
        self.state = Browsing(View.TOPICS)

    def show_practice_tests(self) -> None:
        self._require(Browsing)
        self.state = Browsing(View.PRACTICE_TESTS)

    def go_home(self) -> None:
        """Return to the home view, dropping any quiz attempt."""
        self._require(Browsing, InProgress, Completed)
        if isinstance(self.state, (InProgress, Completed)):
            logger.info("Leaving quiz %s", self.state.topic.id)
        self.state = Browsing(View.HOME)

    # Starting a quiz

    def check_startable(self, content_id: str) -> ContentKind:
        entry = find_entry(content_id)
        kind = entry[1] if entry else ContentKind.TOPIC
        if entry is None or not self.availability.is_available(content_id, kind):
            raise ContentUnavailableError(
                content_id,
                self.source.describe(content_id),
                practice_test=kind is ContentKind.PRACTICE_TEST,
            )
        return kind

    def begin_loading(self, content_id: str) -> None:
        self._require(Browsing)
        self.check_startable(content_id)
        self.state = Loading(content_id, self.state.view)

    def finish_loading(self, topic: TopicData) -> None:
        self._require(Loading)
        if not topic.questions:
            raise ValueError("Cannot start a quiz without questions")
        self.state = InProgress(
            topic=topic,
            index=0,
            answers=(),
            selection=new_selection(topic.questions[0]),
            started_at=self.clock(),
        )
        logger.info("Started quiz %s (%d questions)", topic.id, topic.question_count)

    def fail_loading(self) -> None:
        self._require(Loading)
        self.state = Browsing(self.state.return_view)

    def start_quiz(self, content_id: str) -> None:
        """Check availability, load the content and start the attempt."""
        self.begin_loading(content_id)
        try:
            topic = load_topic(self.source, content_id)
        except QuizLoadError:
            self.fail_loading()
            raise
        self.finish_loading(topic)

    # Answering

    @property
    def current_question(self) -> Question:
        self._require(InProgress)
        return self.state.question

    @property
    def progress(self) -> tuple[int, int]:
        self._require(InProgress)
        return self.state.index + 1, self.state.topic.question_count

    @property
    def advance_label(self) -> str:
        self._require(InProgress)
        return "Finish Quiz" if self.state.is_last_question else "Next Question"

    def select_answer(self, option_index: int) -> None:
        self._require(InProgress)
        question = self.state.question
        if option_index < 0 or option_index >= len(question.options):
            raise ValueError(f"Option index {option_index} is out of range")
        selection = self.state.selection.choose(option_index)
        logger.debug("Question %d selection: %r", self.state.index + 1, selection)
        self.state = replace(self.state, selection=selection)

    def is_selected(self, option_index: int) -> bool:
        self._require(InProgress)
        return self.state.selection.contains(option_index)

    @property
    def can_proceed(self) -> bool:
        return isinstance(self.state, InProgress) and self.state.selection.ready

    def advance(self) -> bool:
        """
        Record the pending selection and move on.

        Returns False, leaving the state unchanged, when nothing is selected.
        """
        self._require(InProgress)
        if not self.state.selection.ready:
            return False
        current = self.state
        answers = current.answers[: current.index] + (current.selection.committed(),)
        if current.is_last_question:
            self.state = Completed(
                topic=current.topic,
                answers=answers,
                started_at=current.started_at,
                finished_at=self.clock(),
            )
            result = self.state.result
            logger.info(
                "Finished quiz %s: %s (%d%%) in %s",
                current.topic.id,
                result.fraction,
                result.percent,
                self.state.time_taken,
            )
            return True
        next_index = current.index + 1
        self.state = replace(
            current,
            index=next_index,
            answers=answers,
            selection=new_selection(current.topic.questions[next_index]),
        )
        return True

    def restart(self) -> None:
        """Start the same topic over with no answers."""
        self._require(InProgress, Completed)
        topic = self.state.topic
        self.state = InProgress(
            topic=topic,
            index=0,
            answers=(),
            selection=new_selection(topic.questions[0]),
            started_at=self.clock(),
        )
        logger.info("Restarted quiz %s", topic.id)
