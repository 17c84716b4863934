from __future__ import annotations

from typing import Any, Sequence

from availability import Availability
from catalog import PRACTICE_TESTS, TOPICS
from models import ContentKind, Question, RecordedAnswer, Topic, TopicData
from scoring import is_answer_correct
from session import Completed, QuizController

STATUS_AVAILABLE = "Available"
STATUS_MISSING = "JSON file missing"

OPTION_CORRECT = "correct"
OPTION_INCORRECT = "incorrect"
OPTION_NEUTRAL = "neutral"

MULTI_SELECT_HINT = "(Select all that apply)"


def option_letter(index: int) -> str:
    return f"{chr(65 + index)}."


def _catalog_entries(
    entries: Sequence[Topic], kind: ContentKind, availability: Availability
) -> list[dict[str, Any]]:
    payload = []
    for entry in entries:
        available = availability.is_available(entry.id, kind)
        payload.append(
            {
                "id": entry.id,
                "title": entry.title,
                "kind": kind.value,
                "available": available,
                "status": STATUS_AVAILABLE if available else STATUS_MISSING,
                "fileName": entry.file_name,
            }
        )
    return payload


def serialize_catalog(
    availability: Availability,
    topics: Sequence[Topic] = TOPICS,
    practice_tests: Sequence[Topic] = PRACTICE_TESTS,
) -> dict[str, Any]:
    return {
        "topics": _catalog_entries(topics, ContentKind.TOPIC, availability),
        "practiceTests": _catalog_entries(
            practice_tests, ContentKind.PRACTICE_TEST, availability
        ),
        "topicsAvailable": len(availability.topics),
        "practiceTestsAvailable": len(availability.practice_tests),
        "itemsAvailable": availability.total,
    }


def serialize_question(controller: QuizController) -> dict[str, Any]:
    """Payload for the question being answered."""
    question = controller.current_question
    position, total = controller.progress
    return {
        "label": f"Question {position} of {total}",
        "progressPercent": position / total * 100,
        "question": question.text,
        "multiSelect": question.is_multi_select,
        "hint": MULTI_SELECT_HINT if question.is_multi_select else "",
        "options": [
            {
                "index": index,
                "letter": option_letter(index),
                "text": text,
                "selected": controller.is_selected(index),
            }
            for index, text in enumerate(question.options)
        ],
        "canProceed": controller.can_proceed,
        "advanceLabel": controller.advance_label,
    }


def _selected_indices(answer: RecordedAnswer) -> set[int]:
    if answer is None:
        return set()
    if isinstance(answer, int):
        return {answer}
    return set(answer)


def serialize_review_item(
    index: int, question: Question, answer: RecordedAnswer
) -> dict[str, Any]:
    correct = is_answer_correct(question, answer)
    picked = _selected_indices(answer)
    options = []
    for option_index, text in enumerate(question.options):
        if question.answer_key.contains(option_index):
            status = OPTION_CORRECT
        elif option_index in picked and not correct:
            status = OPTION_INCORRECT
        else:
            status = OPTION_NEUTRAL
        options.append(
            {
                "index": option_index,
                "text": text,
                "status": status,
                "selected": option_index in picked,
            }
        )
    return {
        "number": index + 1,
        "question": question.text,
        "multiSelect": question.is_multi_select,
        "hint": MULTI_SELECT_HINT if question.is_multi_select else "",
        "isCorrect": correct,
        "answer": list(answer) if isinstance(answer, tuple) else answer,
        "options": options,
        "explanation": question.explanation,
    }


def serialize_review(completed: Completed) -> dict[str, Any]:
    topic = completed.topic
    answers = completed.answers
    result = completed.result
    items = []
    for index, question in enumerate(topic.questions):
        answer = answers[index] if index < len(answers) else None
        items.append(serialize_review_item(index, question, answer))
    return {
        "id": topic.id,
        "title": topic.title,
        "score": result.percent,
        "correctCount": result.fraction,
        "timeTaken": completed.time_taken,
        "questions": items,
    }


def serialize_metadata(topic: TopicData) -> dict[str, Any]:
    return {
        "id": topic.id,
        "title": topic.title,
        "questionCount": topic.question_count,
        "multiSelectCount": topic.multi_select_count,
    }
