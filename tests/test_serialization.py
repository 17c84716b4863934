from datetime import datetime, timedelta, timezone

from availability import Availability
from catalog import PRACTICE_TESTS, TOPICS
from content import DirectoryContentSource, parse_topic_document
from models import MultiSelect, Question, SingleSelect
from serialization import (
    OPTION_CORRECT,
    OPTION_INCORRECT,
    OPTION_NEUTRAL,
    option_letter,
    serialize_catalog,
    serialize_metadata,
    serialize_question,
    serialize_review,
    serialize_review_item,
)
from session import Completed, QuizController

START = datetime(2024, 1, 1, tzinfo=timezone.utc)


def test_option_letters() -> None:
    assert [option_letter(i) for i in range(4)] == ["A.", "B.", "C.", "D."]


def test_catalog_marks_missing_files() -> None:
    availability = Availability(
        topics=frozenset({"encryption", "hashing"}),
        practice_tests=frozenset(),
    )
    catalog = serialize_catalog(availability)
    assert len(catalog["topics"]) == len(TOPICS)
    assert len(catalog["practiceTests"]) == len(PRACTICE_TESTS)
    by_id = {entry["id"]: entry for entry in catalog["topics"]}
    assert by_id["encryption"]["status"] == "Available"
    assert by_id["encryption"]["available"] is True
    assert by_id["encryption"]["fileName"] == "encryption.json"
    assert by_id["penetration-testing"]["status"] == "JSON file missing"
    assert catalog["practiceTests"][0]["kind"] == "practice-test"
    assert catalog["topicsAvailable"] == 2
    assert catalog["practiceTestsAvailable"] == 0
    assert catalog["itemsAvailable"] == 2


def test_catalog_before_probe_shows_everything_missing() -> None:
    catalog = serialize_catalog(Availability.empty())
    assert catalog["itemsAvailable"] == 0
    assert all(not entry["available"] for entry in catalog["topics"])


def test_question_payload(content_dir) -> None:
    controller = QuizController(
        DirectoryContentSource(content_dir),
        Availability(topics=frozenset({"encryption"})),
    )
    controller.start_quiz("encryption")
    payload = serialize_question(controller)
    assert payload["label"] == "Question 1 of 2"
    assert payload["progressPercent"] == 50
    assert payload["hint"] == ""
    assert payload["canProceed"] is False
    assert payload["advanceLabel"] == "Next Question"
    assert [option["letter"] for option in payload["options"]] == ["A.", "B.", "C.", "D."]

    controller.select_answer(1)
    controller.advance()
    controller.select_answer(0)
    payload = serialize_question(controller)
    assert payload["label"] == "Question 2 of 2"
    assert payload["multiSelect"] is True
    assert payload["hint"] == "(Select all that apply)"
    assert [option["selected"] for option in payload["options"]] == [True, False, False, False]
    assert payload["canProceed"] is True
    assert payload["advanceLabel"] == "Finish Quiz"


def test_review_item_for_wrong_multi_select() -> None:
    question = Question("q", ("a", "b", "c", "d"), MultiSelect(frozenset({0, 2})), "why")
    item = serialize_review_item(0, question, (0, 1))
    assert item["number"] == 1
    assert item["isCorrect"] is False
    assert item["answer"] == [0, 1]
    assert [option["status"] for option in item["options"]] == [
        OPTION_CORRECT,
        OPTION_INCORRECT,
        OPTION_CORRECT,
        OPTION_NEUTRAL,
    ]
    assert item["explanation"] == "why"


def test_review_item_for_right_single_select() -> None:
    question = Question("q", ("a", "b", "c"), SingleSelect(1))
    item = serialize_review_item(2, question, 1)
    assert item["isCorrect"] is True
    assert [option["status"] for option in item["options"]] == [
        OPTION_NEUTRAL,
        OPTION_CORRECT,
        OPTION_NEUTRAL,
    ]
    assert item["options"][1]["selected"] is True


def test_review_item_for_unanswered_question() -> None:
    question = Question("q", ("a", "b"), SingleSelect(0))
    item = serialize_review_item(0, question, None)
    assert item["isCorrect"] is False
    assert item["answer"] is None
    assert [option["status"] for option in item["options"]] == [OPTION_CORRECT, OPTION_NEUTRAL]


def test_review_summary(encryption_payload: dict) -> None:
    topic = parse_topic_document("encryption", encryption_payload)
    completed = Completed(
        topic=topic,
        answers=(1, (0, 1, 2)),
        started_at=START,
        finished_at=START + timedelta(seconds=75),
    )
    review = serialize_review(completed)
    assert review["title"] == "Encryption"
    assert review["score"] == 50
    assert review["correctCount"] == "1/2"
    assert review["timeTaken"] == "1:15"
    assert [item["isCorrect"] for item in review["questions"]] == [True, False]


def test_metadata(encryption_payload: dict) -> None:
    topic = parse_topic_document("encryption", encryption_payload)
    assert serialize_metadata(topic) == {
        "id": "encryption",
        "title": "Encryption",
        "questionCount": 2,
        "multiSelectCount": 1,
    }
