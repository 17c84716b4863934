from pathlib import Path

import pytest
import requests
from fastapi.testclient import TestClient

from api.app import app
from api.utils import paths
from content import (
    DirectoryContentSource,
    HttpContentSource,
    load_topic,
    parse_topic_document,
)
from errors import EmptyQuizError, QuizLoadError
from models import MultiSelect, SingleSelect


class FakeResponse:
    def __init__(self, status_code=200, payload=None, error=None):
        self.status_code = status_code
        self._payload = payload
        self._error = error

    def json(self):
        if self._error is not None:
            raise self._error
        return self._payload


class FakeSession:
    def __init__(self, response=None, error=None):
        self.response = response or FakeResponse()
        self.error = error
        self.calls = []

    def head(self, url, timeout=None):
        self.calls.append(("head", url, timeout))
        if self.error is not None:
            raise self.error
        return self.response

    def get(self, url, timeout=None):
        self.calls.append(("get", url, timeout))
        if self.error is not None:
            raise self.error
        return self.response


def test_parse_topic_document_builds_answer_keys(encryption_payload: dict) -> None:
    topic = parse_topic_document("encryption", encryption_payload)
    assert topic.id == "encryption"
    assert topic.title == "Encryption"
    assert topic.question_count == 2
    assert topic.multi_select_count == 1
    first, second = topic.questions
    assert first.answer_key == SingleSelect(1)
    assert not first.is_multi_select
    assert second.answer_key == MultiSelect(frozenset({0, 2}))
    assert second.is_multi_select
    assert second.options == ("RSA", "AES", "ECC", "3DES")
    assert first.explanation == "Symmetric encryption uses one key."


def test_parse_topic_document_without_questions_field() -> None:
    with pytest.raises(EmptyQuizError):
        parse_topic_document("encryption", {"title": "Encryption"})


def test_parse_topic_document_with_empty_questions() -> None:
    with pytest.raises(EmptyQuizError):
        parse_topic_document("encryption", {"title": "Encryption", "questions": []})


def test_parse_topic_document_rejects_out_of_range_index() -> None:
    payload = {
        "title": "Broken",
        "questions": [{"question": "q", "options": ["a", "b"], "correct": 2}],
    }
    with pytest.raises(QuizLoadError) as excinfo:
        parse_topic_document("broken", payload)
    assert not isinstance(excinfo.value, EmptyQuizError)


def test_parse_topic_document_rejects_out_of_range_multi_index() -> None:
    payload = {
        "title": "Broken",
        "questions": [{"question": "q", "options": ["a", "b"], "correct": [0, 5]}],
    }
    with pytest.raises(QuizLoadError):
        parse_topic_document("broken", payload)


def test_parse_topic_document_rejects_non_object() -> None:
    with pytest.raises(QuizLoadError):
        parse_topic_document("broken", ["not", "a", "document"])


def test_explanation_defaults_to_empty() -> None:
    payload = {
        "title": "T",
        "questions": [{"question": "q", "options": ["a", "b"], "correct": 0}],
    }
    topic = parse_topic_document("t", payload)
    assert topic.questions[0].explanation == ""


def test_http_source_urls(encryption_payload: dict) -> None:
    session = FakeSession(FakeResponse(200, encryption_payload))
    source = HttpContentSource("http://quiz.local/", session=session, timeout=2.0)
    assert source.url_for("encryption") == "http://quiz.local/data/encryption.json"
    assert source.exists("encryption")
    assert session.calls == [("head", "http://quiz.local/data/encryption.json", 2.0)]
    assert source.describe("encryption") == "/data/"


def test_http_source_non_success_status() -> None:
    source = HttpContentSource("http://quiz.local", session=FakeSession(FakeResponse(404)))
    assert not source.exists("encryption")
    with pytest.raises(QuizLoadError) as excinfo:
        load_topic(source, "encryption")
    assert "404" in excinfo.value.reason


def test_load_topic_wraps_network_errors() -> None:
    session = FakeSession(error=requests.ConnectionError("refused"))
    source = HttpContentSource("http://quiz.local", session=session)
    with pytest.raises(QuizLoadError) as excinfo:
        load_topic(source, "encryption")
    assert "refused" in excinfo.value.reason


def test_load_topic_wraps_bad_json() -> None:
    response = FakeResponse(200, error=ValueError("Expecting value"))
    source = HttpContentSource("http://quiz.local", session=FakeSession(response))
    with pytest.raises(QuizLoadError):
        load_topic(source, "encryption")


def test_load_topic_over_http(content_dir: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(paths, "CONTENT_DIR", content_dir)
    source = HttpContentSource("", session=TestClient(app))
    assert source.exists("encryption")
    assert not source.exists("hashing")
    topic = load_topic(source, "encryption")
    assert topic.title == "Encryption"
    assert topic.question_count == 2


def test_directory_source(content_dir: Path) -> None:
    source = DirectoryContentSource(content_dir)
    assert source.exists("practice-test2")
    assert not source.exists("hashing")
    assert source.describe("hashing") == f"{content_dir.as_posix()}/"
    topic = load_topic(source, "practice-test2")
    assert topic.title == "Practice Test 2"
    with pytest.raises(QuizLoadError):
        load_topic(source, "hashing")


@pytest.mark.parametrize("correct", ["1", True, 1.0, [0, "1"], [True]])
def test_parse_topic_document_rejects_non_integer_correct(correct) -> None:
    payload = {
        "title": "Loose",
        "questions": [{"question": "q", "options": ["a", "b"], "correct": correct}],
    }
    with pytest.raises(QuizLoadError) as excinfo:
        parse_topic_document("loose", payload)
    assert not isinstance(excinfo.value, EmptyQuizError)
