from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Protocol

import requests
from pydantic import ValidationError

from api.config import CONTENT_PUBLIC_PATH, HTTP_TIMEOUT_SECONDS
from api.models.content import QuestionRecord, TopicDocument
from api.utils.json_utils import read_json_file
from errors import EmptyQuizError, QuizLoadError
from models import MultiSelect, Question, SingleSelect, TopicData

logger = logging.getLogger(__name__)


class ContentSource(Protocol):
    def exists(self, content_id: str) -> bool: ...

    def fetch(self, content_id: str) -> Any: ...

    def describe(self, content_id: str) -> str: ...


def _is_success(status_code: int) -> bool:
    return 200 <= status_code < 300


class HttpContentSource:
    """Content files served over HTTP at ``{base_url}/data/{id}.json``."""

    def __init__(
        self,
        base_url: str = "",
        session: Any = None,
        timeout: float = HTTP_TIMEOUT_SECONDS,
    ):
        self.base_url = base_url.rstrip("/")
        self.session = session if session is not None else requests.Session()
        self.timeout = timeout

    def url_for(self, content_id: str) -> str:
        return f"{self.base_url}{CONTENT_PUBLIC_PATH}{content_id}.json"

    def describe(self, content_id: str) -> str:
        return CONTENT_PUBLIC_PATH

    def exists(self, content_id: str) -> bool:
        response = self.session.head(self.url_for(content_id), timeout=self.timeout)
        return _is_success(response.status_code)

    def fetch(self, content_id: str) -> Any:
        response = self.session.get(self.url_for(content_id), timeout=self.timeout)
        if not _is_success(response.status_code):
            raise QuizLoadError(content_id, f"HTTP error! status: {response.status_code}")
        return response.json()


class DirectoryContentSource:
    """Content files read from ``{root}/{id}.json`` on disk."""

    def __init__(self, root: Path):
        self.root = Path(root)

    def path_for(self, content_id: str) -> Path:
        return self.root / f"{content_id}.json"

    def describe(self, content_id: str) -> str:
        return f"{self.root.as_posix()}/"

    def exists(self, content_id: str) -> bool:
        return self.path_for(content_id).is_file()

    def fetch(self, content_id: str) -> Any:
        path = self.path_for(content_id)
        if not path.is_file():
            raise QuizLoadError(content_id, f"{path.name} not found")
        return read_json_file(path)


def _to_question(record: QuestionRecord) -> Question:
    if isinstance(record.correct, list):
        key = MultiSelect(frozenset(record.correct))
    else:
        key = SingleSelect(record.correct)
    return Question(
        text=record.question,
        options=tuple(record.options),
        answer_key=key,
        explanation=record.explanation,
    )


def parse_topic_document(content_id: str, payload: Any) -> TopicData:
    """
    Validate a parsed content file and convert it to TopicData.

    Raises:
        EmptyQuizError: if the document has no questions
        QuizLoadError: if the document does not match the content schema
    """
    if not isinstance(payload, dict):
        raise QuizLoadError(content_id, "content file is not a JSON object")
    try:
        document = TopicDocument.model_validate(payload)
    except ValidationError as exc:
        raise QuizLoadError(content_id, f"invalid content file: {exc.error_count()} errors") from exc
    if not document.questions:
        raise EmptyQuizError(content_id)
    return TopicData(
        id=content_id,
        title=document.title,
        questions=tuple(_to_question(record) for record in document.questions),
    )


def load_topic(source: ContentSource, content_id: str) -> TopicData:
    """Fetch and validate one content file."""
    try:
        payload = source.fetch(content_id)
    except QuizLoadError:
        logger.warning("Error loading %s: bad response", content_id)
        raise
    except (requests.RequestException, OSError, ValueError) as exc:
        logger.warning("Error loading %s: %s", content_id, exc)
        raise QuizLoadError(content_id, str(exc)) from exc
    try:
        topic = parse_topic_document(content_id, payload)
    except QuizLoadError as exc:
        logger.warning("Error loading %s: %s", content_id, exc.reason)
        raise
    logger.info("Loaded %s: %d questions", content_id, topic.question_count)
    return topic
