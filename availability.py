"""Content availability probing."""
from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Sequence

from api.config import PROBE_WORKERS
from catalog import PRACTICE_TESTS, TOPICS
from content import ContentSource
from models import ContentKind, Topic

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Availability:
    topics: frozenset[str] = frozenset()
    practice_tests: frozenset[str] = frozenset()

    @classmethod
    def empty(cls) -> "Availability":
        return cls()

    @property
    def total(self) -> int:
        return len(self.topics) + len(self.practice_tests)

    def ids_for(self, kind: ContentKind) -> frozenset[str]:
        if kind is ContentKind.PRACTICE_TEST:
            return self.practice_tests
        return self.topics

    def is_available(self, content_id: str, kind: ContentKind | None = None) -> bool:
        if kind is not None:
            return content_id in self.ids_for(kind)
        return content_id in self.topics or content_id in self.practice_tests


def check_available(source: ContentSource, content_id: str) -> bool:
    """Check one content file; any failure counts as unavailable."""
    try:
        return bool(source.exists(content_id))
    except Exception as exc:
        logger.debug("Availability check for %s failed: %s", content_id, exc)
        return False


def _probe_ids(source: ContentSource, ids: list[str], max_workers: int) -> frozenset[str]:
    if not ids:
        return frozenset()
    if max_workers <= 1:
        results = [check_available(source, content_id) for content_id in ids]
    else:
        with ThreadPoolExecutor(
            max_workers=min(max_workers, len(ids)),
            thread_name_prefix="availability_probe",
        ) as executor:
            results = list(executor.map(lambda cid: check_available(source, cid), ids))
    return frozenset(content_id for content_id, ok in zip(ids, results) if ok)


def probe_availability(
    source: ContentSource,
    topics: Sequence[Topic] = TOPICS,
    practice_tests: Sequence[Topic] = PRACTICE_TESTS,
    *,
    max_workers: int = PROBE_WORKERS,
) -> Availability:
    """
    Check which topics and practice tests have a content file.

    With max_workers=1 the checks run one at a time in catalog order,
    otherwise they are dispatched to a thread pool and joined.
    """
    ids = [topic.id for topic in topics] + [test.id for test in practice_tests]
    found = _probe_ids(source, ids, max_workers)
    availability = Availability(
        topics=frozenset(topic.id for topic in topics if topic.id in found),
        practice_tests=frozenset(test.id for test in practice_tests if test.id in found),
    )
    logger.info(
        "Availability: %d/%d topics, %d/%d practice tests",
        len(availability.topics),
        len(topics),
        len(availability.practice_tests),
        len(practice_tests),
    )
    return availability
