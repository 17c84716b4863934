"""Background work for the desktop client.

Workers run on daemon threads and post ``(kind, value)`` tuples onto a queue
that the UI thread drains.
"""
import logging
import queue
import threading

from availability import probe_availability
from content import ContentSource, load_topic
from errors import QuizLoadError

logger = logging.getLogger(__name__)


def run_probe(source: ContentSource, results: queue.Queue) -> None:
    results.put(("availability", probe_availability(source)))


def run_load(source: ContentSource, content_id: str, results: queue.Queue) -> None:
    try:
        topic = load_topic(source, content_id)
    except QuizLoadError as exc:
        results.put(("failed", exc))
    except Exception as exc:
        logger.exception("Unexpected error loading %s", content_id)
        results.put(("failed", QuizLoadError(content_id, str(exc))))
    else:
        results.put(("loaded", topic))


def start_probe(source: ContentSource, results: queue.Queue) -> threading.Thread:
    worker = threading.Thread(
        target=run_probe,
        args=(source, results),
        name="availability_probe",
        daemon=True,
    )
    worker.start()
    return worker


def start_load(source: ContentSource, content_id: str, results: queue.Queue) -> threading.Thread:
    worker = threading.Thread(
        target=run_load,
        args=(source, content_id, results),
        name="quiz_loader",
        daemon=True,
    )
    worker.start()
    return worker
