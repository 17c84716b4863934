"""Service layer for content files."""
from fastapi import HTTPException

from api.utils import content_dir, validate_content_exists
from availability import Availability, probe_availability
from content import DirectoryContentSource, load_topic
from errors import EmptyQuizError, QuizLoadError
from models import TopicData


def content_source() -> DirectoryContentSource:
    """Source reading the served content directory."""
    return DirectoryContentSource(content_dir())


def current_availability() -> Availability:
    """Probe the content directory against the catalog."""
    return probe_availability(content_source())


def load_content(content_id: str) -> TopicData:
    """Load and validate a content file."""
    validate_content_exists(content_id)
    try:
        return load_topic(content_source(), content_id)
    except EmptyQuizError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    except QuizLoadError as exc:
        raise HTTPException(status_code=422, detail=exc.reason) from exc
