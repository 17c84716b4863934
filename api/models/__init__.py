"""Pydantic models."""
from api.models.content import (
    CatalogEntry,
    CatalogResponse,
    ContentSummary,
    QuestionRecord,
    TopicDocument,
)

__all__ = [
    "CatalogEntry",
    "CatalogResponse",
    "ContentSummary",
    "QuestionRecord",
    "TopicDocument",
]
