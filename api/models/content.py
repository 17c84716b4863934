"""Content document Pydantic models."""
from pydantic import BaseModel, Field, StrictInt, model_validator


class QuestionRecord(BaseModel):
    """One question as stored in a content file."""

    question: str
    options: list[str] = Field(..., min_length=1)
    correct: StrictInt | list[StrictInt]
    explanation: str = ""

    @model_validator(mode="after")
    def check_correct_in_bounds(self) -> "QuestionRecord":
        indices = self.correct if isinstance(self.correct, list) else [self.correct]
        for index in indices:
            if index < 0 or index >= len(self.options):
                raise ValueError(
                    f"correct index {index} is out of range for "
                    f"{len(self.options)} options"
                )
        return self


class TopicDocument(BaseModel):
    """A topic or practice test content file."""

    title: str = ""
    questions: list[QuestionRecord] | None = None


class ContentSummary(BaseModel):
    """Summary of a validated content file."""

    id: str
    title: str
    questionCount: int
    multiSelectCount: int


class CatalogEntry(BaseModel):
    """One catalog entry with its availability."""

    id: str
    title: str
    kind: str
    available: bool
    status: str
    fileName: str


class CatalogResponse(BaseModel):
    """Topics and practice tests with availability counts."""

    topics: list[CatalogEntry]
    practiceTests: list[CatalogEntry]
    topicsAvailable: int
    practiceTestsAvailable: int
    itemsAvailable: int
