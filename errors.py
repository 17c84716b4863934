"""Quiz error hierarchy."""
from __future__ import annotations


class QuizError(Exception):
    """Base class for errors shown to the user as a notice."""


class ContentUnavailableError(QuizError):
    """Content was selected before the probe confirmed its file exists."""

    def __init__(self, content_id: str, path: str, practice_test: bool = False):
        self.content_id = content_id
        self.path = path
        self.practice_test = practice_test
        if practice_test:
            message = (
                "Practice test is not available yet. "
                f"Please add the {content_id}.json file to the {path} folder."
            )
        else:
            message = (
                "Questions for this topic are not available yet. "
                f"Please add the {content_id}.json file to the {path} folder."
            )
        super().__init__(message)


class QuizLoadError(QuizError):
    """Fetching or parsing a content document failed."""

    def __init__(self, content_id: str, reason: str):
        self.content_id = content_id
        self.reason = reason
        super().__init__(
            "Error loading quiz data. Please check if the JSON file exists "
            f"and is properly formatted. ({reason})"
        )


class EmptyQuizError(QuizLoadError):
    """A content document parsed fine but carries no questions."""

    def __init__(self, content_id: str):
        QuizError.__init__(self, "No questions found in this file.")
        self.content_id = content_id
        self.reason = "no questions"


class InvalidTransitionError(QuizError):
    """An operation was called in a session state that does not allow it."""
