"""Path utilities for content files."""
from pathlib import Path

from api.config import CONTENT_DIR


def content_dir() -> Path:
    """Get directory holding the content files."""
    return CONTENT_DIR


def content_path(content_id: str) -> Path:
    """Get path to a topic or practice test JSON file."""
    return content_dir() / f"{content_id}.json"
