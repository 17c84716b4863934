"""Validation utilities."""
from pathlib import Path

from fastapi import HTTPException

from api.utils.paths import content_path


def validate_id(name: str, value: str) -> str:
    """Validate ID string (no path traversal)."""
    if not isinstance(value, str):
        raise HTTPException(status_code=400, detail=f"{name} is required")
    cleaned = value.strip()
    if not cleaned:
        raise HTTPException(status_code=400, detail=f"{name} is required")
    if Path(cleaned).name != cleaned or "/" in cleaned or "\\" in cleaned:
        raise HTTPException(status_code=400, detail=f"Invalid {name}")
    return cleaned


def validate_content_exists(content_id: str) -> Path:
    """Validate that the content file exists and return its path."""
    path = content_path(content_id)
    if not path.is_file():
        raise HTTPException(status_code=404, detail="Content not found")
    return path
