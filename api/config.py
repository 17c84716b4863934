"""Application configuration and constants."""
import os
import sys
from pathlib import Path


def _resource_path(relative: str) -> Path:
    """Get path to resource, works for PyInstaller bundles."""
    if getattr(sys, "frozen", False):
        base_dir = Path(sys._MEIPASS)
    else:
        base_dir = Path(__file__).resolve().parent.parent
    return base_dir / relative


def _parse_int_env(name: str, default: int) -> int:
    """Parse integer from environment variable."""
    raw = os.environ.get(name)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _parse_float_env(name: str, default: float) -> float:
    """Parse float from environment variable."""
    raw = os.environ.get(name)
    if raw is None:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


# Content store
CONTENT_DIR = Path(os.environ.get("QUIZ_CONTENT_DIR", _resource_path("data")))
# Empty means the desktop client reads CONTENT_DIR directly
CONTENT_URL = os.environ.get("QUIZ_CONTENT_URL", "").rstrip("/")
# Path the content files are expected under, named in "missing file" notices
CONTENT_PUBLIC_PATH = "/data/"

# HTTP
HTTP_TIMEOUT_SECONDS = _parse_float_env("QUIZ_HTTP_TIMEOUT", 5.0)
PROBE_WORKERS = max(1, _parse_int_env("QUIZ_PROBE_WORKERS", 8))

# Server
HOST = os.environ.get("QUIZ_HOST", "127.0.0.1")
PORT = _parse_int_env("QUIZ_PORT", 8000)

# Logging
LOG_LEVEL = os.environ.get("QUIZ_LOG_LEVEL", "INFO").upper()
