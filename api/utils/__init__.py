"""Utility modules."""
from api.utils.json_utils import json_dump, json_load, read_json_file
from api.utils.paths import content_dir, content_path
from api.utils.validation import validate_content_exists, validate_id

__all__ = [
    "json_dump",
    "json_load",
    "read_json_file",
    "content_dir",
    "content_path",
    "validate_content_exists",
    "validate_id",
]
