"""Content file endpoints."""
from fastapi import APIRouter, HTTPException
from fastapi.responses import FileResponse

from api.models import ContentSummary
from api.services.content_service import load_content
from api.utils import validate_content_exists, validate_id
from serialization import serialize_metadata

router = APIRouter(tags=["content"])


@router.api_route("/data/{file_name}", methods=["GET", "HEAD"])
def get_content_file(file_name: str) -> FileResponse:
    """Serve a topic or practice test JSON file."""
    file_name = validate_id("file name", file_name)
    if not file_name.endswith(".json"):
        raise HTTPException(status_code=404, detail="Content not found")
    path = validate_content_exists(file_name.removesuffix(".json"))
    return FileResponse(path, media_type="application/json")


@router.get("/api/content/{content_id}", response_model=ContentSummary)
def get_content_summary(content_id: str) -> dict[str, object]:
    """Validate a content file and summarize it."""
    content_id = validate_id("content id", content_id)
    return serialize_metadata(load_content(content_id))
