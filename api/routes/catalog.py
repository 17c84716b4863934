"""Catalog endpoints."""
from fastapi import APIRouter

from api.models import CatalogResponse
from api.services.content_service import current_availability
from serialization import serialize_catalog

router = APIRouter(prefix="/api/catalog", tags=["catalog"])


@router.get("", response_model=CatalogResponse)
def get_catalog() -> dict[str, object]:
    """List topics and practice tests with their availability."""
    return serialize_catalog(current_availability())
