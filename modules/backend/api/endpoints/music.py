"""
Music Catalog Endpoints.
"""

from fastapi import APIRouter

from modules.backend.schemas.track import TrackResponse
from modules.backend.services.catalog import CatalogService

router = APIRouter()


@router.get(
    "",
    response_model=list[TrackResponse],
    summary="List the music catalog",
)
async def list_music() -> list[TrackResponse]:
    return [TrackResponse.model_validate(track) for track in CatalogService().list_music()]
