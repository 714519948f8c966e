"""Album listing and search endpoints."""
from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from discography.dependencies import get_store
from discography.schemas.album import AlbumResponse
from discography.schemas.common import MessageResponse
from discography.services.catalog import CatalogService
from discography.services.dataset import DatasetStore

router = APIRouter()


@router.api_route("/getAlbums", methods=["GET", "HEAD"], response_model=List[AlbumResponse])
async def list_albums(store: DatasetStore = Depends(get_store)):
    """List all albums."""
    service = CatalogService(store)
    return [AlbumResponse.from_album(a) for a in service.list_albums()]


@router.api_route(
    "/albumSearch",
    methods=["GET", "HEAD"],
    response_model=List[AlbumResponse],
    responses={400: {"model": MessageResponse}},
)
async def search_albums(
    title: Optional[str] = Query(None, description="Substring of the album title"),
    year: Optional[str] = Query(None, description="Substring of the release year"),
    store: DatasetStore = Depends(get_store),
):
    """Search albums by title and/or release year. At least one is required."""
    service = CatalogService(store)
    return [AlbumResponse.from_album(a) for a in service.search_albums(title, year)]
