"""Song listing, search and editing endpoints."""
from typing import List, Optional

from fastapi import APIRouter, Depends, Form, Query, Response, status

from discography.dependencies import get_store
from discography.schemas.common import MessageResponse
from discography.schemas.song import LyricsMatchResponse, RatingResponse, SongResponse
from discography.services.catalog import CatalogService
from discography.services.dataset import DatasetStore
from discography.services.songs import SongService

router = APIRouter()


# ============================================================================
# Queries
# ============================================================================

@router.api_route(
    "/getSongs",
    methods=["GET", "HEAD"],
    response_model=List[SongResponse],
    response_model_exclude_none=True,
)
async def list_songs(store: DatasetStore = Depends(get_store)):
    """List every track of every album."""
    service = CatalogService(store)
    return [SongResponse.from_track(album, track) for album, track in service.list_songs()]


@router.api_route(
    "/songSearch",
    methods=["GET", "HEAD"],
    response_model=List[SongResponse],
    response_model_exclude_none=True,
    responses={400: {"model": MessageResponse}},
)
async def search_songs(
    title: Optional[str] = Query(None, description="Substring of the song name"),
    year: Optional[str] = Query(None, description="Substring of the album release year"),
    store: DatasetStore = Depends(get_store),
):
    """Search songs by name and/or album release year. At least one is required."""
    service = CatalogService(store)
    return [
        SongResponse.from_track(album, track)
        for album, track in service.search_songs(title, year)
    ]


@router.api_route(
    "/getSongFromLyrics",
    methods=["GET", "HEAD"],
    response_model=List[LyricsMatchResponse],
    responses={400: {"model": MessageResponse}},
)
async def search_lyrics(
    lyrics: Optional[str] = Query(None, description="Text to look for in song lyrics"),
    store: DatasetStore = Depends(get_store),
):
    """Find songs whose lyrics contain the given text."""
    service = CatalogService(store)
    return [
        LyricsMatchResponse.from_track(album, track)
        for album, track in service.search_lyrics(lyrics)
    ]


# ============================================================================
# Edits
# ============================================================================

@router.post(
    "/addSong",
    status_code=status.HTTP_201_CREATED,
    response_model=MessageResponse,
    responses={
        204: {"description": "Existing song updated; lyrics cleared"},
        400: {"model": MessageResponse},
        500: {"model": MessageResponse},
    },
)
async def add_song(
    title: Optional[str] = Form(None),
    length: Optional[str] = Form(None),
    album: Optional[str] = Form(None),
    store: DatasetStore = Depends(get_store),
):
    """Add a song to an album (or the unorganized album), or update it."""
    service = SongService(store)
    if service.add_song(title, length, album):
        return MessageResponse(message="Song added successfully.", id="SongAdded")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post(
    "/addRating",
    response_model=RatingResponse,
    responses={
        400: {"model": MessageResponse},
        404: {"model": MessageResponse},
    },
)
async def add_rating(
    title: Optional[str] = Form(None),
    rating: Optional[str] = Form(None),
    store: DatasetStore = Depends(get_store),
):
    """Rate the first song with the given name."""
    service = SongService(store)
    track = service.add_rating(title, rating)
    return RatingResponse.from_track(track)
