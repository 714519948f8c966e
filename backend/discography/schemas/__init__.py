"""Pydantic schemas for API responses."""
from discography.schemas.album import AlbumResponse, cover_reference
from discography.schemas.song import (
    SongResponse,
    LyricsMatchResponse,
    RatedSong,
    RatingResponse,
)
from discography.schemas.common import MessageResponse, PreviewResponse

__all__ = [
    "AlbumResponse",
    "cover_reference",
    "SongResponse",
    "LyricsMatchResponse",
    "RatedSong",
    "RatingResponse",
    "MessageResponse",
    "PreviewResponse",
]
