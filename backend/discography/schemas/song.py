"""Song schemas."""
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from discography.models import Album, Track
from discography.schemas.album import cover_reference


class SongResponse(BaseModel):
    """Flattened track with its album's cover.

    ``Rating`` and ``Artist`` are optional; serialize with
    ``exclude_none`` so absent values are omitted rather than null.
    """
    model_config = ConfigDict(populate_by_name=True)

    cover_image: str = Field(alias="CoverImage")
    name: Optional[str] = Field(None, alias="SongName")
    length: str = Field(alias="Length")
    lyrics: Optional[str] = Field(None, alias="Lyrics")
    rating: Optional[Union[int, float]] = Field(None, alias="Rating")
    artist: Optional[str] = Field(None, alias="Artist")

    @classmethod
    def from_track(cls, album: Album, track: Track) -> "SongResponse":
        return cls(
            cover_image=cover_reference(album.cover_image),
            name=track.name,
            length=track.length,
            lyrics=track.lyrics,
            rating=track.rating,
            artist=album.resolve_artist(track) or None,
        )


class LyricsMatchResponse(BaseModel):
    """Track matched by a lyrics search."""
    model_config = ConfigDict(populate_by_name=True)

    cover_image: str = Field(alias="CoverImage")
    name: Optional[str] = Field(None, alias="SongName")
    length: str = Field(alias="Length")
    lyrics: str = Field(alias="Lyrics")

    @classmethod
    def from_track(cls, album: Album, track: Track) -> "LyricsMatchResponse":
        return cls(
            cover_image=cover_reference(album.cover_image),
            name=track.name,
            length=track.length,
            lyrics=track.lyrics or "",
        )


class RatedSong(BaseModel):
    title: str
    rating: Union[int, float]


class RatingResponse(BaseModel):
    """Confirmation of a rating update."""
    message: str
    song: RatedSong

    @classmethod
    def from_track(cls, track: Track) -> "RatingResponse":
        return cls(
            message=f'Rating for "{track.name}" updated successfully.',
            song=RatedSong(title=track.name, rating=track.rating),
        )
