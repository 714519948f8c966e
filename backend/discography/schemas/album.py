"""Album schemas."""
from typing import Union
from urllib.parse import quote

from pydantic import BaseModel, ConfigDict, Field

from discography.models import Album


def cover_reference(cover_image: str) -> str:
    """Rewrite a cover image name into its /getImage retrieval path."""
    return f"/getImage?image={quote(cover_image, safe='')}"


class AlbumResponse(BaseModel):
    """Public album shape (tracks are served by the song endpoints)."""
    model_config = ConfigDict(populate_by_name=True)

    id: int = Field(alias="ID")
    title: str = Field(alias="AlbumTitle")
    artist: str = Field(alias="AlbumArtist")
    cover_image: str = Field(alias="CoverImage")
    released: Union[int, str] = Field(alias="Released")
    length: str = Field(alias="Length")
    label: str = Field(alias="Label")
    description: str = Field(alias="Description")
    youtube_url: str = Field(alias="YoutubeURL")
    spotify_url: str = Field(alias="SpotifyURL")
    apple_url: str = Field(alias="AppleURL")
    wiki_url: str = Field(alias="WikiURL")

    @classmethod
    def from_album(cls, album: Album) -> "AlbumResponse":
        return cls(
            id=album.id,
            title=album.title,
            artist=album.artist,
            cover_image=cover_reference(album.cover_image),
            released=album.released,
            length=album.length,
            label=album.label,
            description=album.description,
            youtube_url=album.youtube_url,
            spotify_url=album.spotify_url,
            apple_url=album.apple_url,
            wiki_url=album.wiki_url,
        )
