"""Album record."""
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union

from discography.models.track import Track

# Default bucket for songs added without an album
UNORGANIZED_ALBUM_ID = 0


@dataclass
class Album:
    """An album and its ordered track list."""
    id: int
    title: str
    artist: str = ""
    cover_image: str = ""
    released: Union[int, str] = ""
    length: str = ""
    label: str = ""
    description: str = ""
    youtube_url: str = ""
    spotify_url: str = ""
    apple_url: str = ""
    wiki_url: str = ""
    tracks: List[Track] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Album":
        released = data.get("Released")
        return cls(
            id=data["ID"],
            title=data.get("AlbumTitle") or "",
            artist=data.get("AlbumArtist") or "",
            cover_image=data.get("CoverImage") or "",
            released="" if released is None else released,
            length=data.get("Length") or "",
            label=data.get("Label") or "",
            description=data.get("Description") or "",
            youtube_url=data.get("YoutubeURL") or "",
            spotify_url=data.get("SpotifyURL") or "",
            apple_url=data.get("AppleURL") or "",
            wiki_url=data.get("WikiURL") or "",
            tracks=[Track.from_dict(t) for t in data.get("Tracks") or []],
        )

    @property
    def is_unorganized(self) -> bool:
        return self.id == UNORGANIZED_ALBUM_ID

    @property
    def released_text(self) -> str:
        """Release year as text, for substring year searches."""
        return str(self.released)

    def find_track(self, title: str) -> Optional[Track]:
        """First track whose name matches ``title`` case-insensitively."""
        for track in self.tracks:
            if track.has_name(title):
                return track
        return None

    def resolve_artist(self, track: Track) -> str:
        """Track artist, falling back to the album artist."""
        return track.track_artist or self.artist
