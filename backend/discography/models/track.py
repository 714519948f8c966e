"""Track record."""
from dataclasses import dataclass
from typing import Any, Dict, Optional, Union

Rating = Union[int, float]


@dataclass
class Track:
    """A song belonging to exactly one album.

    ``lyrics`` is ``None`` when the dataset has no lyrics field for the
    track, and ``rating`` is ``None`` until one is set.
    """
    name: Optional[str]
    length: str = ""
    lyrics: Optional[str] = ""
    rating: Optional[Rating] = None
    track_artist: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Track":
        return cls(
            name=data.get("Name"),
            length=data.get("Length") or "",
            lyrics=data.get("Lyrics"),
            rating=data.get("Rating"),
            track_artist=data.get("TrackArtist") or None,
        )

    def has_name(self, title: str) -> bool:
        """Case-insensitive name comparison. Nameless tracks never match."""
        return self.name is not None and self.name.lower() == title.lower()
