"""In-memory catalog records."""
from discography.models.track import Track
from discography.models.album import Album, UNORGANIZED_ALBUM_ID

__all__ = ["Track", "Album", "UNORGANIZED_ALBUM_ID"]
