"""In-memory album dataset, loaded once at startup."""
import json
import logging
from pathlib import Path
from typing import Any, Iterator, List, Optional, Tuple, Union

from discography.exceptions import DatasetError
from discography.models import Album, Track

logger = logging.getLogger(__name__)


class DatasetStore:
    """Owns the album collection shared by the query and mutation services.

    Albums are kept in dataset order. The store has no persistence: any
    change made through the services lives until the process exits.
    """

    def __init__(self, albums: List[Album]):
        self.albums = albums

    @classmethod
    def from_records(cls, records: Any) -> "DatasetStore":
        """Build a store from decoded JSON records."""
        if not isinstance(records, list):
            raise DatasetError("Dataset must be a JSON array of albums")

        albums = []
        for index, record in enumerate(records):
            if not isinstance(record, dict) or "ID" not in record:
                raise DatasetError(f"Dataset entry {index} is not an album with an ID")
            albums.append(Album.from_dict(record))

        store = cls(albums)
        if store.unorganized_album() is None:
            logger.warning("Dataset has no unorganized album (ID 0); songs without an album cannot be added")
        return store

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "DatasetStore":
        """Load the dataset from a JSON file."""
        path = Path(path)
        try:
            records = json.loads(path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            raise DatasetError(f"Dataset file not found: {path}")
        except OSError as e:
            raise DatasetError(f"Dataset file could not be read: {path} ({e})")
        except json.JSONDecodeError as e:
            raise DatasetError(f"Dataset file is not valid JSON: {path} ({e})")

        store = cls.from_records(records)
        logger.info(f"Loaded {store.album_count} albums ({store.track_count} tracks) from {path}")
        return store

    @property
    def album_count(self) -> int:
        return len(self.albums)

    @property
    def track_count(self) -> int:
        return sum(len(album.tracks) for album in self.albums)

    def iter_tracks(self) -> Iterator[Tuple[Album, Track]]:
        """Yield every (album, track) pair in dataset order."""
        for album in self.albums:
            for track in album.tracks:
                yield album, track

    def find_album(self, title: str) -> Optional[Album]:
        """First album whose title equals ``title`` case-insensitively."""
        wanted = title.lower()
        for album in self.albums:
            if album.title.lower() == wanted:
                return album
        return None

    def unorganized_album(self) -> Optional[Album]:
        for album in self.albums:
            if album.is_unorganized:
                return album
        return None

    def find_track(self, title: str) -> Optional[Tuple[Album, Track]]:
        """First track across all albums matching ``title`` case-insensitively."""
        for album in self.albums:
            track = album.find_track(title)
            if track is not None:
                return album, track
        return None
