"""Catalog queries: listing and searching albums, songs and lyrics."""
from typing import List, Optional, Tuple

from discography.exceptions import InvalidRequestError
from discography.models import Album, Track
from discography.services.dataset import DatasetStore


def _clean(term: Optional[str]) -> str:
    return term.strip() if term else ""


class CatalogService:
    """Read-only queries over the album dataset.

    Results keep dataset order: albums as loaded, tracks in album order.
    """

    def __init__(self, store: DatasetStore):
        self.store = store

    def list_albums(self) -> List[Album]:
        """All albums."""
        return list(self.store.albums)

    def list_songs(self) -> List[Tuple[Album, Track]]:
        """All tracks of all albums, flattened, with their album."""
        return list(self.store.iter_tracks())

    def search_albums(
        self,
        title: Optional[str] = None,
        year: Optional[str] = None,
    ) -> List[Album]:
        """Albums whose title contains ``title`` and release year contains ``year``.

        Title matching ignores case. An absent filter matches every album.

        Raises:
            InvalidRequestError: neither title nor year was given
        """
        if not title and not year:
            raise InvalidRequestError("Title or year search term are required.", "MissingTitleOrYear")

        title_term = _clean(title).lower()
        year_term = _clean(year)

        results = []
        for album in self.store.albums:
            if title_term and title_term not in album.title.lower():
                continue
            if year_term and year_term not in album.released_text:
                continue
            results.append(album)
        return results

    def search_songs(
        self,
        title: Optional[str] = None,
        year: Optional[str] = None,
    ) -> List[Tuple[Album, Track]]:
        """Tracks whose name contains ``title``, from albums released in ``year``.

        The year filter is applied per album before looking at its tracks.
        Tracks without a name are skipped.

        Raises:
            InvalidRequestError: neither title nor year was given
        """
        if not title and not year:
            raise InvalidRequestError("Title or year search term are required.", "MissingTitleOrYear")

        title_term = _clean(title).lower()
        year_term = _clean(year)

        results = []
        for album in self.store.albums:
            if year_term and year_term not in album.released_text:
                continue
            for track in album.tracks:
                if not track.name:
                    continue
                if title_term and title_term not in track.name.lower():
                    continue
                results.append((album, track))
        return results

    def search_lyrics(self, lyrics: Optional[str]) -> List[Tuple[Album, Track]]:
        """Tracks whose lyrics contain ``lyrics``, ignoring case.

        Raises:
            InvalidRequestError: no search term was given
        """
        if not lyrics:
            raise InvalidRequestError("Lyrics search term is required.", "MissingLyrics")

        term = _clean(lyrics).lower()
        return [
            (album, track)
            for album, track in self.store.iter_tracks()
            if track.lyrics and term in track.lyrics.lower()
        ]
