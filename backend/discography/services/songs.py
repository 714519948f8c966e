"""Song mutations: adding songs and rating them."""
import logging
import math
from typing import Optional, Union

from discography.exceptions import InternalError, NotFoundError, InvalidRequestError
from discography.models import Track
from discography.models.track import Rating
from discography.services.dataset import DatasetStore

logger = logging.getLogger(__name__)


def parse_rating(value: Union[str, int, float]) -> Rating:
    """Parse a submitted rating into an int (when integral) or float.

    Raises:
        InvalidRequestError: value is not a finite number
    """
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise InvalidRequestError(f"Rating must be a number, got {value!r}.", "InvalidRating")

    if not math.isfinite(number):
        raise InvalidRequestError(f"Rating must be a number, got {value!r}.", "InvalidRating")

    return int(number) if number.is_integer() else number


class SongService:
    """Read-modify-write operations on tracks in the dataset.

    Every check runs before the dataset is touched, so a raised error
    always leaves the store unchanged.
    """

    def __init__(self, store: DatasetStore):
        self.store = store

    def add_song(
        self,
        title: Optional[str],
        length: Optional[str],
        album_title: Optional[str] = None,
    ) -> bool:
        """Add a song to an album, or update it if the album already has it.

        The song goes to the album titled ``album_title`` (case-insensitive)
        when one exists, otherwise to the unorganized album. Re-adding an
        existing song replaces its length and clears its lyrics.

        Returns:
            True if a new track was created, False if an existing one was updated

        Raises:
            InvalidRequestError: title or length missing
            InternalError: the dataset has no unorganized album
        """
        if not title or not length:
            raise InvalidRequestError("Title and length fields are required.", "MissingFields")

        album = self.store.find_album(album_title) if album_title else None
        if album is None:
            album = self.store.unorganized_album()
            if album is None:
                logger.error("Unorganized album (ID 0) missing from dataset")
                raise InternalError("Unorganized album not found in dataset.", "InternalServerError")

        existing = album.find_track(title)
        if existing is None:
            album.tracks.append(Track(name=title, length=length, lyrics=""))
            logger.info(f"Added song '{title}' ({length}) to album '{album.title}'")
            return True

        existing.length = length
        existing.lyrics = ""
        logger.info(f"Updated song '{existing.name}' in album '{album.title}': length {length}, lyrics cleared")
        return False

    def add_rating(
        self,
        title: Optional[str],
        rating: Optional[Union[str, int, float]],
    ) -> Track:
        """Set the rating of the first track named ``title`` in any album.

        Returns:
            The updated track

        Raises:
            InvalidRequestError: title or rating missing, or rating not a number
            NotFoundError: no album has a track with that name
        """
        if not title or rating is None or rating == "":
            raise InvalidRequestError("Both title and rating are required.", "MissingFields")

        value = parse_rating(rating)

        found = self.store.find_track(title)
        if found is None:
            raise NotFoundError(f'Song "{title}" not found in any album.', "SongNotFound")

        album, track = found
        track.rating = value
        logger.info(f"Rated '{track.name}' in album '{album.title}': {value}")
        return track
