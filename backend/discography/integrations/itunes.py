"""iTunes Search API client for song previews.

See https://performance-partners.apple.com/search-api
"""
import logging
from typing import List, Optional

import httpx

from discography.config import settings

logger = logging.getLogger(__name__)


class ITunesError(Exception):
    """iTunes search request failed."""
    pass


class ITunesClient:
    """iTunes Search API client."""

    def __init__(
        self,
        search_url: Optional[str] = None,
        timeout: Optional[float] = None,
        limit: Optional[int] = None,
    ):
        self.search_url = search_url or settings.itunes_search_url
        self.timeout = timeout if timeout is not None else settings.itunes_timeout
        self.limit = limit or settings.itunes_result_limit

    async def search_songs(self, term: str) -> List[dict]:
        """Search the song catalog. Returns the raw ``results`` entries."""
        params = {"term": term, "entity": "song", "limit": self.limit}

        async with httpx.AsyncClient() as client:
            try:
                response = await client.get(
                    self.search_url,
                    params=params,
                    timeout=self.timeout,
                )
                response.raise_for_status()
                data = response.json()
            except httpx.HTTPError as e:
                raise ITunesError(f"iTunes search failed: {e}") from e
            except ValueError as e:
                raise ITunesError(f"iTunes returned invalid JSON: {e}") from e

        return data.get("results", []) if isinstance(data, dict) else []

    async def find_preview(self, song: str, artist: str) -> Optional[str]:
        """Preview URL of the first result matching both song and artist names."""
        results = await self.search_songs(f"{song} {artist}")

        song_name = song.lower()
        artist_name = artist.lower()
        for result in results:
            if (
                (result.get("trackName") or "").lower() == song_name
                and (result.get("artistName") or "").lower() == artist_name
            ):
                return result.get("previewUrl")

        logger.debug(f"No preview among {len(results)} results for '{song}' by '{artist}'")
        return None
