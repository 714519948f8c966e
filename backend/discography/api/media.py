"""Cover image and song preview endpoints."""
import logging
from pathlib import Path
from typing import Optional

from fastapi import APIRouter, Query
from fastapi.responses import FileResponse, RedirectResponse

from discography.config import settings
from discography.exceptions import NotFoundError, UpstreamError, InvalidRequestError
from discography.integrations.itunes import ITunesClient, ITunesError
from discography.schemas.common import MessageResponse, PreviewResponse

logger = logging.getLogger(__name__)

router = APIRouter()

IMAGE_TYPES = {
    ".png": "image/png",
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".webp": "image/webp",
    ".gif": "image/gif",
}


def resolve_image(name: str) -> Path:
    """Resolve an image name inside the images directory.

    Raises:
        NotFoundError: name escapes the images directory or the file is missing
    """
    images_dir = Path(settings.images_dir).resolve()
    try:
        path = (images_dir / name).resolve()
        found = images_dir in path.parents and path.is_file()
    except (ValueError, OSError):
        # Embedded NUL bytes, names longer than the filesystem allows
        found = False

    if not found:
        raise NotFoundError(f'Image "{name}" not found.', "ImageNotFound")
    return path


@router.api_route(
    "/getImage",
    methods=["GET", "HEAD"],
    response_class=FileResponse,
    responses={404: {"model": MessageResponse}},
)
def get_image(image: Optional[str] = Query(None, description="Cover image file name or URL")):
    """Serve an album cover. Albums without a cover get the default image."""
    if image and image.startswith(("http://", "https://")):
        return RedirectResponse(image)

    path = resolve_image(image or settings.default_cover)
    media_type = IMAGE_TYPES.get(path.suffix.lower(), "application/octet-stream")
    return FileResponse(path=path, media_type=media_type)


@router.api_route(
    "/getSongPreview",
    methods=["GET", "HEAD"],
    response_model=PreviewResponse,
    responses={
        400: {"model": MessageResponse},
        404: {"model": MessageResponse},
        502: {"model": MessageResponse},
    },
)
async def get_song_preview(
    song: Optional[str] = Query(None, description="Song name"),
    artist: Optional[str] = Query(None, description="Artist name"),
):
    """Look up a playable preview URL for a song on iTunes."""
    if not song or not artist:
        raise InvalidRequestError("Song and artist are required.", "MissingSongOrArtist")

    client = ITunesClient()
    try:
        preview_url = await client.find_preview(song, artist)
    except ITunesError as e:
        logger.warning(f"Preview lookup failed for '{song}' by '{artist}': {e}")
        raise UpstreamError("Song preview lookup failed.", "PreviewLookupFailed")

    if not preview_url:
        raise NotFoundError("Preview not found.", "PreviewNotFound")

    return PreviewResponse(preview_url=preview_url)
