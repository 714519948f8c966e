"""API routes."""
from fastapi import APIRouter
from discography.api import albums, songs, media

api_router = APIRouter()

# Catalog
api_router.include_router(albums.router, tags=["albums"])
api_router.include_router(songs.router, tags=["songs"])

# Cover images and previews
api_router.include_router(media.router, tags=["media"])
