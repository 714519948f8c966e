"""Catalog services."""
from discography.services.dataset import DatasetStore
from discography.services.catalog import CatalogService
from discography.services.songs import SongService, parse_rating

__all__ = [
    "DatasetStore",
    "CatalogService",
    "SongService",
    "parse_rating",
]
