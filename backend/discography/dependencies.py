"""FastAPI dependencies."""
from fastapi import Request

from discography.services.dataset import DatasetStore


def get_store(request: Request) -> DatasetStore:
    """The dataset store loaded at startup."""
    return request.app.state.store
