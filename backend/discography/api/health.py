"""Health check endpoints for monitoring and load balancers."""
from pathlib import Path

from fastapi import APIRouter, Depends

from discography import __version__
from discography.config import settings
from discography.dependencies import get_store
from discography.services.dataset import DatasetStore

router = APIRouter(tags=["health"])


@router.api_route("/health", methods=["GET", "HEAD"])
def health_check(store: DatasetStore = Depends(get_store)):
    """
    Health check endpoint for load balancers and monitoring.

    Reports the loaded dataset and whether cover images can be served.
    """
    status = {
        "status": "healthy",
        "version": __version__,
        "checks": {}
    }

    status["checks"]["dataset"] = f"ok ({store.album_count} albums, {store.track_count} tracks)"

    # Songs without an album need the unorganized album
    if store.unorganized_album() is None:
        status["checks"]["unorganized_album"] = "missing"
        status["status"] = "degraded"
    else:
        status["checks"]["unorganized_album"] = "ok"

    images_path = Path(settings.images_dir)
    if images_path.exists() and images_path.is_dir():
        status["checks"]["images"] = "ok"
    else:
        status["checks"]["images"] = "not accessible"
        status["status"] = "degraded"

    return status


@router.api_route("/live", methods=["GET", "HEAD"])
def liveness_check():
    """
    Liveness check - is the process alive?
    """
    return {"alive": True, "version": __version__}
