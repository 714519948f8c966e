"""Discography API - Main application entry point."""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from discography import __version__
from discography.api import api_router
from discography.api.health import router as health_router
from discography.config import settings
from discography.exceptions import DiscographyError
from discography.logging_config import setup_logging
from discography.middleware import HeadRequestMiddleware
from discography.services.dataset import DatasetStore

# Initialize logging
setup_logging()

logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "The page you are looking for was not found."


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for startup/shutdown events."""
    # Startup: the dataset lives for the whole process
    app.state.store = DatasetStore.from_file(settings.dataset_path)
    yield
    # Shutdown (nothing needed, changes are not persisted)


app = FastAPI(
    title="Discography",
    description="Album, track, lyrics and rating catalog",
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origin_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(HeadRequestMiddleware)


@app.exception_handler(DiscographyError)
async def discography_error_handler(request: Request, exc: DiscographyError):
    """Render service errors as {message, id} with their status code."""
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


@app.exception_handler(StarletteHTTPException)
async def not_found_handler(request: Request, exc: StarletteHTTPException):
    """Unknown paths and unsupported methods get the notFound body."""
    if exc.status_code in (404, 405):
        return JSONResponse(
            status_code=404,
            content={"message": NOT_FOUND_MESSAGE, "id": "notFound"},
        )
    return await http_exception_handler(request, exc)


# Catalog and media routes (served at the root, no prefix)
app.include_router(api_router)

# Health routes
app.include_router(health_router)


@app.api_route("/", methods=["GET", "HEAD"])
def root():
    """Root endpoint - API info."""
    return {
        "name": "Discography",
        "version": __version__,
        "docs": "/docs",
    }
