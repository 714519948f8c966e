"""Error types raised by the catalog services.

Each error carries the HTTP status and the stable ``id`` code that the API
returns alongside the message, so services never build responses themselves.
"""
from typing import Optional


class DiscographyError(Exception):
    """Base error for catalog operations."""

    status_code = 500
    default_id = "InternalServerError"

    def __init__(self, message: str, error_id: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.error_id = error_id or self.default_id

    def to_dict(self) -> dict:
        return {"message": self.message, "id": self.error_id}


class InvalidRequestError(DiscographyError):
    """Required request parameters are missing or invalid."""

    status_code = 400
    default_id = "InvalidRequest"


class NotFoundError(DiscographyError):
    """No matching song, image or route."""

    status_code = 404
    default_id = "notFound"


class InternalError(DiscographyError):
    """The dataset violates an invariant (e.g. no unorganized album)."""

    status_code = 500
    default_id = "InternalServerError"


class UpstreamError(DiscographyError):
    """An external lookup service failed."""

    status_code = 502
    default_id = "UpstreamError"


class DatasetError(DiscographyError):
    """The dataset file is missing or malformed."""

    status_code = 500
    default_id = "DatasetError"
