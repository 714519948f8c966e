"""Common schema patterns."""
from pydantic import BaseModel, ConfigDict, Field


class MessageResponse(BaseModel):
    """Message with a stable id code, used for errors and confirmations."""
    message: str
    id: str


class PreviewResponse(BaseModel):
    """Song preview location."""
    model_config = ConfigDict(populate_by_name=True)

    preview_url: str = Field(alias="previewUrl")
