"""Pydantic models for the videohub API.

Field names are snake_case in Python and camelCase on the wire.
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model serialising fields under camelCase aliases."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class VideoView(CamelModel):
    """Video record as returned by the API."""

    id: int
    title: str
    author: str
    can_be_downloaded: bool
    min_age_restriction: int | None
    created_at: str
    publication_date: str
    available_resolutions: list[str]


class FieldError(CamelModel):
    """One violated input rule."""

    message: str
    field: str


class ErrorsResponse(CamelModel):
    """Body of a 400 response."""

    errors_messages: list[FieldError]


class HealthResponse(BaseModel):
    """Health check payload."""

    status: str
