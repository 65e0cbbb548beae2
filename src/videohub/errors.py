"""Exceptions raised by videohub.

The API layer maps these onto HTTP responses; nothing below the
routers knows about status codes.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from videohub.models.types import FieldError


class VideohubError(Exception):
    """Base exception for all videohub errors."""


class NotFoundError(VideohubError):
    """Raised when a requested resource is not found."""


class VideoNotFoundError(NotFoundError):
    """Raised when no stored video has the requested id."""

    def __init__(self, video_id: int | str) -> None:
        super().__init__(f"Video {video_id} not found")
        self.video_id = video_id


class RequestValidationFailed(VideohubError):
    """Raised when a request body violates one or more field rules.

    Attributes:
        errors: Ordered field errors, one per violated rule.
    """

    def __init__(self, errors: list[FieldError]) -> None:
        fields = ", ".join(e.field for e in errors)
        super().__init__(f"Invalid fields: {fields}")
        self.errors = errors
