"""Domain models for videohub.

Pure Python dataclasses representing stored records.
These are independent of the HTTP layer; the API converts them
into pydantic views before they leave the process.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

# ============================================================================
# Resolutions
# ============================================================================

# Closed vocabulary, lowest to highest quality.
RESOLUTIONS: tuple[str, ...] = (
    "P144",
    "P240",
    "P360",
    "P480",
    "P720",
    "P1080",
    "P1440",
    "P2160",
)

ALLOWED_RESOLUTIONS: frozenset[str] = frozenset(RESOLUTIONS)


# ============================================================================
# Video Domain
# ============================================================================


@dataclass
class VideoEntity:
    """Domain model for a stored video."""

    id: int
    title: str
    author: str
    created_at: str
    publication_date: str
    can_be_downloaded: bool = False
    min_age_restriction: int | None = None
    available_resolutions: list[str] = field(default_factory=list)


# Fields an update is allowed to overwrite. created_at and id are fixed.
MUTABLE_FIELDS: tuple[str, ...] = (
    "title",
    "author",
    "can_be_downloaded",
    "min_age_restriction",
    "publication_date",
    "available_resolutions",
)


def format_timestamp(moment: datetime) -> str:
    """Render a datetime as UTC ISO-8601 with millisecond precision.

    Matches the ``2023-07-24T12:54:39.991Z`` form clients expect.
    """
    moment = moment.astimezone(timezone.utc)
    return moment.strftime("%Y-%m-%dT%H:%M:%S.") + f"{moment.microsecond // 1000:03d}Z"
