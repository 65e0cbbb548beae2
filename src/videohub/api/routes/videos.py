"""Videos API endpoints.

GET    /videos       - List videos
GET    /videos/{id}  - Get one video
POST   /videos       - Create video
PUT    /videos/{id}  - Overwrite video fields
DELETE /videos/{id}  - Delete video
"""

from __future__ import annotations

import json
import logging
import re
from typing import Any

from fastapi import APIRouter, Depends, Request, Response, status

from videohub.api.app import get_store
from videohub.core.validation import (
    normalize_age,
    normalize_resolutions,
    validate_create,
    validate_update,
)
from videohub.errors import RequestValidationFailed, VideoNotFoundError
from videohub.models.domain import VideoEntity
from videohub.models.types import ErrorsResponse, VideoView
from videohub.store.memory import VideoStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/videos", tags=["videos"])

_ID_PATTERN = re.compile(r"-?[0-9]+")

_ERROR_RESPONSES: dict[int | str, dict[str, Any]] = {
    400: {"model": ErrorsResponse, "description": "Invalid fields"},
    404: {"description": "Video not found"},
}


async def json_body(request: Request) -> dict[str, Any]:
    """Dependency returning the request's JSON object body.

    Missing, malformed or non-object bodies come back as an empty dict
    so they fail field validation instead of producing a 422.
    """
    raw = await request.body()
    if not raw:
        return {}
    try:
        body = json.loads(raw)
    except (ValueError, RecursionError):
        logger.debug(f"{request.method} {request.url.path}: body is not usable JSON")
        return {}
    return body if isinstance(body, dict) else {}


def _parse_id(video_id: str) -> int:
    """Parse a path id; anything non-numeric is simply not found."""
    if _ID_PATTERN.fullmatch(video_id) is None:
        raise VideoNotFoundError(video_id)
    return int(video_id)


def _to_view(video: VideoEntity) -> VideoView:
    return VideoView(
        id=video.id,
        title=video.title,
        author=video.author,
        can_be_downloaded=video.can_be_downloaded,
        min_age_restriction=video.min_age_restriction,
        created_at=video.created_at,
        publication_date=video.publication_date,
        available_resolutions=list(video.available_resolutions),
    )


@router.get("", response_model=list[VideoView])
def list_videos(store: VideoStore = Depends(get_store)) -> list[VideoView]:
    """List all videos in creation order."""
    return [_to_view(v) for v in store.list()]


@router.get("/{video_id}", response_model=VideoView, responses=_ERROR_RESPONSES)
def get_video(video_id: str, store: VideoStore = Depends(get_store)) -> VideoView:
    """Get video by id.

    Raises:
        VideoNotFoundError: 404 if id is unknown or not numeric.
    """
    return _to_view(store.get_by_id(_parse_id(video_id)))


@router.post(
    "",
    response_model=VideoView,
    status_code=status.HTTP_201_CREATED,
    responses=_ERROR_RESPONSES,
)
def create_video(
    body: dict[str, Any] = Depends(json_body),
    store: VideoStore = Depends(get_store),
) -> VideoView:
    """Create a video from title, author and availableResolutions.

    A missing or non-list availableResolutions is treated as empty.

    Raises:
        RequestValidationFailed: 400 with every violated field.
    """
    body = {**body, "availableResolutions": normalize_resolutions(body.get("availableResolutions"))}

    errors = validate_create(body)
    if errors:
        raise RequestValidationFailed(errors)

    video = store.create(
        title=body["title"],
        author=body["author"],
        available_resolutions=body["availableResolutions"],
    )
    return _to_view(video)


@router.put(
    "/{video_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses=_ERROR_RESPONSES,
)
def update_video(
    video_id: str,
    body: dict[str, Any] = Depends(json_body),
    store: VideoStore = Depends(get_store),
) -> Response:
    """Overwrite all mutable fields of a video.

    Existence is checked before the body, so an unknown id is a 404
    even when the body is also invalid.

    Raises:
        VideoNotFoundError: 404 if id is unknown.
        RequestValidationFailed: 400 with every violated field.
    """
    vid = _parse_id(video_id)
    store.get_by_id(vid)

    errors = validate_update(body)
    if errors:
        raise RequestValidationFailed(errors)

    store.update(
        vid,
        {
            "title": body["title"],
            "author": body["author"],
            "can_be_downloaded": body["canBeDownloaded"],
            "min_age_restriction": normalize_age(body["minAgeRestriction"]),
            "publication_date": body["publicationDate"],
            "available_resolutions": list(body.get("availableResolutions", [])),
        },
    )
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete(
    "/{video_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses=_ERROR_RESPONSES,
)
def delete_video(video_id: str, store: VideoStore = Depends(get_store)) -> Response:
    """Delete a video.

    Raises:
        VideoNotFoundError: 404 if id is unknown.
    """
    store.delete(_parse_id(video_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
