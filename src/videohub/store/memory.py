"""In-memory video store.

Holds video records in insertion order for the lifetime of the process.
All operations take a single lock because FastAPI runs sync endpoints
on a thread pool.
"""

from __future__ import annotations

import logging
import threading
import time
from dataclasses import replace
from datetime import datetime, timedelta, timezone
from typing import Any, Callable

from videohub.errors import VideoNotFoundError
from videohub.models.domain import MUTABLE_FIELDS, VideoEntity, format_timestamp

logger = logging.getLogger(__name__)

# Default gap between creation and publication
PUBLICATION_DELAY = timedelta(days=1)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _copy(video: VideoEntity) -> VideoEntity:
    # Callers never get a reference to a stored record
    return replace(video, available_resolutions=list(video.available_resolutions))


class VideoStore:
    """Ordered, id-unique collection of videos.

    Args:
        clock: Returns the current time; tests pass a fixed clock.
    """

    def __init__(self, clock: Callable[[], datetime] = _utcnow) -> None:
        self._videos: list[VideoEntity] = []
        self._lock = threading.Lock()
        self._clock = clock
        self._last_id = 0

    def __len__(self) -> int:
        with self._lock:
            return len(self._videos)

    def _next_id(self) -> int:
        # Millisecond timestamp, bumped so back-to-back creates never collide
        candidate = time.time_ns() // 1_000_000
        self._last_id = max(candidate, self._last_id + 1)
        return self._last_id

    def _find(self, video_id: int) -> VideoEntity | None:
        for video in self._videos:
            if video.id == video_id:
                return video
        return None

    def list(self) -> list[VideoEntity]:
        """Return copies of all videos in insertion order."""
        with self._lock:
            return [_copy(v) for v in self._videos]

    def get_by_id(self, video_id: int) -> VideoEntity:
        """Get a copy of a video by id.

        Raises:
            VideoNotFoundError: If no video has that id.
        """
        with self._lock:
            video = self._find(video_id)
            found = _copy(video) if video is not None else None
        if found is None:
            logger.debug(f"Video {video_id} not found")
            raise VideoNotFoundError(video_id)
        return found

    def create(
        self,
        title: str,
        author: str,
        available_resolutions: list[str],
        publication_date: str | None = None,
    ) -> VideoEntity:
        """Create and store a new video.

        Performs no validation; callers validate first.

        Args:
            title: Video title.
            author: Video author.
            available_resolutions: Resolution tags.
            publication_date: Optional ISO timestamp. Defaults to one day
                after creation.

        Returns:
            A copy of the stored video.
        """
        now = self._clock()
        with self._lock:
            video = VideoEntity(
                id=self._next_id(),
                title=title,
                author=author,
                created_at=format_timestamp(now),
                publication_date=(
                    format_timestamp(now + PUBLICATION_DELAY)
                    if publication_date is None
                    else publication_date
                ),
                can_be_downloaded=False,
                min_age_restriction=None,
                available_resolutions=list(available_resolutions),
            )
            self._videos.append(video)
            created = _copy(video)
        logger.info(f"Created video {video.id}: {video.title!r}")
        return created

    def update(self, video_id: int, changes: dict[str, Any]) -> VideoEntity:
        """Overwrite mutable fields of a stored video.

        Args:
            video_id: Video to update.
            changes: Mapping of VideoEntity attribute names to new values.
                Only names in MUTABLE_FIELDS are accepted.

        Returns:
            A copy of the updated video.

        Raises:
            VideoNotFoundError: If no video has that id.
            ValueError: If changes names an immutable or unknown field.
        """
        unknown = set(changes) - set(MUTABLE_FIELDS)
        if unknown:
            raise ValueError(f"Cannot update fields: {sorted(unknown)}")

        with self._lock:
            video = self._find(video_id)
            if video is None:
                raise VideoNotFoundError(video_id)
            for name, value in changes.items():
                setattr(video, name, list(value) if isinstance(value, list) else value)
            updated = _copy(video)
        logger.info(f"Updated video {video_id}")
        return updated

    def delete(self, video_id: int) -> VideoEntity:
        """Remove a video and return it.

        Raises:
            VideoNotFoundError: If no video has that id.
        """
        with self._lock:
            for index, video in enumerate(self._videos):
                if video.id == video_id:
                    del self._videos[index]
                    break
            else:
                raise VideoNotFoundError(video_id)
        logger.info(f"Deleted video {video_id}")
        return video

    def clear(self) -> int:
        """Remove every video.

        Returns:
            Number of videos removed; 0 means the store was already empty.
        """
        with self._lock:
            removed = len(self._videos)
            self._videos.clear()
        if removed:
            logger.info(f"Cleared {removed} videos")
        else:
            logger.info("Nothing to delete, store already empty")
        return removed

    def seed_sample(self) -> VideoEntity:
        """Insert the sample video used for local demos."""
        with self._lock:
            existing = self._find(1)
            if existing is not None:
                return _copy(existing)
            video = VideoEntity(
                id=1,
                title="string",
                author="string",
                created_at="2023-07-24T12:54:39.991Z",
                publication_date="2023-07-24T12:54:39.991Z",
                can_be_downloaded=True,
                min_age_restriction=None,
                available_resolutions=["P144"],
            )
            self._videos.append(video)
            seeded = _copy(video)
        logger.info("Seeded sample video 1")
        return seeded
