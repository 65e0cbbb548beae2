"""Field validation for video create/update payloads.

Checks run in a fixed order and every violated rule yields one
FieldError, so clients see all problems with a request at once:

    title -> author -> minAgeRestriction -> canBeDownloaded
          -> publicationDate -> availableResolutions

Create payloads only carry title, author and availableResolutions.
Update payloads must carry the full mutable field set.

Validators never raise; an empty list means the payload may be stored.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from videohub.models.domain import ALLOWED_RESOLUTIONS
from videohub.models.types import FieldError

TITLE_MAX_LENGTH = 40
AUTHOR_MAX_LENGTH = 20
MIN_AGE_FLOOR = 0
MIN_AGE_CEILING = 18

_MISSING = object()


def _invalid(field: str) -> FieldError:
    return FieldError(message=f"Invalid {field}", field=field)


def _is_valid_text(value: Any, max_length: int) -> bool:
    if not isinstance(value, str):
        return False
    trimmed = value.strip()
    return 0 < len(trimmed) <= max_length


def _is_valid_age(value: Any) -> bool:
    if value is None:
        return True
    # bool is an int subclass; JSON true/false is not an age
    if isinstance(value, bool):
        return False
    value = normalize_age(value)
    if not isinstance(value, int):
        return False
    return MIN_AGE_FLOOR <= value <= MIN_AGE_CEILING


def _is_valid_resolutions(value: Any) -> bool:
    if value is _MISSING:
        return True
    if not isinstance(value, list):
        return False
    return all(isinstance(r, str) and r in ALLOWED_RESOLUTIONS for r in value)


def normalize_resolutions(value: Any) -> Any:
    """Coerce a non-list resolutions value to an empty list.

    Used on the create path, where a missing or malformed
    availableResolutions means "no resolutions" rather than an error.
    Lists pass through unchanged so their elements still get checked.
    """
    return value if isinstance(value, list) else []


def normalize_age(value: Any) -> Any:
    """Convert a whole-number float age such as 5.0 to an int.

    Anything else, null included, passes through unchanged.
    """
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


def validate_create(body: Mapping[str, Any]) -> list[FieldError]:
    """Validate a create payload.

    Args:
        body: Parsed JSON body. availableResolutions should already
            have gone through normalize_resolutions().

    Returns:
        Ordered list of field errors (empty if valid).
    """
    errors: list[FieldError] = []

    if not _is_valid_text(body.get("title"), TITLE_MAX_LENGTH):
        errors.append(_invalid("title"))

    if not _is_valid_text(body.get("author"), AUTHOR_MAX_LENGTH):
        errors.append(_invalid("author"))

    if not _is_valid_resolutions(body.get("availableResolutions", _MISSING)):
        errors.append(_invalid("availableResolutions"))

    return errors


def validate_update(body: Mapping[str, Any]) -> list[FieldError]:
    """Validate an update payload.

    Args:
        body: Parsed JSON body.

    Returns:
        Ordered list of field errors (empty if valid).
    """
    errors: list[FieldError] = []

    if not _is_valid_text(body.get("title"), TITLE_MAX_LENGTH):
        errors.append(_invalid("title"))

    if not _is_valid_text(body.get("author"), AUTHOR_MAX_LENGTH):
        errors.append(_invalid("author"))

    # Missing is not the same as null here: null clears the restriction
    if not _is_valid_age(body.get("minAgeRestriction", _MISSING)):
        errors.append(_invalid("minAgeRestriction"))

    if not isinstance(body.get("canBeDownloaded"), bool):
        errors.append(_invalid("canBeDownloaded"))

    if not isinstance(body.get("publicationDate"), str):
        errors.append(_invalid("publicationDate"))

    if not _is_valid_resolutions(body.get("availableResolutions", _MISSING)):
        errors.append(_invalid("availableResolutions"))

    return errors
