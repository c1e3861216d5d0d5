"""Identifier & Payload Validation — decides well-formedness before any storage access.

Invariants:
    - All functions are PURE: no IO, no async, no DB, no side effects
    - check_* return an error message on violation, None on success
    - require_* raise InputValidationError with the same message
    - Payload checks chain in a fixed order — first error wins

Design Decisions:
    - Route ids validated as strings, not coerced by the framework: "01", "+1" and
      " 1" would otherwise parse as valid integers
    - bool is rejected where an integer is required (bool subclasses int); a float
      with no fractional part is accepted and normalized to int
    - Messages are written for direct client display
"""

import re

from jukebox.core.domain_types import MAX_RESOURCE_ID, PlaylistId, TrackId
from jukebox.core.errors import InputValidationError

_POSITIVE_INT = re.compile(r"[1-9][0-9]*")

BODY_REQUIRED = "Request body is required"
BODY_NOT_OBJECT = "Request body must be a JSON object"
PLAYLIST_FIELDS_REQUIRED = "Name and description are required fields"
PLAYLIST_FIELDS_NOT_STRINGS = "Name and description must be strings"
TRACK_ID_REQUIRED = "trackId is required in request body"
TRACK_ID_INVALID = "trackId must be a positive integer"


def is_valid_id(raw: str) -> bool:
    """Positive integer with no sign, leading zero, decimal point or whitespace."""
    return isinstance(raw, str) and _POSITIVE_INT.fullmatch(raw) is not None


def check_resource_id(raw: str, resource: str) -> str | None:
    if not is_valid_id(raw):
        return f"{resource} ID must be a valid positive integer"
    return None


def check_body_present(body: object) -> str | None:
    if body is None:
        return BODY_REQUIRED
    if not isinstance(body, dict):
        return BODY_NOT_OBJECT
    return None


def check_playlist_payload(body: object) -> str | None:
    """Validate a POST /playlists body: {name, description}."""
    error = check_body_present(body)
    if error:
        return error
    name = body.get("name")
    description = body.get("description")
    if not name or not description:
        return PLAYLIST_FIELDS_REQUIRED
    if not isinstance(name, str) or not isinstance(description, str):
        return PLAYLIST_FIELDS_NOT_STRINGS
    return None


def check_track_reference(body: object) -> str | None:
    """Validate a POST /playlists/{id}/tracks body: {trackId}."""
    error = check_body_present(body)
    if error:
        return error
    track_id = body.get("trackId")
    if track_id is None:
        return TRACK_ID_REQUIRED
    if not _is_integral(track_id) or track_id <= 0:
        return TRACK_ID_INVALID
    return None


def _is_integral(value: object) -> bool:
    """JSON has one number type: 2.0 counts as an integer, 2.5 and NaN do not."""
    if isinstance(value, bool):
        return False
    if isinstance(value, float):
        return value.is_integer()
    return isinstance(value, int)


# ─── Raising wrappers (used at the HTTP boundary) ────────────────

def require_resource_id(raw: str, resource: str) -> int:
    error = check_resource_id(raw, resource)
    if error:
        raise InputValidationError(error, field="id")
    # Longer than any storable id: skip int() so it resolves to not found
    if len(raw) > len(str(MAX_RESOURCE_ID)):
        return MAX_RESOURCE_ID + 1
    return int(raw)


def require_playlist_payload(body: object) -> tuple[str, str]:
    """Returns (name, description)."""
    error = check_playlist_payload(body)
    if error:
        raise InputValidationError(error, field="body")
    return body["name"], body["description"]


def require_track_reference(body: object) -> TrackId:
    error = check_track_reference(body)
    if error:
        raise InputValidationError(error, field="trackId")
    return TrackId(int(body["trackId"]))


def require_playlist_id(raw: str) -> PlaylistId:
    return PlaylistId(require_resource_id(raw, "Playlist"))


def require_track_id(raw: str) -> TrackId:
    return TrackId(require_resource_id(raw, "Track"))
