"""Identifier & Payload Validation — pure checks, no IO.

Tests cover:
    - is_valid_id accepts canonical positive integers only
    - check_resource_id names the resource in its message
    - check_playlist_payload: presence before type, first error wins
    - check_track_reference: presence before integer-ness, bools and fractional floats rejected
    - require_* raise InputValidationError with the same message
"""

import pytest

from jukebox.core.domain_types import MAX_RESOURCE_ID, fits_storage
from jukebox.core.errors import InputValidationError
from jukebox.core.validation import (
    BODY_NOT_OBJECT,
    BODY_REQUIRED,
    PLAYLIST_FIELDS_NOT_STRINGS,
    PLAYLIST_FIELDS_REQUIRED,
    TRACK_ID_INVALID,
    TRACK_ID_REQUIRED,
    check_playlist_payload,
    check_resource_id,
    check_track_reference,
    is_valid_id,
    require_playlist_id,
    require_playlist_payload,
    require_track_id,
    require_track_reference,
)


# ─── is_valid_id ─────────────────────────────────────────────────

@pytest.mark.parametrize("raw", ["1", "7", "10", "999999", "2147483648"])
def test_is_valid_id_accepts_positive_integers(raw):
    assert is_valid_id(raw)


@pytest.mark.parametrize(
    "raw", ["0", "-1", "1.5", "abc", "01", "", " 1", "1 ", "+1", "1e3", "١"],
)
def test_is_valid_id_rejects_everything_else(raw):
    assert not is_valid_id(raw)


def test_is_valid_id_rejects_non_strings():
    assert not is_valid_id(5)


def test_check_resource_id_message_names_resource():
    assert check_resource_id("abc", "Playlist") == (
        "Playlist ID must be a valid positive integer"
    )
    assert check_resource_id("12", "Playlist") is None


# ─── check_playlist_payload ──────────────────────────────────────

def test_playlist_payload_valid():
    assert check_playlist_payload({"name": "X", "description": "Y"}) is None


def test_playlist_payload_absent_body():
    assert check_playlist_payload(None) == BODY_REQUIRED


def test_playlist_payload_non_object_body():
    assert check_playlist_payload(["X", "Y"]) == BODY_NOT_OBJECT


@pytest.mark.parametrize("body", [
    {},
    {"name": "X"},
    {"description": "Y"},
    {"name": "", "description": "Y"},
    {"name": "X", "description": None},
])
def test_playlist_payload_missing_fields(body):
    assert check_playlist_payload(body) == PLAYLIST_FIELDS_REQUIRED


@pytest.mark.parametrize("body", [
    {"name": 42, "description": "Y"},
    {"name": "X", "description": ["Y"]},
    {"name": True, "description": "Y"},
])
def test_playlist_payload_wrong_types(body):
    assert check_playlist_payload(body) == PLAYLIST_FIELDS_NOT_STRINGS


# ─── check_track_reference ───────────────────────────────────────

def test_track_reference_valid():
    assert check_track_reference({"trackId": 3}) is None


def test_track_reference_accepts_integral_float():
    assert check_track_reference({"trackId": 2.0}) is None


def test_track_reference_absent_body():
    assert check_track_reference(None) == BODY_REQUIRED


def test_track_reference_non_object_body():
    assert check_track_reference(3) == BODY_NOT_OBJECT


@pytest.mark.parametrize("body", [{}, {"trackId": None}, {"track_id": 3}])
def test_track_reference_missing(body):
    assert check_track_reference(body) == TRACK_ID_REQUIRED


@pytest.mark.parametrize(
    "value", [0, -4, 1.5, -2.0, float("nan"), float("inf"), "3", True, [1]],
)
def test_track_reference_invalid(value):
    assert check_track_reference({"trackId": value}) == TRACK_ID_INVALID


# ─── require_* ───────────────────────────────────────────────────

def test_require_playlist_id_returns_int():
    assert require_playlist_id("42") == 42


def test_require_track_id_raises_with_message():
    with pytest.raises(InputValidationError) as exc_info:
        require_track_id("01")
    assert exc_info.value.message == "Track ID must be a valid positive integer"
    assert exc_info.value.http_status == 400


def test_require_playlist_payload_returns_fields():
    assert require_playlist_payload({"name": "X", "description": "Y"}) == ("X", "Y")


def test_require_track_reference_raises_for_missing_field():
    with pytest.raises(InputValidationError) as exc_info:
        require_track_reference({})
    assert exc_info.value.message == TRACK_ID_REQUIRED
    assert exc_info.value.field == "trackId"


def test_require_track_reference_normalizes_float():
    track_id = require_track_reference({"trackId": 2.0})
    assert track_id == 2
    assert type(track_id) is int


def test_require_playlist_id_beyond_int_conversion_limit():
    """Thousands of digits never reach int(); the id simply cannot exist."""
    pid = require_playlist_id("9" * 5000)
    assert pid > MAX_RESOURCE_ID
    assert not fits_storage(pid)


def test_require_track_id_just_past_storage_range():
    assert require_track_id(str(MAX_RESOURCE_ID + 1)) == MAX_RESOURCE_ID + 1
