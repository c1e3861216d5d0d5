"""Domain Types — identity wrappers, frozen records, storage range."""

import dataclasses

import pytest

from jukebox.core.domain_types import (
    MAX_RESOURCE_ID, PlaylistId, TrackId, TrackRecord, fits_storage,
)


def test_identity_types_wrap_int():
    assert PlaylistId(3) == 3
    assert TrackId(4) == 4


def test_records_are_frozen():
    track = TrackRecord(id=TrackId(1), name="Imagine", duration_ms=183_000)
    with pytest.raises(dataclasses.FrozenInstanceError):
        track.name = "Other"


def test_fits_storage_bounds():
    assert fits_storage(1)
    assert fits_storage(MAX_RESOURCE_ID)
    assert not fits_storage(MAX_RESOURCE_ID + 1)
    assert not fits_storage(0)
