"""Domain Types — identity types and immutable records shared across layers.

Invariants:
    - Identifiers are positive integers assigned by the database
    - Records are frozen: the manager never mutates what the repository returns
    - MAX_RESOURCE_ID mirrors the 32-bit INTEGER primary keys

Design Decisions:
    - NewType over wrapper classes: zero runtime cost, full type-checker support
    - Plain dataclasses instead of ORM objects: substitute stores in tests build
      records without a session
"""

from dataclasses import dataclass
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

PlaylistId = NewType("PlaylistId", int)
TrackId = NewType("TrackId", int)
MembershipId = NewType("MembershipId", int)

MAX_RESOURCE_ID = 2**31 - 1


# ─── Records ─────────────────────────────────────────────────────

@dataclass(frozen=True)
class TrackRecord:
    id: TrackId
    name: str
    duration_ms: int


@dataclass(frozen=True)
class PlaylistRecord:
    id: PlaylistId
    name: str
    description: str


@dataclass(frozen=True)
class MembershipRecord:
    """One row of playlists_tracks."""
    id: MembershipId
    playlist_id: PlaylistId
    track_id: TrackId


def fits_storage(resource_id: int) -> bool:
    """True when the id can exist in an INTEGER primary key column."""
    return 0 < resource_id <= MAX_RESOURCE_ID
