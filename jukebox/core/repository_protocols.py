"""Boundary Protocols — contract between the association manager and storage.

Invariants:
    - Services NEVER import a concrete repository — dependency arrows point inward only
    - Listings are ordered by id ascending
    - get_* return None for a missing record (never raise for absence)
    - add_membership raises DuplicateMembershipError when the storage uniqueness
      constraint on (playlist_id, track_id) rejects the insert
    - Every other storage failure surfaces as DatabaseError

Design Decisions:
    - Protocol over ABC: structural subtyping, so tests pass an in-memory store
      without inheriting anything
    - Async in Protocol: implementations do IO
"""

from typing import Protocol

from jukebox.core.domain_types import (
    MembershipRecord, PlaylistId, PlaylistRecord, TrackId, TrackRecord,
)


class CatalogRepository(Protocol):
    """Contract for playlist/track/membership persistence — implemented by shell."""
    async def list_tracks(self) -> list[TrackRecord]: ...
    async def get_track(self, track_id: TrackId) -> TrackRecord | None: ...
    async def list_playlists(self) -> list[PlaylistRecord]: ...
    async def create_playlist(
        self, name: str, description: str,
    ) -> PlaylistRecord: ...
    async def get_playlist(
        self, playlist_id: PlaylistId,
    ) -> PlaylistRecord | None: ...
    async def list_playlist_tracks(
        self, playlist_id: PlaylistId,
    ) -> list[TrackRecord]: ...
    async def add_membership(
        self, playlist_id: PlaylistId, track_id: TrackId,
    ) -> MembershipRecord: ...
