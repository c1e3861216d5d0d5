"""Service test fixtures — in-memory CatalogRepository.

Invariants:
    - Satisfies CatalogRepository structurally (no inheritance)
    - add_membership enforces (playlist_id, track_id) uniqueness the way the
      storage constraint does: the second insert raises DuplicateMembershipError

Design Decisions:
    - Plain dicts over SQLite: AssociationManager tests exercise ordering of checks
      and error mapping, not SQL
    - fail_next_add lets a test simulate a concurrent insert landing between the
      existence checks and the write
"""

import pytest

from jukebox.core.domain_types import (
    MembershipId, MembershipRecord, PlaylistRecord, TrackRecord,
)
from jukebox.core.errors import DuplicateMembershipError


class InMemoryCatalogRepository:
    def __init__(self):
        self.tracks: dict[int, TrackRecord] = {}
        self.playlists: dict[int, PlaylistRecord] = {}
        self.memberships: dict[tuple[int, int], MembershipRecord] = {}
        self.fail_next_add = False
        self.calls: list[str] = []

    def add_track(self, track_id: int, name: str, duration_ms: int) -> TrackRecord:
        record = TrackRecord(id=track_id, name=name, duration_ms=duration_ms)
        self.tracks[track_id] = record
        return record

    async def list_tracks(self):
        self.calls.append("list_tracks")
        return [self.tracks[k] for k in sorted(self.tracks)]

    async def get_track(self, track_id):
        self.calls.append("get_track")
        return self.tracks.get(track_id)

    async def list_playlists(self):
        self.calls.append("list_playlists")
        return [self.playlists[k] for k in sorted(self.playlists)]

    async def create_playlist(self, name, description):
        self.calls.append("create_playlist")
        new_id = max(self.playlists, default=0) + 1
        record = PlaylistRecord(id=new_id, name=name, description=description)
        self.playlists[new_id] = record
        return record

    async def get_playlist(self, playlist_id):
        self.calls.append("get_playlist")
        return self.playlists.get(playlist_id)

    async def list_playlist_tracks(self, playlist_id):
        self.calls.append("list_playlist_tracks")
        ids = sorted(t for (p, t) in self.memberships if p == playlist_id)
        return [self.tracks[t] for t in ids]

    async def add_membership(self, playlist_id, track_id):
        self.calls.append("add_membership")
        key = (playlist_id, track_id)
        if self.fail_next_add or key in self.memberships:
            self.fail_next_add = False
            raise DuplicateMembershipError(playlist_id, track_id)
        record = MembershipRecord(
            id=MembershipId(len(self.memberships) + 1),
            playlist_id=playlist_id, track_id=track_id,
        )
        self.memberships[key] = record
        return record


@pytest.fixture
def repo():
    store = InMemoryCatalogRepository()
    store.add_track(3, "Creep", 238_000)
    store.add_track(1, "Imagine", 183_000)
    store.add_track(2, "Billie Jean", 294_000)
    return store
