"""Association Manager — existence checks and reads/writes for playlists and tracks.

Invariants:
    - Receives a CatalogRepository by injection; no module-level storage handle
    - Missing playlist -> ResourceNotFoundError (404), always checked first
    - Missing track on add -> InputValidationError (400): the path resource exists,
      the body references nothing
    - Duplicate membership is decided by the storage constraint; the repository's
      DuplicateMembershipError propagates unchanged
    - No retries, no locks

Design Decisions:
    - Existence checks before the insert exist only to pick the right message;
      a concurrent insert that slips between check and insert still fails on the
      constraint and surfaces as the same 400
"""

import logging

from jukebox.core.domain_types import (
    MembershipRecord, PlaylistId, PlaylistRecord, TrackId, TrackRecord,
)
from jukebox.core.errors import (
    DuplicateMembershipError, ErrorContext, InputValidationError,
    ResourceNotFoundError,
)
from jukebox.core.repository_protocols import CatalogRepository

logger = logging.getLogger(__name__)


class AssociationManager:
    """Playlist/track catalog operations and membership management."""

    def __init__(self, repository: CatalogRepository):
        self._repo = repository

    # ─── Tracks ──────────────────────────────────────────────────

    async def list_tracks(self) -> list[TrackRecord]:
        tracks = await self._repo.list_tracks()
        logger.info(f"Retrieved {len(tracks)} tracks")
        return tracks

    async def get_track(self, track_id: TrackId) -> TrackRecord:
        track = await self._repo.get_track(track_id)
        if track is None:
            logger.info(
                f"Track not found: {track_id}", extra={"track_id": track_id},
            )
            raise ResourceNotFoundError(
                "Track", track_id, ErrorContext(track_id=track_id),
            )
        return track

    # ─── Playlists ───────────────────────────────────────────────

    async def list_playlists(self) -> list[PlaylistRecord]:
        playlists = await self._repo.list_playlists()
        logger.info(f"Retrieved {len(playlists)} playlists")
        return playlists

    async def create_playlist(
        self, name: str, description: str,
    ) -> PlaylistRecord:
        playlist = await self._repo.create_playlist(name, description)
        logger.info(
            f"Created playlist: {playlist.name}",
            extra={"playlist_id": playlist.id},
        )
        return playlist

    async def get_playlist(self, playlist_id: PlaylistId) -> PlaylistRecord:
        playlist = await self._repo.get_playlist(playlist_id)
        if playlist is None:
            logger.info(
                f"Playlist not found: {playlist_id}",
                extra={"playlist_id": playlist_id},
            )
            raise ResourceNotFoundError(
                "Playlist", playlist_id, ErrorContext(playlist_id=playlist_id),
            )
        return playlist

    # ─── Memberships ─────────────────────────────────────────────

    async def list_playlist_tracks(
        self, playlist_id: PlaylistId,
    ) -> list[TrackRecord]:
        await self.get_playlist(playlist_id)
        tracks = await self._repo.list_playlist_tracks(playlist_id)
        logger.info(
            f"Retrieved {len(tracks)} tracks from playlist {playlist_id}",
            extra={"playlist_id": playlist_id},
        )
        return tracks

    async def add_track_to_playlist(
        self, playlist_id: PlaylistId, track_id: TrackId,
    ) -> MembershipRecord:
        await self.get_playlist(playlist_id)

        if await self._repo.get_track(track_id) is None:
            logger.info(
                f"Track does not exist: {track_id}",
                extra={"playlist_id": playlist_id, "track_id": track_id},
            )
            raise InputValidationError(
                "Track does not exist", field="trackId",
                context=ErrorContext(playlist_id=playlist_id, track_id=track_id),
            )

        try:
            membership = await self._repo.add_membership(playlist_id, track_id)
        except DuplicateMembershipError:
            logger.info(
                f"Track {track_id} already in playlist {playlist_id}",
                extra={"playlist_id": playlist_id, "track_id": track_id},
            )
            raise
        logger.info(
            f"Added track {track_id} to playlist {playlist_id}",
            extra={"playlist_id": playlist_id, "track_id": track_id},
        )
        return membership
