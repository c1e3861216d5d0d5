"""SQL Catalog Repository — CatalogRepository over an AsyncSession.

Invariants:
    - All statements are parameterized SQLAlchemy Core/ORM constructs (no string SQL)
    - Listings ORDER BY id ascending
    - Ids outside the INTEGER range short-circuit to "not found" without a query
    - add_membership: unique violation on the pair -> DuplicateMembershipError,
      any other storage failure -> DatabaseError
    - Failed writes roll the session back before the error leaves this module

Design Decisions:
    - @storage_operation decorator holds the SQLAlchemyError -> DatabaseError mapping in
      one place; the label becomes the client message ("... while fetching tracks")
      while the driver detail only goes to the log
    - Rows converted to frozen records at this boundary: ORM objects never reach
      services or routes
"""

import functools
import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from jukebox.core.domain_types import (
    MembershipId, MembershipRecord, PlaylistId, PlaylistRecord,
    TrackId, TrackRecord, fits_storage,
)
from jukebox.core.errors import DatabaseError, DuplicateMembershipError, ErrorContext
from jukebox.infrastructure.classify_db_errors import is_membership_conflict
from jukebox.models.playlist import Playlist
from jukebox.models.playlist_track import PlaylistTrack
from jukebox.models.track import Track

logger = logging.getLogger(__name__)


def storage_operation(label: str):
    """Translate SQLAlchemy failures inside a repository method into DatabaseError."""
    def decorator(fn):
        @functools.wraps(fn)
        async def wrapper(self, *args, **kwargs):
            try:
                return await fn(self, *args, **kwargs)
            except SQLAlchemyError as e:
                logger.error(
                    f"Storage failure while {label}: {e}", exc_info=True,
                )
                raise DatabaseError(
                    label, ErrorContext(debug_info={"operation": fn.__name__}),
                ) from e
        return wrapper
    return decorator


def _track(row: Track) -> TrackRecord:
    return TrackRecord(
        id=TrackId(row.id), name=row.name, duration_ms=row.duration_ms,
    )


def _playlist(row: Playlist) -> PlaylistRecord:
    return PlaylistRecord(
        id=PlaylistId(row.id), name=row.name, description=row.description,
    )


class SqlCatalogRepository:
    """Reads and writes playlists, tracks, and memberships through one session."""

    def __init__(self, db: AsyncSession):
        self._db = db

    @storage_operation("fetching tracks")
    async def list_tracks(self) -> list[TrackRecord]:
        result = await self._db.execute(select(Track).order_by(Track.id))
        return [_track(row) for row in result.scalars().all()]

    @storage_operation("fetching track")
    async def get_track(self, track_id: TrackId) -> TrackRecord | None:
        if not fits_storage(track_id):
            return None
        result = await self._db.execute(
            select(Track).where(Track.id == track_id),
        )
        row = result.scalar_one_or_none()
        return _track(row) if row else None

    @storage_operation("fetching playlists")
    async def list_playlists(self) -> list[PlaylistRecord]:
        result = await self._db.execute(
            select(Playlist).order_by(Playlist.id),
        )
        return [_playlist(row) for row in result.scalars().all()]

    @storage_operation("creating playlist")
    async def create_playlist(
        self, name: str, description: str,
    ) -> PlaylistRecord:
        playlist = Playlist(name=name, description=description)
        self._db.add(playlist)
        try:
            await self._db.commit()
        except SQLAlchemyError:
            await self._db.rollback()
            raise
        await self._db.refresh(playlist)
        return _playlist(playlist)

    @storage_operation("fetching playlist")
    async def get_playlist(
        self, playlist_id: PlaylistId,
    ) -> PlaylistRecord | None:
        if not fits_storage(playlist_id):
            return None
        result = await self._db.execute(
            select(Playlist).where(Playlist.id == playlist_id),
        )
        row = result.scalar_one_or_none()
        return _playlist(row) if row else None

    @storage_operation("fetching playlist tracks")
    async def list_playlist_tracks(
        self, playlist_id: PlaylistId,
    ) -> list[TrackRecord]:
        result = await self._db.execute(
            select(Track)
            .join(PlaylistTrack, PlaylistTrack.track_id == Track.id)
            .where(PlaylistTrack.playlist_id == playlist_id)
            .order_by(Track.id),
        )
        return [_track(row) for row in result.scalars().all()]

    @storage_operation("adding track to playlist")
    async def add_membership(
        self, playlist_id: PlaylistId, track_id: TrackId,
    ) -> MembershipRecord:
        membership = PlaylistTrack(playlist_id=playlist_id, track_id=track_id)
        self._db.add(membership)
        try:
            await self._db.commit()
        except IntegrityError as e:
            await self._db.rollback()
            if is_membership_conflict(e):
                raise DuplicateMembershipError(playlist_id, track_id) from e
            raise
        except SQLAlchemyError:
            await self._db.rollback()
            raise
        return MembershipRecord(
            id=MembershipId(membership.id),
            playlist_id=PlaylistId(membership.playlist_id),
            track_id=TrackId(membership.track_id),
        )
