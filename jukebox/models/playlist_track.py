"""PlaylistTrack ORM — junction row linking one playlist to one track.

Invariants:
    - (playlist_id, track_id) is unique: a track appears in a playlist at most once
    - Both foreign keys cascade on delete
    - The uniqueness constraint, not the service's prior existence check, is the
      authority on duplicates

Design Decisions:
    - Constraint named explicitly: the error classifier matches on it
"""

from sqlalchemy import ForeignKey, Integer, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from jukebox.db.base import Base

MEMBERSHIP_UNIQUE_CONSTRAINT = "uq_playlists_tracks_playlist_id_track_id"


class PlaylistTrack(Base):
    __tablename__ = "playlists_tracks"
    __table_args__ = (
        UniqueConstraint(
            "playlist_id", "track_id", name=MEMBERSHIP_UNIQUE_CONSTRAINT,
        ),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    playlist_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("playlists.id", ondelete="CASCADE"),
        nullable=False,
    )
    track_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("tracks.id", ondelete="CASCADE"),
        nullable=False,
    )

    playlist: Mapped["Playlist"] = relationship(
        "Playlist", back_populates="memberships",
    )
    track: Mapped["Track"] = relationship(
        "Track", back_populates="memberships",
    )
