"""Track ORM — a playable track with its duration in milliseconds.

Invariants:
    - Created only by seeding; the API never inserts tracks
    - Deleting a track removes its memberships in every playlist
"""

from sqlalchemy import CheckConstraint, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from jukebox.db.base import Base


class Track(Base):
    __tablename__ = "tracks"
    __table_args__ = (
        CheckConstraint("duration_ms >= 0", name="ck_tracks_duration_ms_non_negative"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    duration_ms: Mapped[int] = mapped_column(Integer, nullable=False)

    memberships: Mapped[list["PlaylistTrack"]] = relationship(
        "PlaylistTrack", back_populates="track",
        cascade="all, delete-orphan", passive_deletes=True,
    )
