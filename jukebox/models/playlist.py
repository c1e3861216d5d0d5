"""Playlist ORM — a named, described collection of track memberships.

Invariants:
    - id is a SERIAL integer primary key assigned by the database
    - name and description are non-nullable text
    - Deleting a playlist removes its memberships (ON DELETE CASCADE), never tracks

Design Decisions:
    - passive_deletes=True: the database cascade does the work, the ORM does not
      load memberships just to delete them
"""

from sqlalchemy import Integer, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from jukebox.db.base import Base


class Playlist(Base):
    __tablename__ = "playlists"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)

    memberships: Mapped[list["PlaylistTrack"]] = relationship(
        "PlaylistTrack", back_populates="playlist",
        cascade="all, delete-orphan", passive_deletes=True,
    )
