"""ORM Models — SQLAlchemy declarative models for playlists, tracks, and memberships.

Invariants:
    - All models inherit from Base (db/base.py)
    - PlaylistTrack is the only cross-reference; it never owns either side

Design Decisions:
    - One file per entity for locality
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs
"""

from jukebox.models.playlist import Playlist  # noqa: F401
from jukebox.models.track import Track  # noqa: F401
from jukebox.models.playlist_track import PlaylistTrack  # noqa: F401
