"""Catalog Schemas — response shapes for tracks, playlists, and memberships.

Invariants:
    - TrackResponse: {id, name, duration_ms}
    - PlaylistResponse: {id, name, description}
    - PlaylistTrackResponse: {id, playlist_id, track_id}

Design Decisions:
    - from_attributes=True: routes return the frozen records from core/domain_types.py
      and FastAPI serializes them through these models
"""

from pydantic import BaseModel, ConfigDict


class TrackResponse(BaseModel):
    """A track as listed in the catalog or inside a playlist."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    duration_ms: int


class PlaylistResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    description: str


class PlaylistTrackResponse(BaseModel):
    """A newly created playlist membership."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    playlist_id: int
    track_id: int
