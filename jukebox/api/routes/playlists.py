"""Playlist Routes — playlists and their track memberships.

Invariants:
    - Path ids validated as strings before any storage access
    - POST bodies read after the path id check; check order is
      id format -> body -> fields -> existence -> insert
    - Creations return 201
"""

from fastapi import APIRouter, Depends, Request, status

from jukebox.api.dependencies import get_association_manager
from jukebox.api.request_body import read_json_body
from jukebox.core.validation import (
    require_playlist_id, require_playlist_payload, require_track_reference,
)
from jukebox.schemas.catalog import (
    PlaylistResponse, PlaylistTrackResponse, TrackResponse,
)
from jukebox.services.association_manager import AssociationManager

router = APIRouter(prefix="/playlists", tags=["playlists"])


@router.get("", response_model=list[PlaylistResponse])
async def list_playlists(
    manager: AssociationManager = Depends(get_association_manager),
):
    """Return all playlists."""
    return await manager.list_playlists()


@router.post(
    "", response_model=PlaylistResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_playlist(
    request: Request,
    manager: AssociationManager = Depends(get_association_manager),
):
    """Create an empty playlist from {name, description}."""
    name, description = require_playlist_payload(await read_json_body(request))
    return await manager.create_playlist(name, description)


@router.get("/{playlist_id}", response_model=PlaylistResponse)
async def get_playlist(
    playlist_id: str,
    manager: AssociationManager = Depends(get_association_manager),
):
    return await manager.get_playlist(require_playlist_id(playlist_id))


@router.get("/{playlist_id}/tracks", response_model=list[TrackResponse])
async def list_playlist_tracks(
    playlist_id: str,
    manager: AssociationManager = Depends(get_association_manager),
):
    """Tracks in the playlist ordered by track id; [] when it has none."""
    return await manager.list_playlist_tracks(require_playlist_id(playlist_id))


@router.post(
    "/{playlist_id}/tracks", response_model=PlaylistTrackResponse,
    status_code=status.HTTP_201_CREATED,
)
async def add_track_to_playlist(
    playlist_id: str,
    request: Request,
    manager: AssociationManager = Depends(get_association_manager),
):
    """Add {trackId} to the playlist."""
    pid = require_playlist_id(playlist_id)
    track_id = require_track_reference(await read_json_body(request))
    return await manager.add_track_to_playlist(pid, track_id)
