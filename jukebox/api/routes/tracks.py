"""Track Routes — read-only access to the track catalog.

Invariants:
    - GET /tracks returns every track ordered by id
    - GET /tracks/{track_id}: 400 malformed id, 404 unknown id
"""

from fastapi import APIRouter, Depends

from jukebox.api.dependencies import get_association_manager
from jukebox.core.validation import require_track_id
from jukebox.schemas.catalog import TrackResponse
from jukebox.services.association_manager import AssociationManager

router = APIRouter(prefix="/tracks", tags=["tracks"])


@router.get("", response_model=list[TrackResponse])
async def list_tracks(
    manager: AssociationManager = Depends(get_association_manager),
):
    """Return all tracks."""
    return await manager.list_tracks()


@router.get("/{track_id}", response_model=TrackResponse)
async def get_track(
    track_id: str,
    manager: AssociationManager = Depends(get_association_manager),
):
    """Return one track by id."""
    return await manager.get_track(require_track_id(track_id))
