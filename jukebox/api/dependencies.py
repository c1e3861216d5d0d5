"""Request Dependencies — wires a per-request session into the association manager.

Invariants:
    - One AsyncSession, one repository, one manager per request
    - Tests override get_association_manager to inject a substitute store
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from jukebox.infrastructure.catalog_repository import SqlCatalogRepository
from jukebox.infrastructure.database import get_db
from jukebox.services.association_manager import AssociationManager


def get_association_manager(
    db: AsyncSession = Depends(get_db),
) -> AssociationManager:
    return AssociationManager(SqlCatalogRepository(db))
