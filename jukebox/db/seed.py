"""Seed Data — loads the sample catalog: tracks, themed playlists, and memberships.

Invariants:
    - Existing rows are cleared child-first (playlists_tracks, tracks, playlists)
    - Memberships reference seeded rows by list position, never by hard-coded id
    - Runs in one transaction: a failure leaves the previous data untouched

Usage:
    python -m jukebox.db.seed      (or the jukebox-seed console script)
"""

import asyncio
import logging

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from jukebox.config import get_settings
from jukebox.db.session import create_session_factory
from jukebox.infrastructure.observability import setup_logging
from jukebox.models.playlist import Playlist
from jukebox.models.playlist_track import PlaylistTrack
from jukebox.models.track import Track

logger = logging.getLogger(__name__)

# (name, duration_ms)
TRACKS: list[tuple[str, int]] = [
    ("Bohemian Rhapsody", 355_000),
    ("Sweet Child O' Mine", 356_000),
    ("Hotel California", 391_000),
    ("Stairway to Heaven", 482_000),
    ("Imagine", 183_000),
    ("Billie Jean", 294_000),
    ("Like a Rolling Stone", 369_000),
    ("Smells Like Teen Spirit", 301_000),
    ("Purple Haze", 170_000),
    ("Good Vibrations", 218_000),
    ("What's Going On", 231_000),
    ("Respect", 147_000),
    ("Johnny B. Goode", 161_000),
    ("I Want to Hold Your Hand", 145_000),
    ("Born to Run", 270_000),
    ("Losing My Religion", 267_000),
    ("Wonderwall", 258_000),
    ("Black", 343_000),
    ("Creep", 238_000),
    ("Mr. Brightside", 202_000),
    ("Hey Ya!", 235_000),
    ("Crazy", 229_000),
    ("Somebody That I Used to Know", 244_000),
    ("Rolling in the Deep", 228_000),
]

# (name, description)
PLAYLISTS: list[tuple[str, str]] = [
    ("Classic Rock Legends",
     "Timeless rock anthems that defined generations of music lovers"),
    ("Chill Vibes",
     "Relaxing tracks perfect for unwinding after a long day"),
    ("Workout Pump",
     "High-energy songs to keep you motivated during exercise"),
    ("Road Trip Essentials",
     "Perfect soundtrack for long drives and adventures"),
    ("90s Nostalgia",
     "The best hits from the decade that brought us grunge and alternative"),
    ("Feel Good Hits",
     "Uplifting songs guaranteed to boost your mood"),
    ("Late Night Vibes",
     "Mellow tunes for those quiet, contemplative evening hours"),
    ("Party Starters",
     "Get the crowd moving with these certified dance floor fillers"),
    ("Acoustic Sessions",
     "Stripped-down versions and acoustic gems for intimate listening"),
    ("Greatest Hits Collection",
     "The most iconic songs from legendary artists across decades"),
    ("Alternative Rock Mix",
     "Indie and alternative tracks that push creative boundaries"),
    ("Emotional Journey",
     "Songs that tell stories and evoke deep feelings"),
]

# playlist position -> track positions
MEMBERSHIPS: dict[int, list[int]] = {
    0: [0, 1, 2, 3, 8],
    1: [4, 10, 15, 18],
    2: [5, 7, 14, 19, 20],
    3: [1, 2, 6, 14, 16],
    4: [7, 15, 17, 18],
    5: [9, 13, 19, 20, 21],
    6: [4, 17, 18, 23],
    7: [5, 12, 20, 21],
    9: [0, 1, 3, 4, 5, 6, 7, 13, 19],
    10: [7, 15, 16, 17, 18],
}


async def seed(db: AsyncSession) -> dict[str, int]:
    """Replace the catalog with the sample data. Returns row counts."""
    await db.execute(delete(PlaylistTrack))
    await db.execute(delete(Track))
    await db.execute(delete(Playlist))

    tracks = [Track(name=name, duration_ms=ms) for name, ms in TRACKS]
    playlists = [
        Playlist(name=name, description=description)
        for name, description in PLAYLISTS
    ]
    db.add_all(tracks + playlists)
    await db.flush()
    logger.info(f"Inserted {len(tracks)} tracks and {len(playlists)} playlists")

    db.add_all(
        PlaylistTrack(
            playlist_id=playlists[p].id, track_id=tracks[t].id,
        )
        for p, track_positions in MEMBERSHIPS.items()
        for t in track_positions
    )
    await db.commit()

    counts = {}
    for label, model in (
        ("tracks", Track), ("playlists", Playlist), ("memberships", PlaylistTrack),
    ):
        counts[label] = await db.scalar(select(func.count()).select_from(model))
    return counts


async def _main() -> None:
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    engine, session_factory = create_session_factory(settings.database_url)
    try:
        async with session_factory() as db:
            counts = await seed(db)
    finally:
        await engine.dispose()
    logger.info(
        "Database seeded: "
        + ", ".join(f"{count} {label}" for label, count in counts.items()),
    )


def main() -> None:
    asyncio.run(_main())


if __name__ == "__main__":
    main()
