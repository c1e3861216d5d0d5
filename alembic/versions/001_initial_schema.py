"""Initial schema — playlists, tracks, and the playlists_tracks junction.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-18

Both junction foreign keys cascade on delete, and (playlist_id, track_id) is
unique: the API relies on that constraint, not on a prior lookup, to reject a
track added twice to the same playlist.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "playlists",
        sa.Column("id", sa.Integer, primary_key=True),
        sa.Column("name", sa.Text, nullable=False),
        sa.Column("description", sa.Text, nullable=False),
    )

    op.create_table(
        "tracks",
        sa.Column("id", sa.Integer, primary_key=True),
        sa.Column("name", sa.Text, nullable=False),
        sa.Column("duration_ms", sa.Integer, nullable=False),
        sa.CheckConstraint(
            "duration_ms >= 0", name="ck_tracks_duration_ms_non_negative",
        ),
    )

    op.create_table(
        "playlists_tracks",
        sa.Column("id", sa.Integer, primary_key=True),
        sa.Column(
            "playlist_id", sa.Integer,
            sa.ForeignKey("playlists.id", ondelete="CASCADE"), nullable=False,
        ),
        sa.Column(
            "track_id", sa.Integer,
            sa.ForeignKey("tracks.id", ondelete="CASCADE"), nullable=False,
        ),
        sa.UniqueConstraint(
            "playlist_id", "track_id",
            name="uq_playlists_tracks_playlist_id_track_id",
        ),
    )


def downgrade() -> None:
    op.drop_table("playlists_tracks")
    op.drop_table("tracks")
    op.drop_table("playlists")
