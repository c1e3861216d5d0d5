"""Storage Error Classification — decides whether a failed insert is a membership conflict.

Invariants:
    - Classification reads structured driver fields only (SQLSTATE, SQLite extended
      result code, constraint name); message text is never inspected
    - Only a unique violation on the (playlist_id, track_id) constraint is a
      membership conflict; foreign key and every other violation is a fault
    - When the driver reports a constraint name it must match; SQLite reports none,
      so a unique violation raised by a playlists_tracks insert is attributed to the
      pair constraint (the surrogate id is database-assigned and cannot collide)

Design Decisions:
    - Supports asyncpg (SQLAlchemy-adapted: sqlstate on the adapter, constraint_name
      on the chained asyncpg error), psycopg/psycopg2 (pgcode/sqlstate + diag), and
      sqlite3 (sqlite_errorcode) so tests on SQLite exercise the same path
"""

from sqlalchemy.exc import DBAPIError

from jukebox.models.playlist_track import MEMBERSHIP_UNIQUE_CONSTRAINT

PG_UNIQUE_VIOLATION = "23505"
PG_FOREIGN_KEY_VIOLATION = "23503"
SQLITE_CONSTRAINT_UNIQUE = 2067       # SQLITE_CONSTRAINT | (8 << 8)
SQLITE_CONSTRAINT_FOREIGNKEY = 787    # SQLITE_CONSTRAINT | (3 << 8)


def sqlstate_of(exc: DBAPIError) -> str | None:
    """PostgreSQL SQLSTATE from whichever driver raised the error."""
    orig = exc.orig
    for attr in ("sqlstate", "pgcode"):
        code = getattr(orig, attr, None)
        if code:
            return code
    cause = getattr(orig, "__cause__", None)
    return getattr(cause, "sqlstate", None)


def sqlite_code_of(exc: DBAPIError) -> int | None:
    """Extended result code; async adapters may chain the sqlite3 error as __cause__."""
    orig = exc.orig
    code = getattr(orig, "sqlite_errorcode", None)
    if code is None:
        code = getattr(getattr(orig, "__cause__", None), "sqlite_errorcode", None)
    return code


def constraint_name_of(exc: DBAPIError) -> str | None:
    orig = exc.orig
    diag = getattr(orig, "diag", None)
    name = getattr(diag, "constraint_name", None)
    if name:
        return name
    cause = getattr(orig, "__cause__", None)
    return getattr(cause, "constraint_name", None)


def is_unique_violation(exc: DBAPIError) -> bool:
    sqlstate = sqlstate_of(exc)
    if sqlstate is not None:
        return sqlstate == PG_UNIQUE_VIOLATION
    return sqlite_code_of(exc) == SQLITE_CONSTRAINT_UNIQUE


def is_foreign_key_violation(exc: DBAPIError) -> bool:
    sqlstate = sqlstate_of(exc)
    if sqlstate is not None:
        return sqlstate == PG_FOREIGN_KEY_VIOLATION
    return sqlite_code_of(exc) == SQLITE_CONSTRAINT_FOREIGNKEY


def is_membership_conflict(exc: DBAPIError) -> bool:
    """True only for the (playlist_id, track_id) uniqueness violation."""
    if not is_unique_violation(exc):
        return False
    constraint = constraint_name_of(exc)
    return constraint is None or constraint == MEMBERSHIP_UNIQUE_CONSTRAINT
