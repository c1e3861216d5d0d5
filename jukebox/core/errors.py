"""Error Hierarchy — typed, categorized exceptions for every Jukebox failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Client errors (400/404) are expected outcomes; DatabaseError (500) is a fault
    - to_response() always produces {"error": <message>}
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with JukeboxError base: one global handler maps all of them
    - DuplicateMembershipError is a 400, not a 409: a repeated add is a bad request
      against the playlist, matching the rest of the client-error surface
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    CONFLICT = "conflict"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Context carried for logs only, never rendered to clients."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    playlist_id: int | None = None
    track_id: int | None = None
    debug_info: dict[str, Any] | None = None


class JukeboxError(Exception):
    """Base exception for all Jukebox errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    @property
    def is_client_error(self) -> bool:
        return 400 <= self.http_status < 500

    def to_response(self) -> dict:
        """Convert to the REST error envelope."""
        return {"error": self.message}

    def log_extra(self) -> dict:
        """Structured fields for the logger's `extra=`."""
        return {
            "error_code": self.code,
            "playlist_id": self.context.playlist_id,
            "track_id": self.context.track_id,
        }


# ─── Client Errors (400/404) ────────────────────────────────────

class InputValidationError(JukeboxError):
    """Malformed identifier or request body. Raised before any storage access,
    and for a trackId that references no track."""
    def __init__(
        self, message: str, field: str | None = None,
        context: ErrorContext | None = None,
    ):
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )
        self.field = field


class ResourceNotFoundError(JukeboxError):
    """Well-formed identifier with no matching record."""
    def __init__(
        self, resource_type: str, resource_id: int,
        context: ErrorContext | None = None,
    ):
        super().__init__(
            f"{resource_type} not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.INFO, context, 404,
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


class DuplicateMembershipError(JukeboxError):
    """The (playlist, track) pair already exists in playlists_tracks."""
    def __init__(self, playlist_id: int, track_id: int):
        super().__init__(
            "Track is already in this playlist",
            "DUPLICATE_MEMBERSHIP", ErrorCategory.CONFLICT,
            ErrorSeverity.INFO,
            ErrorContext(playlist_id=playlist_id, track_id=track_id), 400,
        )


# ─── Infrastructure Errors (500) ────────────────────────────────

class DatabaseError(JukeboxError):
    """Any storage failure other than the membership conflict."""
    def __init__(self, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Internal server error while {operation}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 500,
        )
        self.operation = operation
