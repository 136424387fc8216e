"""Domain models for travel planning sessions."""

from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Final
from uuid import UUID

PLANNING_STATUS: Final = "planificacion"


@dataclass(frozen=True)
class CreateSessionRequest:
    """Validated input for starting a planning session."""

    user_id: str | None
    interests: tuple[str, ...]
    start_date: datetime
    end_date: datetime
    experience_type: str
    traveler_count: int
    restrictions: tuple[str, ...] = ()


@dataclass(frozen=True)
class Session:
    """Represents a stored travel planning session."""

    id: UUID
    user_id: str | None
    is_guest: bool
    interests: tuple[str, ...]
    start_date: str
    end_date: str
    experience_type: str
    traveler_count: int
    restrictions: tuple[str, ...]
    status: str
    created_at: str
    updated_at: str


def to_iso_timestamp(value: datetime) -> str:
    """Format a datetime as an ISO-8601 UTC timestamp with milliseconds."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=UTC)
    formatted = value.astimezone(UTC).isoformat(timespec="milliseconds")
    return formatted.replace("+00:00", "Z")


def build_session(
    request: CreateSessionRequest, session_id: UUID, now: datetime
) -> Session:
    """Build a new session in the initial planning state."""
    timestamp = to_iso_timestamp(now)
    return Session(
        id=session_id,
        user_id=request.user_id,
        is_guest=not request.user_id,
        interests=tuple(request.interests),
        start_date=to_iso_timestamp(request.start_date),
        end_date=to_iso_timestamp(request.end_date),
        experience_type=request.experience_type,
        traveler_count=request.traveler_count,
        restrictions=tuple(request.restrictions),
        status=PLANNING_STATUS,
        created_at=timestamp,
        updated_at=timestamp,
    )
