"""Session lifecycle business logic."""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Protocol
from uuid import UUID, uuid4

from travel_sessions.domain.sessions import (
    CreateSessionRequest,
    Session,
    build_session,
)

_logger = logging.getLogger(__name__)


class SessionRepository(Protocol):
    """Persistence interface for planning sessions."""

    def create(self, session: Session) -> Session:
        """Store a session and return the stored value."""


def _utc_now() -> datetime:
    return datetime.now(tz=UTC)


@dataclass
class SessionService:
    """Coordinates creation and storage of planning sessions."""

    repository: SessionRepository
    clock: Callable[[], datetime] = field(default=_utc_now)
    id_factory: Callable[[], UUID] = field(default=uuid4)

    def create_session(self, request: CreateSessionRequest) -> Session:
        """Create a planning session for a validated request and store it."""
        session = build_session(request, self.id_factory(), self.clock())
        stored = self.repository.create(session)
        _logger.info(
            "Session created: id=%s guest=%s travelers=%s",
            stored.id,
            stored.is_guest,
            stored.traveler_count,
        )
        return stored
