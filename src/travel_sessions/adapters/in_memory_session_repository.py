"""In-memory session repository."""

import threading
from dataclasses import dataclass, field
from uuid import UUID

from travel_sessions.domain.sessions import Session
from travel_sessions.services.sessions import SessionRepository


@dataclass
class InMemorySessionRepository(SessionRepository):
    """Process-local session storage keyed by session id."""

    _sessions: dict[UUID, Session] = field(default_factory=dict)
    _lock: threading.Lock = field(default_factory=threading.Lock)

    def create(self, session: Session) -> Session:
        """Store the session, replacing any entry with the same id."""
        with self._lock:
            self._sessions[session.id] = session
        return session
