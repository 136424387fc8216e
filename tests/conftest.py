"""Shared test fixtures."""

from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import UUID

import pytest

from travel_sessions.adapters.in_memory_session_repository import (
    InMemorySessionRepository,
)
from travel_sessions.config import Settings
from travel_sessions.containers import AppContainer
from travel_sessions.domain.sessions import Session
from travel_sessions.errors import SessionStoreError
from travel_sessions.services.sessions import SessionRepository, SessionService

FIXED_NOW = datetime(2025, 11, 1, 9, 30, tzinfo=UTC)


@dataclass
class RecordingSessionRepository(SessionRepository):
    """Session repository that records every stored session."""

    sessions: list[Session] = field(default_factory=list)

    def create(self, session: Session) -> Session:
        self.sessions.append(session)
        return session


@dataclass
class FailingSessionRepository(SessionRepository):
    """Session repository that always fails to persist."""

    error: Exception = field(
        default_factory=lambda: SessionStoreError("Failed to create session")
    )

    def create(self, session: Session) -> Session:
        raise self.error


def sequential_ids() -> Callable[[], UUID]:
    counter = iter(range(1, 1_000_000))

    def next_id() -> UUID:
        return UUID(int=next(counter))

    return next_id


@pytest.fixture
def valid_payload() -> dict[str, object]:
    return {
        "intereses": ["aventura", "gastronomia"],
        "fechaInicio": "2025-12-10",
        "fechaFin": "2025-12-20",
        "tipoExperiencia": "Aventura Andina",
        "numeroViajeros": 2,
        "restricciones": ["vegetariano"],
    }


@pytest.fixture
def settings() -> Settings:
    return Settings(environment="test", log_level="info", cors_origins="*")


@pytest.fixture
def session_repository() -> InMemorySessionRepository:
    return InMemorySessionRepository()


@pytest.fixture
def container(
    settings: Settings, session_repository: InMemorySessionRepository
) -> AppContainer:
    session_service = SessionService(session_repository)

    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        session_service=session_service,
        close_resources=close_resources,
    )
