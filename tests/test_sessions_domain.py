"""Tests for session domain helpers."""

from datetime import UTC, datetime, timedelta, timezone
from uuid import uuid4

from travel_sessions.domain.sessions import (
    PLANNING_STATUS,
    CreateSessionRequest,
    build_session,
    to_iso_timestamp,
)


def test_to_iso_timestamp_normalizes_to_utc() -> None:
    lima = timezone(timedelta(hours=-5))

    assert to_iso_timestamp(datetime(2025, 12, 10, 19, 0, tzinfo=lima)) == (
        "2025-12-11T00:00:00.000Z"
    )
    assert to_iso_timestamp(datetime(2025, 12, 10, 8, 5, 3, 250000)) == (
        "2025-12-10T08:05:03.250Z"
    )


def test_build_session_preserves_input_order() -> None:
    request = CreateSessionRequest(
        user_id="traveler-7",
        interests=("museos", "aventura", "cafe"),
        start_date=datetime(2025, 12, 10, tzinfo=UTC),
        end_date=datetime(2025, 12, 10, tzinfo=UTC),
        experience_type="Cultural",
        traveler_count=4,
        restrictions=("sin gluten", "vegano"),
    )
    now = datetime(2025, 11, 1, tzinfo=UTC)

    session = build_session(request, uuid4(), now)

    assert session.interests == ("museos", "aventura", "cafe")
    assert session.restrictions == ("sin gluten", "vegano")
    assert session.is_guest is False
    assert session.status == PLANNING_STATUS
    assert session.created_at == session.updated_at == "2025-11-01T00:00:00.000Z"
