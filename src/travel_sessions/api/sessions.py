"""Session API endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from fastapi import APIRouter, Body, Request, status

from travel_sessions.api.session_models import SessionPayload
from travel_sessions.domain.validation import (
    ValidationFailure,
    validate_create_session,
)
from travel_sessions.errors import HttpError

if TYPE_CHECKING:
    from travel_sessions.containers import AppContainer

INVALID_DATA_MESSAGE = "Los datos proporcionados no son válidos"

router = APIRouter(prefix="/api/sesion", tags=["sessions"])


@router.post("/iniciar", status_code=status.HTTP_201_CREATED)
async def start_session(
    request: Request, payload: Any = Body(default=None)
) -> dict[str, object]:
    """Validate the request and start a new planning session."""
    result = validate_create_session(payload)
    if isinstance(result, ValidationFailure):
        raise HttpError(
            status.HTTP_400_BAD_REQUEST,
            INVALID_DATA_MESSAGE,
            result.errors,
        )

    container: AppContainer = request.app.state.container
    session = container.session_service.create_session(result.value)
    return {
        "status": "success",
        "data": {"session": SessionPayload.from_session(session).to_response()},
    }
