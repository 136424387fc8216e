"""Pydantic models for session API responses."""

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from travel_sessions.domain.sessions import Session


class SessionPayload(BaseModel):
    """Session as returned to API clients."""

    model_config = ConfigDict(populate_by_name=True)

    id: UUID
    user_id: str | None = Field(default=None, alias="usuarioId")
    is_guest: bool = Field(alias="esInvitado")
    interests: list[str] = Field(alias="intereses")
    start_date: str = Field(alias="fechaInicio")
    end_date: str = Field(alias="fechaFin")
    experience_type: str = Field(alias="tipoExperiencia")
    traveler_count: int = Field(alias="numeroViajeros")
    restrictions: list[str] = Field(alias="restricciones")
    status: str = Field(alias="estado")
    created_at: str = Field(alias="createdAt")
    updated_at: str = Field(alias="updatedAt")

    @classmethod
    def from_session(cls, session: Session) -> "SessionPayload":
        """Build the payload from a stored session."""
        return cls(
            id=session.id,
            user_id=session.user_id,
            is_guest=session.is_guest,
            interests=list(session.interests),
            start_date=session.start_date,
            end_date=session.end_date,
            experience_type=session.experience_type,
            traveler_count=session.traveler_count,
            restrictions=list(session.restrictions),
            status=session.status,
            created_at=session.created_at,
            updated_at=session.updated_at,
        )

    def to_response(self) -> dict[str, object]:
        """Serialize with wire field names, omitting an absent user id."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
