"""Validation rules for incoming session requests.

``CreateSessionPayload`` is the pydantic schema for the wire payload. Field
validators coerce and trim input and raise ``PydanticCustomError`` with the
client-facing messages; the model validator adds the date order rule.
``validate_create_session`` never raises on bad input and returns a
``ValidationSuccess`` or a ``ValidationFailure`` keyed by wire field name.
"""

import math
import re
from dataclasses import dataclass
from datetime import UTC, date, datetime
from decimal import Decimal, InvalidOperation
from typing import Annotated, Self

from pydantic import (
    BaseModel,
    BeforeValidator,
    Field,
    ValidationError,
    ValidationInfo,
    field_validator,
    model_validator,
)
from pydantic_core import ErrorDetails, PydanticCustomError

from travel_sessions.domain.sessions import CreateSessionRequest

REQUIRED = "Este campo es obligatorio"
OBJECT_TYPE = "Debe ser un objeto"
TEXT_TYPE = "Debe ser un texto"
LIST_TYPE = "Debe ser una lista"
MIN_LENGTH = "Debe contener al menos un carácter"
MIN_INTERESTS = "Debe proporcionar al menos un interés"
INVALID_DATE = "Debe ser una fecha válida"
TRAVELERS_REQUIRED = "Debe indicar el número de viajeros"
NUMBER_TYPE = "Debe ser un número"
INTEGER = "Debe ser un número entero"
MIN_TRAVELERS = "Debe haber al menos un viajero"
MAX_TRAVELERS = "El número de viajeros no puede exceder 99"
END_BEFORE_START = "La fecha de fin debe ser posterior o igual a la fecha de inicio"

MIN_TRAVELER_COUNT = 1
MAX_TRAVELER_COUNT = 99

# Epoch milliseconds for 0001-01-01 and 9999-12-31 UTC.
_MIN_EPOCH_MS = -62_135_596_800_000
_MAX_EPOCH_MS = 253_402_214_400_000

_DECIMAL_NUMBER = re.compile(r"[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?")
_DATE_ONLY = re.compile(r"\d{4}-\d{2}-\d{2}")

_FIELD_ERROR = "session_field"

_MISSING_MESSAGES = {"numeroViajeros": TRAVELERS_REQUIRED}

_TYPE_MESSAGES = {
    "model_type": OBJECT_TYPE,
    "list_type": LIST_TYPE,
    "tuple_type": LIST_TYPE,
    "string_type": TEXT_TYPE,
    "greater_than_equal": MIN_TRAVELERS,
    "less_than_equal": MAX_TRAVELERS,
}

_FALLBACK_MESSAGES = {
    "fechaInicio": INVALID_DATE,
    "fechaFin": INVALID_DATE,
    "numeroViajeros": NUMBER_TYPE,
}


def _field_error(message: str, field: str | None = None) -> PydanticCustomError:
    context = {"field": field} if field else None
    return PydanticCustomError(_FIELD_ERROR, message, context)


def _non_empty_text(value: object) -> str:
    if not isinstance(value, str):
        raise _field_error(TEXT_TYPE)
    stripped = value.strip()
    if not stripped:
        raise _field_error(MIN_LENGTH)
    return stripped


NonEmptyText = Annotated[str, BeforeValidator(_non_empty_text)]


class CreateSessionPayload(BaseModel):
    """Wire schema for starting a planning session."""

    user_id: str | None = Field(default=None, alias="usuarioId")
    interests: tuple[NonEmptyText, ...] = Field(alias="intereses")
    start_date: datetime = Field(alias="fechaInicio")
    end_date: datetime = Field(alias="fechaFin")
    experience_type: str = Field(alias="tipoExperiencia")
    traveler_count: int = Field(
        alias="numeroViajeros", ge=MIN_TRAVELER_COUNT, le=MAX_TRAVELER_COUNT
    )
    restrictions: tuple[NonEmptyText, ...] = Field(default=(), alias="restricciones")

    @field_validator("user_id", mode="before")
    @classmethod
    def optional_user_id(cls, value: object) -> object:
        if value is None:
            return None
        return _non_empty_text(value)

    @field_validator("experience_type", mode="before")
    @classmethod
    def required_text(cls, value: object) -> object:
        if value is None:
            raise _field_error(REQUIRED)
        return _non_empty_text(value)

    @field_validator("interests", "restrictions", mode="before")
    @classmethod
    def list_input(cls, value: object, info: ValidationInfo) -> object:
        if value is None:
            if info.field_name == "restrictions":
                return ()
            raise _field_error(REQUIRED)
        if not isinstance(value, list | tuple):
            raise _field_error(LIST_TYPE)
        return value

    @field_validator("interests")
    @classmethod
    def at_least_one_interest(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        if not value:
            raise _field_error(MIN_INTERESTS)
        return value

    @field_validator("start_date", "end_date", mode="before")
    @classmethod
    def coerce_date(cls, value: object) -> object:  # noqa: PLR0911
        if value is None:
            raise _field_error(REQUIRED)
        if isinstance(value, datetime):
            return value
        if isinstance(value, date):
            return datetime(value.year, value.month, value.day, tzinfo=UTC)
        if isinstance(value, bool):
            raise _field_error(INVALID_DATE)
        if isinstance(value, int | float):
            if isinstance(value, float) and not math.isfinite(value):
                raise _field_error(INVALID_DATE)
            if not _MIN_EPOCH_MS <= value <= _MAX_EPOCH_MS:
                raise _field_error(INVALID_DATE)
            return datetime.fromtimestamp(value / 1000, tz=UTC)
        if isinstance(value, str):
            text = value.strip()
            if _DATE_ONLY.fullmatch(text):
                return f"{text}T00:00:00Z"
            return text
        raise _field_error(INVALID_DATE)

    @field_validator("start_date", "end_date")
    @classmethod
    def assume_utc(cls, value: datetime) -> datetime:
        if value.tzinfo is None:
            return value.replace(tzinfo=UTC)
        return value

    @field_validator("traveler_count", mode="before")
    @classmethod
    def coerce_traveler_count(cls, value: object) -> int:  # noqa: PLR0912
        if value is None:
            raise _field_error(TRAVELERS_REQUIRED)
        if isinstance(value, bool):
            raise _field_error(NUMBER_TYPE)
        if isinstance(value, int):
            number = Decimal(value)
        elif isinstance(value, float):
            if not math.isfinite(value):
                raise _field_error(NUMBER_TYPE)
            number = Decimal(value)
        elif isinstance(value, str):
            text = value.strip()
            if not _DECIMAL_NUMBER.fullmatch(text):
                raise _field_error(NUMBER_TYPE)
            try:
                number = Decimal(text)
            except InvalidOperation:
                raise _field_error(NUMBER_TYPE) from None
        else:
            raise _field_error(NUMBER_TYPE)
        try:
            integral = number == number.to_integral_value()
        except InvalidOperation:
            raise _field_error(NUMBER_TYPE) from None
        if not integral:
            raise _field_error(INTEGER)
        if number < MIN_TRAVELER_COUNT:
            raise _field_error(MIN_TRAVELERS)
        if number > MAX_TRAVELER_COUNT:
            raise _field_error(MAX_TRAVELERS)
        return int(number)

    @model_validator(mode="after")
    def check_date_order(self) -> Self:
        if self.end_date < self.start_date:
            raise _field_error(END_BEFORE_START, field="fechaFin")
        return self

    def to_request(self) -> CreateSessionRequest:
        """Convert the validated payload into the domain request."""
        return CreateSessionRequest(
            user_id=self.user_id,
            interests=self.interests,
            start_date=self.start_date,
            end_date=self.end_date,
            experience_type=self.experience_type,
            traveler_count=self.traveler_count,
            restrictions=self.restrictions,
        )


@dataclass(frozen=True)
class ValidationSuccess:
    """Validated and normalized request."""

    value: CreateSessionRequest


@dataclass(frozen=True)
class ValidationFailure:
    """Field-attributed validation errors."""

    errors: dict[str, list[str]]


ValidationResult = ValidationSuccess | ValidationFailure


def _error_field(error: ErrorDetails) -> str:
    if error["loc"]:
        return str(error["loc"][0])
    return str(error.get("ctx", {}).get("field", "body"))


def _error_message(error: ErrorDetails, field: str) -> str:
    if error["type"] == _FIELD_ERROR:
        return error["msg"]
    if error["type"] == "missing":
        return _MISSING_MESSAGES.get(field, REQUIRED)
    if error["type"] in _TYPE_MESSAGES:
        return _TYPE_MESSAGES[error["type"]]
    return _FALLBACK_MESSAGES.get(field, error["msg"])


def validate_create_session(raw: object) -> ValidationResult:
    """Validate an untyped payload for starting a planning session."""
    try:
        payload = CreateSessionPayload.model_validate(raw)
    except ValidationError as exc:
        errors: dict[str, list[str]] = {}
        for error in exc.errors(include_url=False):
            field = _error_field(error)
            errors.setdefault(field, []).append(_error_message(error, field))
        return ValidationFailure(errors=errors)
    return ValidationSuccess(value=payload.to_request())
