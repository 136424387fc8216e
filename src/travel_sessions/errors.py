"""Application error types."""

from fastapi import status


class HttpError(Exception):
    """Client-facing error carrying an HTTP status and optional details."""

    def __init__(
        self,
        status_code: int,
        message: str,
        details: object | None = None,
    ) -> None:
        self.status_code = status_code
        self.message = message
        self.details = details
        super().__init__(message)

    @property
    def is_client_error(self) -> bool:
        return self.status_code < status.HTTP_500_INTERNAL_SERVER_ERROR


class SessionStoreError(Exception):
    """Raised when a session could not be persisted."""
