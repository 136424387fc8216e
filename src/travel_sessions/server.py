"""Run the API with uvicorn."""

import uvicorn

from travel_sessions.api.app import create_app
from travel_sessions.config import Settings
from travel_sessions.containers import build_container

_UVICORN_LEVELS = {"fatal": "critical", "warn": "warning"}


def main() -> None:
    """Serve the API until SIGINT or SIGTERM."""
    settings = Settings()
    app = create_app(build_container(settings))
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level=_UVICORN_LEVELS.get(settings.log_level, settings.log_level),
    )


if __name__ == "__main__":
    main()
