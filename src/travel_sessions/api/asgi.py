"""ASGI entrypoint for the travel sessions API."""

from travel_sessions.api.app import create_app
from travel_sessions.containers import build_container

app = create_app(build_container())
