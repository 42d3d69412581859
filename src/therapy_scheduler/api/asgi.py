"""ASGI entrypoint for the therapy scheduler API."""

from therapy_scheduler.api.app import create_app
from therapy_scheduler.containers import build_container

app = create_app(build_container())
