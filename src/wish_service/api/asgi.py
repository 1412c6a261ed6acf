"""ASGI entrypoint for the wish service API."""

from wish_service.api.app import create_app
from wish_service.containers import build_container

app = create_app(build_container())
