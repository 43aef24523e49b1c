"""ASGI entrypoint for the fridge insights API."""

from fridge_insights.api.app import create_app
from fridge_insights.containers import build_container

app = create_app(build_container())
