"""ASGI entrypoint for the nutrition API."""

from fitcoach_nutrition.api.app import create_app
from fitcoach_nutrition.containers import build_container

app = create_app(build_container())
