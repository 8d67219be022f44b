"""ASGI entrypoint for the USDA nutrition API."""

from usda_nutrition.api.app import create_app
from usda_nutrition.containers import build_container

app = create_app(build_container())
