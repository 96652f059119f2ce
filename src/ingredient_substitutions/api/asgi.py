"""ASGI entrypoint for the ingredient substitutions API."""

from ingredient_substitutions.api.app import create_app
from ingredient_substitutions.containers import build_container

app = create_app(build_container())
