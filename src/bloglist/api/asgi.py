"""ASGI entrypoint for the bloglist API."""

from bloglist.api.app import create_app
from bloglist.containers import build_container

app = create_app(build_container())
