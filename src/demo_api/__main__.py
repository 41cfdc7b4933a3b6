"""Module entry point: ``python -m demo_api run``."""

from demo_api.main import app

app()
