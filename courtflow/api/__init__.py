"""HTTP and WebSocket API."""

from courtflow.api.main import app, create_app, run_api

__all__ = ["app", "create_app", "run_api"]
