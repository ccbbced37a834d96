"""Fixtures for API tests."""

import falcon.asgi
import pytest

from recordkeeper.interfaces.api.middleware.actor import ActorMiddleware
from recordkeeper.main import add_routes


@pytest.fixture
def app(services):
    """Falcon ASGI app with record resources wired to in-memory services."""
    app = falcon.asgi.App(middleware=[ActorMiddleware("system")])
    add_routes(app, services)
    return app


@pytest.fixture
def client(app):
    """Falcon ASGI test client."""
    from falcon.testing import TestClient
    return TestClient(app)
