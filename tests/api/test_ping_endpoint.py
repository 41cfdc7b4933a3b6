"""Integration tests for ``GET /ping`` against an in-process test host."""

import pytest
from fastapi import APIRouter, Request
from fastapi.testclient import TestClient

from demo_api.app import create_app
from demo_api.constants import ServiceScope
from demo_api.middleware import translate_errors
from demo_api.pipeline import Pipeline
from demo_api.services.ping_service import PingService
from demo_api.settings import Settings


@pytest.fixture
def settings():
    """Settings isolated from the environment and any .env file."""
    return Settings(_env_file=None)


@pytest.fixture
def app(settings):
    """A fresh application with its own service registry."""
    return create_app(settings)


@pytest.fixture
def client(app):
    """Test client for the application."""
    return TestClient(app)


def get_service_from_registry[T](app, service_type: type[T]) -> T:
    """Reach a service through the application's registry, the way tests configure it."""
    return app.state.registry.get(service_type)


def test_ping_on_success_returns_ok_with_pong_response(client):
    response = client.get("/ping")

    assert response.is_success
    assert response.text == "Pong!"
    assert response.headers["content-type"].startswith("text/plain")


def test_ping_on_error_returns_bad_request_with_failure_message(app, client):
    ping_service = get_service_from_registry(app, PingService)
    ping_service.configure_failure("Something went wrong!")

    response = client.get("/ping")

    assert response.status_code == 400
    assert response.text == "Something went wrong!"
    assert response.headers["content-type"].startswith("text/plain")


def test_ping_is_idempotent_when_unconfigured(client):
    first = client.get("/ping")
    second = client.get("/ping")

    assert first.status_code == second.status_code == 200
    assert first.text == second.text == "Pong!"


def test_ping_with_empty_failure_message(app, client):
    get_service_from_registry(app, PingService).configure_failure("")

    response = client.get("/ping")

    assert response.status_code == 400
    assert response.text == ""


def test_configured_failure_persists_across_requests(app, client):
    get_service_from_registry(app, PingService).configure_failure("still broken")

    for _ in range(2):
        response = client.get("/ping")
        assert response.status_code == 400
        assert response.text == "still broken"


def test_request_scope_does_not_leak_configured_failure():
    app = create_app(Settings(_env_file=None, ping_service_scope=ServiceScope.REQUEST))
    get_service_from_registry(app, PingService).configure_failure("Something went wrong!")

    response = TestClient(app).get("/ping")

    assert response.status_code == 200
    assert response.text == "Pong!"


def test_apps_do_not_share_ping_service(settings):
    broken = create_app(settings)
    healthy = create_app(settings)
    get_service_from_registry(broken, PingService).configure_failure("only here")

    assert TestClient(broken).get("/ping").status_code == 400
    assert TestClient(healthy).get("/ping").text == "Pong!"


def test_exception_in_endpoint_becomes_bad_request(app, client):
    async def explode(_request: Request):
        raise ValueError("exploded")

    router = APIRouter()
    router.add_api_route("/explode", Pipeline([translate_errors]).wrap(explode), methods=["GET"], response_model=None)
    app.include_router(router)

    response = client.get("/explode")

    assert response.status_code == 400
    assert response.text == "exploded"


def test_only_ping_route_is_exposed(client):
    assert client.get("/docs").status_code == 404
    assert client.get("/openapi.json").status_code == 404
    assert client.post("/ping").status_code == 405


def test_lifespan_runs_with_context_manager(app):
    with TestClient(app) as client:
        assert client.get("/ping").text == "Pong!"
