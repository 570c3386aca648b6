"""Shared fixtures: a canned API backend and a Flask app wired to it."""

import json

import pytest
import requests

from choojobs.config.settings import Settings
from choojobs.services.api_client import ApiClient
from choojobs.web import create_app


USER = {
    "id": 7,
    "email": "ada@example.com",
    "full_name": "Ada Lovelace",
    "plan": "free",
    "credits": 5,
    "role": "user",
}

ADMIN = dict(USER, id=1, email="admin@example.com", role="admin", plan="pro")


def make_response(body=None, status=200, content=None, headers=None):
    """Build a real requests.Response without touching the network."""
    response = requests.Response()
    response.status_code = status
    if content is None:
        content = b"" if body is None else json.dumps(body).encode("utf-8")
    response._content = content
    response.encoding = "utf-8"
    response.headers.update(headers or {})
    return response


class FakeBackend:
    """Route table standing in for the API. Values are JSON bodies, responses or exceptions."""

    def __init__(self):
        self.routes = {}
        self.calls = []

    def on(self, method, path, answer=None):
        self.routes[(method, path)] = answer
        return self

    def called(self, method, path):
        return [call for call in self.calls if call[0] == method and call[1] == path]


class FakeApiClient(ApiClient):
    """ApiClient that answers from a FakeBackend."""

    def __init__(self, backend, token=None):
        super().__init__("http://api.test", token=token)
        self.backend = backend

    def request_raw(self, method, path, **kwargs):
        self.backend.calls.append((method, path, kwargs, self.token))
        if (method, path) not in self.backend.routes:
            raise AssertionError(f"Unexpected API call: {method} {path}")

        answer = self.backend.routes[(method, path)]
        if isinstance(answer, Exception):
            raise answer
        if isinstance(answer, requests.Response):
            return answer
        return make_response(answer)


@pytest.fixture
def backend():
    return FakeBackend()


@pytest.fixture
def settings():
    return Settings(
        api_url="http://api.test/",
        secret_key="test-secret",
        pro_plan_amount=5000,
    )


@pytest.fixture
def app(settings, backend):
    app = create_app(
        settings,
        client_factory=lambda token: FakeApiClient(backend, token=token),
        configure_logging=False,
    )
    app.config["TESTING"] = True
    return app


@pytest.fixture
def client(app):
    return app.test_client()


def sign_in(client, user=None, token="token-123"):
    with client.session_transaction() as sess:
        sess["token"] = token
        sess["user"] = dict(user or USER)


@pytest.fixture
def user_client(client):
    sign_in(client)
    return client


@pytest.fixture
def admin_client(client):
    sign_in(client, ADMIN, token="admin-token")
    return client
