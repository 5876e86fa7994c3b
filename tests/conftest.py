"""Shared fixtures: isolated settings, a controllable clock and per-test containers."""

from __future__ import annotations

import random
from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient

from app.core.config import GenerationSettings, SecuritySettings, Settings
from app.core.container import build_container
from app.main import create_app
from app.modules.generation import UpstreamGenerationError

TEST_SECRET = "test-secret-key-0123456789"


class FakeClock:
    """Deterministic replacement for ``datetime.now(timezone.utc)``."""

    def __init__(self, start: datetime | None = None) -> None:
        self.now = start or datetime(2026, 10, 19, 12, 0, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> datetime:
        self.now = self.now + timedelta(**kwargs)
        return self.now


class StubGenerationClient:
    """Text generation client returning a canned answer."""

    def __init__(self, text: str = "") -> None:
        self.text = text
        self.prompts: list[str] = []

    async def generate_text(self, prompt: str) -> str:
        self.prompts.append(prompt)
        return self.text


class FailingGenerationClient:
    """Text generation client whose remote call always fails."""

    def __init__(self) -> None:
        self.calls = 0

    async def generate_text(self, prompt: str) -> str:
        self.calls += 1
        raise UpstreamGenerationError("service unavailable")


@pytest.fixture(autouse=True)
def _isolate_environment(monkeypatch):
    for name in ("JWT_SECRET", "HUGGINGFACE_API_KEY", "HF_API_KEY"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def settings() -> Settings:
    return Settings(
        _env_file=None,
        environment="test",
        security=SecuritySettings(secret_key=TEST_SECRET, bcrypt_rounds=4),
        generation=GenerationSettings(api_key=None),
    )


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture
def generation_client() -> FailingGenerationClient:
    return FailingGenerationClient()


@pytest.fixture
def container(settings, rng, clock, generation_client):
    return build_container(settings, rng=rng, generation_client=generation_client, clock=clock)


@pytest.fixture
def client(container):
    app = create_app(container=container)
    with TestClient(app) as test_client:
        yield test_client


def signup(client: TestClient, email: str = "alice@creators.io", username: str = "alice", **extra) -> dict:
    payload = {
        "email": email,
        "password": "secret123",
        "username": username,
        "fullName": extra.pop("full_name", "Alice Example"),
    }
    payload.update(extra)
    response = client.post("/api/auth/signup", json=payload)
    assert response.status_code == 200, response.text
    return response.json()


def auth_headers(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


def script_payload(**overrides) -> dict:
    payload = {
        "title": "Morning routine",
        "niche": "Fitness & Health",
        "contentType": "Instagram Reel",
        "tone": "Energetic",
        "length": "30 seconds",
        "notes": "Mention hydration",
        "hook": "Wake up like this",
        "body": "Water, sunlight, squats.",
        "cta": "Follow for more",
    }
    payload.update(overrides)
    return payload
