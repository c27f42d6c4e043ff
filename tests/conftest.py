"""Pytest configuration and shared fakes.

Ensure the repository root is on sys.path so tests can import the `app` package
when running pytest from the repo root or from other working directories.
Provider clients are swapped for in-memory fakes through
`app.dependency_overrides`, and any real outbound HTTP call fails the test.
"""
import os
import sys
from pathlib import Path

import pytest
import requests

# Insert repo root (one level up from tests/) at front of sys.path
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

# create_app reads ENV when app.main is imported
os.environ.setdefault("ENV", "dev")

from fastapi.testclient import TestClient  # noqa: E402

from app.config import Settings, get_settings  # noqa: E402
from app.dependencies import get_discord, get_fal, get_gemini  # noqa: E402
from app.errors import ProviderError  # noqa: E402
from app.main import app  # noqa: E402


class FakeGemini:
    def __init__(self, text="generated text", error=None, configured=True):
        self.text = text
        self.error = error
        self.configured = configured
        self.calls = []

    def ensure_configured(self):
        if not self.configured:
            raise ProviderError("GEMINI_API_KEY not configured")

    def _answer(self):
        self.ensure_configured()
        if self.error:
            raise self.error
        return self.text

    def generate_text(self, prompt, **kwargs):
        self.calls.append({"prompt": prompt, **kwargs})
        return self._answer()

    def generate_vision(self, prompt, images, **kwargs):
        self.calls.append({"prompt": prompt, "images": list(images), **kwargs})
        return self._answer()


class FakeDiscord:
    def __init__(self, error=None):
        self.error = error
        self.messages = []

    def post_message(self, message):
        self.messages.append(message)
        if self.error:
            raise self.error


class FakeFal:
    def __init__(self, result=None, error=None):
        self.result = result if result is not None else {"masks": [], "boxes": []}
        self.error = error
        self.calls = []

    def segment(self, image_url, prompt=None):
        self.calls.append((image_url, prompt))
        if self.error:
            raise self.error
        return self.result


class FakeResponse:
    def __init__(self, content=b"", status_code=200, headers=None, text=""):
        self.content = content
        self.status_code = status_code
        self.headers = headers or {}
        self.text = text

    @property
    def ok(self):
        return 200 <= self.status_code < 300

    def raise_for_status(self):
        if not self.ok:
            raise requests.exceptions.HTTPError(f"{self.status_code} error", response=self)


@pytest.fixture(autouse=True)
def no_network(monkeypatch):
    """Fail on any requests call a test did not stub explicitly"""
    def blocked(*args, **kwargs):
        raise AssertionError("unexpected outbound HTTP call")

    monkeypatch.setattr(requests.sessions.Session, "request", blocked)


@pytest.fixture
def gemini():
    fake = FakeGemini()
    app.dependency_overrides[get_gemini] = lambda: fake
    return fake


@pytest.fixture
def discord():
    fake = FakeDiscord()
    app.dependency_overrides[get_discord] = lambda: fake
    return fake


@pytest.fixture
def fal():
    fake = FakeFal()
    app.dependency_overrides[get_fal] = lambda: fake
    return fake


@pytest.fixture
def settings():
    """Settings with every key present; tests may replace fields"""
    value = Settings(
        gemini_api_key="test-gemini-key",
        fal_api_key="test-fal-key",
        discord_webhook_url="https://discord.example/webhook",
        http_timeout_seconds=5.0,
    )
    app.dependency_overrides[get_settings] = lambda: value
    return value


def use_settings(**overrides) -> Settings:
    value = Settings(**overrides)
    app.dependency_overrides[get_settings] = lambda: value
    return value


@pytest.fixture(autouse=True)
def reset_overrides():
    yield
    app.dependency_overrides.clear()


@pytest.fixture
def client():
    return TestClient(app)
