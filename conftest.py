# conftest.py
import asyncio

import pytest

import llm_analyzer
from sensor_simulator import generate_corpus


class FakeResponse:
    def __init__(self, text):
        self.text = text


class FakeModel:
    """Stands in for the Gemini model: returns canned text, raises, or stalls."""

    def __init__(self, text=None, error=None, delay=0):
        self.text = text
        self.error = error
        self.delay = delay
        self.prompts = []

    async def generate_content_async(self, prompt, **kwargs):
        self.prompts.append(prompt)
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.error is not None:
            raise self.error
        return FakeResponse(self.text)


class LoopBoundModel(FakeModel):
    """Like the Gemini async client: fails on any event loop other than the one it first ran on."""

    def __init__(self, text):
        super().__init__(text=text)
        self.loop = None

    async def generate_content_async(self, prompt, **kwargs):
        loop = asyncio.get_running_loop()
        if self.loop is None:
            self.loop = loop
        elif self.loop is not loop or self.loop.is_closed():
            raise RuntimeError("Event loop is closed")
        return await super().generate_content_async(prompt, **kwargs)


@pytest.fixture(autouse=True)
def no_llm(monkeypatch):
    """Tests never reach the real advisory service."""
    monkeypatch.setattr(llm_analyzer, "llm_model", None)


@pytest.fixture
def fake_model():
    return FakeModel


@pytest.fixture
def loop_bound_model():
    return LoopBoundModel


@pytest.fixture
def app(tmp_path):
    from app import create_app

    app = create_app({
        "TESTING": True,
        "DB_PATH": str(tmp_path / "test_water.db"),
        "SEED_DEMO_DATA": False,
        "READING_CORPUS": generate_corpus(60, seed=7),
        "HEATMAP_CORPUS": [
            {"id": 1, "location_label": "A", "lat": 28.6, "lng": 77.2, "tds": 420},
            {"id": 2, "location_label": "B", "lat": 19.0, "lng": 72.8, "tds": 130},
        ],
        "REFRESH_INTERVAL_SECONDS": 3600,
        "CONTAMINATION_ALERT_DELAY_SECONDS": 3600,
        "DRIFT_INTERVAL_SECONDS": 3600,
        "ADVISORY_TIMEOUT_SECONDS": 5,
    })
    yield app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def socket_client(app):
    from extensions import socketio

    client = socketio.test_client(app)
    yield client
    if client.is_connected():
        client.disconnect()
