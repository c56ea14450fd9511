"""
Tests for the HTTP surface and the progress stream framing.
"""

import pytest
from fastapi.testclient import TestClient

from config import get_settings
from main import app
from models.schemas import COMPLETE_MESSAGE, ProgressEvent
from pipeline.caption_burner import DEMO_VIDEO_URL
from services.event_stream import encode_events, format_event, parse_event_stream
from tests.conftest import make_settings


class TestEventStream:
    """Test SSE framing."""

    def test_format_progress_event(self):
        assert format_event(ProgressEvent.update("Working...")) == 'data: {"progress": "Working..."}\n\n'

    def test_format_keeps_unicode(self):
        assert "🎬" in format_event(ProgressEvent.update("🎬 Creating viral script..."))

    def test_parse_event_stream(self):
        body = 'data: {"progress": "a"}\n\n: keep-alive\n\ndata: {"error": "b"}\n\n'
        assert list(parse_event_stream(body.splitlines())) == [{"progress": "a"}, {"error": "b"}]

    @pytest.mark.asyncio
    async def test_encode_stops_after_terminal_event(self):
        async def events():
            yield ProgressEvent.update("one")
            yield ProgressEvent.failure("broken")
            yield ProgressEvent.update("late")

        chunks = [chunk async for chunk in encode_events(events())]

        assert len(chunks) == 2
        assert chunks[-1] == b'data: {"error": "broken"}\n\n'

    @pytest.mark.asyncio
    async def test_encode_closes_producer_after_terminal_event(self):
        closed = []

        async def events():
            try:
                yield ProgressEvent.complete("https://example.com/v.mp4")
                yield ProgressEvent.update("late")
            finally:
                closed.append(True)

        chunks = [chunk async for chunk in encode_events(events())]

        assert len(chunks) == 1
        assert closed == [True]


class TestAPIEndpoints:
    """Test FastAPI endpoints using TestClient."""

    @pytest.fixture
    def client(self):
        """Create test client with zero-delay, credential-free settings."""
        app.dependency_overrides[get_settings] = lambda: make_settings()
        yield TestClient(app)
        app.dependency_overrides.clear()

    def test_health_endpoint(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["checks"] == {"elevenlabs_api_key": False, "kling_api_key": False}
        assert data["config"]["poll_max_attempts"] == 30

    def test_generate_streams_demo_video(self, client):
        response = client.post("/api/generate", json={"topic": "Best productivity app"})

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/event-stream")
        assert response.headers["cache-control"] == "no-cache"

        events = list(parse_event_stream(response.text.splitlines()))
        assert len(events) == 7
        assert all(set(event) == {"progress"} for event in events[:-1])
        assert events[-1] == {
            "videoUrl": DEMO_VIDEO_URL,
            "progress": COMPLETE_MESSAGE,
        }

    @pytest.mark.parametrize("payload", [{"topic": ""}, {"topic": "   "}])
    def test_generate_rejects_blank_topic(self, client, payload):
        response = client.post("/api/generate", json=payload)
        assert response.status_code == 422  # Validation error

    @pytest.mark.parametrize("body", [b"{not json", b"{}", b'{"subject": "desks"}', b'{"topic": 42}', b"[1, 2]"])
    def test_generate_streams_error_for_malformed_body(self, client, body):
        response = client.post(
            "/api/generate",
            content=body,
            headers={"Content-Type": "application/json"}
        )

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/event-stream")

        events = list(parse_event_stream(response.text.splitlines()))
        assert len(events) == 1
        assert set(events[0]) == {"error"}
        assert events[0]["error"]
