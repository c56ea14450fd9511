"""Shared fixtures for the Viral Shorts test suite."""

import pytest

from config import Settings


def make_settings(**overrides) -> Settings:
    """Settings with no provider keys and every delay set to zero."""
    values = dict(
        elevenlabs_api_key="",
        kling_api_key="",
        poll_interval_seconds=0,
        script_delay_seconds=0,
        voice_delay_seconds=0,
        video_delay_seconds=0,
        lipsync_delay_seconds=0,
        captions_delay_seconds=0,
        finalize_delay_seconds=0,
        lipsync_stub_seconds=0,
        captions_stub_seconds=0,
    )
    values.update(overrides)
    return Settings(_env_file=None, **values)


@pytest.fixture
def fast_settings():
    return make_settings()
