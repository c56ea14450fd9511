"""
Lip-sync stage.

Placeholder for a real lip-sync provider: waits for the stub delay and
returns the video untouched. The audio reference is accepted so callers
already wire it through.
"""

import asyncio

from config import Settings


class LipSyncer:
    """Aligns the generated video with the voice-over (stubbed)."""

    def __init__(self, settings: Settings):
        self.delay = settings.lipsync_stub_seconds

    async def apply(self, video_url: str, audio_url: str) -> str:
        await asyncio.sleep(self.delay)
        return video_url
