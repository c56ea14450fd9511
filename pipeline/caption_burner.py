"""
Caption Burner stage.

Placeholder: no captions are rendered yet. The stage waits for the
configured stub delay and hands back the public demo clip so the browser
always has something playable. With `caption_passthrough` enabled it
returns the incoming video instead, which is the contract a real
FFmpeg caption pass would keep.
"""

import asyncio
import logging

from config import Settings

logger = logging.getLogger(__name__)

DEMO_VIDEO_URL = "https://commondatastorage.googleapis.com/gtv-videos-bucket/sample/ForBiggerBlazes.mp4"


class CaptionBurner:
    """Adds dynamic captions to a video (stubbed)."""

    def __init__(self, settings: Settings):
        self.delay = settings.captions_stub_seconds
        self.passthrough = settings.caption_passthrough

    async def add_captions(self, video_url: str, script: str) -> str:
        await asyncio.sleep(self.delay)

        if self.passthrough:
            return video_url

        logger.debug(f"Caption stub active, returning demo video ({len(script)} chars of script ignored)")
        return DEMO_VIDEO_URL
