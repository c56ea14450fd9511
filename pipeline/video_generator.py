"""
Video Generator using the Kling AI text-to-video API.
Submits one generation task and polls it within a fixed attempt budget.
"""

import asyncio
import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

import httpx

from config import Settings

logger = logging.getLogger(__name__)

# Minimal H.264 MP4 stub used whenever Kling cannot deliver a clip
PLACEHOLDER_VIDEO = (
    "data:video/mp4;base64,AAAAIGZ0eXBpc29tAAACAGlzb21pc28yYXZjMW1wNDEAAAAIZnJlZQ"
    "AAAs1tZGF0AAACrgYF//+q3EXpvebZSLeWLNgg2SPu73gyNjQgLSBjb3JlIDE1MiByMjg1NCBlOW"
    "E1OTAzIC0gSC4yNjQvTVBFRy00IEFWQyBjb2RlYyAtIENvcHlsZWZ0IDIwMDMtMjAxNyAtIGh0dH"
    "A6Ly93d3cudmlkZW9sYW4ub3JnL3gyNjQuaHRtbCAtIG9wdGlvbnM6IGNhYmFjPTEgcmVmPTMgZG"
    "VibG9jaz0xOjA6MCBhbmFseXNlPTB4MzoweDExMyBtZT1oZXggc3VibWU9NyBwc3k9MSBwc3lfcm"
    "Q9MS4wMDowLjAwIG1peGVkX3JlZj0xIG1lX3JhbmdlPTE2IGNocm9tYV9tZT0xIHRyZWxsaXM9MS"
    "A4eDhkY3Q9MSBjcW09MCBkZWFkem9uZT0yMSwxMSBmYXN0X3Bza2lwPTEgY2hyb21hX3FwX29mZn"
    "NldD0tMiB0aHJlYWRzPTYgbG9va2FoZWFkX3RocmVhZHM9MSBzbGljZWRfdGhyZWFkcz0wIG5yPT"
    "AgZGVjaW1hdGU9MSBpbnRlcmxhY2VkPTAgYmx1cmF5X2NvbXBhdD0wIGNvbnN0cmFpbmVkX2ludH"
    "JhPTAgYmZyYW1lcz0zIGJfcHlyYW1pZD0yIGJfYWRhcHQ9MSBiX2JpYXM9MCBkaXJlY3Q9MSB3ZW"
    "lnaHRiPTEgb3Blbl9nb3A9MCB3ZWlnaHRwPTIga2V5aW50PTI1MCBrZXlpbnRfbWluPTI1IHNjZW"
    "5lY3V0PTQwIGludHJhX3JlZnJlc2g9MCByY19sb29rYWhlYWQ9NDAgcmM9Y3JmIG1idHJlZT0xIG"
    "NyZj0yMy4wIHFjb21wPTAuNjAgcXBtaW49MCBxcG1heD02OSBxcHN0ZXA9NCBpcF9yYXRpbz0xLj"
    "QwIGFxPTE6MS4wMACAAAAA"
)


@dataclass(frozen=True)
class PollPolicy:
    """Bounded polling: sleep `interval_seconds` before each of `max_attempts` status queries."""
    max_attempts: int = 30
    interval_seconds: float = 2.0

    @classmethod
    def from_settings(cls, settings: Settings) -> "PollPolicy":
        return cls(
            max_attempts=settings.poll_max_attempts,
            interval_seconds=settings.poll_interval_seconds
        )

    @property
    def budget_seconds(self) -> float:
        return self.max_attempts * self.interval_seconds


class VideoGenerator:
    """
    Generates a vertical clip for a topic using Kling AI.
    Never raises: a missing key, a failed task or an exhausted poll budget
    all yield PLACEHOLDER_VIDEO.
    """

    def __init__(
        self,
        settings: Settings,
        poll_policy: Optional[PollPolicy] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        self.settings = settings
        self.api_key = settings.kling_api_key
        self.base_url = settings.kling_base_url
        self.poll_policy = poll_policy or PollPolicy.from_settings(settings)
        self.transport = transport

    async def generate(self, topic: str, script: str) -> str:
        """
        Generate a video clip for a topic.

        Args:
            topic: User topic, used to build the visual prompt
            script: Voice-over script (only logged; Kling works from the prompt)

        Returns:
            URL of the generated video, or PLACEHOLDER_VIDEO
        """
        if not self.api_key:
            logger.info("Kling API key not found, using mock video")
            return PLACEHOLDER_VIDEO

        prompt = self.build_prompt(topic)
        logger.debug(f"Generating video for script: {script[:60]}...")

        try:
            async with httpx.AsyncClient(
                timeout=self.settings.http_timeout_seconds,
                transport=self.transport
            ) as client:
                task_id = await self._create_video_task(client, prompt)
                video_url = await self._poll_for_result(client, task_id)
        except Exception as e:
            logger.error(f"Kling AI error: {e}")
            return PLACEHOLDER_VIDEO

        if not video_url:
            return PLACEHOLDER_VIDEO

        logger.info(f"Video generated: {video_url}")
        return video_url

    @staticmethod
    def build_prompt(topic: str) -> str:
        """Build the cinematic prompt sent to Kling."""
        return (
            f"Cinematic 4K video: {topic}. Vibrant colors, dynamic motion, "
            "professional lighting, eye-catching visuals, trending style, high energy"
        )

    def _headers(self) -> Dict[str, str]:
        return {"Authorization": f"Bearer {self.api_key}"}

    async def _create_video_task(self, client: httpx.AsyncClient, prompt: str) -> str:
        """Create a video generation task and return the task ID."""
        response = await client.post(
            f"{self.base_url}/videos/text2video",
            headers=self._headers(),
            json={
                "prompt": prompt,
                "duration": self.settings.video_duration_seconds,
                "aspect_ratio": self.settings.video_aspect_ratio,
                "mode": self.settings.video_mode,
            }
        )

        if response.is_error:
            raise Exception(f"Kling AI API failed: {response.status_code} - {response.text[:200]}")

        data = response.json()
        task_id = self._extract(data, "task_id")
        if not task_id:
            raise Exception(f"No task ID in response: {data}")

        logger.info(f"Video task created: {task_id}")
        return task_id

    async def _poll_for_result(self, client: httpx.AsyncClient, task_id: str) -> Optional[str]:
        """
        Poll the task until it completes or the budget runs out.

        Returns the video URL, or None when the task failed, finished
        without a URL or never completed within the budget.
        """
        policy = self.poll_policy

        for attempt in range(policy.max_attempts):
            await asyncio.sleep(policy.interval_seconds)

            response = await client.get(
                f"{self.base_url}/videos/{task_id}",
                headers=self._headers()
            )
            response.raise_for_status()
            data = response.json()

            status = self._extract(data, "status")
            logger.debug(f"Video task {task_id} status: {status} (attempt {attempt + 1}/{policy.max_attempts})")

            if status == "completed":
                video_url = self._extract(data, "video_url")
                if not video_url:
                    logger.warning(f"Video task {task_id} completed without a video URL")
                return video_url

            if status == "failed":
                logger.error(f"Video task {task_id} failed: {data}")
                return None

        logger.warning(
            f"Video task {task_id} timed out after {policy.budget_seconds:.0f} seconds"
        )
        return None

    @staticmethod
    def _extract(data: Any, key: str) -> Optional[str]:
        """Read a field from the top level or from a nested `data` object."""
        if not isinstance(data, dict):
            return None
        value = data.get(key)
        if value is None and isinstance(data.get("data"), dict):
            value = data["data"].get(key)
        return value
