"""
Voice Generator using the ElevenLabs text-to-speech API.
Falls back to a silent placeholder clip when the provider is unavailable.
"""

import base64
import logging
from typing import Optional

import httpx

from config import Settings

logger = logging.getLogger(__name__)

# Header-only 8kHz mono WAV with an empty data chunk
PLACEHOLDER_AUDIO = "data:audio/wav;base64,UklGRiQAAABXQVZFZm10IBAAAAABAAEAQB8AAEAfAAABAAgAZGF0YQAAAAA="


class VoiceGenerator:
    """
    Generates the voice-over for a script with a fixed ElevenLabs voice.
    Never raises: any provider problem yields PLACEHOLDER_AUDIO.
    """

    def __init__(
        self,
        settings: Settings,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        self.settings = settings
        self.api_key = settings.elevenlabs_api_key
        self.base_url = settings.elevenlabs_base_url
        self.transport = transport

    async def synthesize(self, script: str) -> str:
        """
        Synthesize speech for a script.

        Args:
            script: Text to read out

        Returns:
            A data URI holding the MP3 audio, or PLACEHOLDER_AUDIO
        """
        if not self.api_key:
            logger.info("ElevenLabs API key not found, using mock audio")
            return PLACEHOLDER_AUDIO

        url = f"{self.base_url}/text-to-speech/{self.settings.elevenlabs_voice_id}"

        try:
            async with httpx.AsyncClient(
                timeout=self.settings.http_timeout_seconds,
                transport=self.transport
            ) as client:
                response = await client.post(
                    url,
                    headers={
                        "Accept": "audio/mpeg",
                        "xi-api-key": self.api_key,
                    },
                    json={
                        "text": script,
                        "model_id": self.settings.elevenlabs_model_id,
                        "voice_settings": {
                            "stability": self.settings.voice_stability,
                            "similarity_boost": self.settings.voice_similarity_boost,
                        },
                    }
                )
                response.raise_for_status()

                encoded = base64.b64encode(response.content).decode("ascii")
                logger.info(f"Voice generated: {len(response.content)} bytes")
                return f"data:audio/mpeg;base64,{encoded}"

        except httpx.HTTPStatusError as e:
            logger.error(f"ElevenLabs API error: {e.response.status_code} - {e.response.text[:200]}")
        except httpx.HTTPError as e:
            logger.error(f"ElevenLabs request failed: {e}")

        return PLACEHOLDER_AUDIO
