"""
Configuration module for the Viral Shorts demo service.
Loads environment variables and provides typed configuration.
"""

from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # API Keys (both optional - absence switches the stage to its placeholder)
    elevenlabs_api_key: str = ""
    kling_api_key: str = ""

    # Application Settings
    app_name: str = "Viral Shorts Generator"
    app_version: str = "1.0.0"
    debug: bool = False

    # ElevenLabs text-to-speech
    elevenlabs_base_url: str = "https://api.elevenlabs.io/v1"
    elevenlabs_voice_id: str = "21m00Tcm4TlvDq8ikWAM"
    elevenlabs_model_id: str = "eleven_monolingual_v1"
    voice_stability: float = 0.5
    voice_similarity_boost: float = 0.5

    # Kling AI text-to-video
    kling_base_url: str = "https://api.klingai.com/v1"
    video_duration_seconds: int = 15
    video_aspect_ratio: str = "9:16"
    video_mode: str = "standard"

    # Polling (worst case wait = attempts * interval)
    poll_max_attempts: int = 30
    poll_interval_seconds: float = 2.0

    # None disables client-side timeouts on provider calls
    http_timeout_seconds: Optional[float] = None

    # Pacing delays after each pipeline step
    script_delay_seconds: float = 1.0
    voice_delay_seconds: float = 1.5
    video_delay_seconds: float = 2.0
    lipsync_delay_seconds: float = 1.5
    captions_delay_seconds: float = 1.5
    finalize_delay_seconds: float = 1.0

    # Stub stages
    lipsync_stub_seconds: float = 1.0
    captions_stub_seconds: float = 1.0
    caption_passthrough: bool = False

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False
        frozen = True


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Convenience function to get settings
settings = get_settings()
