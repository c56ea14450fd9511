"""
Pydantic schemas for API requests, responses, and streamed progress events.
"""

from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


COMPLETE_MESSAGE = "Complete!"
GENERIC_ERROR_MESSAGE = "Failed to generate video"


# === Enums ===

class PipelineStep(str, Enum):
    """Pipeline steps in execution order."""
    COMPOSING_SCRIPT = "composing_script"
    SYNTHESIZING_VOICE = "synthesizing_voice"
    SYNTHESIZING_VIDEO = "synthesizing_video"
    LIP_SYNCING = "lip_syncing"
    ADDING_CAPTIONS = "adding_captions"
    FINALIZING = "finalizing"

    @property
    def message(self) -> str:
        """Human-readable progress text shown to the client."""
        return STEP_MESSAGES[self]


STEP_MESSAGES = {
    PipelineStep.COMPOSING_SCRIPT: "🎬 Creating viral script...",
    PipelineStep.SYNTHESIZING_VOICE: "🎤 Generating AI voice with ElevenLabs...",
    PipelineStep.SYNTHESIZING_VIDEO: "🎨 Creating stunning visuals with Kling AI...",
    PipelineStep.LIP_SYNCING: "💋 Syncing lips with audio...",
    PipelineStep.ADDING_CAPTIONS: "✨ Adding dynamic captions...",
    PipelineStep.FINALIZING: "🎉 Rendering final video...",
}


# === API Request/Response Models ===

class GenerateRequest(BaseModel):
    """Request body for POST /api/generate endpoint."""
    topic: str = Field(
        ...,
        min_length=1,
        max_length=500,
        description="Short topic the video should promote"
    )

    @field_validator("topic")
    @classmethod
    def topic_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Topic must not be empty")
        return value


class HealthResponse(BaseModel):
    """Response body for GET /health endpoint."""
    status: str = "healthy"
    version: str
    checks: Dict[str, bool]
    config: Dict[str, Any]


# === Streamed Events ===

class ProgressEvent(BaseModel):
    """
    One event of the progress stream.

    Exactly one of three shapes goes over the wire:
    - {"progress": text}
    - {"error": text}                             (terminal)
    - {"videoUrl": url, "progress": "Complete!"}  (terminal)
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    video_url: Optional[str] = Field(default=None, alias="videoUrl")
    error: Optional[str] = None
    progress: Optional[str] = None

    @classmethod
    def update(cls, message: str) -> "ProgressEvent":
        return cls(progress=message)

    @classmethod
    def failure(cls, message: Optional[str] = None) -> "ProgressEvent":
        return cls(error=message or GENERIC_ERROR_MESSAGE)

    @classmethod
    def complete(cls, video_url: str) -> "ProgressEvent":
        return cls(video_url=video_url, progress=COMPLETE_MESSAGE)

    @property
    def is_terminal(self) -> bool:
        return self.error is not None or self.video_url is not None

    def to_payload(self) -> Dict[str, str]:
        """Wire representation with camelCase keys and unset fields dropped."""
        return self.model_dump(by_alias=True, exclude_none=True)
