"""Models package for the Viral Shorts demo service."""

from .schemas import (
    COMPLETE_MESSAGE,
    GENERIC_ERROR_MESSAGE,
    GenerateRequest,
    HealthResponse,
    PipelineStep,
    ProgressEvent,
)

__all__ = [
    "COMPLETE_MESSAGE",
    "GENERIC_ERROR_MESSAGE",
    "GenerateRequest",
    "HealthResponse",
    "PipelineStep",
    "ProgressEvent",
]
