"""Pipeline package for the Viral Shorts demo service."""

from .script_generator import ScriptGenerator
from .voice_generator import VoiceGenerator
from .video_generator import PollPolicy, VideoGenerator
from .lipsync import LipSyncer
from .caption_burner import CaptionBurner
from .orchestrator import PipelineOrchestrator

__all__ = [
    "ScriptGenerator",
    "VoiceGenerator",
    "PollPolicy",
    "VideoGenerator",
    "LipSyncer",
    "CaptionBurner",
    "PipelineOrchestrator",
]
