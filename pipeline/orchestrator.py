"""
Pipeline Orchestrator - Coordinates the video generation pipeline.
Produces the ordered progress events for one run, independent of transport.
"""

import asyncio
import logging
from typing import AsyncIterator, List, Optional

from config import Settings
from models.schemas import PipelineStep, ProgressEvent
from .script_generator import ScriptGenerator
from .voice_generator import VoiceGenerator
from .video_generator import VideoGenerator
from .lipsync import LipSyncer
from .caption_burner import CaptionBurner

logger = logging.getLogger(__name__)


class PipelineOrchestrator:
    """
    Orchestrates the complete video generation pipeline.

    Pipeline stages:
    1. Script Composition (hook + topic)
    2. Voice Synthesis (ElevenLabs)
    3. Video Synthesis (Kling AI)
    4. Lip-Sync (stub)
    5. Caption Burn-in (stub)
    6. Finalize

    A progress event is emitted right before each stage runs. The run ends
    with exactly one terminal event: the final video URL, or an error.
    """

    def __init__(
        self,
        settings: Settings,
        script_generator: Optional[ScriptGenerator] = None,
        voice_generator: Optional[VoiceGenerator] = None,
        video_generator: Optional[VideoGenerator] = None,
        lip_syncer: Optional[LipSyncer] = None,
        caption_burner: Optional[CaptionBurner] = None
    ):
        self.settings = settings
        self.script_generator = script_generator or ScriptGenerator()
        self.voice_generator = voice_generator or VoiceGenerator(settings)
        self.video_generator = video_generator or VideoGenerator(settings)
        self.lip_syncer = lip_syncer or LipSyncer(settings)
        self.caption_burner = caption_burner or CaptionBurner(settings)

    async def run(self, topic: str) -> AsyncIterator[ProgressEvent]:
        """Run the pipeline for a topic, yielding progress events as it goes."""
        logger.info(f"Starting run for topic: {topic[:50]}")
        settings = self.settings

        try:
            yield self._enter(PipelineStep.COMPOSING_SCRIPT)
            script = self.script_generator.compose(topic)
            await asyncio.sleep(settings.script_delay_seconds)

            yield self._enter(PipelineStep.SYNTHESIZING_VOICE)
            audio_url = await self.voice_generator.synthesize(script)
            await asyncio.sleep(settings.voice_delay_seconds)

            yield self._enter(PipelineStep.SYNTHESIZING_VIDEO)
            video_url = await self.video_generator.generate(topic, script)
            await asyncio.sleep(settings.video_delay_seconds)

            yield self._enter(PipelineStep.LIP_SYNCING)
            synced_url = await self.lip_syncer.apply(video_url, audio_url)
            await asyncio.sleep(settings.lipsync_delay_seconds)

            yield self._enter(PipelineStep.ADDING_CAPTIONS)
            final_url = await self.caption_burner.add_captions(synced_url, script)
            await asyncio.sleep(settings.captions_delay_seconds)

            yield self._enter(PipelineStep.FINALIZING)
            await asyncio.sleep(settings.finalize_delay_seconds)

        except Exception as e:
            logger.exception(f"Generation error: {e}")
            yield ProgressEvent.failure(str(e))
            return

        logger.info(f"Run complete! Video URL: {final_url[:80]}")
        yield ProgressEvent.complete(final_url)

    async def collect(self, topic: str) -> List[ProgressEvent]:
        """Run the pipeline to completion and return every event."""
        return [event async for event in self.run(topic)]

    def _enter(self, step: PipelineStep) -> ProgressEvent:
        logger.debug(f"Entering step: {step.value}")
        return ProgressEvent.update(step.message)
