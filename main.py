"""
Viral Shorts Generator - FastAPI Main Application

Turns a short topic into a vertical promo video by chaining text-to-speech
and text-to-video providers, streaming progress to the browser as
server-sent events.

Version: 1.0.0
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import Depends, FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import StreamingResponse
from pydantic import ValidationError

from config import Settings, get_settings, settings
from models.schemas import GenerateRequest, HealthResponse, ProgressEvent
from pipeline.orchestrator import PipelineOrchestrator
from services.event_stream import STREAM_HEADERS, encode_events

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.debug else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[
        logging.StreamHandler(sys.stdout)
    ]
)

logger = logging.getLogger(__name__)


# === Lifespan Events ===

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events for startup and shutdown."""
    logger.info(f"Starting {settings.app_name} v{settings.app_version}")

    if not settings.elevenlabs_api_key:
        logger.warning("ELEVENLABS_API_KEY not set - voice stage will use mock audio")
    if not settings.kling_api_key:
        logger.warning("KLING_API_KEY not set - video stage will use mock video")

    yield

    logger.info(f"Shutting down {settings.app_name}...")


# === FastAPI App ===

app = FastAPI(
    title=settings.app_name,
    description="""
    ## Viral Shorts Generator API

    Turn a topic into a short vertical video.

    ### Pipeline
    - **Script**: hook + topic + call to action
    - **Voice**: ElevenLabs text-to-speech
    - **Video**: Kling AI text-to-video (9:16, 15s)
    - **Lip-sync / Captions**: placeholder stages

    ### Workflow
    1. `POST /api/generate` with `{"topic": "..."}`
    2. Read the `text/event-stream` response until a `videoUrl` or `error` event
    """,
    version=settings.app_version,
    lifespan=lifespan
)

# CORS middleware for frontend access
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def get_orchestrator(settings: Settings = Depends(get_settings)) -> PipelineOrchestrator:
    """Build a fresh orchestrator per request; runs share nothing but settings."""
    return PipelineOrchestrator(settings)


# === API Endpoints ===

@app.get("/health", response_model=HealthResponse, tags=["Health"])
async def health_check(settings: Settings = Depends(get_settings)):
    """Health check with provider configuration status."""
    return HealthResponse(
        version=settings.app_version,
        checks={
            "elevenlabs_api_key": bool(settings.elevenlabs_api_key),
            "kling_api_key": bool(settings.kling_api_key),
        },
        config={
            "poll_max_attempts": settings.poll_max_attempts,
            "poll_interval_seconds": settings.poll_interval_seconds,
            "video_duration_seconds": settings.video_duration_seconds,
            "video_aspect_ratio": settings.video_aspect_ratio,
            "caption_passthrough": settings.caption_passthrough,
        }
    )


async def _rejected_run(message: str) -> AsyncIterator[ProgressEvent]:
    yield ProgressEvent.failure(message)


@app.post(
    "/api/generate",
    tags=["Video Generation"],
    summary="Generate a video",
    description="Run the pipeline for a topic and stream progress events.",
    response_class=StreamingResponse
)
async def generate_video(
    request: Request,
    orchestrator: PipelineOrchestrator = Depends(get_orchestrator)
):
    """
    Generate a video for a topic.

    **Request Body:**
    - `topic`: Non-empty text (max 500 chars). Blank topics are rejected with 422.

    **Response:** `text/event-stream`, one `data: <json>` line per event:
    - `{"progress": "..."}` while the pipeline runs
    - `{"error": "..."}` if the run fails (terminal), including bodies that
      are not JSON or carry no `topic` string
    - `{"videoUrl": "...", "progress": "Complete!"}` on success (terminal)
    """
    try:
        payload = await request.json()
    except ValueError as e:
        logger.warning(f"Unreadable request body: {e}")
        payload = None

    topic = payload.get("topic") if isinstance(payload, dict) else None

    if not isinstance(topic, str):
        events = _rejected_run("Invalid request body: expected JSON with a 'topic' string")
    else:
        try:
            body = GenerateRequest(topic=topic)
        except ValidationError as e:
            raise HTTPException(status_code=422, detail=e.errors(include_url=False, include_context=False))

        logger.info(f"New video generation request: {body.topic[:50]}")
        events = orchestrator.run(body.topic)

    return StreamingResponse(
        encode_events(events),
        media_type="text/event-stream",
        headers=STREAM_HEADERS
    )


# === Run Server ===

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.debug
    )
