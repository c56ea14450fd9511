"""
Progress channel framing.

Events travel as line-oriented server-sent events, one `data: <json>`
line followed by a blank line per event.
"""

import json
import logging
from typing import AsyncIterable, AsyncIterator, Dict, Iterable, Iterator

from models.schemas import ProgressEvent

logger = logging.getLogger(__name__)

DATA_PREFIX = "data: "

STREAM_HEADERS = {
    "Cache-Control": "no-cache",
    "Connection": "keep-alive",
    "X-Accel-Buffering": "no",
}


def format_event(event: ProgressEvent) -> str:
    """Frame a single event for the wire."""
    return f"{DATA_PREFIX}{json.dumps(event.to_payload(), ensure_ascii=False)}\n\n"


async def encode_events(events: AsyncIterable[ProgressEvent]) -> AsyncIterator[bytes]:
    """
    Encode an event sequence as UTF-8 SSE chunks.

    Stops after the first terminal event; anything the producer yields
    afterwards is dropped. The producer is closed before returning.
    """
    try:
        async for event in events:
            yield format_event(event).encode("utf-8")
            if event.is_terminal:
                break
        else:
            logger.warning("Event stream ended without a terminal event")
    finally:
        aclose = getattr(events, "aclose", None)
        if aclose is not None:
            await aclose()


def parse_event_stream(lines: Iterable[str]) -> Iterator[Dict[str, str]]:
    """Decode `data:` lines of a progress stream into payload dicts."""
    for line in lines:
        line = line.strip()
        if not line.startswith(DATA_PREFIX.strip()):
            continue
        body = line[len(DATA_PREFIX.strip()):].strip()
        if body:
            yield json.loads(body)
