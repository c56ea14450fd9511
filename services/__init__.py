"""Services package for the Viral Shorts demo service."""

from .event_stream import (
    STREAM_HEADERS,
    encode_events,
    format_event,
    parse_event_stream,
)

__all__ = [
    "STREAM_HEADERS",
    "encode_events",
    "format_event",
    "parse_event_stream",
]
