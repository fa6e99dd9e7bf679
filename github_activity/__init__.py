"""Recent public GitHub activity, grouped and formatted for the terminal."""

from .client import fetch_events
from .errors import DecodeError, FetchError, NetworkError, UpstreamError, UserNotFoundError
from .formatter import format_event, render_events
from .grouper import group_events
from .models import Event, Payload, parse_events

__all__ = [
    "DecodeError",
    "Event",
    "FetchError",
    "NetworkError",
    "Payload",
    "UpstreamError",
    "UserNotFoundError",
    "fetch_events",
    "format_event",
    "group_events",
    "parse_events",
    "render_events",
]
