"""Data models for chat events."""

from .entities import ChannelMember, ChannelSnapshot, Message, Reaction, User
from .events import KNOWN_EVENT_TYPES, Event, EventType, UserCustomEvent
from .response import Response

__all__ = [
    # Entities
    "User",
    "Message",
    "Reaction",
    "ChannelMember",
    "ChannelSnapshot",
    # Events
    "EventType",
    "KNOWN_EVENT_TYPES",
    "Event",
    "UserCustomEvent",
    # Responses
    "Response",
]
