"""stream_chat: chat event codec and dispatch."""

from .channel import Channel, IChannel
from .client import Client, IClient
from .codec import ExtensibleRecord, decode, encode
from .config import ClientConfig
from .errors import (
    APIError,
    DeadlineExceeded,
    InvalidArgument,
    MalformedDocument,
    StreamChatError,
    TransportError,
)
from .models import (
    KNOWN_EVENT_TYPES,
    ChannelMember,
    ChannelSnapshot,
    Event,
    EventType,
    Message,
    Reaction,
    Response,
    User,
    UserCustomEvent,
)
from .transport import HttpTransport, ITransport

__all__ = [
    # Client
    "IClient",
    "Client",
    "IChannel",
    "Channel",
    "ClientConfig",
    # Codec
    "ExtensibleRecord",
    "encode",
    "decode",
    # Models
    "EventType",
    "KNOWN_EVENT_TYPES",
    "Event",
    "UserCustomEvent",
    "User",
    "Message",
    "Reaction",
    "ChannelMember",
    "ChannelSnapshot",
    "Response",
    # Transport
    "ITransport",
    "HttpTransport",
    # Errors
    "StreamChatError",
    "InvalidArgument",
    "MalformedDocument",
    "TransportError",
    "DeadlineExceeded",
    "APIError",
]
