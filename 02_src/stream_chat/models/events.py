"""Event data models."""

from typing import Any, ClassVar

from pydantic import Field, GetCoreSchemaHandler
from pydantic_core import core_schema

from ..codec import ExtensibleRecord, Timestamp
from .entities import ChannelMember, ChannelSnapshot, Message, Reaction, User


class EventType(str):
    """Event kind tag.

    Open on the wire: any string decodes, so kinds added server-side never
    break decoding. The constants below are the documented set.
    """

    __slots__ = ()

    MESSAGE_NEW: "EventType"
    MESSAGE_UPDATED: "EventType"
    MESSAGE_DELETED: "EventType"
    MESSAGE_READ: "EventType"

    REACTION_NEW: "EventType"
    REACTION_DELETED: "EventType"

    MEMBER_ADDED: "EventType"
    MEMBER_UPDATED: "EventType"
    MEMBER_REMOVED: "EventType"

    CHANNEL_CREATED: "EventType"
    CHANNEL_UPDATED: "EventType"
    CHANNEL_DELETED: "EventType"
    CHANNEL_TRUNCATED: "EventType"

    HEALTH_CHECK: "EventType"

    NOTIFICATION_NEW_MESSAGE: "EventType"
    NOTIFICATION_MARK_READ: "EventType"
    NOTIFICATION_INVITED: "EventType"
    NOTIFICATION_INVITE_ACCEPTED: "EventType"
    NOTIFICATION_ADDED_TO_CHANNEL: "EventType"
    NOTIFICATION_REMOVED_FROM_CHANNEL: "EventType"
    NOTIFICATION_MUTES_UPDATED: "EventType"

    TYPING_START: "EventType"
    TYPING_STOP: "EventType"

    USER_MUTED: "EventType"
    USER_UNMUTED: "EventType"
    USER_PRESENCE_CHANGED: "EventType"
    USER_WATCHING_START: "EventType"
    USER_WATCHING_STOP: "EventType"
    USER_UPDATED: "EventType"

    def __repr__(self) -> str:
        return f"EventType({str.__repr__(self)})"

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        # Any string validates; dumps as the plain tag.
        return core_schema.no_info_after_validator_function(
            cls,
            core_schema.str_schema(),
            serialization=core_schema.to_string_ser_schema(),
        )

    def is_known(self) -> bool:
        """Whether this kind is one of the documented event kinds."""
        return self in KNOWN_EVENT_TYPES


_KINDS = {
    "MESSAGE_NEW": "message.new",
    "MESSAGE_UPDATED": "message.updated",
    "MESSAGE_DELETED": "message.deleted",
    "MESSAGE_READ": "message.read",
    "REACTION_NEW": "reaction.new",
    "REACTION_DELETED": "reaction.deleted",
    "MEMBER_ADDED": "member.added",
    "MEMBER_UPDATED": "member.updated",
    "MEMBER_REMOVED": "member.removed",
    "CHANNEL_CREATED": "channel.created",
    "CHANNEL_UPDATED": "channel.updated",
    "CHANNEL_DELETED": "channel.deleted",
    "CHANNEL_TRUNCATED": "channel.truncated",
    "HEALTH_CHECK": "health.check",
    "NOTIFICATION_NEW_MESSAGE": "notification.message_new",
    "NOTIFICATION_MARK_READ": "notification.mark_read",
    "NOTIFICATION_INVITED": "notification.invited",
    "NOTIFICATION_INVITE_ACCEPTED": "notification.invite_accepted",
    "NOTIFICATION_ADDED_TO_CHANNEL": "notification.added_to_channel",
    "NOTIFICATION_REMOVED_FROM_CHANNEL": "notification.removed_from_channel",
    "NOTIFICATION_MUTES_UPDATED": "notification.mutes_updated",
    "TYPING_START": "typing.start",
    "TYPING_STOP": "typing.stop",
    "USER_MUTED": "user.muted",
    "USER_UNMUTED": "user.unmuted",
    "USER_PRESENCE_CHANGED": "user.presence.changed",
    "USER_WATCHING_START": "user.watching.start",
    "USER_WATCHING_STOP": "user.watching.stop",
    "USER_UPDATED": "user.updated",
}

for _name, _tag in _KINDS.items():
    setattr(EventType, _name, EventType(_tag))

KNOWN_EVENT_TYPES: frozenset[str] = frozenset(_KINDS.values())


class Event(ExtensibleRecord):
    """Event received from a webhook, or sent with Channel.send_event.

    ``cid`` is filled in by the server and is not a constructor argument.
    """

    server_fields: ClassVar[frozenset[str]] = frozenset({"cid"})

    type: EventType
    cid: str = ""
    message: Message | None = None
    reaction: Reaction | None = None
    channel: ChannelSnapshot | None = None
    member: ChannelMember | None = None
    members: list[ChannelMember] = Field(default_factory=list)
    user: User | None = None
    user_id: str = ""
    own_user: User | None = Field(default=None, alias="me")
    watcher_count: int = 0
    created_at: Timestamp | None = None


class UserCustomEvent(ExtensibleRecord):
    """Custom event sent to every connected client of one user.

    ``type`` is free-form; built-in event kinds are not meant to be sent here.
    """

    type: str
    created_at: Timestamp | None = None
