"""Chat entities embedded in event payloads."""

from ..codec import ExtensibleRecord, Timestamp


class User(ExtensibleRecord):
    """A chat user. Only ``id`` is needed to reference one."""

    id: str = ""
    name: str = ""
    role: str = ""
    online: bool = False
    created_at: Timestamp | None = None
    updated_at: Timestamp | None = None
    last_active: Timestamp | None = None


class Message(ExtensibleRecord):
    """A channel message."""

    id: str = ""
    text: str = ""
    html: str = ""
    type: str = ""  # "regular", "ephemeral", "error", "reply", "system"
    user: User | None = None
    parent_id: str = ""
    created_at: Timestamp | None = None
    updated_at: Timestamp | None = None


class Reaction(ExtensibleRecord):
    """A reaction on a message."""

    type: str = ""
    message_id: str = ""
    user_id: str = ""
    user: User | None = None
    score: int = 0
    created_at: Timestamp | None = None


class ChannelMember(ExtensibleRecord):
    """Membership of a user in a channel."""

    user_id: str = ""
    user: User | None = None
    role: str = ""
    is_moderator: bool = False
    invited: bool = False
    created_at: Timestamp | None = None
    updated_at: Timestamp | None = None


class ChannelSnapshot(ExtensibleRecord):
    """Snapshot of a channel as carried inside an event."""

    id: str = ""
    type: str = ""
    cid: str = ""
    created_by: User | None = None
    frozen: bool = False
    member_count: int = 0
    created_at: Timestamp | None = None
    updated_at: Timestamp | None = None
