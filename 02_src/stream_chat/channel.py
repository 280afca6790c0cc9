"""Channel-scoped handle."""

from typing import Protocol

from .codec import encode
from .errors import InvalidArgument
from .logging_config import get_logger
from .models import Event, Response, User
from .transport import ITransport, escape_path_segment, join_path

logger = get_logger(__name__)


class IChannel(Protocol):
    """Operations scoped to one channel."""

    async def send_event(
        self, event: Event | None, user_id: str, *, timeout: float | None = None
    ) -> Response:
        """Send an event on this channel on behalf of ``user_id``."""
        ...


class Channel:
    """Handle for one channel, identified by type and id.

    Holds no state besides its identity; safe to share between tasks.
    """

    def __init__(self, client: ITransport, channel_type: str, channel_id: str):
        self._client = client
        self.type = channel_type
        self.id = channel_id

    @property
    def cid(self) -> str:
        return f"{self.type}:{self.id}"

    def _path(self, *segments: str) -> str:
        return join_path(
            "channels",
            escape_path_segment(self.type),
            escape_path_segment(self.id),
            *segments,
        )

    async def send_event(
        self, event: Event | None, user_id: str, *, timeout: float | None = None
    ) -> Response:
        """
        Send an event on this channel.

        Side effect: ``event.user`` is replaced by ``User(id=user_id)``, so the
        caller's event object is modified. The event is encoded first; if that
        fails the event is left untouched.

        Args:
            event: Event to send.
            user_id: Acting user.
            timeout: Per-request timeout in seconds, forwarded to the transport.

        Raises:
            InvalidArgument: ``event`` is None or cannot be encoded. Nothing is
                sent.
            TransportError: Propagated unchanged from the transport.
        """
        if event is None:
            raise InvalidArgument("event is nil")

        acting_user = User(id=user_id)
        document = encode(event.model_copy(update={"user": acting_user}))
        event.user = acting_user

        path = self._path("event")
        logger.debug(
            "Sending %s event to %s",
            event.type,
            self.cid,
            extra={"event_type": str(event.type), "cid": self.cid, "user_id": user_id},
        )
        return await self._client.make_request(
            "POST", path, data={"event": document}, timeout=timeout
        )
