"""Top-level client handle."""

from typing import Any, Protocol

from .channel import Channel
from .codec import encode
from .config import ClientConfig
from .errors import InvalidArgument
from .logging_config import get_logger
from .models import Response, UserCustomEvent
from .transport import HttpTransport, ITransport, escape_path_segment, join_path

logger = get_logger(__name__)


class IClient(Protocol):
    """Application-wide operations."""

    def channel(self, channel_type: str, channel_id: str) -> Channel:
        """Get a handle for one channel."""
        ...

    async def send_user_custom_event(
        self,
        target_user_id: str,
        event: UserCustomEvent | None,
        *,
        timeout: float | None = None,
    ) -> Response:
        """Send a custom event to every connected client of a user."""
        ...


class Client:
    """Chat API client.

    Builds requests and hands them to an injected transport. Without a
    transport, an HttpTransport is created from ``config`` (or the
    environment).
    """

    def __init__(
        self,
        config: ClientConfig | None = None,
        transport: ITransport | None = None,
    ):
        if transport is None:
            config = config or ClientConfig.from_env()
            transport = HttpTransport(config)
        self._config = config
        self._transport = transport

    @property
    def transport(self) -> ITransport:
        return self._transport

    def channel(self, channel_type: str, channel_id: str) -> Channel:
        """Get a handle for one channel. No request is made."""
        return Channel(self, channel_type, channel_id)

    async def make_request(
        self,
        method: str,
        path: str,
        params: dict[str, str] | None = None,
        data: dict[str, Any] | None = None,
        timeout: float | None = None,
    ) -> Response:
        """Delegate one round trip to the transport."""
        return await self._transport.make_request(
            method, path, params=params, data=data, timeout=timeout
        )

    async def send_user_custom_event(
        self,
        target_user_id: str,
        event: UserCustomEvent | None,
        *,
        timeout: float | None = None,
    ) -> Response:
        """Send a custom event to every connected client of a user.

        Raises InvalidArgument before any request when ``event`` is None or
        ``target_user_id`` is empty. The event is not modified.
        """
        if event is None:
            raise InvalidArgument("event is nil")
        if not target_user_id:
            raise InvalidArgument("targetUserID should not be empty")

        path = join_path("users", escape_path_segment(target_user_id), "event")
        logger.debug(
            "Sending custom %s event to user %s",
            event.type,
            target_user_id,
            extra={"event_type": event.type, "user_id": target_user_id},
        )
        return await self.make_request(
            "POST", path, data={"event": encode(event)}, timeout=timeout
        )

    async def close(self) -> None:
        """Close the transport, if it holds resources."""
        if hasattr(self._transport, "aclose"):
            await self._transport.aclose()

    async def __aenter__(self) -> "Client":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()
