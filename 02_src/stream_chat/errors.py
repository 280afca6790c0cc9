"""Error types raised by the stream_chat core."""


class StreamChatError(Exception):
    """Base class for all library errors."""


class InvalidArgument(StreamChatError, ValueError):
    """A dispatch call was made with arguments that can never succeed."""


class MalformedDocument(StreamChatError, ValueError):
    """A wire document could not be interpreted as a flat JSON object."""


class TransportError(StreamChatError):
    """The HTTP round trip failed."""


class DeadlineExceeded(TransportError):
    """The request did not complete before its timeout."""


class APIError(TransportError):
    """The API answered with a non-2xx status."""

    def __init__(self, status_code: int, message: str, code: int | None = None):
        super().__init__(f"{status_code}: {message}")
        self.status_code = status_code
        self.message = message
        self.code = code
