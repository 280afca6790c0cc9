"""API response model."""

from ..codec import ExtensibleRecord


class Response(ExtensibleRecord):
    """Decoded API response body. Everything but ``duration`` lands in extra_data."""

    duration: str = ""
