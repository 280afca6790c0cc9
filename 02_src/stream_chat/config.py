"""Client configuration."""

import os
from dataclasses import dataclass

DEFAULT_BASE_URL = "https://chat.stream-io-api.com"
DEFAULT_TIMEOUT = 6.0


@dataclass
class ClientConfig:
    """Settings for talking to the chat API."""

    api_key: str
    auth_token: str = ""  # pre-issued server-side token
    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT

    @classmethod
    def from_env(cls) -> "ClientConfig":
        """Build config from STREAM_* environment variables."""
        api_key = os.getenv("STREAM_KEY")
        if not api_key:
            raise ValueError("STREAM_KEY environment variable not set")

        timeout = os.getenv("STREAM_CHAT_TIMEOUT")
        return cls(
            api_key=api_key,
            auth_token=os.getenv("STREAM_AUTH_TOKEN", ""),
            base_url=os.getenv("STREAM_CHAT_URL", DEFAULT_BASE_URL),
            timeout=float(timeout) if timeout else DEFAULT_TIMEOUT,
        )
