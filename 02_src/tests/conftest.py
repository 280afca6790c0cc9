"""Pytest configuration and fixtures."""

import sys
from pathlib import Path
from unittest.mock import AsyncMock

import pytest

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))


@pytest.fixture
def config():
    """Client config with test credentials."""
    from stream_chat.config import ClientConfig

    return ClientConfig(
        api_key="test_key",
        auth_token="test_token",
        base_url="https://chat.example.com",
    )


@pytest.fixture
def mock_transport():
    """Transport double that records calls instead of sending them."""
    from stream_chat.models import Response

    transport = AsyncMock()
    transport.make_request.return_value = Response(duration="1.00ms")
    return transport


@pytest.fixture
def client(mock_transport):
    """Client wired to the mock transport."""
    from stream_chat.client import Client

    return Client(transport=mock_transport)


@pytest.fixture
def channel(client):
    """Channel handle whose id needs escaping."""
    return client.channel("messaging", "general/team")


@pytest.fixture
def webhook_document():
    """A message.new webhook payload with custom fields."""
    return {
        "type": "message.new",
        "cid": "messaging:general",
        "message": {
            "id": "msg1",
            "text": "Hello",
            "type": "regular",
            "user": {"id": "alice", "name": "Alice", "favorite_color": "blue"},
            "created_at": "2024-05-01T10:00:00.123456789Z",
            "mood": "happy",
        },
        "user": {"id": "alice", "role": "user", "online": True},
        "watcher_count": 2,
        "created_at": "2024-05-01T10:00:00.5Z",
        "request_info": {"ip": "127.0.0.1"},
        "team": "blue",
    }
