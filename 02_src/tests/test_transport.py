"""Tests for HttpTransport."""

import json

import httpx
import pytest

from stream_chat.client import Client
from stream_chat.errors import APIError, DeadlineExceeded, MalformedDocument, TransportError
from stream_chat.models import Event, EventType, User
from stream_chat.transport import HttpTransport, escape_path_segment, join_path


def _transport(config, handler) -> tuple[HttpTransport, httpx.AsyncClient]:
    http_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return HttpTransport(config, client=http_client), http_client


class TestPathHelpers:
    """Tests for path escaping."""

    @pytest.mark.parametrize(
        "segment,expected",
        [
            ("general", "general"),
            ("general/team", "general%2Fteam"),
            ("a b", "a%20b"),
            ("q?x;y,z", "q%3Fx%3By%2Cz"),
            ("user@example.com", "user@example.com"),
            ("a:b=c&d+e$", "a:b=c&d+e$"),
        ],
    )
    def test_escape_path_segment(self, segment, expected):
        """Test percent-encoding of single path segments."""
        assert escape_path_segment(segment) == expected

    def test_join_path_skips_empty_segments(self):
        """Test empty segments do not produce double slashes."""
        assert join_path("channels", "", "general", "event") == "channels/general/event"


class TestHttpTransportRequest:
    """Tests for request construction."""

    @pytest.mark.asyncio
    async def test_request_shape(self, config):
        """Test URL, query, headers and body of a request."""
        captured = []

        def handler(request: httpx.Request) -> httpx.Response:
            captured.append(request)
            return httpx.Response(201, json={"duration": "1.2ms"})

        transport, _ = _transport(config, handler)
        await transport.make_request(
            "POST", "users/bob/event", data={"event": {"type": "ping"}}
        )

        request = captured[0]
        assert request.method == "POST"
        assert request.url.host == "chat.example.com"
        assert request.url.path == "/users/bob/event"
        assert request.url.params["api_key"] == "test_key"
        assert request.headers["Authorization"] == "test_token"
        assert request.headers["Stream-Auth-Type"] == "jwt"
        assert json.loads(request.content) == {"event": {"type": "ping"}}

    @pytest.mark.asyncio
    async def test_extra_query_params(self, config):
        """Test caller query params are sent next to api_key."""
        captured = []

        def handler(request: httpx.Request) -> httpx.Response:
            captured.append(request)
            return httpx.Response(200, json={})

        transport, _ = _transport(config, handler)
        await transport.make_request("GET", "app", params={"limit": "5"})

        assert captured[0].url.params["limit"] == "5"
        assert captured[0].url.params["api_key"] == "test_key"

    @pytest.mark.asyncio
    async def test_no_auth_headers_without_token(self, config):
        """Test auth headers are only sent with a token."""
        config.auth_token = ""
        captured = []

        def handler(request: httpx.Request) -> httpx.Response:
            captured.append(request)
            return httpx.Response(200, json={})

        transport, _ = _transport(config, handler)
        await transport.make_request("POST", "users/bob/event", data={})

        assert "Authorization" not in captured[0].headers

    @pytest.mark.asyncio
    async def test_timeout_is_applied_per_request(self, config):
        """Test a per-call timeout overrides the client default."""
        captured = []

        def handler(request: httpx.Request) -> httpx.Response:
            captured.append(request)
            return httpx.Response(200, json={})

        transport, _ = _transport(config, handler)
        await transport.make_request("POST", "users/bob/event", data={}, timeout=2.5)

        assert captured[0].extensions["timeout"]["read"] == 2.5


class TestHttpTransportResponse:
    """Tests for response handling."""

    @pytest.mark.asyncio
    async def test_decodes_response(self, config):
        """Test the body is decoded into Response."""
        transport, _ = _transport(
            config,
            lambda request: httpx.Response(
                201, json={"duration": "1.2ms", "event": {"type": "ping"}}
            ),
        )
        response = await transport.make_request("POST", "users/bob/event", data={})

        assert response.duration == "1.2ms"
        assert response.extra_data == {"event": {"type": "ping"}}

    @pytest.mark.asyncio
    async def test_empty_body(self, config):
        """Test an empty success body yields an empty Response."""
        transport, _ = _transport(config, lambda request: httpx.Response(204))
        response = await transport.make_request("POST", "users/bob/event", data={})

        assert response.duration == ""
        assert response.extra_data == {}

    @pytest.mark.asyncio
    async def test_non_object_body(self, config):
        """Test a success body that is not an object is malformed."""
        transport, _ = _transport(
            config, lambda request: httpx.Response(200, json=[1, 2])
        )
        with pytest.raises(MalformedDocument):
            await transport.make_request("POST", "users/bob/event", data={})

    @pytest.mark.asyncio
    async def test_api_error(self, config):
        """Test non-2xx responses raise APIError with the API's details."""
        transport, _ = _transport(
            config,
            lambda request: httpx.Response(
                400, json={"code": 4, "message": "event type is required"}
            ),
        )
        with pytest.raises(APIError) as exc_info:
            await transport.make_request("POST", "users/bob/event", data={})

        error = exc_info.value
        assert error.status_code == 400
        assert error.code == 4
        assert error.message == "event type is required"
        assert isinstance(error, TransportError)

    @pytest.mark.asyncio
    async def test_api_error_without_json_body(self, config):
        """Test error bodies that are not JSON."""
        transport, _ = _transport(
            config, lambda request: httpx.Response(502, text="bad gateway")
        )
        with pytest.raises(APIError) as exc_info:
            await transport.make_request("POST", "users/bob/event", data={})

        assert exc_info.value.status_code == 502
        assert exc_info.value.message == "bad gateway"
        assert exc_info.value.code is None

    @pytest.mark.asyncio
    async def test_timeout_raises_deadline_exceeded(self, config):
        """Test httpx timeouts surface as DeadlineExceeded."""

        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("timed out", request=request)

        transport, _ = _transport(config, handler)
        with pytest.raises(DeadlineExceeded):
            await transport.make_request("POST", "users/bob/event", data={})

    @pytest.mark.asyncio
    async def test_network_failure_raises_transport_error(self, config):
        """Test connection failures surface as TransportError."""

        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        transport, _ = _transport(config, handler)
        with pytest.raises(TransportError) as exc_info:
            await transport.make_request("POST", "users/bob/event", data={})

        assert not isinstance(exc_info.value, DeadlineExceeded)


class TestHttpTransportLifecycle:
    """Tests for aclose()."""

    @pytest.mark.asyncio
    async def test_injected_client_is_not_closed(self, config):
        """Test an injected httpx client stays open."""
        transport, http_client = _transport(config, lambda r: httpx.Response(200))
        await transport.aclose()
        assert not http_client.is_closed
        await http_client.aclose()

    @pytest.mark.asyncio
    async def test_owned_client_is_closed(self, config):
        """Test the transport closes the client it created."""
        async with HttpTransport(config) as transport:
            pass
        assert transport._client.is_closed


class TestEndToEnd:
    """Tests for Client and Channel over HttpTransport."""

    @pytest.mark.asyncio
    async def test_send_event_over_http(self, config):
        """Test the full request produced by Channel.send_event()."""
        captured = []

        def handler(request: httpx.Request) -> httpx.Response:
            captured.append(request)
            return httpx.Response(
                201, json={"duration": "2ms", "event": {"type": "typing.start"}}
            )

        transport, http_client = _transport(config, handler)
        client = Client(config, transport=transport)
        channel = client.channel("messaging", "general/team")

        event = Event(
            type=EventType.TYPING_START,
            user=User(id="alice"),
            extra_data={"parent_id": "p1"},
        )
        response = await channel.send_event(event, "bob")

        request = captured[0]
        assert request.url.raw_path.startswith(
            b"/channels/messaging/general%2Fteam/event"
        )
        assert json.loads(request.content) == {
            "event": {"type": "typing.start", "user": {"id": "bob"}, "parent_id": "p1"}
        }
        assert response.duration == "2ms"
        await http_client.aclose()
