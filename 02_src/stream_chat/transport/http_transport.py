"""HTTP transport for the chat REST API."""

from typing import Any, Protocol
from urllib.parse import quote

import httpx

from ..codec import decode, load_document
from ..config import ClientConfig
from ..errors import APIError, DeadlineExceeded, MalformedDocument, TransportError
from ..logging_config import get_logger
from ..models import Response

logger = get_logger(__name__)

# Characters a path segment may carry unescaped besides the unreserved set.
_SEGMENT_SAFE = "$&+:=@"


def escape_path_segment(segment: str) -> str:
    """Percent-encode one path segment; '/' is always escaped."""
    return quote(segment, safe=_SEGMENT_SAFE)


def join_path(*segments: str) -> str:
    """Join path segments with '/', skipping empty ones."""
    return "/".join(segment for segment in segments if segment)


class ITransport(Protocol):
    """Performs one API round trip."""

    async def make_request(
        self,
        method: str,
        path: str,
        params: dict[str, str] | None = None,
        data: dict[str, Any] | None = None,
        timeout: float | None = None,
    ) -> Response:
        """Send ``data`` as JSON to ``path`` and decode the response body."""
        ...


class HttpTransport:
    """httpx-backed transport."""

    def __init__(
        self,
        config: ClientConfig,
        client: httpx.AsyncClient | None = None,
    ):
        self._config = config
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=config.timeout)

    def _url(self, path: str) -> str:
        return f"{self._config.base_url.rstrip('/')}/{path.lstrip('/')}"

    def _headers(self) -> dict[str, str]:
        headers = {"Content-Type": "application/json"}
        if self._config.auth_token:
            headers["Authorization"] = self._config.auth_token
            headers["Stream-Auth-Type"] = "jwt"
        return headers

    async def make_request(
        self,
        method: str,
        path: str,
        params: dict[str, str] | None = None,
        data: dict[str, Any] | None = None,
        timeout: float | None = None,
    ) -> Response:
        """Send ``data`` as JSON to ``path`` and decode the response body."""
        query = {"api_key": self._config.api_key, **(params or {})}
        kwargs: dict[str, Any] = {}
        if timeout is not None:
            kwargs["timeout"] = timeout

        logger.debug(
            "Request %s %s",
            method,
            path,
            extra={"method": method, "path": path},
        )

        try:
            response = await self._client.request(
                method,
                self._url(path),
                params=query,
                json=data,
                headers=self._headers(),
                **kwargs,
            )
        except httpx.TimeoutException as e:
            raise DeadlineExceeded(f"{method} {path}: {e}") from e
        except httpx.HTTPError as e:
            raise TransportError(f"{method} {path}: {e}") from e

        if not response.is_success:
            error = self._api_error(response)
            logger.warning(
                "API error on %s %s: %s",
                method,
                path,
                error,
                extra={
                    "method": method,
                    "path": path,
                    "status_code": error.status_code,
                    "error_code": error.code,
                },
            )
            raise error

        if not response.content:
            return Response()
        return decode(Response, response.content)

    @staticmethod
    def _api_error(response: httpx.Response) -> APIError:
        try:
            body = load_document(response.content)
        except MalformedDocument:
            return APIError(response.status_code, response.text or response.reason_phrase)

        code = body.get("code")
        return APIError(
            response.status_code,
            str(body.get("message") or response.reason_phrase),
            code=code if isinstance(code, int) else None,
        )

    async def aclose(self) -> None:
        """Close the underlying httpx client if this transport created it."""
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "HttpTransport":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()
