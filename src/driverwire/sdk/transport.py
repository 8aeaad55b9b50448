"""Client-side transport abstraction.

The session dispatcher renders commands into RequestData and hands them to a
transport; the transport owns the wire and nothing else.

Architecture:
- WebDriverTransport is the PROTOCOL (interface) for all transports
- HTTPTransport talks to a remote end over HTTP via httpx
- MockTransport records requests and replays canned responses for tests

Transport errors (httpx exceptions) propagate unchanged. No retries.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import Any, Protocol, runtime_checkable

import httpx

from ..errors import ResponseDecodeError
from ..protocol.request import RequestData, RequestMethod
from ..protocol.response import WireResponse, unwrap_response
from ..protocol.types import ServerStatus

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "http://localhost:4444"
DEFAULT_TIMEOUT = 30.0


@dataclass
class TransportConfig:
    """Configuration for the HTTP transport."""

    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT  # seconds
    headers: dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_env(cls) -> TransportConfig:
        """Read DRIVERWIRE_URL and DRIVERWIRE_TIMEOUT, falling back to defaults."""
        timeout = os.getenv("DRIVERWIRE_TIMEOUT")
        return cls(
            base_url=os.getenv("DRIVERWIRE_URL", DEFAULT_BASE_URL),
            timeout=float(timeout) if timeout else DEFAULT_TIMEOUT,
        )


@runtime_checkable
class WebDriverTransport(Protocol):
    """Protocol for anything that can carry a request to a remote end."""

    async def send(self, request: RequestData) -> WireResponse:
        """Send a request and return the status and parsed JSON body.

        Raises:
            httpx.HTTPError: On connection or HTTP-level failure.
        """
        ...

    async def close(self) -> None:
        """Release any connections held by the transport."""
        ...


class HTTPTransport:
    """Transport over HTTP using a pooled httpx.AsyncClient.

    The client is created on first use. Pass `transport` to route requests
    through a custom httpx transport, e.g. httpx.ASGITransport for an
    in-process remote end.
    """

    def __init__(
        self,
        config: TransportConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.config = config or TransportConfig()
        self._transport = transport
        self._http_client: httpx.AsyncClient | None = None

    def _client(self) -> httpx.AsyncClient:
        if self._http_client is None:
            self._http_client = httpx.AsyncClient(
                base_url=self.config.base_url,
                timeout=self.config.timeout,
                headers={
                    "Accept": "application/json",
                    "Content-Type": "application/json; charset=utf-8",
                    **self.config.headers,
                },
                transport=self._transport,
            )
            logger.info(f"HTTP transport opened for {self.config.base_url}")
        return self._http_client

    async def send(self, request: RequestData) -> WireResponse:
        """Send a request and parse the JSON reply."""
        body = request.body
        if body is None and request.method == RequestMethod.POST:
            # Some remote ends reject a POST without a JSON body
            body = {}

        logger.debug(f"-> {request.method.value} {request.path}")
        response = await self._client().request(request.method.value, request.path, json=body)
        logger.debug(f"<- {response.status_code} {request.method.value} {request.path}")

        try:
            payload = response.json()
        except ValueError as e:
            response.raise_for_status()
            raise ResponseDecodeError(
                f"Non-JSON response to {request.method.value} {request.path}: "
                f"{response.text[:100]!r}"
            ) from e
        return WireResponse(status=response.status_code, body=payload)

    async def status(self) -> ServerStatus:
        """Query GET /status. Not session scoped."""
        response = await self.send(RequestData(method=RequestMethod.GET, path="/status"))
        value = unwrap_response(response)
        if not isinstance(value, dict):
            raise ResponseDecodeError(f"Unexpected status payload: {value!r}")
        return ServerStatus.model_validate(value)

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        if self._http_client is not None:
            await self._http_client.aclose()
            self._http_client = None
            logger.info(f"HTTP transport closed for {self.config.base_url}")

    async def __aenter__(self) -> HTTPTransport:
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()


class MockTransport:
    """Mock transport for testing.

    Records every request and answers from canned responses keyed by
    (method, path). Unknown requests get {"value": null}.

    Usage:
        transport = MockTransport()
        transport.set_response("GET", "/session/abc/title", "Example")

        session = WebDriverSession("abc", transport)
        assert await session.title() == "Example"
        assert transport.recorded_requests[0].path == "/session/abc/title"
    """

    def __init__(self) -> None:
        self._responses: dict[tuple[str, str], WireResponse] = {}
        self._recorded_requests: list[RequestData] = []

    @property
    def recorded_requests(self) -> list[RequestData]:
        """All requests sent through this transport."""
        return self._recorded_requests.copy()

    @property
    def last_request(self) -> RequestData:
        if not self._recorded_requests:
            raise LookupError("No requests recorded")
        return self._recorded_requests[-1]

    def set_response(self, method: str, path: str, value: Any, status: int = 200) -> None:
        """Answer `method path` with {"value": value}."""
        self._responses[(method, path)] = WireResponse(status=status, body={"value": value})

    def set_error(
        self,
        method: str,
        path: str,
        error: str,
        message: str = "",
        status: int = 404,
    ) -> None:
        """Answer `method path` with a W3C error object."""
        self.set_response(
            method,
            path,
            {"error": error, "message": message, "stacktrace": ""},
            status=status,
        )

    def set_raw_response(self, method: str, path: str, response: WireResponse) -> None:
        """Answer `method path` with an arbitrary body, envelope or not."""
        self._responses[(method, path)] = response

    async def close(self) -> None:
        """No-op for mock."""
        pass

    def clear(self) -> None:
        """Clear recorded requests and responses."""
        self._recorded_requests.clear()
        self._responses.clear()

    async def send(self, request: RequestData) -> WireResponse:
        self._recorded_requests.append(request)
        return self._responses.get(
            (request.method.value, request.path),
            WireResponse(status=200, body={"value": None}),
        )


# Factory functions


def create_http_transport(
    base_url: str = DEFAULT_BASE_URL,
    timeout: float = DEFAULT_TIMEOUT,
) -> HTTPTransport:
    """Create an HTTP transport for a remote end.

    Args:
        base_url: Remote end URL, e.g. a chromedriver listening on port 9515
        timeout: Request timeout in seconds

    Returns:
        HTTPTransport configured for the remote end
    """
    return HTTPTransport(TransportConfig(base_url=base_url, timeout=timeout))


def create_mock_transport() -> MockTransport:
    """Create a mock transport for testing."""
    return MockTransport()
