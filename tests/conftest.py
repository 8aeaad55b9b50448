"""Pytest configuration and shared fixtures."""

import httpx
import pytest
import pytest_asyncio

from driverwire.sdk.client import WebDriverSession, create_test_session
from driverwire.sdk.transport import HTTPTransport, MockTransport, TransportConfig

from fake_remote import SESSION_ID, FakeRemoteEnd, create_fake_remote_app


@pytest.fixture
def mock_transport() -> MockTransport:
    """Fresh mock transport."""
    return MockTransport()


@pytest.fixture
def session(mock_transport: MockTransport) -> WebDriverSession:
    """Session client over the mock transport."""
    return create_test_session("sess-1", mock_transport)


@pytest.fixture
def remote_end() -> FakeRemoteEnd:
    """In-memory remote end state."""
    return FakeRemoteEnd()


@pytest_asyncio.fixture
async def remote_session(remote_end: FakeRemoteEnd):
    """Session client talking HTTP to the fake remote end in-process."""
    app = create_fake_remote_app(remote_end)
    transport = HTTPTransport(
        TransportConfig(base_url="http://remote.test"),
        transport=httpx.ASGITransport(app=app),
    )
    async with WebDriverSession(SESSION_ID, transport) as session:
        yield session
