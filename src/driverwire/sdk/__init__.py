"""driverwire SDK - async client for WebDriver remote ends.

Provides multiple transport modes:
- http: Connect to a driver process or grid over HTTP (httpx)
- mock: For testing without real I/O

WebDriverSession dispatches any command that can render itself into a
request, so vendor command sets plug in without changes here.
"""

from .client import (
    ScriptResult,
    ShadowRoot,
    WebDriverSession,
    WebElement,
    attach_session,
    attach_session_from_env,
    create_test_session,
)
from .transport import (
    HTTPTransport,
    MockTransport,
    TransportConfig,
    WebDriverTransport,
    create_http_transport,
    create_mock_transport,
)

__all__ = [
    # Session client
    "WebDriverSession",
    "WebElement",
    "ShadowRoot",
    "ScriptResult",
    "attach_session",
    "attach_session_from_env",
    "create_test_session",
    # Transport Protocol & Config
    "WebDriverTransport",
    "TransportConfig",
    # Transport Implementations
    "HTTPTransport",
    "MockTransport",
    # Transport Factory Functions
    "create_http_transport",
    "create_mock_transport",
]
