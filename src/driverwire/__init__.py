"""driverwire - W3C WebDriver wire protocol client.

Layers:
- protocol: commands, request rendering, value codec, response decoding (no I/O)
- extensions: vendor command sets (Chrome)
- sdk: transports and the async session client
"""

from .errors import (
    EncodingError,
    NoSuchCookieError,
    NoSuchElementError,
    ProtocolError,
    ResponseDecodeError,
    StaleElementReferenceError,
    WebDriverError,
)
from .extensions import ChromeCommand, ChromeDevTools, NetworkConditions
from .protocol import (
    Command,
    CommandType,
    Cookie,
    ElementRef,
    FormatRequestData,
    Key,
    LocatorStrategy,
    RequestData,
    RequestMethod,
    SameSite,
    TimeoutConfiguration,
)
from .sdk import (
    HTTPTransport,
    MockTransport,
    ScriptResult,
    TransportConfig,
    WebDriverSession,
    WebDriverTransport,
    WebElement,
    attach_session,
    create_test_session,
)

__version__ = "0.1.0"

__all__ = [
    # Errors
    "WebDriverError",
    "EncodingError",
    "ProtocolError",
    "ResponseDecodeError",
    "NoSuchElementError",
    "NoSuchCookieError",
    "StaleElementReferenceError",
    # Protocol
    "Command",
    "CommandType",
    "Cookie",
    "ElementRef",
    "FormatRequestData",
    "Key",
    "LocatorStrategy",
    "RequestData",
    "RequestMethod",
    "SameSite",
    "TimeoutConfiguration",
    # Extensions
    "ChromeCommand",
    "ChromeDevTools",
    "NetworkConditions",
    # SDK
    "WebDriverSession",
    "WebElement",
    "ScriptResult",
    "WebDriverTransport",
    "TransportConfig",
    "HTTPTransport",
    "MockTransport",
    "attach_session",
    "create_test_session",
]
