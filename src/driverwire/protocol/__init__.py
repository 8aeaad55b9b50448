"""Transport-agnostic WebDriver protocol layer.

Defines how commands become wire requests and how responses become Python
values, without performing any I/O.

Key concepts:
- RequestData: method + session-scoped path + optional JSON body
- FormatRequestData: the "render to RequestData" capability shared by the
  standard catalogue and vendor extensions
- Remote references: element/shadow root/frame/window handles, woven into
  and out of JSON trees by the value codec
"""

from .commands import ROUTES, Command, CommandType
from .request import FormatRequestData, RequestData, RequestMethod, render_request
from .response import WireResponse, convert, decode_response, unwrap_response
from .timeouts import TimeoutConfiguration
from .types import Cookie, ElementRect, Key, LocatorStrategy, SameSite, ServerStatus, WindowRect
from .values import (
    ELEMENT_KEY,
    FRAME_KEY,
    SHADOW_ROOT_KEY,
    WINDOW_KEY,
    ElementRef,
    FrameRef,
    RemoteReference,
    ShadowRootRef,
    WindowRef,
    decode_value,
    encode_value,
)

__all__ = [
    # Commands
    "Command",
    "CommandType",
    "ROUTES",
    # Request model
    "FormatRequestData",
    "RequestData",
    "RequestMethod",
    "render_request",
    # Responses
    "WireResponse",
    "convert",
    "decode_response",
    "unwrap_response",
    # Value types
    "Cookie",
    "ElementRect",
    "Key",
    "LocatorStrategy",
    "SameSite",
    "ServerStatus",
    "TimeoutConfiguration",
    "WindowRect",
    # Value codec
    "ELEMENT_KEY",
    "SHADOW_ROOT_KEY",
    "FRAME_KEY",
    "WINDOW_KEY",
    "RemoteReference",
    "ElementRef",
    "ShadowRootRef",
    "FrameRef",
    "WindowRef",
    "encode_value",
    "decode_value",
]
