"""WebDriver session client.

WebDriverSession is the dispatcher: it renders any FormatRequestData value
(standard Command, ChromeCommand, or a third-party command set) for its
session, sends it through a WebDriverTransport, and decodes the response.
Typed helpers on top of cmd() interpret each command's result.

Usage:
    async with attach_session(session_id, "http://localhost:9515") as session:
        await session.goto("https://example.com")
        heading = await session.find(LocatorStrategy.CSS_SELECTOR, "h1")
        print(await heading.text())
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import timedelta
from typing import Any

from ..errors import NoSuchElementError, ResponseDecodeError, StaleElementReferenceError
from ..extensions.chrome import ChromeDevTools
from ..protocol.commands import Command
from ..protocol.request import FormatRequestData
from ..protocol.response import convert, decode_response
from ..protocol.timeouts import TimeoutConfiguration
from ..protocol.types import Cookie, ElementRect, Key, LocatorStrategy, WindowRect
from ..protocol.values import ElementRef, ShadowRootRef, encode_value
from .transport import (
    DEFAULT_BASE_URL,
    DEFAULT_TIMEOUT,
    HTTPTransport,
    MockTransport,
    TransportConfig,
    WebDriverTransport,
    create_mock_transport,
)

logger = logging.getLogger(__name__)


def _keys_to_text(keys: str | Key | Iterable[str | Key]) -> str:
    if isinstance(keys, Key):
        return keys.value
    if isinstance(keys, str):
        return keys
    return "".join(k.value if isinstance(k, Key) else k for k in keys)


@dataclass
class WebDriverSession:
    """Client for one remote session.

    The session id comes from whoever created the session; this client
    never negotiates capabilities. It holds no per-request state, so one
    instance can serve concurrent tasks.

    Usage:
        # HTTP
        session = attach_session("4f2c...", "http://localhost:4444")

        # Testing
        transport = create_mock_transport()
        transport.set_response("GET", "/session/test/title", "Example")
        session = WebDriverSession("test", transport)
    """

    session_id: str
    _transport: WebDriverTransport
    _owns_transport: bool = field(default=True)

    @property
    def transport(self) -> WebDriverTransport:
        """Access the underlying transport."""
        return self._transport

    @property
    def chrome(self) -> ChromeDevTools:
        """Chrome vendor operations."""
        return ChromeDevTools(self)

    async def cmd(self, command: FormatRequestData) -> Any:
        """Send any renderable command and return its decoded value.

        Raises:
            EncodingError: If the command's body cannot be encoded.
            ProtocolError: If the remote end reports an error.
            ResponseDecodeError: If the response is not a WebDriver envelope.
        """
        request = command.format_request(self.session_id)
        response = await self._transport.send(request)
        return decode_response(response, self.session_id)

    def element(self, reference: ElementRef) -> WebElement:
        """Wrap an element reference so commands can be issued against it."""
        return WebElement(reference, self)

    def _as_element(self, value: Any) -> WebElement:
        if not isinstance(value, ElementRef):
            raise ResponseDecodeError(f"Expected an element reference, got {value!r}")
        return self.element(value)

    def _as_elements(self, value: Any) -> list[WebElement]:
        if not isinstance(value, list):
            raise ResponseDecodeError(f"Expected a list of element references, got {value!r}")
        return [self._as_element(item) for item in value]

    # Navigation

    async def goto(self, url: str) -> None:
        await self.cmd(Command.navigate_to(url))

    async def current_url(self) -> str:
        return convert(await self.cmd(Command.get_current_url()), str)

    async def back(self) -> None:
        await self.cmd(Command.back())

    async def forward(self) -> None:
        await self.cmd(Command.forward())

    async def refresh(self) -> None:
        await self.cmd(Command.refresh())

    async def title(self) -> str:
        return convert(await self.cmd(Command.get_title()), str)

    async def source(self) -> str:
        return convert(await self.cmd(Command.get_page_source()), str)

    # Elements

    async def find(self, using: LocatorStrategy, value: str) -> WebElement:
        """Find the first element matching a locator.

        Raises:
            NoSuchElementError: If nothing matches.
        """
        return self._as_element(await self.cmd(Command.find_element(using, value)))

    async def find_all(self, using: LocatorStrategy, value: str) -> list[WebElement]:
        return self._as_elements(await self.cmd(Command.find_elements(using, value)))

    async def active_element(self) -> WebElement:
        return self._as_element(await self.cmd(Command.get_active_element()))

    # Scripts

    async def execute(self, script: str, args: list[Any] | None = None) -> ScriptResult:
        """Run a synchronous script in the current browsing context.

        `args` may contain WebElement or reference handles at any depth; they
        arrive in the page as DOM nodes. Returned nodes come back as handles.
        """
        value = await self.cmd(Command.execute_script(script, args))
        return ScriptResult(value, self)

    async def execute_async(self, script: str, args: list[Any] | None = None) -> ScriptResult:
        """Run an asynchronous script; it resolves by calling its last argument."""
        value = await self.cmd(Command.execute_async_script(script, args))
        return ScriptResult(value, self)

    # Timeouts

    async def get_timeouts(self) -> TimeoutConfiguration:
        return TimeoutConfiguration.from_wire(await self.cmd(Command.get_timeouts()))

    async def set_timeouts(self, timeouts: TimeoutConfiguration) -> None:
        """Write timeouts as given. Prefer update_timeouts() for partial changes."""
        await self.cmd(Command.set_timeouts(timeouts))

    async def update_timeouts(self, timeouts: TimeoutConfiguration) -> TimeoutConfiguration:
        """Change only the timeouts that are set, leaving the rest untouched.

        Reads the current configuration, overlays the given fields and writes
        the complete result back.

        Returns:
            The configuration that was written
        """
        current = await self.get_timeouts()
        merged = current.merge(timeouts)
        logger.debug(f"Updating timeouts for session {self.session_id}: {merged.to_wire()}")
        await self.set_timeouts(merged)
        return merged

    async def set_script_timeout(self, timeout: timedelta) -> TimeoutConfiguration:
        return await self.update_timeouts(TimeoutConfiguration(script=timeout))

    async def set_page_load_timeout(self, timeout: timedelta) -> TimeoutConfiguration:
        return await self.update_timeouts(TimeoutConfiguration(page_load=timeout))

    async def set_implicit_wait_timeout(self, timeout: timedelta) -> TimeoutConfiguration:
        return await self.update_timeouts(TimeoutConfiguration(implicit=timeout))

    # Cookies

    async def get_all_cookies(self) -> list[Cookie]:
        return convert(await self.cmd(Command.get_all_cookies()), list[Cookie])

    async def get_named_cookie(self, name: str) -> Cookie:
        """Get a cookie by name.

        Raises:
            NoSuchCookieError: If no cookie has that name.
        """
        return convert(await self.cmd(Command.get_named_cookie(name)), Cookie)

    async def add_cookie(self, cookie: Cookie) -> None:
        await self.cmd(Command.add_cookie(cookie))

    async def delete_cookie(self, name: str) -> None:
        await self.cmd(Command.delete_cookie(name))

    async def delete_all_cookies(self) -> None:
        await self.cmd(Command.delete_all_cookies())

    # Windows and frames

    async def window(self) -> str:
        """Handle of the current window."""
        return convert(await self.cmd(Command.get_window_handle()), str)

    async def windows(self) -> list[str]:
        return convert(await self.cmd(Command.get_window_handles()), list[str])

    async def new_window(self, window_type: str = "tab") -> str:
        """Open a tab or window and return its handle (without switching to it)."""
        value = convert(await self.cmd(Command.new_window(window_type)), dict[str, Any])
        if not isinstance(value.get("handle"), str):
            raise ResponseDecodeError(f"New window response has no handle: {value!r}")
        return value["handle"]

    async def switch_to_window(self, handle: str) -> None:
        await self.cmd(Command.switch_to_window(handle))

    async def close_window(self) -> list[str]:
        """Close the current window and return the remaining handles."""
        return convert(await self.cmd(Command.close_window()), list[str])

    async def switch_to_frame(self, frame: int | WebElement | ElementRef | None = None) -> None:
        """Switch to a frame by index or element; None selects the top level."""
        if isinstance(frame, WebElement):
            frame = frame.remote_reference
        await self.cmd(Command.switch_to_frame(frame))

    async def switch_to_parent_frame(self) -> None:
        await self.cmd(Command.switch_to_parent_frame())

    async def get_window_rect(self) -> WindowRect:
        return convert(await self.cmd(Command.get_window_rect()), WindowRect)

    async def set_window_rect(
        self,
        x: int | None = None,
        y: int | None = None,
        width: int | None = None,
        height: int | None = None,
    ) -> WindowRect:
        value = await self.cmd(Command.set_window_rect(x, y, width, height))
        return convert(value, WindowRect)

    async def maximize_window(self) -> WindowRect:
        return convert(await self.cmd(Command.maximize_window()), WindowRect)

    async def minimize_window(self) -> WindowRect:
        return convert(await self.cmd(Command.minimize_window()), WindowRect)

    async def fullscreen_window(self) -> WindowRect:
        return convert(await self.cmd(Command.fullscreen_window()), WindowRect)

    # User prompts

    async def dismiss_alert(self) -> None:
        await self.cmd(Command.dismiss_alert())

    async def accept_alert(self) -> None:
        await self.cmd(Command.accept_alert())

    async def get_alert_text(self) -> str:
        return convert(await self.cmd(Command.get_alert_text()), str)

    async def send_alert_text(self, keys: str | Key | Iterable[str | Key]) -> None:
        await self.cmd(Command.send_alert_text(_keys_to_text(keys)))

    # Actions

    async def perform_actions(self, actions: list[dict[str, Any]]) -> None:
        await self.cmd(Command.perform_actions(actions))

    async def release_actions(self) -> None:
        await self.cmd(Command.release_actions())

    # Screen capture

    async def screenshot_as_base64(self) -> str:
        """Screenshot of the viewport as the base64 PNG the server returns."""
        return convert(await self.cmd(Command.take_screenshot()), str)

    async def print_page(self, options: dict[str, Any] | None = None) -> str:
        """Print the page to PDF; returns base64 data."""
        return convert(await self.cmd(Command.print_page(options)), str)

    # Lifecycle

    async def quit(self) -> None:
        """Delete the remote session and release the transport."""
        try:
            await self.cmd(Command.delete_session())
            logger.info(f"Session {self.session_id} deleted")
        finally:
            await self.close()

    async def close(self) -> None:
        """Release the transport if this client created it."""
        if self._owns_transport:
            await self._transport.close()

    async def __aenter__(self) -> WebDriverSession:
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()


@dataclass(frozen=True)
class WebElement:
    """An element reference bound to the session that can act on it.

    Every call is a fresh command against the reference id; nothing is
    cached, and a stale reference fails with StaleElementReferenceError
    when used.
    """

    remote_reference: ElementRef
    session: WebDriverSession = field(compare=False, repr=False)

    @property
    def element_id(self) -> str:
        return self.remote_reference.id

    def to_json(self) -> dict[str, str]:
        """Wire form of the reference."""
        return self.remote_reference.to_json()

    async def _cmd(self, command: FormatRequestData) -> Any:
        return await self.session.cmd(command)

    # State

    async def is_selected(self) -> bool:
        return convert(await self._cmd(Command.is_element_selected(self.remote_reference)), bool)

    async def is_enabled(self) -> bool:
        return convert(await self._cmd(Command.is_element_enabled(self.remote_reference)), bool)

    async def is_displayed(self) -> bool:
        return convert(await self._cmd(Command.is_element_displayed(self.remote_reference)), bool)

    async def is_present(self) -> bool:
        """Whether the reference still points into the document."""
        try:
            await self.tag_name()
        except (NoSuchElementError, StaleElementReferenceError):
            return False
        return True

    async def is_clickable(self) -> bool:
        return await self.is_displayed() and await self.is_enabled()

    async def attr(self, name: str) -> str | None:
        """HTML attribute value, or None if the attribute is absent."""
        value = await self._cmd(Command.get_element_attribute(self.remote_reference, name))
        return convert(value, str | None)

    async def prop(self, name: str) -> Any:
        """DOM property value, decoded (may itself be a reference)."""
        return await self._cmd(Command.get_element_property(self.remote_reference, name))

    async def css_value(self, name: str) -> str:
        value = await self._cmd(Command.get_element_css_value(self.remote_reference, name))
        return convert(value, str)

    async def tag_name(self) -> str:
        return convert(await self._cmd(Command.get_element_tag_name(self.remote_reference)), str)

    async def text(self) -> str:
        return convert(await self._cmd(Command.get_element_text(self.remote_reference)), str)

    async def rect(self) -> ElementRect:
        value = await self._cmd(Command.get_element_rect(self.remote_reference))
        return convert(value, ElementRect)

    async def class_name(self) -> str | None:
        return await self.attr("class")

    async def id(self) -> str | None:
        """The element's HTML id attribute (not the reference id)."""
        return await self.attr("id")

    async def value(self) -> str | None:
        return convert(await self.prop("value"), str | None)

    async def inner_html(self) -> str:
        return convert(await self.prop("innerHTML"), str)

    async def outer_html(self) -> str:
        return convert(await self.prop("outerHTML"), str)

    # Interaction

    async def click(self) -> None:
        await self._cmd(Command.element_click(self.remote_reference))

    async def clear(self) -> None:
        await self._cmd(Command.element_clear(self.remote_reference))

    async def send_keys(self, keys: str | Key | Iterable[str | Key]) -> None:
        text = _keys_to_text(keys)
        await self._cmd(Command.element_send_keys(self.remote_reference, text))

    async def focus(self) -> None:
        await self.session.execute("arguments[0].focus();", [self])

    async def scroll_into_view(self) -> None:
        await self.session.execute("arguments[0].scrollIntoView();", [self])

    async def screenshot_as_base64(self) -> str:
        value = await self._cmd(Command.take_element_screenshot(self.remote_reference))
        return convert(value, str)

    # Relatives

    async def find(self, using: LocatorStrategy, value: str) -> WebElement:
        command = Command.find_element_from_element(self.remote_reference, using, value)
        return self.session._as_element(await self._cmd(command))

    async def find_all(self, using: LocatorStrategy, value: str) -> list[WebElement]:
        command = Command.find_elements_from_element(self.remote_reference, using, value)
        return self.session._as_elements(await self._cmd(command))

    async def parent(self) -> WebElement:
        return await self.find(LocatorStrategy.XPATH, "./..")

    async def shadow_root(self) -> ShadowRoot:
        """The element's open shadow root.

        Raises:
            NoSuchShadowRootError: If the element has none.
        """
        value = await self._cmd(Command.get_element_shadow_root(self.remote_reference))
        if not isinstance(value, ShadowRootRef):
            raise ResponseDecodeError(f"Expected a shadow root reference, got {value!r}")
        return ShadowRoot(value, self.session)


@dataclass(frozen=True)
class ShadowRoot:
    """A shadow root reference bound to its session."""

    remote_reference: ShadowRootRef
    session: WebDriverSession = field(compare=False, repr=False)

    async def find(self, using: LocatorStrategy, value: str) -> WebElement:
        command = Command.find_element_from_shadow_root(self.remote_reference, using, value)
        return self.session._as_element(await self.session.cmd(command))

    async def find_all(self, using: LocatorStrategy, value: str) -> list[WebElement]:
        command = Command.find_elements_from_shadow_root(self.remote_reference, using, value)
        return self.session._as_elements(await self.session.cmd(command))


class ScriptResult:
    """The decoded return value of a script.

    Usage:
        ret = await session.execute("return document.getElementById('select1');")
        elem = ret.element()
        count = (await session.execute("return 1 + 1;")).convert(int)
    """

    def __init__(self, value: Any, session: WebDriverSession):
        self.value = value
        self._session = session

    def json(self) -> Any:
        """The value in wire form, references re-encoded."""
        return encode_value(self.value)

    def convert(self, expected: Any) -> Any:
        """Validate the value as `expected` (any type pydantic accepts).

        Raises:
            ResponseDecodeError: If the value does not match.
        """
        return convert(self.value, expected)

    def element(self) -> WebElement:
        return self._session._as_element(self.value)

    def elements(self) -> list[WebElement]:
        return self._session._as_elements(self.value)

    def __repr__(self) -> str:
        return f"ScriptResult({self.value!r})"


# Factory functions


def attach_session(
    session_id: str,
    base_url: str = DEFAULT_BASE_URL,
    timeout: float = DEFAULT_TIMEOUT,
) -> WebDriverSession:
    """Create a client for an existing session on a remote end.

    Args:
        session_id: Id returned when the session was created
        base_url: Remote end URL
        timeout: Request timeout in seconds

    Returns:
        WebDriverSession with its own HTTPTransport
    """
    transport = HTTPTransport(TransportConfig(base_url=base_url, timeout=timeout))
    return WebDriverSession(session_id, transport)


def attach_session_from_env(session_id: str) -> WebDriverSession:
    """Like attach_session(), configured from DRIVERWIRE_URL / DRIVERWIRE_TIMEOUT."""
    return WebDriverSession(session_id, HTTPTransport(TransportConfig.from_env()))


def create_test_session(
    session_id: str = "test-session",
    transport: MockTransport | None = None,
) -> WebDriverSession:
    """Create a session client for testing.

    Args:
        session_id: Session id to render into paths
        transport: Pre-configured mock transport (creates new if None)

    Returns:
        WebDriverSession with MockTransport
    """
    return WebDriverSession(
        session_id,
        transport or create_mock_transport(),
        _owns_transport=transport is None,
    )
