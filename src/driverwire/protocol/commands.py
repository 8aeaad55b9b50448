"""Standard W3C WebDriver commands.

Each CommandType maps to exactly one protocol operation with a fixed HTTP
method and path template. A Command carries the operation's parameters and
renders into a RequestData for a session:

    Command.navigate_to("https://example.com").format_request("abc")
    # POST /session/abc/url  {"url": "https://example.com"}

Body field names are part of the wire contract and are spelled here exactly
as the W3C specification defines them.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from .request import RequestData, RequestMethod, render_request
from .timeouts import TimeoutConfiguration
from .types import Cookie, LocatorStrategy
from .values import ElementRef, ShadowRootRef


class CommandType(str, Enum):
    """All supported standard commands."""

    # Session
    DELETE_SESSION = "delete_session"
    GET_TIMEOUTS = "get_timeouts"
    SET_TIMEOUTS = "set_timeouts"

    # Navigation
    NAVIGATE_TO = "navigate_to"
    GET_CURRENT_URL = "get_current_url"
    BACK = "back"
    FORWARD = "forward"
    REFRESH = "refresh"
    GET_TITLE = "get_title"
    GET_PAGE_SOURCE = "get_page_source"

    # Windows and frames
    GET_WINDOW_HANDLE = "get_window_handle"
    CLOSE_WINDOW = "close_window"
    SWITCH_TO_WINDOW = "switch_to_window"
    GET_WINDOW_HANDLES = "get_window_handles"
    NEW_WINDOW = "new_window"
    SWITCH_TO_FRAME = "switch_to_frame"
    SWITCH_TO_PARENT_FRAME = "switch_to_parent_frame"
    GET_WINDOW_RECT = "get_window_rect"
    SET_WINDOW_RECT = "set_window_rect"
    MAXIMIZE_WINDOW = "maximize_window"
    MINIMIZE_WINDOW = "minimize_window"
    FULLSCREEN_WINDOW = "fullscreen_window"

    # Element retrieval
    GET_ACTIVE_ELEMENT = "get_active_element"
    FIND_ELEMENT = "find_element"
    FIND_ELEMENTS = "find_elements"
    FIND_ELEMENT_FROM_ELEMENT = "find_element_from_element"
    FIND_ELEMENTS_FROM_ELEMENT = "find_elements_from_element"
    GET_ELEMENT_SHADOW_ROOT = "get_element_shadow_root"
    FIND_ELEMENT_FROM_SHADOW_ROOT = "find_element_from_shadow_root"
    FIND_ELEMENTS_FROM_SHADOW_ROOT = "find_elements_from_shadow_root"

    # Element state
    IS_ELEMENT_SELECTED = "is_element_selected"
    IS_ELEMENT_ENABLED = "is_element_enabled"
    IS_ELEMENT_DISPLAYED = "is_element_displayed"
    GET_ELEMENT_ATTRIBUTE = "get_element_attribute"
    GET_ELEMENT_PROPERTY = "get_element_property"
    GET_ELEMENT_CSS_VALUE = "get_element_css_value"
    GET_ELEMENT_TEXT = "get_element_text"
    GET_ELEMENT_TAG_NAME = "get_element_tag_name"
    GET_ELEMENT_RECT = "get_element_rect"

    # Element interaction
    ELEMENT_CLICK = "element_click"
    ELEMENT_CLEAR = "element_clear"
    ELEMENT_SEND_KEYS = "element_send_keys"
    TAKE_ELEMENT_SCREENSHOT = "take_element_screenshot"

    # Scripts
    EXECUTE_SCRIPT = "execute_script"
    EXECUTE_ASYNC_SCRIPT = "execute_async_script"

    # Cookies
    GET_ALL_COOKIES = "get_all_cookies"
    GET_NAMED_COOKIE = "get_named_cookie"
    ADD_COOKIE = "add_cookie"
    DELETE_COOKIE = "delete_cookie"
    DELETE_ALL_COOKIES = "delete_all_cookies"

    # Actions
    PERFORM_ACTIONS = "perform_actions"
    RELEASE_ACTIONS = "release_actions"

    # User prompts
    DISMISS_ALERT = "dismiss_alert"
    ACCEPT_ALERT = "accept_alert"
    GET_ALERT_TEXT = "get_alert_text"
    SEND_ALERT_TEXT = "send_alert_text"

    # Screen capture
    TAKE_SCREENSHOT = "take_screenshot"
    PRINT_PAGE = "print_page"


_SESSION = "/session/{session_id}"
_ELEMENT = _SESSION + "/element/{element_id}"
_GET = RequestMethod.GET
_POST = RequestMethod.POST
_DELETE = RequestMethod.DELETE

# (method, path template)
ROUTES: dict[CommandType, tuple[RequestMethod, str]] = {
    CommandType.DELETE_SESSION: (_DELETE, _SESSION),
    CommandType.GET_TIMEOUTS: (_GET, _SESSION + "/timeouts"),
    CommandType.SET_TIMEOUTS: (_POST, _SESSION + "/timeouts"),
    CommandType.NAVIGATE_TO: (_POST, _SESSION + "/url"),
    CommandType.GET_CURRENT_URL: (_GET, _SESSION + "/url"),
    CommandType.BACK: (_POST, _SESSION + "/back"),
    CommandType.FORWARD: (_POST, _SESSION + "/forward"),
    CommandType.REFRESH: (_POST, _SESSION + "/refresh"),
    CommandType.GET_TITLE: (_GET, _SESSION + "/title"),
    CommandType.GET_PAGE_SOURCE: (_GET, _SESSION + "/source"),
    CommandType.GET_WINDOW_HANDLE: (_GET, _SESSION + "/window"),
    CommandType.CLOSE_WINDOW: (_DELETE, _SESSION + "/window"),
    CommandType.SWITCH_TO_WINDOW: (_POST, _SESSION + "/window"),
    CommandType.GET_WINDOW_HANDLES: (_GET, _SESSION + "/window/handles"),
    CommandType.NEW_WINDOW: (_POST, _SESSION + "/window/new"),
    CommandType.SWITCH_TO_FRAME: (_POST, _SESSION + "/frame"),
    CommandType.SWITCH_TO_PARENT_FRAME: (_POST, _SESSION + "/frame/parent"),
    CommandType.GET_WINDOW_RECT: (_GET, _SESSION + "/window/rect"),
    CommandType.SET_WINDOW_RECT: (_POST, _SESSION + "/window/rect"),
    CommandType.MAXIMIZE_WINDOW: (_POST, _SESSION + "/window/maximize"),
    CommandType.MINIMIZE_WINDOW: (_POST, _SESSION + "/window/minimize"),
    CommandType.FULLSCREEN_WINDOW: (_POST, _SESSION + "/window/fullscreen"),
    CommandType.GET_ACTIVE_ELEMENT: (_GET, _SESSION + "/element/active"),
    CommandType.FIND_ELEMENT: (_POST, _SESSION + "/element"),
    CommandType.FIND_ELEMENTS: (_POST, _SESSION + "/elements"),
    CommandType.FIND_ELEMENT_FROM_ELEMENT: (_POST, _ELEMENT + "/element"),
    CommandType.FIND_ELEMENTS_FROM_ELEMENT: (_POST, _ELEMENT + "/elements"),
    CommandType.GET_ELEMENT_SHADOW_ROOT: (_GET, _ELEMENT + "/shadow"),
    CommandType.FIND_ELEMENT_FROM_SHADOW_ROOT: (_POST, _SESSION + "/shadow/{shadow_id}/element"),
    CommandType.FIND_ELEMENTS_FROM_SHADOW_ROOT: (_POST, _SESSION + "/shadow/{shadow_id}/elements"),
    CommandType.IS_ELEMENT_SELECTED: (_GET, _ELEMENT + "/selected"),
    CommandType.IS_ELEMENT_ENABLED: (_GET, _ELEMENT + "/enabled"),
    CommandType.IS_ELEMENT_DISPLAYED: (_GET, _ELEMENT + "/displayed"),
    CommandType.GET_ELEMENT_ATTRIBUTE: (_GET, _ELEMENT + "/attribute/{name}"),
    CommandType.GET_ELEMENT_PROPERTY: (_GET, _ELEMENT + "/property/{name}"),
    CommandType.GET_ELEMENT_CSS_VALUE: (_GET, _ELEMENT + "/css/{name}"),
    CommandType.GET_ELEMENT_TEXT: (_GET, _ELEMENT + "/text"),
    CommandType.GET_ELEMENT_TAG_NAME: (_GET, _ELEMENT + "/name"),
    CommandType.GET_ELEMENT_RECT: (_GET, _ELEMENT + "/rect"),
    CommandType.ELEMENT_CLICK: (_POST, _ELEMENT + "/click"),
    CommandType.ELEMENT_CLEAR: (_POST, _ELEMENT + "/clear"),
    CommandType.ELEMENT_SEND_KEYS: (_POST, _ELEMENT + "/value"),
    CommandType.TAKE_ELEMENT_SCREENSHOT: (_GET, _ELEMENT + "/screenshot"),
    CommandType.EXECUTE_SCRIPT: (_POST, _SESSION + "/execute/sync"),
    CommandType.EXECUTE_ASYNC_SCRIPT: (_POST, _SESSION + "/execute/async"),
    CommandType.GET_ALL_COOKIES: (_GET, _SESSION + "/cookie"),
    CommandType.GET_NAMED_COOKIE: (_GET, _SESSION + "/cookie/{name}"),
    CommandType.ADD_COOKIE: (_POST, _SESSION + "/cookie"),
    CommandType.DELETE_COOKIE: (_DELETE, _SESSION + "/cookie/{name}"),
    CommandType.DELETE_ALL_COOKIES: (_DELETE, _SESSION + "/cookie"),
    CommandType.PERFORM_ACTIONS: (_POST, _SESSION + "/actions"),
    CommandType.RELEASE_ACTIONS: (_DELETE, _SESSION + "/actions"),
    CommandType.DISMISS_ALERT: (_POST, _SESSION + "/alert/dismiss"),
    CommandType.ACCEPT_ALERT: (_POST, _SESSION + "/alert/accept"),
    CommandType.GET_ALERT_TEXT: (_GET, _SESSION + "/alert/text"),
    CommandType.SEND_ALERT_TEXT: (_POST, _SESSION + "/alert/text"),
    CommandType.TAKE_SCREENSHOT: (_GET, _SESSION + "/screenshot"),
    CommandType.PRINT_PAGE: (_POST, _SESSION + "/print"),
}


class Command(BaseModel):
    """A standard WebDriver command.

    - `cmd` selects the operation (and therefore method and path template)
    - `path_params` fills the template's placeholders other than session_id
    - `body` is the JSON body before value encoding, or None

    Prefer the factory classmethods, which fix the body field names.
    """

    model_config = ConfigDict(frozen=True)

    cmd: CommandType
    path_params: dict[str, str] = Field(default_factory=dict)
    body: Any = None

    def format_request(self, session_id: str) -> RequestData:
        method, template = ROUTES[self.cmd]
        return render_request(method, template, session_id, self.path_params, self.body)

    @classmethod
    def create(
        cls,
        cmd: CommandType,
        path_params: dict[str, str] | None = None,
        body: Any = None,
    ) -> Command:
        """Factory method for creating commands."""
        return cls(cmd=cmd, path_params=path_params or {}, body=body)

    @classmethod
    def _for_element(cls, cmd: CommandType, element: ElementRef, **params: str) -> Command:
        return cls.create(cmd, {"element_id": element.id, **params})

    # Session

    @classmethod
    def delete_session(cls) -> Command:
        return cls.create(CommandType.DELETE_SESSION)

    @classmethod
    def get_timeouts(cls) -> Command:
        return cls.create(CommandType.GET_TIMEOUTS)

    @classmethod
    def set_timeouts(cls, timeouts: TimeoutConfiguration) -> Command:
        return cls.create(CommandType.SET_TIMEOUTS, body=timeouts.to_wire())

    # Navigation

    @classmethod
    def navigate_to(cls, url: str) -> Command:
        return cls.create(CommandType.NAVIGATE_TO, body={"url": url})

    @classmethod
    def get_current_url(cls) -> Command:
        return cls.create(CommandType.GET_CURRENT_URL)

    @classmethod
    def back(cls) -> Command:
        return cls.create(CommandType.BACK)

    @classmethod
    def forward(cls) -> Command:
        return cls.create(CommandType.FORWARD)

    @classmethod
    def refresh(cls) -> Command:
        return cls.create(CommandType.REFRESH)

    @classmethod
    def get_title(cls) -> Command:
        return cls.create(CommandType.GET_TITLE)

    @classmethod
    def get_page_source(cls) -> Command:
        return cls.create(CommandType.GET_PAGE_SOURCE)

    # Windows and frames

    @classmethod
    def get_window_handle(cls) -> Command:
        return cls.create(CommandType.GET_WINDOW_HANDLE)

    @classmethod
    def close_window(cls) -> Command:
        return cls.create(CommandType.CLOSE_WINDOW)

    @classmethod
    def switch_to_window(cls, handle: str) -> Command:
        return cls.create(CommandType.SWITCH_TO_WINDOW, body={"handle": handle})

    @classmethod
    def get_window_handles(cls) -> Command:
        return cls.create(CommandType.GET_WINDOW_HANDLES)

    @classmethod
    def new_window(cls, window_type: str = "tab") -> Command:
        """Open a new top-level browsing context ("tab" or "window")."""
        return cls.create(CommandType.NEW_WINDOW, body={"type": window_type})

    @classmethod
    def switch_to_frame(cls, frame: int | ElementRef | None = None) -> Command:
        """Switch to a frame by index or element; None selects the top-level context."""
        return cls.create(CommandType.SWITCH_TO_FRAME, body={"id": frame})

    @classmethod
    def switch_to_parent_frame(cls) -> Command:
        return cls.create(CommandType.SWITCH_TO_PARENT_FRAME)

    @classmethod
    def get_window_rect(cls) -> Command:
        return cls.create(CommandType.GET_WINDOW_RECT)

    @classmethod
    def set_window_rect(
        cls,
        x: int | None = None,
        y: int | None = None,
        width: int | None = None,
        height: int | None = None,
    ) -> Command:
        """Move and/or resize the window. Only the given fields are sent."""
        rect = {"x": x, "y": y, "width": width, "height": height}
        return cls.create(
            CommandType.SET_WINDOW_RECT,
            body={k: v for k, v in rect.items() if v is not None},
        )

    @classmethod
    def maximize_window(cls) -> Command:
        return cls.create(CommandType.MAXIMIZE_WINDOW)

    @classmethod
    def minimize_window(cls) -> Command:
        return cls.create(CommandType.MINIMIZE_WINDOW)

    @classmethod
    def fullscreen_window(cls) -> Command:
        return cls.create(CommandType.FULLSCREEN_WINDOW)

    # Element retrieval

    @classmethod
    def get_active_element(cls) -> Command:
        return cls.create(CommandType.GET_ACTIVE_ELEMENT)

    @classmethod
    def find_element(cls, using: LocatorStrategy, value: str) -> Command:
        return cls.create(CommandType.FIND_ELEMENT, body=_locator(using, value))

    @classmethod
    def find_elements(cls, using: LocatorStrategy, value: str) -> Command:
        return cls.create(CommandType.FIND_ELEMENTS, body=_locator(using, value))

    @classmethod
    def find_element_from_element(
        cls, element: ElementRef, using: LocatorStrategy, value: str
    ) -> Command:
        return cls.create(
            CommandType.FIND_ELEMENT_FROM_ELEMENT,
            {"element_id": element.id},
            _locator(using, value),
        )

    @classmethod
    def find_elements_from_element(
        cls, element: ElementRef, using: LocatorStrategy, value: str
    ) -> Command:
        return cls.create(
            CommandType.FIND_ELEMENTS_FROM_ELEMENT,
            {"element_id": element.id},
            _locator(using, value),
        )

    @classmethod
    def get_element_shadow_root(cls, element: ElementRef) -> Command:
        return cls._for_element(CommandType.GET_ELEMENT_SHADOW_ROOT, element)

    @classmethod
    def find_element_from_shadow_root(
        cls, shadow_root: ShadowRootRef, using: LocatorStrategy, value: str
    ) -> Command:
        return cls.create(
            CommandType.FIND_ELEMENT_FROM_SHADOW_ROOT,
            {"shadow_id": shadow_root.id},
            _locator(using, value),
        )

    @classmethod
    def find_elements_from_shadow_root(
        cls, shadow_root: ShadowRootRef, using: LocatorStrategy, value: str
    ) -> Command:
        return cls.create(
            CommandType.FIND_ELEMENTS_FROM_SHADOW_ROOT,
            {"shadow_id": shadow_root.id},
            _locator(using, value),
        )

    # Element state

    @classmethod
    def is_element_selected(cls, element: ElementRef) -> Command:
        return cls._for_element(CommandType.IS_ELEMENT_SELECTED, element)

    @classmethod
    def is_element_enabled(cls, element: ElementRef) -> Command:
        return cls._for_element(CommandType.IS_ELEMENT_ENABLED, element)

    @classmethod
    def is_element_displayed(cls, element: ElementRef) -> Command:
        return cls._for_element(CommandType.IS_ELEMENT_DISPLAYED, element)

    @classmethod
    def get_element_attribute(cls, element: ElementRef, name: str) -> Command:
        return cls._for_element(CommandType.GET_ELEMENT_ATTRIBUTE, element, name=name)

    @classmethod
    def get_element_property(cls, element: ElementRef, name: str) -> Command:
        return cls._for_element(CommandType.GET_ELEMENT_PROPERTY, element, name=name)

    @classmethod
    def get_element_css_value(cls, element: ElementRef, name: str) -> Command:
        return cls._for_element(CommandType.GET_ELEMENT_CSS_VALUE, element, name=name)

    @classmethod
    def get_element_text(cls, element: ElementRef) -> Command:
        return cls._for_element(CommandType.GET_ELEMENT_TEXT, element)

    @classmethod
    def get_element_tag_name(cls, element: ElementRef) -> Command:
        return cls._for_element(CommandType.GET_ELEMENT_TAG_NAME, element)

    @classmethod
    def get_element_rect(cls, element: ElementRef) -> Command:
        return cls._for_element(CommandType.GET_ELEMENT_RECT, element)

    # Element interaction

    @classmethod
    def element_click(cls, element: ElementRef) -> Command:
        return cls._for_element(CommandType.ELEMENT_CLICK, element)

    @classmethod
    def element_clear(cls, element: ElementRef) -> Command:
        return cls._for_element(CommandType.ELEMENT_CLEAR, element)

    @classmethod
    def element_send_keys(cls, element: ElementRef, text: str) -> Command:
        return cls.create(
            CommandType.ELEMENT_SEND_KEYS,
            {"element_id": element.id},
            {"text": text},
        )

    @classmethod
    def take_element_screenshot(cls, element: ElementRef) -> Command:
        return cls._for_element(CommandType.TAKE_ELEMENT_SCREENSHOT, element)

    # Scripts

    @classmethod
    def execute_script(cls, script: str, args: list[Any] | None = None) -> Command:
        return cls.create(
            CommandType.EXECUTE_SCRIPT,
            body={"script": script, "args": list(args or [])},
        )

    @classmethod
    def execute_async_script(cls, script: str, args: list[Any] | None = None) -> Command:
        """The script receives a resolve callback as its last argument."""
        return cls.create(
            CommandType.EXECUTE_ASYNC_SCRIPT,
            body={"script": script, "args": list(args or [])},
        )

    # Cookies

    @classmethod
    def get_all_cookies(cls) -> Command:
        return cls.create(CommandType.GET_ALL_COOKIES)

    @classmethod
    def get_named_cookie(cls, name: str) -> Command:
        return cls.create(CommandType.GET_NAMED_COOKIE, {"name": name})

    @classmethod
    def add_cookie(cls, cookie: Cookie) -> Command:
        return cls.create(CommandType.ADD_COOKIE, body={"cookie": cookie.to_wire()})

    @classmethod
    def delete_cookie(cls, name: str) -> Command:
        return cls.create(CommandType.DELETE_COOKIE, {"name": name})

    @classmethod
    def delete_all_cookies(cls) -> Command:
        return cls.create(CommandType.DELETE_ALL_COOKIES)

    # Actions

    @classmethod
    def perform_actions(cls, actions: list[dict[str, Any]]) -> Command:
        """Dispatch input source action sequences, e.g. key or pointer ticks."""
        return cls.create(CommandType.PERFORM_ACTIONS, body={"actions": actions})

    @classmethod
    def release_actions(cls) -> Command:
        return cls.create(CommandType.RELEASE_ACTIONS)

    # User prompts

    @classmethod
    def dismiss_alert(cls) -> Command:
        return cls.create(CommandType.DISMISS_ALERT)

    @classmethod
    def accept_alert(cls) -> Command:
        return cls.create(CommandType.ACCEPT_ALERT)

    @classmethod
    def get_alert_text(cls) -> Command:
        return cls.create(CommandType.GET_ALERT_TEXT)

    @classmethod
    def send_alert_text(cls, text: str) -> Command:
        return cls.create(CommandType.SEND_ALERT_TEXT, body={"text": text})

    # Screen capture

    @classmethod
    def take_screenshot(cls) -> Command:
        return cls.create(CommandType.TAKE_SCREENSHOT)

    @classmethod
    def print_page(cls, options: dict[str, Any] | None = None) -> Command:
        """Print to PDF. `options` uses the W3C print parameter names as-is."""
        return cls.create(CommandType.PRINT_PAGE, body=dict(options or {}))


def _locator(using: LocatorStrategy, value: str) -> dict[str, str]:
    return {"using": LocatorStrategy(using).value, "value": value}
