"""Value types exchanged with the remote end."""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class SameSite(str, Enum):
    """Cookie SameSite policy."""

    STRICT = "Strict"
    LAX = "Lax"
    NONE = "None"


class Cookie(BaseModel):
    """A cookie as sent to and received from the remote end.

    Example (wire form):
        {"name": "cookietest", "value": "wiki-session", "domain": ".wikipedia.org",
         "path": "/", "sameSite": "Lax"}
    """

    model_config = ConfigDict(populate_by_name=True)

    name: str
    value: str
    path: str | None = None
    domain: str | None = None
    secure: bool | None = None
    http_only: bool | None = Field(default=None, alias="httpOnly")
    expiry: int | None = None
    same_site: SameSite | None = Field(default=None, alias="sameSite")

    def to_wire(self) -> dict[str, Any]:
        """Wire form with unset fields left out."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class ElementRect(BaseModel):
    """Position and size of an element, in CSS pixels."""

    x: float
    y: float
    width: float
    height: float


class WindowRect(BaseModel):
    """Position and size of the top-level window."""

    x: int | None = None
    y: int | None = None
    width: int
    height: int


class LocatorStrategy(str, Enum):
    """Element location strategies defined by W3C WebDriver."""

    CSS_SELECTOR = "css selector"
    LINK_TEXT = "link text"
    PARTIAL_LINK_TEXT = "partial link text"
    TAG_NAME = "tag name"
    XPATH = "xpath"


class Key(str, Enum):
    """Special keys, as the private-use code points WebDriver assigns them.

    Members concatenate with strings and each other:
        Key.CONTROL + "a"
    """

    NULL = "\ue000"
    CANCEL = "\ue001"
    HELP = "\ue002"
    BACKSPACE = "\ue003"
    TAB = "\ue004"
    CLEAR = "\ue005"
    RETURN = "\ue006"
    ENTER = "\ue007"
    SHIFT = "\ue008"
    CONTROL = "\ue009"
    ALT = "\ue00a"
    PAUSE = "\ue00b"
    ESCAPE = "\ue00c"
    SPACE = "\ue00d"
    PAGE_UP = "\ue00e"
    PAGE_DOWN = "\ue00f"
    END = "\ue010"
    HOME = "\ue011"
    LEFT = "\ue012"
    UP = "\ue013"
    RIGHT = "\ue014"
    DOWN = "\ue015"
    INSERT = "\ue016"
    DELETE = "\ue017"
    F1 = "\ue031"
    F5 = "\ue035"
    F12 = "\ue03c"
    META = "\ue03d"
    COMMAND = "\ue03d"

    def __add__(self, other: object) -> str:
        return self.value + str(other.value if isinstance(other, Key) else other)

    def __radd__(self, other: object) -> str:
        return str(other) + self.value


class ServerStatus(BaseModel):
    """Result of GET /status."""

    ready: bool
    message: str = ""
