"""Request model for the WebDriver wire protocol.

A RequestData is what a command renders into: an HTTP method, a path with
every placeholder already substituted, and an optional JSON body. Rendering
is pure; sending belongs to the transport.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Protocol, runtime_checkable
from urllib.parse import quote

from pydantic import BaseModel, ConfigDict, model_validator

from ..errors import EncodingError
from .values import encode_value


class RequestMethod(str, Enum):
    """HTTP methods used by the protocol."""

    GET = "GET"
    POST = "POST"
    DELETE = "DELETE"


class RequestData(BaseModel):
    """A fully rendered wire request.

    Example:
        RequestData(method=RequestMethod.POST, path="/session/abc/url")
            .add_body({"url": "https://example.com"})
    """

    model_config = ConfigDict(frozen=True)

    method: RequestMethod
    path: str
    body: Any = None

    @model_validator(mode="after")
    def _check_request(self) -> RequestData:
        if not self.path.startswith("/"):
            raise ValueError(f"Request path must be absolute: {self.path!r}")
        if "{" in self.path or "}" in self.path:
            raise ValueError(f"Request path has an unsubstituted placeholder: {self.path!r}")
        if self.body is not None and self.method != RequestMethod.POST:
            raise ValueError(f"{self.method.value} requests cannot carry a body")
        return self

    def add_body(self, body: Any) -> RequestData:
        """Return a copy of this request carrying `body`."""
        return RequestData(method=self.method, path=self.path, body=body)


@runtime_checkable
class FormatRequestData(Protocol):
    """Anything that can render itself into a request for a session.

    The core command catalogue and every vendor extension implement this,
    so the dispatcher never needs to know which command set a value
    belongs to.
    """

    def format_request(self, session_id: str) -> RequestData:
        """Render this command for the given session."""
        ...


def render_request(
    method: RequestMethod,
    template: str,
    session_id: str,
    path_params: dict[str, str] | None = None,
    body: Any = None,
) -> RequestData:
    """Substitute a path template and attach an encoded body.

    Every substituted value is percent-encoded with no safe characters, so
    ids and names cannot add path segments or placeholders.

    Raises:
        EncodingError: If a placeholder has no value or the body cannot be
            encoded.
    """
    params = {key: quote(str(value), safe="") for key, value in (path_params or {}).items()}
    try:
        path = template.format(session_id=quote(session_id, safe=""), **params)
    except KeyError as e:
        raise EncodingError(f"Missing path parameter {e} for {template}") from e

    request = RequestData(method=method, path=path)
    if body is not None:
        request = request.add_body(encode_value(body, session_id=session_id))
    return request
