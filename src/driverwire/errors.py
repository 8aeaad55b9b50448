"""Error taxonomy for the WebDriver client.

Four kinds of failure reach the caller, and each is a distinct type:

- EncodingError: caller input that cannot be put on the wire. Raised before
  any request is sent.
- Transport errors: httpx exceptions, propagated unchanged.
- ProtocolError (and subclasses): the remote end answered with a W3C error
  envelope, e.g. "stale element reference" or "no such cookie".
- ResponseDecodeError: the response could not be interpreted as the expected
  result. This is a client/server contract mismatch, not an operation failure.
"""

from __future__ import annotations

from typing import Any, ClassVar


class WebDriverError(Exception):
    """Base class for errors raised by driverwire."""


class EncodingError(WebDriverError, ValueError):
    """A value cannot be represented as a wire value."""


class ResponseDecodeError(WebDriverError):
    """A response did not match the shape the command expects."""


class ProtocolError(WebDriverError):
    """An error reported by the remote end.

    Example payload (the contents of the "value" key):
        {
            "error": "no such element",
            "message": "Unable to locate element: #missing",
            "stacktrace": "..."
        }
    """

    code: ClassVar[str | None] = None
    _registry: ClassVar[dict[str, type[ProtocolError]]] = {}

    def __init__(
        self,
        error: str,
        message: str = "",
        stacktrace: str = "",
        data: Any = None,
        status: int | None = None,
    ):
        self.error = error
        self.message = message
        self.stacktrace = stacktrace
        self.data = data
        self.status = status
        super().__init__(f"{error}: {message}" if message else error)

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if cls.code:
            ProtocolError._registry[cls.code] = cls

    @classmethod
    def from_payload(cls, payload: dict[str, Any], status: int | None = None) -> ProtocolError:
        """Build the most specific error for a W3C error object."""
        error = str(payload.get("error", "unknown error"))
        error_cls = cls._registry.get(error, ProtocolError)
        return error_cls(
            error,
            message=str(payload.get("message") or ""),
            stacktrace=str(payload.get("stacktrace") or ""),
            data=payload.get("data"),
            status=status,
        )


class ElementClickInterceptedError(ProtocolError):
    code = "element click intercepted"


class ElementNotInteractableError(ProtocolError):
    code = "element not interactable"


class InvalidArgumentError(ProtocolError):
    code = "invalid argument"


class InvalidSelectorError(ProtocolError):
    code = "invalid selector"


class InvalidSessionIdError(ProtocolError):
    code = "invalid session id"


class JavascriptError(ProtocolError):
    code = "javascript error"


class NoSuchAlertError(ProtocolError):
    code = "no such alert"


class NoSuchCookieError(ProtocolError):
    code = "no such cookie"


class NoSuchElementError(ProtocolError):
    code = "no such element"


class NoSuchFrameError(ProtocolError):
    code = "no such frame"


class NoSuchShadowRootError(ProtocolError):
    code = "no such shadow root"


class NoSuchWindowError(ProtocolError):
    code = "no such window"


class DetachedShadowRootError(ProtocolError):
    code = "detached shadow root"


class OperationTimeoutError(ProtocolError):
    code = "timeout"


class ScriptTimeoutError(ProtocolError):
    code = "script timeout"


class StaleElementReferenceError(ProtocolError):
    code = "stale element reference"


class UnknownCommandError(ProtocolError):
    code = "unknown command"


class UnknownError(ProtocolError):
    code = "unknown error"


class UnsupportedOperationError(ProtocolError):
    code = "unsupported operation"
