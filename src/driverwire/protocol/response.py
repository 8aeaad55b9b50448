"""Response envelope handling.

Every WebDriver response is a JSON object with a single "value" key:

    {"value": "https://example.com/"}

Errors use the same envelope with a W3C error object and a 4xx/5xx status:

    {"value": {"error": "stale element reference", "message": "...", "stacktrace": "..."}}
"""

from __future__ import annotations

import logging
from typing import Any

from pydantic import BaseModel, TypeAdapter, ValidationError

from ..errors import ProtocolError, ResponseDecodeError
from .values import decode_value

logger = logging.getLogger(__name__)


class WireResponse(BaseModel):
    """Status code and parsed JSON body of one HTTP exchange."""

    status: int
    body: Any = None


def _is_error_object(value: Any) -> bool:
    return isinstance(value, dict) and isinstance(value.get("error"), str)


def unwrap_response(response: WireResponse) -> Any:
    """Return the raw "value" of a response.

    Raises:
        ProtocolError: If the remote end reported an error.
        ResponseDecodeError: If the body is not a WebDriver envelope.
    """
    body = response.body
    if not isinstance(body, dict) or "value" not in body:
        raise ResponseDecodeError(
            f"Response (status {response.status}) has no 'value' envelope: {body!r}"
        )

    value = body["value"]
    if response.status >= 400:
        if not _is_error_object(value):
            raise ResponseDecodeError(
                f"Error response (status {response.status}) has no error object: {value!r}"
            )
        error = ProtocolError.from_payload(value, status=response.status)
        logger.warning(f"Remote end error ({response.status}): {error}")
        raise error
    return value


def decode_response(response: WireResponse, session_id: str) -> Any:
    """Unwrap a response and resolve the references it contains."""
    return decode_value(unwrap_response(response), session_id)


def convert(value: Any, expected: Any) -> Any:
    """Validate a decoded value against the type a command expects.

    Raises:
        ResponseDecodeError: If the value does not match.
    """
    try:
        return TypeAdapter(expected).validate_python(value)
    except ValidationError as e:
        raise ResponseDecodeError(f"Expected {expected!r}, got {value!r}") from e
