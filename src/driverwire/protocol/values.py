"""WebDriver value codec.

Remote objects (elements, shadow roots, frames, windows) travel over the
wire as single-key objects whose key is a reserved identifier:

    {"element-6066-11e4-a52e-4f735466cecf": "5fd2cc7c-..."}

encode_value() rewrites reference handles found anywhere in a value tree into
that form. decode_value() does the reverse, binding every reference it finds
to the session that received it. Both are pure functions.

Decoding is structural only: a reference to an element that no longer
exists still decodes, and the failure surfaces when a command is sent
against it.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, ClassVar

from pydantic import BaseModel

from ..errors import EncodingError

ELEMENT_KEY = "element-6066-11e4-a52e-4f735466cecf"
SHADOW_ROOT_KEY = "shadow-6066-11e4-a52e-4f735466cecf"
FRAME_KEY = "frame-075b-4da1-b6ba-e579c2d3230a"
WINDOW_KEY = "window-fcc6-11e5-b4f8-330a88ab9d7f"


@dataclass(frozen=True)
class RemoteReference:
    """Handle to a live object in the remote document.

    Holds no resources; the remote end may invalidate it at any time.
    """

    identifier: ClassVar[str]

    session_id: str
    id: str

    def to_json(self) -> dict[str, str]:
        return {self.identifier: self.id}

    @classmethod
    def from_json(cls, payload: dict[str, Any], session_id: str) -> RemoteReference:
        return cls(session_id=session_id, id=payload[cls.identifier])


@dataclass(frozen=True)
class ElementRef(RemoteReference):
    identifier: ClassVar[str] = ELEMENT_KEY


@dataclass(frozen=True)
class ShadowRootRef(RemoteReference):
    identifier: ClassVar[str] = SHADOW_ROOT_KEY


@dataclass(frozen=True)
class FrameRef(RemoteReference):
    identifier: ClassVar[str] = FRAME_KEY


@dataclass(frozen=True)
class WindowRef(RemoteReference):
    identifier: ClassVar[str] = WINDOW_KEY


REFERENCE_TYPES: dict[str, type[RemoteReference]] = {
    ref_type.identifier: ref_type for ref_type in (ElementRef, ShadowRootRef, FrameRef, WindowRef)
}


def encode_value(value: Any, session_id: str | None = None) -> Any:
    """Convert a Python value into its wire form.

    Args:
        value: Scalars, lists, tuples, string-keyed dicts, pydantic models
            and RemoteReference handles (or objects with a `remote_reference`
            attribute), nested arbitrarily.
        session_id: When given, references owned by another session are
            rejected.

    Raises:
        EncodingError: If any part of the value has no wire representation.
    """
    # Wrappers such as WebElement expose the handle they stand for
    reference = getattr(value, "remote_reference", None)
    if isinstance(reference, RemoteReference):
        value = reference

    if isinstance(value, RemoteReference):
        if session_id is not None and value.session_id != session_id:
            raise EncodingError(
                f"Reference {value.id!r} belongs to session {value.session_id!r}, "
                f"not {session_id!r}"
            )
        return value.to_json()
    if value is None or isinstance(value, (str, bool, int)):
        return value
    if isinstance(value, float):
        if not math.isfinite(value):
            raise EncodingError(f"Cannot encode non-finite number: {value}")
        return value
    if isinstance(value, (list, tuple)):
        return [encode_value(item, session_id) for item in value]
    if isinstance(value, dict):
        encoded: dict[str, Any] = {}
        for key, item in value.items():
            if not isinstance(key, str):
                raise EncodingError(f"Object keys must be strings, got {type(key).__name__}")
            encoded[key] = encode_value(item, session_id)
        return encoded
    if isinstance(value, BaseModel):
        dumped = value.model_dump(mode="json", by_alias=True, exclude_none=True)
        return encode_value(dumped, session_id)
    raise EncodingError(f"Cannot encode value of type {type(value).__name__}")


def as_reference(payload: Any, session_id: str) -> RemoteReference | None:
    """Return the reference a wire object denotes, or None.

    Only a pure single-key object qualifies: extra keys, a misspelled key or a
    non-string id make it an ordinary object.
    """
    if not isinstance(payload, dict) or len(payload) != 1:
        return None
    ((key, ref_id),) = payload.items()
    ref_type = REFERENCE_TYPES.get(key)
    if ref_type is None or not isinstance(ref_id, str):
        return None
    return ref_type.from_json(payload, session_id)


def decode_value(value: Any, session_id: str) -> Any:
    """Convert a wire value into Python values, resolving references."""
    if isinstance(value, list):
        return [decode_value(item, session_id) for item in value]
    if isinstance(value, dict):
        reference = as_reference(value, session_id)
        if reference is not None:
            return reference
        return {k: decode_value(v, session_id) for k, v in value.items()}
    return value
