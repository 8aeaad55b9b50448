"""Session timeout configuration.

The wire protocol only accepts a complete timeouts object on write, while
callers usually want to change one field. merge() overlays a partial
configuration on a full one; WebDriverSession.update_timeouts() does the
read-merge-write round trip.
"""

from __future__ import annotations

from datetime import timedelta
from typing import Any

from pydantic import BaseModel, ConfigDict

from ..errors import ResponseDecodeError

_WIRE_KEYS = {
    "script": "script",
    "page_load": "pageLoad",
    "implicit": "implicit",
}


def _to_millis(value: timedelta) -> int:
    return value // timedelta(milliseconds=1)


class TimeoutConfiguration(BaseModel):
    """Script, page-load and implicit-wait timeouts.

    A field set to None means "not specified" in a partial update. When read
    from the server, a None script timeout means the script never times out.
    """

    model_config = ConfigDict(frozen=True)

    script: timedelta | None = None
    page_load: timedelta | None = None
    implicit: timedelta | None = None

    def merge(self, partial: TimeoutConfiguration) -> TimeoutConfiguration:
        """Return this configuration with the fields set in `partial` applied."""
        updates = {k: v for k, v in partial if v is not None}
        return self.model_copy(update=updates)

    def to_wire(self) -> dict[str, int]:
        """Wire form in milliseconds; unset fields are left out."""
        return {
            _WIRE_KEYS[field]: _to_millis(value)
            for field, value in self
            if value is not None
        }

    @classmethod
    def from_wire(cls, payload: Any) -> TimeoutConfiguration:
        """Parse the server's timeouts object."""
        if not isinstance(payload, dict):
            raise ResponseDecodeError(f"Expected a timeouts object, got {payload!r}")
        values: dict[str, timedelta | None] = {}
        for field, key in _WIRE_KEYS.items():
            millis = payload.get(key)
            if millis is None:
                values[field] = None
            elif isinstance(millis, (int, float)) and not isinstance(millis, bool):
                values[field] = timedelta(milliseconds=millis)
            else:
                raise ResponseDecodeError(f"Invalid {key} timeout: {millis!r}")
        return cls(**values)
