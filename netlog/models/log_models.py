"""
Log entry model for netlog.

A LogEntry describes one captured HTTP request/response cycle. It is an
immutable pydantic model, so entries can be shared with any subscriber
without copying.

Payload layout (as produced by HTTP interceptors and consumed by the
overlay / export code):

    {
      "type": "GET",
      "response": "200 OK",
      "queryparameter": "{page: 1}",
      "header": "{Accept: application/json}",
      "data": "-",
      "response_data": "{...}",
      "path": "/users",
      "message": "-",
      "curl": "curl -X GET ..."
    }
"""

from collections.abc import Mapping
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, ValidationError

from exceptions.exceptions import LogPayloadError


# Placeholder used by from_payload for any key that is missing or null.
MISSING_VALUE = "-"

# field name -> payload key, in payload order
PAYLOAD_KEYS: Dict[str, str] = {
    "request_type": "type",
    "response": "response",
    "query_parameter": "queryparameter",
    "header": "header",
    "request_data": "data",
    "response_data": "response_data",
    "path": "path",
    "message": "message",
    "curl": "curl",
}

# Order used by str(entry), equality and hashing.
DISPLAY_ORDER = (
    "request_type",
    "response",
    "header",
    "query_parameter",
    "request_data",
    "response_data",
    "path",
    "message",
    "curl",
)


class LogEntry(BaseModel):
    """One HTTP request/response log record.

    Every field is optional. Equality and hashing are structural over all
    nine fields.
    """

    model_config = ConfigDict(frozen=True)

    request_type: Optional[str] = None   # GET, POST, ...
    response: Optional[str] = None       # raw response summary
    query_parameter: Optional[str] = None
    header: Optional[str] = None
    request_data: Optional[str] = None   # request body
    response_data: Optional[str] = None  # response body
    path: Optional[str] = None           # API path / endpoint
    message: Optional[str] = None
    curl: Optional[str] = None           # shell-reproducible request

    @classmethod
    def from_payload(cls, payload: Mapping) -> "LogEntry":
        """Build an entry from a string-keyed mapping.

        Missing (or null) keys become "-". The "path" key is not read, so
        `path` stays None on the returned entry.

        Raises
        ------
        LogPayloadError
            If `payload` is not a mapping or holds a non-string value.
        """
        if not isinstance(payload, Mapping):
            raise LogPayloadError(
                payload,
                f"expected a mapping, got {type(payload).__name__}",
            )

        values: Dict[str, Any] = {}
        for field_name, key in PAYLOAD_KEYS.items():
            if field_name == "path":
                continue
            value = payload.get(key)
            values[field_name] = MISSING_VALUE if value is None else value

        try:
            return cls(**values)
        except ValidationError as e:
            bad_keys = ", ".join(
                PAYLOAD_KEYS[str(err["loc"][0])] for err in e.errors() if err["loc"]
            )
            raise LogPayloadError(
                payload,
                f"values must be strings or null (offending keys: {bad_keys})",
            ) from e

    def to_payload(self) -> Dict[str, Optional[str]]:
        """Return the entry as a plain dict using the payload key names."""
        return {key: getattr(self, field_name) for field_name, key in PAYLOAD_KEYS.items()}

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LogEntry):
            return NotImplemented
        return _display_values(self) == _display_values(other)

    def __hash__(self) -> int:
        return hash(_display_values(self))

    def __str__(self) -> str:
        return ", ".join(str(value) for value in _display_values(self))


def _display_values(entry: LogEntry) -> tuple:
    return tuple(getattr(entry, field_name) for field_name in DISPLAY_ORDER)
