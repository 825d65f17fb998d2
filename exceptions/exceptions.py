"""
Custom exceptions for netlog.

These exceptions are intentionally simple and descriptive.
They are used across:

  - netlog/models/
  - netlog/api/

Placing them at the project root (exceptions/) avoids circular imports
and keeps exception types consistent across modules.
"""


class LogPayloadError(ValueError):
    """
    Raised when a payload cannot be turned into a LogEntry.

    Missing keys are never an error (they default to "-"). This is only
    raised when the payload is not a mapping at all, or when one of its
    values is neither a string nor None.

    Example:
        {"type": "GET"}        ← fine
        {"type": 200}          ← raises this exception
        ["GET", "/users"]      ← raises this exception
    """

    def __init__(self, payload, details=None):
        self.payload = payload
        self.details = details or "Invalid log payload."
        msg = f"Cannot build log entry from payload: {payload!r}\nDetails: {self.details}"
        super().__init__(msg)
