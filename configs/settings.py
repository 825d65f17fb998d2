from __future__ import annotations

import os
from typing import Optional

from dotenv import load_dotenv


load_dotenv()


class Settings:
    """
    Central configuration for netlog.

    Values are loaded once from environment variables (with sensible defaults)
    and then exposed via typed properties.
    """

    def __init__(self) -> None:
        # Store retention (unset / empty means unbounded)
        self._max_entries = os.getenv("NETLOG_MAX_ENTRIES") or None

        # Logging
        self._log_level = os.getenv("NETLOG_LOG_LEVEL", "INFO").upper()

    # ------------------------------------------------------------------
    # Store settings
    # ------------------------------------------------------------------

    @property
    def max_entries(self) -> Optional[int]:
        if self._max_entries is None:
            return None
        try:
            value = int(self._max_entries)
        except ValueError:
            raise RuntimeError(
                f"NETLOG_MAX_ENTRIES must be a positive integer, got {self._max_entries!r}. "
                "Unset it to keep every log entry."
            ) from None
        if value < 1:
            raise RuntimeError(
                f"NETLOG_MAX_ENTRIES must be a positive integer, got {value}. "
                "Unset it to keep every log entry."
            )
        return value

    # ------------------------------------------------------------------
    # Logging
    # ------------------------------------------------------------------

    @property
    def log_level(self) -> str:
        return self._log_level


settings = Settings()
